"""
gui_mainwindow.py - GUI Main Window

Single tab: pick a directory, choose a naming convention, preview and
execute the conversion.
"""

from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QTabWidget, QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import (
    Convention, ConvertMode, ConflictPolicy, ConvertOptions, RenamePlan, RenameResult, validate_plan
)
from .gui_workers import ScanWorker, PlanWorker, RenameWorker

AUTO_DETECT = "(Auto detect)"

CONFLICT_LABELS = [
    ("Skip", ConflictPolicy.SKIP),
    ("Add number suffix", ConflictPolicy.SUFFIX_NUMBER),
    ("Overwrite", ConflictPolicy.OVERWRITE),
]


class ConvertTab(QWidget):
    """Naming Convention Conversion Tab"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.paths: List[Path] = []
        self.plan: Optional[RenamePlan] = None
        self.scan_worker: Optional[ScanWorker] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Directory settings group
        dir_group = QGroupBox("Directory Settings")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select directory...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        options_layout = QHBoxLayout()
        self.recursive_check = QCheckBox("Recursive")
        self.hidden_check = QCheckBox("Include Hidden Files")
        self.full_path_check = QCheckBox("Convert Full Path")
        options_layout.addWidget(self.recursive_check)
        options_layout.addWidget(self.hidden_check)
        options_layout.addWidget(self.full_path_check)
        options_layout.addStretch()
        dir_layout.addLayout(options_layout, 1, 0, 1, 3)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._do_scan)
        dir_layout.addWidget(self.scan_btn, 2, 0, 1, 3)

        layout.addWidget(dir_group)

        # Convention settings group
        conv_group = QGroupBox("Convention Settings")
        conv_layout = QGridLayout(conv_group)

        conv_layout.addWidget(QLabel("From:"), 0, 0)
        self.from_combo = QComboBox()
        self.from_combo.addItem(AUTO_DETECT, None)
        for c in Convention:
            self.from_combo.addItem(c.example, c)
        conv_layout.addWidget(self.from_combo, 0, 1)

        conv_layout.addWidget(QLabel("To:"), 1, 0)
        self.to_combo = QComboBox()
        for c in Convention:
            self.to_combo.addItem(c.example, c)
        self.to_combo.setCurrentIndex(list(Convention).index(Convention.SNAKE))
        conv_layout.addWidget(self.to_combo, 1, 1)

        conv_layout.addWidget(QLabel("On Conflict:"), 2, 0)
        self.conflict_combo = QComboBox()
        for label, policy in CONFLICT_LABELS:
            self.conflict_combo.addItem(label, policy)
        conv_layout.addWidget(self.conflict_combo, 2, 1)

        self.ascii_check = QCheckBox("ASCII letters only mark case boundaries")
        conv_layout.addWidget(self.ascii_check, 3, 0, 1, 2)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        self.preview_btn.setEnabled(False)
        conv_layout.addWidget(self.preview_btn, 4, 0, 1, 2)

        layout.addWidget(conv_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Path"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _base_dir(self) -> Path:
        return Path(self.dir_edit.text().strip())

    def _options(self) -> ConvertOptions:
        """Collect conversion options from the widgets"""
        full_path = self.full_path_check.isChecked()
        return ConvertOptions(
            to=self.to_combo.currentData(),
            source=self.from_combo.currentData(),
            ascii_only=self.ascii_check.isChecked(),
            mode=ConvertMode.FULL_PATH if full_path else ConvertMode.BASENAME,
            # The chosen directory itself is never converted
            prefix=self._base_dir() if full_path else None,
            recursive=self.recursive_check.isChecked(),
            include_hidden=self.hidden_check.isChecked(),
            conflict_policy=self.conflict_combo.currentData(),
        )

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_scan(self):
        """Execute scan"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        self.scan_btn.setEnabled(False)
        self.scan_btn.setText("Scanning...")
        self.preview_btn.setEnabled(False)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.scan_worker = ScanWorker(path, self._options())
        self.scan_worker.progress.connect(self._on_scan_progress)
        self.scan_worker.finished.connect(self._on_scan_finished)
        self.scan_worker.error.connect(self._on_scan_error)
        self.scan_worker.start()

    @Slot(str)
    def _on_scan_progress(self, msg: str):
        """Scan progress update"""
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(list)
    def _on_scan_finished(self, paths: List[Path]):
        """Scan complete"""
        self.paths = paths
        self.plan = None
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")
        self.progress_bar.setVisible(False)

        base_dir = self._base_dir()
        self.table.setRowCount(len(paths))
        for i, p in enumerate(paths):
            self.table.setItem(i, 0, QTableWidgetItem(p.name))
            self.table.setItem(i, 1, QTableWidgetItem(""))  # New name pending preview
            self.table.setItem(i, 2, QTableWidgetItem(""))
            try:
                rel_path = str(p.parent.relative_to(base_dir))
            except ValueError:
                rel_path = str(p.parent)
            self.table.setItem(i, 3, QTableWidgetItem(rel_path))

        if paths:
            self.preview_btn.setEnabled(True)
            self.status_label.setText(f"Found {len(paths)} entries")
        else:
            self.status_label.setText("No entries found")

    @Slot(str)
    def _on_scan_error(self, error: str):
        """Scan error"""
        self.scan_btn.setEnabled(True)
        self.scan_btn.setText("Scan")
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Scan failed: {error}")

    def _do_preview(self):
        """Generate preview"""
        if not self.paths:
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")

        self.plan_worker = PlanWorker(self.paths, self._options())
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")

        if plan.errors:
            QMessageBox.warning(self, "Warning", "\n".join(plan.errors))
            return

        op_map = {str(op.src): op for op in plan.ops}
        for i, p in enumerate(self.paths):
            op = op_map.get(str(p))
            if op:
                new_name_item = QTableWidgetItem(op.dst.name)
                if op.note:
                    new_name_item.setBackground(QColor(255, 255, 200))
                    status_item = QTableWidgetItem("Conflict Resolved" if not op.overwrite else "Overwrite")
                    status_item.setForeground(QColor(200, 150, 0))
                else:
                    status_item = QTableWidgetItem("Will Rename")
                    status_item.setForeground(QColor(0, 150, 0))
            else:
                new_name_item = QTableWidgetItem(p.name)
                status_item = QTableWidgetItem("No Change")
                status_item.setForeground(QColor(150, 150, 150))

            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)

        if plan.valid_ops:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Will perform {plan.total_count} rename operations "
                f"(conflict resolutions: {plan.conflict_count}, warnings: {len(plan.warnings)})"
            )
        else:
            self.status_label.setText("No entries need renaming")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.valid_ops:
            return

        problems = validate_plan(self.plan)
        if problems:
            msg = "The plan cannot be executed:\n\n" + "\n".join(problems[:10])
            if len(problems) > 10:
                msg += f"\n... and {len(problems) - 10} more problems"
            QMessageBox.warning(self, "Warning", msg)
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.total_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.scan_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.total_count)

        self.rename_worker = RenameWorker(self.plan, dry_run=False)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(False)
        self.scan_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

        msg = f"Rename complete!\n\nSuccess: {result.success_count}\nFailed: {result.failed_count}"
        if result.failed_count > 0:
            msg += "\n\nFailure Details:\n"
            for op, error in result.failed[:5]:
                msg += f"  {op.src.name}: {error}\n"
            if len(result.failed) > 5:
                msg += f"  ... and {len(result.failed) - 5} more failures"

        QMessageBox.information(self, "Complete", msg)

        self.paths = []
        self.plan = None
        self.table.setRowCount(0)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self.execute_btn.setEnabled(True)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.scan_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("ccpath - Naming Convention Converter")
        self.setMinimumSize(800, 600)

        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)

        self.tabs = QTabWidget()
        self.convert_tab = ConvertTab()
        self.tabs.addTab(self.convert_tab, "Convert Names")

        layout.addWidget(self.tabs)

        self.statusBar().showMessage("Ready")
