"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QObject, QThread, Signal

from ..core import (
    ConvertOptions, RenamePlan, cleanup_temp_files, collect_paths, execute_rename,
    plan_convert_rename,
)


class ScanWorker(QThread):
    """Path collection worker thread"""

    # Signals
    progress = Signal(str)          # Progress message
    finished = Signal(list)         # Complete, returns path list
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Path,
        options: ConvertOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options
        self._cancelled = False

    def cancel(self):
        """Cancel scan"""
        self._cancelled = True

    def run(self):
        try:
            def progress_callback(msg: str):
                if self._cancelled:
                    raise InterruptedError("Scan cancelled")
                self.progress.emit(msg)

            if self.options.recursive:
                paths = collect_paths(
                    [self.directory],
                    recursive=True,
                    mode=self.options.mode,
                    include_hidden=self.options.include_hidden,
                    ignore_dirs=self.options.ignore_dirs,
                    progress_callback=progress_callback,
                )
                # The chosen directory itself is not renamed
                paths = [p for p in paths if p != self.directory]
            else:
                paths = collect_paths(
                    [p for p in sorted(self.directory.iterdir())
                     if self.options.include_hidden or not p.name.startswith('.')],
                    mode=self.options.mode,
                )

            if not self._cancelled:
                self.finished.emit(paths)
        except InterruptedError:
            self.finished.emit([])
        except Exception as e:
            self.error.emit(str(e))


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        paths: List[Path],
        options: ConvertOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.paths = paths
        self.options = options

    def run(self):
        try:
            self.progress.emit("Generating rename plan...")
            plan = plan_convert_rename(self.paths, self.options)
            self.finished.emit(plan)
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plan: RenamePlan,
        dry_run: bool = False,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plan = plan
        self.dry_run = dry_run

    def run(self):
        try:
            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_rename(
                self.plan,
                dry_run=self.dry_run,
                progress_callback=progress_callback,
                log_dir=self.plan.options.log_dir,
            )
            for directory in result.stranded_dirs:
                cleanup_temp_files(directory)

            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
