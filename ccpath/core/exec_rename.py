"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Two-phase execution per operation (first rename to temporary name, then to final name)
- Creation of missing target directories (full path mode)
- Exception handling and logging
- dry_run support
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple
import json
import os
import uuid

from .models_fs import RenameOp, RenamePlan

TEMP_PREFIX = ".__tmp_ccpath__"
RESTORE_FAILED = "restore also failed"


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)
    skipped: List[RenameOp] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def stranded_dirs(self) -> List[Path]:
        """Directories still holding temporary entries after a failed restore"""
        return sorted({op.src.parent for op, error in self.failed if RESTORE_FAILED in error})


def _generate_temp_name(original: Path) -> Path:
    """Generate temporary name next to the original"""
    unique_id = uuid.uuid4().hex[:8]
    temp_name = f"{TEMP_PREFIX}{unique_id}__{original.name}"
    return original.parent / temp_name


def _is_temp_name(name: str) -> bool:
    return name.startswith(TEMP_PREFIX)


def _restore(op: RenameOp, temp_path: Path, error: str, created: List[Path]) -> str:
    """Move a temporary entry back to its source, return the failure message"""
    try:
        os.rename(temp_path, op.src)
        _remove_created(created)
        return f"Phase 2 failed (restored): {error}"
    except OSError as e2:
        return f"Phase 2 failed ({RESTORE_FAILED}): {error}, restore error: {e2}"


def _missing_dirs(directory: Path) -> List[Path]:
    """Directories that have to be created for directory to exist, deepest first"""
    missing = []
    while not directory.exists() and directory != directory.parent:
        missing.append(directory)
        directory = directory.parent
    return missing


def _remove_created(created: List[Path]) -> None:
    """Remove directories created for a rename that did not happen"""
    for directory in created:
        try:
            directory.rmdir()
        except OSError:
            # Something else was put there in the meantime, keep it
            break


def rename_one(op: RenameOp) -> Optional[str]:
    """
    Perform a single rename operation

    Even if source and destination only differ in case, two phases are used
    so that case-insensitive filesystems pick up the new name.

    Args:
        op: Rename operation

    Returns:
        Error message, None on success
    """
    if not os.path.lexists(op.src):
        return "Source does not exist"

    created = _missing_dirs(op.dst.parent)
    if created:
        try:
            op.dst.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return f"Cannot create directory {op.dst.parent}: {e}"

    # Phase 1: source -> temporary name
    temp_path = _generate_temp_name(op.src)
    try:
        os.rename(op.src, temp_path)
    except OSError as e:
        _remove_created(created)
        return f"Phase 1 failed: {e}"

    # Phase 2: temporary name -> destination
    if op.overwrite:
        try:
            os.replace(temp_path, op.dst)
        except OSError as e:
            return _restore(op, temp_path, str(e), created)
        return None

    if os.path.lexists(op.dst):
        return _restore(op, temp_path, f"Target already exists: {op.dst}", created)

    try:
        os.rename(temp_path, op.dst)
    except OSError as e:
        return _restore(op, temp_path, str(e), created)

    return None


def execute_rename(
    plan: RenamePlan,
    dry_run: bool = False,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
    log_dir: Optional[Path] = None
) -> RenameResult:
    """
    Execute rename plan

    Operations run in plan order, which scan_files.collect_paths arranges so
    that children are renamed before their parent directories.

    Args:
        plan: Rename plan
        dry_run: Whether to preview only
        progress_callback: Progress callback (current, total, message)
        log_dir: Log directory (for saving execution logs)

    Returns:
        Execution result
    """
    result = RenameResult()
    valid_ops = plan.valid_ops
    total = len(valid_ops)

    if total == 0:
        return result

    if log_dir and not dry_run:
        save_plan_log(plan, log_dir)

    if dry_run:
        for i, op in enumerate(valid_ops):
            if progress_callback:
                progress_callback(i + 1, total, f"[Preview] {op.src} -> {op.dst}")
            result.success.append(op)
        return result

    for i, op in enumerate(valid_ops):
        if progress_callback:
            progress_callback(i + 1, total, f"{op.src.name} -> {op.dst.name}")

        # Source vanished since planning
        if not os.path.lexists(op.src):
            result.skipped.append(op)
            continue

        error = rename_one(op)
        if error is None:
            result.success.append(op)
        else:
            result.failed.append((op, error))

    if log_dir:
        save_result_log(result, log_dir)

    return result


def save_plan_log(plan: RenamePlan, log_dir: Path) -> Path:
    """Save execution plan log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"ccpath_plan_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "convention": plan.options.to.value,
        "mode": plan.options.mode.value,
        "total_ops": len(plan.valid_ops),
        "operations": [
            {
                "src": str(op.src),
                "dst": str(op.dst),
                "note": op.note
            }
            for op in plan.valid_ops
        ],
        "warnings": plan.warnings,
        "errors": plan.errors
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"ccpath_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "success_count": result.success_count,
        "failed_count": result.failed_count,
        "skipped_count": result.skipped_count,
        "success": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.success
        ],
        "failed": [
            {"src": str(op.src), "dst": str(op.dst), "error": error}
            for op, error in result.failed
        ],
        "skipped": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.skipped
        ]
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file


def cleanup_temp_files(directory: Path) -> int:
    """
    Restore temporary entries left behind in the directory (for exception recovery)

    Args:
        directory: Directory

    Returns:
        Number of restored entries
    """
    count = 0
    for item in Path(directory).iterdir():
        if not _is_temp_name(item.name):
            continue

        # Temporary name format: .__tmp_ccpath__{uuid}__{original_name}
        original_name = item.name[len(TEMP_PREFIX):].split("__", 1)[-1]
        original_path = item.parent / original_name
        if original_name and not os.path.lexists(original_path):
            try:
                os.rename(item, original_path)
                count += 1
            except OSError as e:
                print(f"Warning: Cannot restore {item}: {e}")
    return count
