"""Tests for rename execution."""

import json
from pathlib import Path

from ccpath.core import (
    Convention,
    ConvertOptions,
    RenameOp,
    RenamePlan,
    RenameResult,
    cleanup_temp_files,
    execute_rename,
)
from ccpath.core import exec_rename
from ccpath.core.exec_rename import RESTORE_FAILED, TEMP_PREFIX


def _plan(*ops, **kwargs) -> RenamePlan:
    plan = RenamePlan(options=ConvertOptions(to=Convention.SNAKE))
    for src, dst in ops:
        plan.add_op(src, dst, **kwargs)
    return plan


def test_execute_renames(tmp_path: Path) -> None:
    """Verify files are renamed on disk."""
    src = tmp_path / "File One.txt"
    src.write_text("one")
    dst = tmp_path / "file_one.txt"

    result = execute_rename(_plan((src, dst)))

    assert result.success_count == 1
    assert not src.exists()
    assert dst.read_text() == "one"


def test_execute_dry_run(tmp_path: Path) -> None:
    """Verify dry run reports operations without touching the filesystem."""
    src = tmp_path / "File One.txt"
    src.write_text("one")

    messages = []
    result = execute_rename(
        _plan((src, tmp_path / "file_one.txt")),
        dry_run=True,
        progress_callback=lambda cur, total, msg: messages.append(msg),
    )

    assert result.success_count == 1
    assert src.exists()
    assert not (tmp_path / "file_one.txt").exists()
    assert messages and messages[0].startswith("[Preview]")


def test_execute_case_only_change(tmp_path: Path) -> None:
    """Verify a rename that only changes case succeeds."""
    src = tmp_path / "FILE.txt"
    src.write_text("x")
    dst = tmp_path / "file.txt"

    result = execute_rename(_plan((src, dst)))

    assert result.failed_count == 0
    assert [p.name for p in tmp_path.iterdir()] == ["file.txt"]


def test_execute_creates_parent_directories(tmp_path: Path) -> None:
    """Verify missing target directories are created."""
    src = tmp_path / "Parent Dir" / "Some Child.txt"
    src.parent.mkdir()
    src.write_text("child")
    dst = tmp_path / "parent_dir" / "some_child.txt"

    result = execute_rename(_plan((src, dst)))

    assert result.success_count == 1
    assert dst.read_text() == "child"


def test_execute_restores_when_target_appears(tmp_path: Path) -> None:
    """Verify an existing target is never overwritten without the overwrite flag."""
    src = tmp_path / "File One.txt"
    src.write_text("new")
    dst = tmp_path / "file_one.txt"
    plan = _plan((src, dst))
    dst.write_text("old")

    result = execute_rename(plan)

    assert result.failed_count == 1
    assert "restored" in result.failed[0][1]
    assert src.read_text() == "new"
    assert dst.read_text() == "old"


def test_execute_overwrite(tmp_path: Path) -> None:
    """Verify overwrite operations replace the target."""
    src = tmp_path / "File One.txt"
    src.write_text("new")
    dst = tmp_path / "file_one.txt"
    dst.write_text("old")

    result = execute_rename(_plan((src, dst), overwrite=True))

    assert result.success_count == 1
    assert dst.read_text() == "new"
    assert not src.exists()


def test_execute_skips_vanished_source(tmp_path: Path) -> None:
    """Verify sources removed after planning are skipped."""
    result = execute_rename(_plan((tmp_path / "Gone.txt", tmp_path / "gone.txt")))

    assert result.skipped_count == 1
    assert result.failed_count == 0


def test_execute_children_before_parent(tmp_path: Path) -> None:
    """Verify nested renames succeed when ordered deepest first."""
    parent = tmp_path / "Sub Dir"
    parent.mkdir()
    child = parent / "Some File.txt"
    child.write_text("c")

    plan = _plan(
        (child, parent / "some_file.txt"),
        (parent, tmp_path / "sub_dir"),
    )
    result = execute_rename(plan)

    assert result.success_count == 2
    assert (tmp_path / "sub_dir" / "some_file.txt").read_text() == "c"


def test_execute_writes_logs(tmp_path: Path) -> None:
    """Verify plan and result logs are written as JSON."""
    src = tmp_path / "File One.txt"
    src.write_text("one")
    log_dir = tmp_path / "logs"

    execute_rename(_plan((src, tmp_path / "file_one.txt")), log_dir=log_dir)

    plan_logs = list(log_dir.glob("ccpath_plan_*.json"))
    result_logs = list(log_dir.glob("ccpath_result_*.json"))
    assert len(plan_logs) == 1
    assert len(result_logs) == 1

    data = json.loads(plan_logs[0].read_text(encoding="utf-8"))
    assert data["convention"] == "snake"
    assert data["total_ops"] == 1
    assert json.loads(result_logs[0].read_text(encoding="utf-8"))["success_count"] == 1


def test_cleanup_temp_files(tmp_path: Path) -> None:
    """Verify leftover temporary entries are restored."""
    leftover = tmp_path / f"{TEMP_PREFIX}abcd1234__Some File.txt"
    leftover.write_text("x")

    assert cleanup_temp_files(tmp_path) == 1
    assert (tmp_path / "Some File.txt").read_text() == "x"


def test_phase_one_failure_removes_created_directories(tmp_path: Path, monkeypatch) -> None:
    """Verify target directories made for a rename that failed are removed again."""
    src = tmp_path / "Parent Dir" / "Some Child.txt"
    src.parent.mkdir()
    src.write_text("child")
    dst = tmp_path / "parent_dir" / "nested_dir" / "some_child.txt"

    # A temporary name inside a missing directory makes phase 1 fail
    monkeypatch.setattr(
        exec_rename, "_generate_temp_name", lambda original: original.parent / "missing" / "tmp"
    )
    result = execute_rename(_plan((src, dst)))

    assert result.failed_count == 1
    assert "Phase 1 failed" in result.failed[0][1]
    assert not (tmp_path / "parent_dir").exists()
    assert src.read_text() == "child"


def test_restored_phase_two_removes_created_directories(tmp_path: Path, monkeypatch) -> None:
    """Verify a failed and restored move leaves no new directories behind."""
    src = tmp_path / "Parent Dir" / "Some Child.txt"
    src.parent.mkdir()
    src.write_text("child")
    dst = tmp_path / "parent_dir" / "some_child.txt"

    real_lexists = exec_rename.os.path.lexists
    monkeypatch.setattr(
        exec_rename.os.path, "lexists", lambda p: True if Path(p) == dst else real_lexists(p)
    )
    result = execute_rename(_plan((src, dst)))

    assert "restored" in result.failed[0][1]
    assert not (tmp_path / "parent_dir").exists()
    assert src.read_text() == "child"


def test_stranded_dirs(tmp_path: Path) -> None:
    """Verify only failures whose restore failed point at leftover temporary entries."""
    op = RenameOp(src=tmp_path / "a" / "A.txt", dst=tmp_path / "a" / "a.txt")
    other = RenameOp(src=tmp_path / "b" / "B.txt", dst=tmp_path / "b" / "b.txt")
    result = RenameResult(failed=[
        (op, f"Phase 2 failed ({RESTORE_FAILED}): boom, restore error: denied"),
        (other, "Phase 2 failed (restored): boom"),
    ])

    assert result.stranded_dirs == [tmp_path / "a"]
