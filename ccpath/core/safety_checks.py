"""
safety_checks.py - Target Name Checks

Converted names only hold letters, digits and the convention separator, but
the parts that are kept verbatim (extensions, dot segments, prefixes) can
still produce a name some filesystem refuses. These checks run before
anything is renamed.
"""

from typing import Optional
import os
import platform

from .models_fs import RenameOp

# Characters Windows refuses in file and directory names
WINDOWS_FORBIDDEN = frozenset('<>:"/\\|?*')

# Windows device names, reserved with or without an extension
WINDOWS_DEVICE_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

MAX_NAME_BYTES = 255
MAX_WINDOWS_PATH = 260


def name_problem(name: str) -> Optional[str]:
    """
    Explain why name cannot be used as a file or directory name

    Args:
        name: Converted name (a single path component)

    Returns:
        Reason, None when the name is usable
    """
    if not name:
        return "name is empty"

    forbidden = "".join(sorted(set(name) & WINDOWS_FORBIDDEN))
    if forbidden:
        return f"name contains characters not allowed on Windows: {forbidden}"

    if name[-1] in " .":
        return "name ends with a space or dot"

    device = name.split(".")[0].upper()
    if device in WINDOWS_DEVICE_NAMES:
        return f"'{device}' is a reserved device name on Windows"

    if len(name.encode("utf-8")) > MAX_NAME_BYTES:
        return f"name is longer than {MAX_NAME_BYTES} bytes"

    return None


def op_problem(op: RenameOp) -> Optional[str]:
    """
    Explain why a planned rename cannot be carried out

    Args:
        op: Rename operation

    Returns:
        Reason, None when the operation can run
    """
    if not os.path.lexists(op.src):
        return f"Source does not exist: {op.src}"

    problem = name_problem(op.dst.name)
    if problem:
        return problem

    if platform.system() == "Windows" and len(str(op.dst)) > MAX_WINDOWS_PATH:
        return f"target path is longer than {MAX_WINDOWS_PATH} characters: {op.dst}"

    # Phase 1 renames inside the source directory
    if not os.access(op.src.parent, os.W_OK):
        return f"Directory is not writable: {op.src.parent}"

    return None
