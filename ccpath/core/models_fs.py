"""
models_fs.py - Core Data Structure Definitions

Contains:
- ConvertMode: which path components are converted
- ConflictPolicy: what to do when a target name is taken
- ConvertOptions: conversion options configuration
- RenameOp: Single rename operation
- RenamePlan: Batch rename plan
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
import platform

from .convention import Convention


class ConvertMode(Enum):
    """Conversion mode enumeration"""
    BASENAME = "basename"      # Only the last path component
    FULL_PATH = "full_path"    # Every path component (optionally below a prefix)


class ConflictPolicy(Enum):
    """Conflict handling policy"""
    SKIP = "skip"                    # Skip and warn
    SUFFIX_NUMBER = "suffix_number"  # Add _1, _2, _3...
    OVERWRITE = "overwrite"          # Overwrite (dangerous)


def is_case_insensitive_fs() -> bool:
    """Detect if current filesystem is case-insensitive"""
    return platform.system() in ("Windows", "Darwin")


def normalize_for_comparison(name: str, case_insensitive: bool) -> str:
    """Normalize filename for comparison"""
    if case_insensitive:
        return name.casefold()
    return name


@dataclass
class ConvertOptions:
    """Conversion options configuration"""
    to: Convention = Convention.SNAKE
    source: Optional[Convention] = None     # Known source convention (None means detect)
    ascii_only: bool = False                # Only ASCII letters drive case boundaries

    # Path selection
    mode: ConvertMode = ConvertMode.BASENAME
    prefix: Optional[Path] = None           # Kept verbatim in full path mode
    recursive: bool = False
    include_hidden: bool = False
    ignore_dirs: List[str] = field(default_factory=lambda: [".git", "__pycache__", "node_modules"])

    # Conflict handling
    conflict_policy: ConflictPolicy = ConflictPolicy.SKIP
    case_insensitive_detect: bool = field(default_factory=is_case_insensitive_fs)

    # Execution options
    dry_run: bool = False                   # Preview only, do not actually execute
    log_dir: Optional[Path] = None          # Where JSON execution logs are saved


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    note: str = ""                  # Note (e.g., conflict resolution explanation)
    overwrite: bool = False         # Replace an existing destination

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src == self.dst


@dataclass
class RenamePlan:
    """Batch rename plan"""
    ops: List[RenameOp] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    options: ConvertOptions = field(default_factory=ConvertOptions)

    @property
    def valid_ops(self) -> List[RenameOp]:
        """Get valid operations (excluding source=destination)"""
        return [op for op in self.ops if not op.is_same]

    @property
    def conflict_count(self) -> int:
        """Number of conflict resolutions"""
        return sum(1 for op in self.ops if op.note.startswith("conflict resolved"))

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.valid_ops)

    def add_op(self, src: Path, dst: Path, note: str = "", overwrite: bool = False) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, dst=dst, note=note, overwrite=overwrite))

    def add_warning(self, msg: str) -> None:
        """Add warning"""
        self.warnings.append(msg)

    def add_error(self, msg: str) -> None:
        """Add error"""
        self.errors.append(msg)
