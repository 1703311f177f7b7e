"""
scan_files.py - Path Collection Module

Expands the paths given by the user into the list of paths to convert
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set
import os

from .models_fs import ConvertMode

DEFAULT_IGNORE_DIRS = [".git", "__pycache__", "node_modules"]


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def walk_tree(
    root: Path,
    mode: ConvertMode,
    include_hidden: bool = False,
    ignore_dirs: Optional[List[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[Path]:
    """
    Recursively collect the entries below root (root itself excluded)

    Args:
        root: Root directory
        mode: Basename mode collects files and directories,
              full path mode collects files and empty directories
        include_hidden: Whether to include hidden entries
        ignore_dirs: List of directories to ignore
        progress_callback: Progress callback function

    Returns:
        Collected paths
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    results: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)

        # Modifying dirnames in place prevents os.walk from entering these directories
        dirnames[:] = [
            d for d in dirnames
            if d not in ignore_dirs and (include_hidden or not _is_hidden(d))
        ]
        filenames = [f for f in filenames if include_hidden or not _is_hidden(f)]

        if progress_callback:
            progress_callback(str(current_dir))

        if mode == ConvertMode.BASENAME:
            results.extend(current_dir / d for d in dirnames)
        elif not dirnames and not filenames and current_dir != root:
            results.append(current_dir)

        results.extend(current_dir / f for f in filenames)

    return results


def order_for_rename(paths: Iterable[Path], mode: ConvertMode) -> List[Path]:
    """
    Order paths so that no rename invalidates a later one

    In basename mode the deepest entries come first, so children are renamed
    before the directories that contain them.
    """
    if mode == ConvertMode.BASENAME:
        return sorted(paths, key=lambda p: (-len(p.parts), str(p).lower()))
    return sorted(paths, key=lambda p: str(p).lower())


def collect_paths(
    paths: Iterable[Path],
    recursive: bool = False,
    mode: ConvertMode = ConvertMode.BASENAME,
    include_hidden: bool = False,
    ignore_dirs: Optional[List[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[Path]:
    """
    Expand user supplied paths into the paths to convert

    Args:
        paths: Paths given by the user (must exist)
        recursive: Whether to descend into directories
        mode: Conversion mode
        include_hidden: Whether to include hidden entries found while recursing
        ignore_dirs: List of directories to ignore while recursing
        progress_callback: Progress callback function

    Returns:
        Deduplicated paths in rename order

    Raises:
        FileNotFoundError: a given path does not exist
    """
    seen: Set[Path] = set()
    results: List[Path] = []

    def add(p: Path) -> None:
        if p not in seen:
            seen.add(p)
            results.append(p)

    for p in paths:
        p = Path(p)
        if not p.exists():
            raise FileNotFoundError(f"no such file or directory '{p}'")

        if recursive and p.is_dir():
            children = walk_tree(p, mode, include_hidden, ignore_dirs, progress_callback)
            for child in children:
                add(child)
            # In full path mode a non-empty directory is carried by its contents
            if mode == ConvertMode.BASENAME or not children:
                add(p)
        else:
            add(p)

    return order_for_rename(results, mode)


def get_existing_names(directory: Path, case_insensitive: bool = True) -> Set[str]:
    """
    Get set of existing entry names in directory (for conflict detection)

    Args:
        directory: Target directory
        case_insensitive: Whether case-insensitive

    Returns:
        Name set (empty if the directory does not exist yet)
    """
    directory = Path(directory)
    if not directory.is_dir():
        return set()

    names = set()
    for item in directory.iterdir():
        name = item.name.casefold() if case_insensitive else item.name
        names.add(name)

    return names
