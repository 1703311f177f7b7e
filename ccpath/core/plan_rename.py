"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Generate target names by applying a naming convention to each path
- Conflict detection and resolution (skip, overwrite or add _1, _2...)
- Output RenamePlan
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Set, Tuple

from .convert_path import (
    convert_basename, convert_full, convert_full_except_prefix, split_extension
)
from .errors import PathConvertError
from .models_fs import (
    ConflictPolicy, ConvertMode, ConvertOptions, RenamePlan, normalize_for_comparison
)
from .safety_checks import name_problem, op_problem
from .scan_files import get_existing_names


class ConflictResolver:
    """Conflict resolver"""

    def __init__(self, case_insensitive: bool = True):
        """
        Initialize conflict resolver

        Args:
            case_insensitive: Whether case-insensitive
        """
        self.case_insensitive = case_insensitive
        # key: directory path, value: occupied names set (normalized)
        self.occupied: Dict[Path, Set[str]] = defaultdict(set)

    def _normalize(self, name: str) -> str:
        return normalize_for_comparison(name, self.case_insensitive)

    def add_existing(self, directory: Path, names: Iterable[str]) -> None:
        """Add existing names (on disk)"""
        normalized = {self._normalize(n) for n in names}
        self.occupied[directory].update(normalized)

    def remove_participating(self, directory: Path, names: Iterable[str]) -> None:
        """Remove names of sources that are renamed away (these names will be freed)"""
        normalized = {self._normalize(n) for n in names}
        self.occupied[directory] -= normalized

    def is_occupied(self, directory: Path, name: str) -> bool:
        """Check if name is already occupied"""
        return self._normalize(name) in self.occupied[directory]

    def mark_occupied(self, directory: Path, name: str) -> None:
        """Mark name as occupied"""
        self.occupied[directory].add(self._normalize(name))

    def resolve(self, directory: Path, desired_name: str) -> Tuple[str, bool]:
        """
        Resolve conflict, return available name

        Args:
            directory: Directory
            desired_name: Desired name

        Returns:
            (actual name, whether conflict occurred)
        """
        if not self.is_occupied(directory, desired_name):
            self.mark_occupied(directory, desired_name)
            return desired_name, False

        stem, suffix = split_extension(desired_name)

        n = 1
        while True:
            candidate = f"{stem}_{n}{suffix}"
            if not self.is_occupied(directory, candidate):
                self.mark_occupied(directory, candidate)
                return candidate, True
            n += 1
            if n > 10000:
                raise RuntimeError(f"Cannot find available name for {desired_name} (tried over 10000 times)")


def convert_target(path: Path, options: ConvertOptions) -> Path:
    """
    Compute the converted path according to the conversion mode

    Raises:
        PathConvertError: a component cannot be converted
    """
    if options.mode == ConvertMode.FULL_PATH:
        if options.prefix is not None:
            return convert_full_except_prefix(
                path, options.prefix, options.to, options.source, options.ascii_only
            )
        return convert_full(path, options.to, options.source, options.ascii_only)

    return convert_basename(path, options.to, options.source, options.ascii_only)


def plan_convert_rename(paths: List[Path], options: ConvertOptions) -> RenamePlan:
    """
    Generate naming convention rename plan

    Args:
        paths: Paths in rename order (see scan_files.collect_paths)
        options: Conversion options

    Returns:
        Rename plan
    """
    plan = RenamePlan(options=options)

    # Pass 1: compute targets
    candidates: List[Tuple[Path, Path]] = []
    for src in paths:
        src = Path(src)
        try:
            dst = convert_target(src, options)
        except PathConvertError as e:
            plan.add_error(str(e))
            continue

        # Skip if name hasn't changed
        if dst == src:
            continue

        problem = name_problem(dst.name)
        if problem:
            plan.add_warning(f"Skip {src}: {problem}")
            continue

        candidates.append((src, dst))

    # Names of renamed sources are freed in their directories
    freed: Dict[Path, Set[str]] = defaultdict(set)
    for src, _ in candidates:
        freed[src.parent].add(src.name)

    resolver = ConflictResolver(case_insensitive=options.case_insensitive_detect)
    loaded: Set[Path] = set()

    def load(directory: Path) -> None:
        if directory in loaded:
            return
        loaded.add(directory)
        resolver.add_existing(
            directory, get_existing_names(directory, options.case_insensitive_detect)
        )
        resolver.remove_participating(directory, freed.get(directory, set()))

    # Pass 2: resolve conflicts
    for src, dst in candidates:
        directory = dst.parent
        load(directory)

        if not resolver.is_occupied(directory, dst.name):
            resolver.mark_occupied(directory, dst.name)
            plan.add_op(src, dst)
            continue

        policy = options.conflict_policy
        if policy == ConflictPolicy.OVERWRITE:
            plan.add_op(src, dst, note="overwrites existing target", overwrite=True)
        elif policy == ConflictPolicy.SUFFIX_NUMBER:
            final_name, _ = resolver.resolve(directory, dst.name)
            plan.add_op(
                src, directory / final_name,
                note=f"conflict resolved: {dst.name} -> {final_name}",
            )
        else:
            plan.add_warning(f"Skip {src}: target already exists: {dst}")
            # The source keeps its name
            load(src.parent)
            resolver.mark_occupied(src.parent, src.name)

    return plan


def validate_plan(plan: RenamePlan) -> List[str]:
    """
    Validate rename plan

    Args:
        plan: Rename plan

    Returns:
        Error list
    """
    errors = []

    for op in plan.valid_ops:
        problem = op_problem(op)
        if problem:
            errors.append(f"{op.src} -> {op.dst}: {problem}")

    # Check for duplicate destinations
    dst_set: Dict[str, List[Path]] = defaultdict(list)
    for op in plan.valid_ops:
        key = str(op.dst).lower() if plan.options.case_insensitive_detect else str(op.dst)
        dst_set[key].append(op.src)

    for dst_key, srcs in dst_set.items():
        if len(srcs) > 1:
            errors.append(f"Multiple paths have the same destination: {srcs} -> {dst_key}")

    return errors
