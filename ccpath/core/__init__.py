"""
core - Naming Convention Conversion Core Module

Provides the tokenizer, renderer and convention registry, plus path
conversion, rename plan generation and execution.
"""

from .errors import (
    UnknownConvention,
    PathConvertError,
    InvalidUtf8Path,
    InvalidPath,
)

from .convention import (
    Convention,
    RenderPolicy,
    resolve,
    convention_names,
)

from .tokenizer import (
    tokenize,
    Boundary,
    WordSequence,
)

from .renderer import (
    render,
    convert_text,
)

from .convert_path import (
    convert_component,
    convert_basename,
    convert_full,
    convert_full_except_prefix,
)

from .models_fs import (
    ConvertMode,
    ConflictPolicy,
    ConvertOptions,
    RenameOp,
    RenamePlan,
)

from .scan_files import (
    collect_paths,
    get_existing_names,
)

from .plan_rename import (
    plan_convert_rename,
    validate_plan,
    ConflictResolver,
)

from .exec_rename import (
    execute_rename,
    RenameResult,
    cleanup_temp_files,
)

from .safety_checks import (
    name_problem,
    op_problem,
)

__all__ = [
    # Errors
    "UnknownConvention",
    "PathConvertError",
    "InvalidUtf8Path",
    "InvalidPath",

    # Conventions
    "Convention",
    "RenderPolicy",
    "resolve",
    "convention_names",

    # Tokenizing and rendering
    "tokenize",
    "Boundary",
    "WordSequence",
    "render",
    "convert_text",

    # Path conversion
    "convert_component",
    "convert_basename",
    "convert_full",
    "convert_full_except_prefix",

    # Data models
    "ConvertMode",
    "ConflictPolicy",
    "ConvertOptions",
    "RenameOp",
    "RenamePlan",
    "RenameResult",

    # Scanning
    "collect_paths",
    "get_existing_names",

    # Planning
    "plan_convert_rename",
    "validate_plan",
    "ConflictResolver",

    # Execution
    "execute_rename",
    "cleanup_temp_files",

    # Safety checks
    "name_problem",
    "op_problem",
]
