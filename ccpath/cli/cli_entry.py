"""
cli_entry.py - CLI Entry Point

Usage:
  ccpath [options] CONVENTION PATH...
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..core import (
    Convention, ConvertMode, ConflictPolicy, ConvertOptions, UnknownConvention,
    cleanup_temp_files, collect_paths, execute_rename, plan_convert_rename, resolve, validate_plan,
)

CONFLICT_CHOICES = {
    "skip": ConflictPolicy.SKIP,
    "suffix": ConflictPolicy.SUFFIX_NUMBER,
    "overwrite": ConflictPolicy.OVERWRITE,
}

# Exit codes
EXIT_OK = 0
EXIT_BAD_CONVENTION = 1
EXIT_NO_SUCH_PATH = 2
EXIT_CONVERT_ERROR = 3
EXIT_RENAME_FAILED = 4


def _conventions_help() -> str:
    lines = ["ccpath supports several naming conventions:"]
    for c in Convention:
        lines.append(f"  {c.value:<12} {c.example}")
    lines.append("")
    lines.append("Conventions are matched case-insensitively, aliases such as")
    lines.append("snake_case, pascal or screaming_snake are accepted.")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="ccpath",
        description="Rename files and directories to a naming convention",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_conventions_help() + """

Examples:
  # Rename a file to snake_case
  ccpath snake "./Some File.txt"

  # Preview converting a whole tree to kebab-case
  ccpath --dry-run --recursive kebab ./photos

  # Convert every component below ./docs
  ccpath --full-path --prefix ./docs snake "./docs/Parent Dir/Some Child.txt"
"""
    )

    parser.add_argument("-r", "--recursive", action="store_true", help="recurse into directories")
    parser.add_argument("--dry-run", action="store_true",
                        help="show the operations that would be performed without doing them")
    parser.add_argument("-v", "--verbose", action="store_true", help="print a message for every converted path")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-b", "--basename", action="store_true",
                      help="only convert the basename of each given path (default)")
    mode.add_argument("-F", "--full-path", action="store_true", help="convert all components of the path")

    parser.add_argument("-P", "--prefix", type=str, default=None,
                        help="exclude a path prefix when --full-path is given, otherwise ignored")
    parser.add_argument("-f", "--from", dest="source", type=str, default=None, metavar="CONVENTION",
                        help="set the current naming convention if it is known, this may improve accuracy")
    parser.add_argument("--ascii-only", action="store_true",
                        help="only ASCII letters mark case boundaries")
    parser.add_argument("--include-hidden", action="store_true",
                        help="include hidden entries when recursing")
    parser.add_argument("--on-conflict", choices=list(CONFLICT_CHOICES), default="skip",
                        help="what to do when the target name already exists (default: skip)")
    parser.add_argument("--log-dir", type=str, default=None, help="save JSON execution logs in this directory")

    parser.add_argument("into", metavar="CONVENTION", help="the target naming convention")
    parser.add_argument("paths", nargs="+", metavar="PATH", help="the paths to convert")

    return parser


def build_options(args: argparse.Namespace) -> ConvertOptions:
    """
    Turn parsed arguments into conversion options

    Raises:
        UnknownConvention: target or source convention is not supported
    """
    to = resolve(args.into)
    source = resolve(args.source) if args.source else None

    return ConvertOptions(
        to=to,
        source=source,
        ascii_only=args.ascii_only,
        mode=ConvertMode.FULL_PATH if args.full_path else ConvertMode.BASENAME,
        prefix=Path(args.prefix) if args.prefix else None,
        recursive=args.recursive,
        include_hidden=args.include_hidden,
        conflict_policy=CONFLICT_CHOICES[args.on_conflict],
        dry_run=args.dry_run,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )


def run(args: argparse.Namespace) -> int:
    """Handle a parsed command line"""
    try:
        options = build_options(args)
    except UnknownConvention as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_CONVENTION

    paths = [Path(p) for p in args.paths]
    for path in paths:
        if not path.exists():
            print(f"Error: no such file or directory '{path}'", file=sys.stderr)
            return EXIT_NO_SUCH_PATH

    try:
        targets = collect_paths(
            paths,
            recursive=options.recursive,
            mode=options.mode,
            include_hidden=options.include_hidden,
            ignore_dirs=options.ignore_dirs,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NO_SUCH_PATH

    plan = plan_convert_rename(targets, options)

    if plan.errors:
        for err in plan.errors:
            print(f"Error: {err}", file=sys.stderr)
        return EXIT_CONVERT_ERROR

    for warn in plan.warnings:
        print(f"Warning: {warn}", file=sys.stderr)

    if not options.dry_run:
        problems = validate_plan(plan)
        if problems:
            for problem in problems:
                print(f"Error: {problem}", file=sys.stderr)
            return EXIT_CONVERT_ERROR

    result = execute_rename(plan, dry_run=options.dry_run, log_dir=options.log_dir)

    if args.verbose or options.dry_run:
        for op in result.success:
            note = f" ({op.note})" if op.note else ""
            print(f"'{op.src}' -> '{op.dst}'{note}")

    for op in result.skipped:
        print(f"Warning: Skip {op.src}: source no longer exists", file=sys.stderr)

    if result.failed:
        for op, error in result.failed:
            print(f"Error: '{op.src}' -> '{op.dst}': {error}", file=sys.stderr)
        for directory in result.stranded_dirs:
            restored = cleanup_temp_files(directory)
            print(f"Restored {restored} temporary entries in '{directory}'", file=sys.stderr)
        return EXIT_RENAME_FAILED

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
