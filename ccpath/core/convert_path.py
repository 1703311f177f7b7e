"""
convert_path.py - Path Conversion

Applies a naming convention to path components:
- convert_component: a single file or directory name
- convert_basename: only the last component of a path
- convert_full: every component of a path
- convert_full_except_prefix: every component below a given prefix
"""

from pathlib import Path
from typing import Optional, Union

from .convention import Convention
from .errors import InvalidPath, InvalidUtf8Path
from .renderer import convert_text

PathLike = Union[str, Path]

# Components that never change
_SPECIAL_PARTS = ("", ".", "..")


def split_extension(name: str) -> tuple:
    """
    Split a name (without leading dots) into stem and extension

    Args:
        name: Filename

    Returns:
        (stem, extension), extension includes the dot or is empty
    """
    idx = name.rfind(".")
    if 0 < idx < len(name) - 1:
        return name[:idx], name[idx:]
    return name, ""


def convert_component(
    name: str,
    to: Convention,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> str:
    """
    Convert a single path component

    Leading dots and the final extension are kept verbatim. Every dot separated
    segment of the stem is converted on its own; a segment without letters or
    digits is left as is.

    Args:
        name: File or directory name
        to: Target convention
        source: Known convention of name
        ascii_only: Only ASCII letters take part in case transitions

    Returns:
        Converted name

    Raises:
        InvalidUtf8Path: name cannot be encoded as UTF-8
        InvalidPath: name is empty
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidUtf8Path(name) from None

    if not name:
        raise InvalidPath(name)

    body = name.lstrip(".")
    leading = name[:len(name) - len(body)]
    if not body:
        return name

    stem, ext = split_extension(body)

    segments = []
    for segment in stem.split("."):
        converted = convert_text(segment, to, source=source, ascii_only=ascii_only)
        segments.append(converted or segment)

    return f"{leading}{'.'.join(segments)}{ext}"


def convert_basename(
    path: PathLike,
    to: Convention,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> Path:
    """
    Convert only the filename portion of a path

    e.g. "/An Absolute/Path To/Some File.jpg" -> "/An Absolute/Path To/someFile.jpg" (camel)
    """
    path = Path(path)
    if path.name in _SPECIAL_PARTS:
        return path

    return path.with_name(convert_component(path.name, to, source, ascii_only))


def convert_full(
    path: PathLike,
    to: Convention,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> Path:
    """
    Convert every component of a path

    e.g. "/An Absolute/Path To/Some File.jpg" -> "/anAbsolute/pathTo/someFile.jpg" (camel)
    """
    path = Path(path)
    parts = path.parts
    converted = Path(path.anchor) if path.anchor else Path()
    if path.anchor:
        parts = parts[1:]

    for part in parts:
        if part in _SPECIAL_PARTS:
            converted = converted / part
        else:
            converted = converted / convert_component(part, to, source, ascii_only)

    return converted


def convert_full_except_prefix(
    path: PathLike,
    prefix: PathLike,
    to: Convention,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> Path:
    """
    Convert every component of a path that lies below prefix

    If path does not start with prefix, the result is the same as convert_full.
    """
    path = Path(path)
    prefix = Path(prefix)

    try:
        relative = path.relative_to(prefix)
    except ValueError:
        return convert_full(path, to, source, ascii_only)

    return prefix / convert_full(relative, to, source, ascii_only)
