"""
errors.py - Exception Definitions

Contains:
- UnknownConvention: naming convention identifier not recognised
- PathConvertError: a path component cannot be converted
"""

from pathlib import Path
from typing import Union


class UnknownConvention(ValueError):
    """Identifier does not match any supported naming convention"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unsupported naming convention '{identifier}'")


class PathConvertError(Exception):
    """Base class for path conversion failures"""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(message)


class InvalidUtf8Path(PathConvertError):
    """Path component is not valid UTF-8"""

    def __init__(self, path: Union[str, Path]):
        super().__init__(
            path,
            f"path contains invalid utf-8 characters: {str(path)!r}",
        )


class InvalidPath(PathConvertError):
    """Path component has neither a stem nor an extension"""

    def __init__(self, path: Union[str, Path]):
        super().__init__(
            path,
            f"paths must contain either a stem or an extension or both: '{path}'",
        )
