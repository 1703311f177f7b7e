"""Tests for converting path components."""

from pathlib import Path

import pytest

from ccpath.core import (
    Convention,
    InvalidPath,
    InvalidUtf8Path,
    convert_basename,
    convert_component,
    convert_full,
    convert_full_except_prefix,
)


def test_component_keeps_extension() -> None:
    """Verify the extension is preserved while the stem is converted."""
    assert convert_component("some-file.jpg", Convention.SNAKE) == "some_file.jpg"
    assert convert_component("Some File.JPG", Convention.KEBAB) == "some-file.JPG"
    assert convert_component("README", Convention.TITLE) == "Readme"


def test_component_with_source_convention() -> None:
    """Verify a known source convention is honoured."""
    result = convert_component("SomeFile.jpg", Convention.FLAT, source=Convention.UPPER_CAMEL)
    assert result == "somefile.jpg"


def test_component_dot_segments() -> None:
    """Verify leading dots are kept and inner dot segments are converted separately."""
    assert convert_component(".bashrc", Convention.SNAKE) == ".bashrc"
    assert convert_component(".My Config", Convention.SNAKE) == ".my_config"
    assert convert_component("archive.Old Copy.tar.gz", Convention.SNAKE) == "archive.old_copy.tar.gz"


def test_component_without_words_is_unchanged() -> None:
    """Verify names without letters or digits pass through."""
    assert convert_component("___.txt", Convention.CAMEL) == "___.txt"
    assert convert_component("..", Convention.SNAKE) == ".."


def test_component_errors() -> None:
    """Verify invalid components raise path conversion errors."""
    with pytest.raises(InvalidPath):
        convert_component("", Convention.SNAKE)
    with pytest.raises(InvalidUtf8Path):
        convert_component("bad\udcffname", Convention.SNAKE)


def test_basename_title_to_camel() -> None:
    """Verify only the last component changes."""
    actual = convert_basename(Path("/An Absolute/Path To/Some File.jpg"), Convention.CAMEL)
    assert actual == Path("/An Absolute/Path To/someFile.jpg")


def test_basename_upper_snake_to_kebab() -> None:
    """Verify basename conversion with a source convention."""
    actual = convert_basename(
        "/An Absolute/Path To/SOME_FILE.jpg",
        Convention.KEBAB,
        source=Convention.UPPER_SNAKE,
    )
    assert actual == Path("/An Absolute/Path To/some-file.jpg")


def test_basename_special_paths() -> None:
    """Verify root and parent references are returned unchanged."""
    assert convert_basename(Path("/"), Convention.SNAKE) == Path("/")
    assert convert_basename(Path(".."), Convention.SNAKE) == Path("..")
    assert convert_basename(Path("Some Dir/.."), Convention.SNAKE) == Path("Some Dir/..")


def test_full_camel_to_snake() -> None:
    """Verify every component is converted."""
    actual = convert_full(Path("/anAbsolute/pathTo/someFile.jpg"), Convention.SNAKE)
    assert actual == Path("/an_absolute/path_to/some_file.jpg")


def test_full_mixed_to_upper_snake() -> None:
    """Verify mixed conventions converge on the target."""
    actual = convert_full(Path("/An Absolute/path-to/someFile.jpg"), Convention.UPPER_SNAKE)
    assert actual == Path("/AN_ABSOLUTE/PATH_TO/SOME_FILE.jpg")


def test_full_relative_path() -> None:
    """Verify parent references survive full conversion."""
    actual = convert_full(Path("../Some Dir/File One"), Convention.SNAKE)
    assert actual == Path("../some_dir/file_one")


def test_except_prefix_no_match() -> None:
    """Verify an unrelated prefix behaves like convert_full."""
    actual = convert_full_except_prefix(
        Path("/some-path/prefix/and-a/child"),
        Path("/a/different/prefix"),
        Convention.UPPER_SNAKE,
    )
    assert actual == Path("/SOME_PATH/PREFIX/AND_A/CHILD")


def test_except_prefix_match() -> None:
    """Verify the prefix is kept verbatim."""
    actual = convert_full_except_prefix(
        Path("/some-path/prefix/and-a/child"),
        Path("/some-path/prefix"),
        Convention.UPPER_SNAKE,
    )
    assert actual == Path("/some-path/prefix/AND_A/CHILD")


def test_except_prefix_equal_to_path() -> None:
    """Verify a path equal to the prefix is unchanged."""
    actual = convert_full_except_prefix("/Some Dir", "/Some Dir", Convention.SNAKE)
    assert actual == Path("/Some Dir")
