"""Tests for the naming convention registry."""

import pytest

from ccpath.core import Convention, UnknownConvention, convention_names, resolve
from ccpath.core.convention import RENDER_POLICIES


def test_resolve_canonical_names() -> None:
    """Verify every canonical name resolves to its convention."""
    for convention in Convention:
        assert resolve(convention.value) is convention
    assert convention_names() == [
        "title", "flat", "upper_flat", "camel", "upper_camel", "snake", "upper_snake", "kebab",
    ]


def test_resolve_is_case_insensitive() -> None:
    """Verify identifiers match regardless of case."""
    assert resolve("SNAKE") == resolve("snake") == Convention.SNAKE
    assert resolve("Kebab") is Convention.KEBAB
    assert resolve("  camel ") is Convention.CAMEL


def test_resolve_aliases() -> None:
    """Verify documented aliases, with hyphens and spaces normalised."""
    assert resolve("snake_case") is Convention.SNAKE
    assert resolve("Snake-Case") is Convention.SNAKE
    assert resolve("kebab-case") is Convention.KEBAB
    assert resolve("pascal") is Convention.UPPER_CAMEL
    assert resolve("PascalCase") is Convention.UPPER_CAMEL
    assert resolve("screaming_snake") is Convention.UPPER_SNAKE
    assert resolve("constant") is Convention.UPPER_SNAKE
    assert resolve("upper flat") is Convention.UPPER_FLAT
    assert resolve("title case") is Convention.TITLE


def test_resolve_unknown() -> None:
    """Verify unsupported identifiers raise UnknownConvention."""
    with pytest.raises(UnknownConvention, match="Unsupported naming convention 'nope'") as info:
        resolve("nope")
    assert info.value.identifier == "nope"
    assert isinstance(info.value, ValueError)

    with pytest.raises(UnknownConvention):
        resolve("")


def test_policy_table_is_read_only() -> None:
    """Verify the render policy table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        RENDER_POLICIES[Convention.SNAKE] = RENDER_POLICIES[Convention.KEBAB]  # type: ignore[index]
    assert Convention.SNAKE.policy.separator == "_"
    assert Convention.CAMEL.policy.first_word_case is not None
