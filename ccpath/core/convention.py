"""
convention.py - Naming Convention Registry

Contains:
- Convention: the eight supported naming schemes
- RenderPolicy: separator and casing rules of a convention
- resolve: identifier -> Convention lookup
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .errors import UnknownConvention


class Convention(Enum):
    """Supported naming conventions

    Flat and upper flat are lossy: word boundaries are discarded and cannot
    be recovered from the converted name.
    """
    TITLE = "title"                  # Title Case
    FLAT = "flat"                    # flatcase
    UPPER_FLAT = "upper_flat"        # UPPERFLATCASE
    CAMEL = "camel"                  # camelCase
    UPPER_CAMEL = "upper_camel"      # UpperCamelCase
    SNAKE = "snake"                  # snake_case
    UPPER_SNAKE = "upper_snake"      # UPPER_SNAKE_CASE
    KEBAB = "kebab"                  # kebab-case

    @property
    def policy(self) -> "RenderPolicy":
        """Render policy owned by this convention"""
        return RENDER_POLICIES[self]

    @property
    def example(self) -> str:
        """Sample rendering used in help texts"""
        return EXAMPLES[self]

    @property
    def is_lossy(self) -> bool:
        """Whether rendering discards word boundaries"""
        return self in (Convention.FLAT, Convention.UPPER_FLAT)


def capitalize(word: str) -> str:
    """Titlecase the first character, lowercase the remainder"""
    # "ß" -> "Ss", "ﬁ" -> "Fi"
    return word[:1].title() + word[1:].lower()


def lower(word: str) -> str:
    return word.lower()


def upper(word: str) -> str:
    return word.upper()


@dataclass(frozen=True)
class RenderPolicy:
    """How a word sequence is joined and cased"""
    separator: str                                          # "" means words are concatenated
    word_case: Callable[[str], str]                         # Applied to every word
    first_word_case: Optional[Callable[[str], str]] = None  # Overrides word_case for the first word


RENDER_POLICIES: Mapping[Convention, RenderPolicy] = MappingProxyType({
    Convention.TITLE: RenderPolicy(" ", capitalize),
    Convention.FLAT: RenderPolicy("", lower),
    Convention.UPPER_FLAT: RenderPolicy("", upper),
    Convention.CAMEL: RenderPolicy("", capitalize, first_word_case=lower),
    Convention.UPPER_CAMEL: RenderPolicy("", capitalize),
    Convention.SNAKE: RenderPolicy("_", lower),
    Convention.UPPER_SNAKE: RenderPolicy("_", upper),
    Convention.KEBAB: RenderPolicy("-", lower),
})

EXAMPLES: Mapping[Convention, str] = MappingProxyType({
    Convention.TITLE: "Title Case",
    Convention.FLAT: "flatcase",
    Convention.UPPER_FLAT: "UPPERFLATCASE",
    Convention.CAMEL: "camelCase",
    Convention.UPPER_CAMEL: "UpperCamelCase",
    Convention.SNAKE: "snake_case",
    Convention.UPPER_SNAKE: "UPPER_SNAKE_CASE",
    Convention.KEBAB: "kebab-case",
})

# Keys are normalised with _normalize_identifier
_ALIASES: Mapping[str, Convention] = MappingProxyType({
    "title": Convention.TITLE,
    "title_case": Convention.TITLE,
    "flat": Convention.FLAT,
    "flat_case": Convention.FLAT,
    "flatcase": Convention.FLAT,
    "upper_flat": Convention.UPPER_FLAT,
    "upper_flat_case": Convention.UPPER_FLAT,
    "upperflat": Convention.UPPER_FLAT,
    "upperflatcase": Convention.UPPER_FLAT,
    "camel": Convention.CAMEL,
    "camel_case": Convention.CAMEL,
    "camelcase": Convention.CAMEL,
    "lower_camel": Convention.CAMEL,
    "upper_camel": Convention.UPPER_CAMEL,
    "upper_camel_case": Convention.UPPER_CAMEL,
    "pascal": Convention.UPPER_CAMEL,
    "pascal_case": Convention.UPPER_CAMEL,
    "pascalcase": Convention.UPPER_CAMEL,
    "snake": Convention.SNAKE,
    "snake_case": Convention.SNAKE,
    "upper_snake": Convention.UPPER_SNAKE,
    "upper_snake_case": Convention.UPPER_SNAKE,
    "screaming_snake": Convention.UPPER_SNAKE,
    "screaming_snake_case": Convention.UPPER_SNAKE,
    "constant": Convention.UPPER_SNAKE,
    "constant_case": Convention.UPPER_SNAKE,
    "kebab": Convention.KEBAB,
    "kebab_case": Convention.KEBAB,
    "dash": Convention.KEBAB,
    "dash_case": Convention.KEBAB,
})


def _normalize_identifier(identifier: str) -> str:
    return identifier.strip().lower().replace("-", "_").replace(" ", "_")


def resolve(identifier: str) -> Convention:
    """
    Look up a naming convention by name or alias

    Args:
        identifier: Canonical name or alias, matched case-insensitively

    Returns:
        Matching convention

    Raises:
        UnknownConvention: identifier is not supported
    """
    try:
        return _ALIASES[_normalize_identifier(identifier)]
    except KeyError:
        raise UnknownConvention(identifier) from None


def convention_names() -> List[str]:
    """Canonical convention names in declaration order"""
    return [c.value for c in Convention]
