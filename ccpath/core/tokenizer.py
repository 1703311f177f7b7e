"""
tokenizer.py - Word Boundary Tokenizer

Splits an arbitrarily cased, arbitrarily delimited string into lowercase words.
Boundaries, in order of precedence:
1. Separators: every character that is not a letter or digit (consumed)
2. Case: lower -> upper, and the last capital of an uppercase run
   when a lowercase letter follows (XMLParser -> xml, parser)
3. Digits: letter -> digit and digit -> letter transitions

Combining marks (decomposed accents) stay with the letter they follow.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional
import unicodedata

from .convention import Convention

WordSequence = List[str]


class Boundary(Enum):
    """Optional word boundaries (separators always split)"""
    LOWER_UPPER = "lower_upper"
    ACRONYM = "acronym"
    DIGIT = "digit"


ALL_BOUNDARIES: FrozenSet[Boundary] = frozenset(Boundary)

_SEPARATORS_ONLY: FrozenSet[Boundary] = frozenset()
_CAMEL = frozenset({Boundary.LOWER_UPPER, Boundary.ACRONYM})

# Boundaries honoured when the source convention of a name is known
SOURCE_BOUNDARIES: Mapping[Convention, FrozenSet[Boundary]] = MappingProxyType({
    Convention.TITLE: _SEPARATORS_ONLY,
    Convention.FLAT: _SEPARATORS_ONLY,
    Convention.UPPER_FLAT: _SEPARATORS_ONLY,
    Convention.CAMEL: _CAMEL,
    Convention.UPPER_CAMEL: _CAMEL,
    Convention.SNAKE: _SEPARATORS_ONLY,
    Convention.UPPER_SNAKE: _SEPARATORS_ONLY,
    Convention.KEBAB: _SEPARATORS_ONLY,
})


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


def _is_base_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdigit()


def _is_upper(ch: str, ascii_only: bool) -> bool:
    return ch.isupper() and (ch.isascii() or not ascii_only)


def _is_lower(ch: str, ascii_only: bool) -> bool:
    return ch.islower() and (ch.isascii() or not ascii_only)


def _next_base(text: str, start: int) -> str:
    """First character at or after start that is not a combining mark"""
    for ch in text[start:]:
        if not _is_mark(ch):
            return ch
    return ""


def _starts_word(
    prev: str,
    ch: str,
    nxt: str,
    boundaries: FrozenSet[Boundary],
    ascii_only: bool
) -> bool:
    """Whether ch begins a new word given the neighbouring letters or digits"""
    if prev.isdigit() != ch.isdigit():
        if Boundary.DIGIT in boundaries:
            return True
        # Digits are caseless, a capital after them still starts a word
        return (Boundary.LOWER_UPPER in boundaries
                and prev.isdigit() and _is_upper(ch, ascii_only))

    if ch.isdigit():
        return False

    if Boundary.LOWER_UPPER in boundaries:
        if _is_lower(prev, ascii_only) and _is_upper(ch, ascii_only):
            return True

    if Boundary.ACRONYM in boundaries:
        if (_is_upper(prev, ascii_only) and _is_upper(ch, ascii_only)
                and nxt and _is_lower(nxt, ascii_only)):
            return True

    return False


def tokenize(
    text: str,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> WordSequence:
    """
    Split text into lowercase words

    Args:
        text: Input string (typically a filename stem)
        source: Known convention of text, restricts the boundaries used
        ascii_only: Only ASCII letters take part in case transitions

    Returns:
        Words in order of appearance (empty when text has no letters or digits)
    """
    boundaries = ALL_BOUNDARIES if source is None else SOURCE_BOUNDARIES[source]

    words: WordSequence = []
    current: List[str] = []
    prev = ""  # Last letter or digit of the current word

    def flush():
        if current:
            words.append("".join(current).lower())
            current.clear()

    for i, ch in enumerate(text):
        if _is_mark(ch):
            # A mark without a letter in front of it is dropped
            if current:
                current.append(ch)
            continue

        if not _is_base_char(ch):
            flush()
            continue

        if current and _starts_word(prev, ch, _next_base(text, i + 1), boundaries, ascii_only):
            flush()

        current.append(ch)
        prev = ch

    flush()
    return words
