"""
renderer.py - Naming Convention Renderer

Joins a word sequence according to the render policy of a convention
"""

from typing import Optional, Sequence

from .convention import Convention
from .tokenizer import tokenize


def render(words: Sequence[str], convention: Convention) -> str:
    """
    Render words in the given convention

    Args:
        words: Word sequence produced by tokenize
        convention: Target convention

    Returns:
        Rendered name, empty string when there are no words
    """
    if not words:
        return ""

    policy = convention.policy
    cased = [policy.word_case(w) for w in words]
    if policy.first_word_case is not None:
        cased[0] = policy.first_word_case(words[0])

    return policy.separator.join(cased)


def convert_text(
    text: str,
    to: Convention,
    source: Optional[Convention] = None,
    ascii_only: bool = False
) -> str:
    """Tokenize text and render it in the target convention"""
    return render(tokenize(text, source=source, ascii_only=ascii_only), to)
