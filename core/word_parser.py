"""
Word parsing for uploaded files and typed text.

Both sources go through the same function so a list saved from a file
and the same text pasted by hand produce identical sessions.
"""

from __future__ import annotations

import re

from core.errors import EmptyInputError


_LINE_BREAKS = re.compile(r"\r\n?")
_WHITESPACE = re.compile(r"\s+")


def parse_words(text: str) -> list[str]:
    """
    Split raw text into whitespace-delimited tokens.

    Line breaks are normalized to spaces first, every token is trimmed
    and empty tokens are dropped.

    Args:
        text: Raw text from a file or a text area

    Returns:
        Ordered list of tokens (empty when the text has no words)
    """
    if not text:
        return []
    flattened = _LINE_BREAKS.sub(" ", text)
    chunks = (chunk.strip() for chunk in _WHITESPACE.split(flattened))
    return [chunk for chunk in chunks if chunk]


def parse_words_or_raise(text: str, source: str = "text") -> list[str]:
    """
    Parse text and reject input without any words.

    Raises:
        EmptyInputError: If no tokens were found
    """
    words = parse_words(text)
    if not words:
        raise EmptyInputError(f"That {source} contains no words.")
    return words


def normalize_word(value: str) -> str:
    """Lowercase, trim and collapse internal whitespace for comparison."""
    return _WHITESPACE.sub(" ", value.strip()).lower()
