"""
Default word list for the practice page.

Reads a plain-text file of words; when it is missing or empty, falls back
to a short passage and returns a notice for the UI.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.errors import ValidationError
from core.word_parser import parse_words

load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_WORDS_PATH = Path(os.getenv("WORDS_FILE", "data/words.txt"))
FALLBACK_TEXT = (
    "We are what we repeatedly do. Excellence, then, is not an act, but a habit."
)


def load_default_words(path: Path = DEFAULT_WORDS_PATH) -> tuple[list[str], Optional[str]]:
    """
    Load the default word list.

    Args:
        path: Plain-text words file

    Returns:
        (words, notice); notice is None when the file was used
    """
    try:
        words = parse_words(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Unable to read %s: %s", path, exc)
        words = []

    if words:
        return words, None

    notice = (
        f"{path.name} was not found or has no words. Using a short sample passage "
        f"instead. Add your own words file at {path} or set WORDS_FILE."
    )
    return parse_words(FALLBACK_TEXT), notice


def decode_upload(data: bytes, source: str = "file") -> str:
    """
    Decode an uploaded text file, tolerating a byte order mark.

    Raises:
        ValidationError: The bytes are not UTF-8 text
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Rejected upload that is not UTF-8: %s", exc)
        raise ValidationError(f"That {source} is not a UTF-8 text file.", field="words")
