"""
Tests for the default word list loader.
"""

import pytest

from core.errors import ValidationError
from core.word_parser import parse_words
from core.word_source import FALLBACK_TEXT, decode_upload, load_default_words


def test_loads_words_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("energy\nclarity  flow\n", encoding="utf-8")
    assert load_default_words(path) == (["energy", "clarity", "flow"], None)


def test_missing_file_falls_back(tmp_path):
    words, notice = load_default_words(tmp_path / "missing.txt")
    assert words == parse_words(FALLBACK_TEXT)
    assert "missing.txt" in notice


def test_empty_file_falls_back(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("  \n", encoding="utf-8")
    words, notice = load_default_words(path)
    assert words[0] == "We"
    assert notice is not None


def test_decode_upload_strips_bom():
    assert decode_upload(b"\xef\xbb\xbfenergy flow") == "energy flow"


def test_decode_upload_rejects_non_utf8():
    with pytest.raises(ValidationError) as exc_info:
        decode_upload(b"caf\xe9 au lait")
    assert exc_info.value.message == "That file is not a UTF-8 text file."
