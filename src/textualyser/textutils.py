from __future__ import annotations

import re
import unicodedata

# Characters that terminate a word in addition to whitespace.
WORD_PUNCTUATION = frozenset("!?/:;,.")

SENTENCE_TERMINATOR = "."

SUFFIXES = ("ed", "ing", "ly")

ENGLISH_ALPHANUMERIC_RE = re.compile(r"[a-zA-Z0-9]")
NON_ALPHANUMERIC_RE = re.compile(r"[`¬!\"£$%^&*()_\-+={}\[\]\\|,.<>/?;:'@#~]")

_ASCII_WHITESPACE = frozenset(" \t\n\x0b\f\r")
_LAST_ASCII_CODE_POINT = 0x80


def is_whitespace(char: str) -> bool:
    """Return True for ASCII whitespace and Unicode separator characters."""
    if char in _ASCII_WHITESPACE:
        return True
    return unicodedata.category(char).startswith("Z")


def is_english_alphanumeric(char: str) -> bool:
    return ENGLISH_ALPHANUMERIC_RE.fullmatch(char) is not None


def is_non_alphanumeric(char: str) -> bool:
    """Return True if char belongs to the fixed punctuation/symbol class."""
    return NON_ALPHANUMERIC_RE.fullmatch(char) is not None


def is_international(char: str) -> bool:
    """Return True for characters beyond the ASCII range (accented letters etc.)."""
    return ord(char) > _LAST_ASCII_CODE_POINT


def is_word_punctuation(char: str) -> bool:
    return char in WORD_PUNCTUATION


def is_word_boundary(char: str) -> bool:
    return is_whitespace(char) or is_word_punctuation(char)


def has_counted_suffix(word: str) -> bool:
    return word.endswith(SUFFIXES)
