from __future__ import annotations

from typing import List

from .errors import InvalidInputError

EXTENDED_ASCII_ALPHABET_SIZE = 256


class StringMatcher:
    """
    Count occurrences of a pattern using the Boyer-Moore bad-character rule.

    Matches may overlap: after a full match the window moves on by one
    position, so ``"abab"`` is found twice in ``"ababab"``.

    Parameters
    ----------
    pattern:
        Non-empty substring to search for.
    alphabet_size:
        Number of distinct symbol values the pattern may use. Every pattern
        character must have a code point below this value.
    """

    def __init__(
        self, pattern: str, alphabet_size: int = EXTENDED_ASCII_ALPHABET_SIZE
    ) -> None:
        if alphabet_size <= 0:
            raise InvalidInputError(
                f"Alphabet size must be positive, got {alphabet_size}."
            )
        if not pattern:
            raise InvalidInputError("Pattern must contain at least one character.")
        for index, char in enumerate(pattern):
            if ord(char) >= alphabet_size:
                raise InvalidInputError(
                    f"Pattern character {char!r} at index {index} is outside "
                    f"the alphabet of size {alphabet_size}."
                )
        self._pattern = pattern
        self._alphabet_size = alphabet_size
        self._bad_char_table = _build_bad_char_table(pattern, alphabet_size)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def alphabet_size(self) -> int:
        return self._alphabet_size

    @property
    def bad_char_table(self) -> List[int]:
        return list(self._bad_char_table)

    def last_index(self, char: str) -> int:
        """Last index of char in the pattern, or -1 (also for out-of-alphabet chars)."""
        code = ord(char)
        if code >= self._alphabet_size:
            return -1
        return self._bad_char_table[code]

    def count_occurrences(self, text: str) -> int:
        """Return the number of (possibly overlapping) matches of the pattern in text."""
        pattern = self._pattern
        pattern_len = len(pattern)
        text_len = len(text)
        matches = 0
        start = 0
        while start <= text_len - pattern_len:
            skip = 0
            for j in range(pattern_len - 1, -1, -1):
                if pattern[j] != text[start + j]:
                    skip = max(1, j - self.last_index(text[start + j]))
                    break
            if skip == 0:
                matches += 1
                skip = 1
            start += skip
        return matches


def _build_bad_char_table(pattern: str, alphabet_size: int) -> List[int]:
    table = [-1] * alphabet_size
    for index, char in enumerate(pattern):
        table[ord(char)] = index
    return table


def count_occurrences(
    pattern: str, text: str, alphabet_size: int = EXTENDED_ASCII_ALPHABET_SIZE
) -> int:
    """Convenience wrapper building a one-off StringMatcher."""
    return StringMatcher(pattern, alphabet_size).count_occurrences(text)
