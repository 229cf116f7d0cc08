from __future__ import annotations

import logging
from enum import Enum, auto
from typing import List, Tuple

from .models import CharacterStream, TokenizedText
from .textutils import SENTENCE_TERMINATOR, is_whitespace, is_word_boundary

LOGGER = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"
TERMINATOR_REPLACEMENT = " "


class LineTerminatorState(Enum):
    PASS_THROUGH = auto()
    POSSIBLE_WINDOWS_LT = auto()


class WordParseState(Enum):
    LISTEN_FOR_NEW_WORD = auto()
    READ_AND_STORE_CHARS = auto()


class SentenceParseState(Enum):
    LISTEN_FOR_NEW_SENTENCE = auto()
    READ_AND_STORE_CHARS = auto()


def _line_terminator_step(
    state: LineTerminatorState, char: str
) -> Tuple[LineTerminatorState, str, int]:
    """Return the next state, the characters to emit and the terminators counted."""
    if state is LineTerminatorState.POSSIBLE_WINDOWS_LT:
        if char == LINE_FEED:
            # "\r\n" is a single Windows terminator.
            return LineTerminatorState.PASS_THROUGH, TERMINATOR_REPLACEMENT, 1
        if char == CARRIAGE_RETURN:
            # Both are Mac-style terminators; the second one does not re-arm the flag.
            return LineTerminatorState.PASS_THROUGH, TERMINATOR_REPLACEMENT * 2, 2
        return LineTerminatorState.PASS_THROUGH, TERMINATOR_REPLACEMENT + char, 1
    if state is LineTerminatorState.PASS_THROUGH:
        if char == CARRIAGE_RETURN:
            return LineTerminatorState.POSSIBLE_WINDOWS_LT, "", 0
        if char == LINE_FEED:
            return LineTerminatorState.PASS_THROUGH, TERMINATOR_REPLACEMENT, 1
        return LineTerminatorState.PASS_THROUGH, char, 0
    raise AssertionError(f"Unhandled line terminator state: {state}")


def tokenize_characters(text: str) -> CharacterStream:
    """Collapse each line terminator in text to one space and count them."""
    state = LineTerminatorState.PASS_THROUGH
    chunks: List[str] = []
    terminators = 0
    for char in text:
        state, emitted, counted = _line_terminator_step(state, char)
        if emitted:
            chunks.append(emitted)
        terminators += counted
    if state is LineTerminatorState.POSSIBLE_WINDOWS_LT:
        # A trailing "\r" is a terminator with nothing after it.
        chunks.append(TERMINATOR_REPLACEMENT)
        terminators += 1
    return CharacterStream(text="".join(chunks), line_terminator_count=terminators)


def tokenize_words(text: str) -> List[str]:
    """Split text into words delimited by whitespace and the punctuation marks !?/:;,."""
    chars = text.replace(CARRIAGE_RETURN, TERMINATOR_REPLACEMENT).replace(
        LINE_FEED, TERMINATOR_REPLACEMENT
    )
    words: List[str] = []
    current: List[str] = []
    state = WordParseState.LISTEN_FOR_NEW_WORD
    for char in chars:
        state = _word_step(state, char, current, words)
    if current:
        words.append("".join(current))
    return words


def _word_step(
    state: WordParseState, char: str, current: List[str], words: List[str]
) -> WordParseState:
    if state is WordParseState.LISTEN_FOR_NEW_WORD:
        if is_word_boundary(char):
            return state
        current.append(char)
        return WordParseState.READ_AND_STORE_CHARS
    if state is WordParseState.READ_AND_STORE_CHARS:
        if is_word_boundary(char):
            words.append("".join(current))
            current.clear()
            return WordParseState.LISTEN_FOR_NEW_WORD
        current.append(char)
        return state
    raise AssertionError(f"Unhandled word parse state: {state}")


def tokenize_sentences(text: str) -> List[str]:
    """Split text into sentences ending with a full stop, which is kept."""
    chars = tokenize_characters(text).text
    sentences: List[str] = []
    current: List[str] = []
    state = SentenceParseState.LISTEN_FOR_NEW_SENTENCE
    for char in chars:
        state = _sentence_step(state, char, current, sentences)
    if current:
        sentences.append("".join(current))
    return sentences


def _sentence_step(
    state: SentenceParseState, char: str, current: List[str], sentences: List[str]
) -> SentenceParseState:
    if state is SentenceParseState.LISTEN_FOR_NEW_SENTENCE:
        if is_whitespace(char) or char == SENTENCE_TERMINATOR:
            return state
        current.append(char)
        return SentenceParseState.READ_AND_STORE_CHARS
    if state is SentenceParseState.READ_AND_STORE_CHARS:
        current.append(char)
        if char == SENTENCE_TERMINATOR:
            sentences.append("".join(current))
            current.clear()
            return SentenceParseState.LISTEN_FOR_NEW_SENTENCE
        return state
    raise AssertionError(f"Unhandled sentence parse state: {state}")


def tokenize(text: str) -> TokenizedText:
    """Run the character, word and sentence passes one after another."""
    characters = tokenize_characters(text)
    words = tokenize_words(text)
    sentences = tokenize_sentences(text)
    LOGGER.debug(
        "Tokenized %d characters, %d words, %d sentences (%d line terminators).",
        len(characters.text),
        len(words),
        len(sentences),
        characters.line_terminator_count,
    )
    return TokenizedText(characters=characters, words=words, sentences=sentences)
