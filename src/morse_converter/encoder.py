"""Text to Morse code encoding."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

from .symbols import DEFAULT_TABLE, SymbolTable

LOGGER = logging.getLogger(__name__)

UNKNOWN_SYMBOL = "*"
LETTER_SEPARATOR = " "
_IGNORED_CHARACTERS = "\r\n"


class WordSeparator(str, Enum):
    SPACES = "   "
    SLASH = " / "


def _encode_word(word: str, table: SymbolTable) -> str:
    codes: List[str] = []
    for character in word:
        code = table.code_for(character)
        if code is None:
            LOGGER.debug("No Morse code for %r, emitting %s", character, UNKNOWN_SYMBOL)
            code = UNKNOWN_SYMBOL
        codes.append(code)
    return LETTER_SEPARATOR.join(codes)


def encode(text: str, use_slash_separator: bool = False, *, table: SymbolTable = DEFAULT_TABLE) -> str:
    """Encode *text* as Morse code.

    Carriage returns and newlines are removed before anything else, so they
    never act as word boundaries. Runs of spaces collapse into a single word
    separator and leading or trailing spaces produce no separator at all.
    Characters missing from *table* are written as ``*``.
    """

    for ignored in _IGNORED_CHARACTERS:
        text = text.replace(ignored, "")
    separator = WordSeparator.SLASH if use_slash_separator else WordSeparator.SPACES
    words = [word for word in text.split(" ") if word]
    return separator.value.join(_encode_word(word, table) for word in words)


__all__ = ["LETTER_SEPARATOR", "UNKNOWN_SYMBOL", "WordSeparator", "encode"]
