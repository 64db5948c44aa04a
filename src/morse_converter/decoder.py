"""Morse code to text decoding.

Decoding walks the input one symbol at a time through a small state machine.
The decoder is either ``IDLE`` (no dots or dashes collected) or
``ACCUMULATING`` the code of a single letter, and counts consecutive spaces
alongside:

* ``"\\n"`` and ``"\\r"`` are ignored.
* Any symbol other than a space or ``"/"`` extends the current code and resets
  the space count.
* The first space after a code flushes it. The third consecutive space emits
  a word break and restarts the count, so two spaces do nothing on their own.
* ``"/"`` flushes the current code, emits a word break and resets the count.

A flushed code that is not in the table is dropped without output.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

from .symbols import DEFAULT_TABLE, WORD_CODE, SymbolTable

LOGGER = logging.getLogger(__name__)

WORD_BREAK = " "
_SPACES_PER_WORD = 3
_IGNORED_SYMBOLS = frozenset("\r\n")


class DecoderState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class MorseDecoder:
    """Incremental Morse decoder; see the module docstring for the rules."""

    def __init__(self, table: SymbolTable = DEFAULT_TABLE) -> None:
        self._table = table
        self._code: List[str] = []
        self._space_run = 0
        self._output: List[str] = []

    @property
    def state(self) -> DecoderState:
        return DecoderState.ACCUMULATING if self._code else DecoderState.IDLE

    @property
    def space_run(self) -> int:
        return self._space_run

    def step(self, symbol: str) -> None:
        if symbol in _IGNORED_SYMBOLS:
            return
        if symbol == " ":
            self._space_run += 1
            if self._space_run == 1 and self._code:
                self._flush()
            elif self._space_run == _SPACES_PER_WORD:
                self._output.append(WORD_BREAK)
                self._space_run = 0
        elif symbol == WORD_CODE:
            self._flush()
            self._output.append(WORD_BREAK)
            self._space_run = 0
        else:
            self._code.append(symbol)
            self._space_run = 0

    def feed(self, text: str) -> None:
        for symbol in text:
            self.step(symbol)

    def finish(self) -> str:
        """Flush any pending code and return everything decoded so far."""

        self._flush()
        return "".join(self._output)

    def _flush(self) -> None:
        if not self._code:
            return
        code = "".join(self._code)
        self._code.clear()
        character = self._table.char_for(code)
        if character is None:
            LOGGER.debug("Dropping unrecognised code %r", code)
            return
        self._output.append(character)


def decode(morse_text: str, *, table: SymbolTable = DEFAULT_TABLE) -> str:
    decoder = MorseDecoder(table)
    decoder.feed(morse_text)
    return decoder.finish()


__all__ = ["DecoderState", "MorseDecoder", "WORD_BREAK", "decode"]
