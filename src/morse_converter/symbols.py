"""Bidirectional lookup table between ASCII characters and Morse code."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

WORD_CODE = "/"

MORSE_CODE_TABLE: Mapping[str, str] = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    ".": ".-.-.-",
    ",": "--..--",
    ":": "---...",
    ";": "-.-.-.",
    "?": "..--..",
    "!": "-.-.--",
    "=": "-...-",
    "-": "-....-",
    "+": ".-.-.",
    "_": "..--.-",
    "(": "-.--.",
    ")": "-.--.-",
    "/": "-..-.",
    "@": ".--.-.",
    " ": WORD_CODE,
}


class SymbolTable(Mapping[str, str]):
    """Immutable one-to-one mapping of characters to Morse codes.

    Characters are stored uppercase and ASCII lookups are case-insensitive,
    through :meth:`code_for` as well as the mapping interface. Every
    character and every code may appear only once; a table that breaks this
    raises :class:`ValueError` when it is built.
    """

    def __init__(self, entries: Iterable[Tuple[str, str]]) -> None:
        forward: dict[str, str] = {}
        reverse: dict[str, str] = {}
        for character, code in entries:
            if len(character) != 1 or not character.isascii():
                raise ValueError(f"Table keys must be single ASCII characters, got {character!r}")
            if not code:
                raise ValueError(f"Empty code for {character!r}")
            key = character.upper()
            if key in forward:
                raise ValueError(f"Duplicate entry for character {key!r}")
            if code in reverse:
                raise ValueError(
                    f"Code {code!r} is shared by {reverse[code]!r} and {key!r}"
                )
            forward[key] = code
            reverse[code] = key
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "SymbolTable":
        return cls(mapping.items())

    def __getitem__(self, character: str) -> str:
        if isinstance(character, str) and character.isascii():
            character = character.upper()
        return self._forward[character]

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} symbols)"

    def code_for(self, character: str) -> Optional[str]:
        """Return the Morse code for *character*, or ``None`` when unsupported."""

        if len(character) != 1 or not character.isascii():
            return None
        return self._forward.get(character.upper())

    def char_for(self, code: str) -> Optional[str]:
        """Return the character whose code is exactly *code*, or ``None``."""

        return self._reverse.get(code)

    def supported_characters(self) -> Tuple[str, ...]:
        return tuple(self._forward)


DEFAULT_TABLE = SymbolTable.from_mapping(MORSE_CODE_TABLE)


def code_for(character: str) -> Optional[str]:
    return DEFAULT_TABLE.code_for(character)


def char_for(code: str) -> Optional[str]:
    return DEFAULT_TABLE.char_for(code)


__all__ = [
    "DEFAULT_TABLE",
    "MORSE_CODE_TABLE",
    "SymbolTable",
    "WORD_CODE",
    "char_for",
    "code_for",
]
