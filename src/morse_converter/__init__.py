"""Text to Morse code conversion.

The package exposes two pure functions backed by a fixed symbol table::

    from morse_converter import decode, encode

    encode("SOS")            # "... --- ..."
    decode("... --- ...")    # "SOS"

:func:`encode` writes ``*`` for characters it cannot represent while
:func:`decode` silently drops codes it does not recognise. The ``morse``
command in :mod:`morse_converter.cli` wraps both for use from a shell.
"""

from __future__ import annotations

from .decoder import DecoderState, MorseDecoder, decode
from .encoder import UNKNOWN_SYMBOL, WordSeparator, encode
from .symbols import DEFAULT_TABLE, MORSE_CODE_TABLE, SymbolTable, char_for, code_for

__all__ = [
    "DEFAULT_TABLE",
    "DecoderState",
    "MORSE_CODE_TABLE",
    "MorseDecoder",
    "SymbolTable",
    "UNKNOWN_SYMBOL",
    "WordSeparator",
    "char_for",
    "code_for",
    "decode",
    "encode",
]

__version__ = "0.1.0"
