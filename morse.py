#-------------------------------------------------------------------------------
# Name:        morse
"""Legacy entry point for the Morse code converter."""

from morse_converter import decode, encode
from morse_converter.cli import main

__all__ = ["decode", "encode", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
