"""Command line interface for converting text to Morse code and back."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigError, ConverterConfig, Mode, load_config
from .decoder import decode
from .encoder import encode
from .symbols import DEFAULT_TABLE, SymbolTable

LOGGER = logging.getLogger(__name__)

STDIN_SOURCE = "-"
_DEFAULT_LOG_LEVEL = "WARNING"


class MorseCLIError(RuntimeError):
    """Base class for errors reported by the ``morse`` command."""


class ConflictingOptionsError(MorseCLIError):
    pass


class InputError(MorseCLIError):
    pass


class MissingInputError(InputError):
    pass


class OutputError(MorseCLIError):
    pass


def describe_supported_characters(table: SymbolTable = DEFAULT_TABLE) -> str:
    symbols = []
    for character in table.supported_characters():
        if character.isalnum():
            continue
        symbols.append("Space" if character == " " else character)
    return "\n".join(
        (
            "SUPPORTED CHARACTERS:",
            "  - Letters: A-Z (case insensitive)",
            "  - Numbers: 0-9",
            f"  - Symbols: {', '.join(symbols)}",
        )
    )


_NOTES = """\
NOTES:
  - If neither INPUT_TEXT nor INPUT_FILE is provided, input is read from stdin
  - Cannot specify both encode (-e) and decode (-d) options
  - --slash-wordspacer can only be used when encoding
  - Input and output files can be specified with relative or absolute paths
  - Newlines and carriage returns are ignored in input
  - Letters are separated by single spaces, words by triple spaces
  - Unsupported characters are represented as '*' in Morse code output

EXAMPLES:
  morse -e "HELLO WORLD"                        Encode 'HELLO WORLD' to Morse code
  morse "HELLO WORLD"                           Same as above (encode is default)
  morse -d ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."    Decode Morse code
  cat file.txt | morse -e                       Encode content from pipe
  morse -e input.txt                            Encode content of input.txt
  morse -d input.morse -o output.txt            Decode and write to output.txt
  morse -e --slash-wordspacer "HELLO WORLD"     Use ' / ' between words
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morse",
        description="Convert text to Morse code and vice versa.",
        epilog=f"{_NOTES}\n{describe_supported_characters()}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUT_TEXT|INPUT_FILE",
        help="Text to convert, or a readable file containing it. Use '-' for stdin.",
    )
    parser.add_argument("-e", "--encode", action="store_true", help="Encode text to Morse code (default)")
    parser.add_argument("-d", "--decode", action="store_true", help="Decode Morse code to text")
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        metavar="FILE",
        help="Write output to FILE instead of stdout",
    )
    parser.add_argument(
        "--slash-wordspacer",
        action="store_true",
        default=None,
        help="Use ' / ' between words (encode only)",
    )
    parser.add_argument(
        "--programmer-info",
        action="store_true",
        help="Display information about the programmer as JSON",
    )
    parser.add_argument("--config", type=Path, help="Path to a JSON configuration file")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging verbosity (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_mode(args: argparse.Namespace, config: ConverterConfig) -> Mode:
    if args.encode and args.decode:
        raise ConflictingOptionsError("Cannot specify both encode (-e) and decode (-d) options")
    if args.decode:
        return Mode.DECODE
    if args.encode:
        return Mode.ENCODE
    return config.mode


def resolve_slash_wordspacer(args: argparse.Namespace, config: ConverterConfig, mode: Mode) -> bool:
    if args.slash_wordspacer and mode is Mode.DECODE:
        raise ConflictingOptionsError("--slash-wordspacer can only be used with encode operation")
    if mode is Mode.DECODE:
        return False
    if args.slash_wordspacer is None:
        return config.slash_wordspacer
    return bool(args.slash_wordspacer)


def read_input(source: Optional[str]) -> str:
    """Return the text named by *source*.

    *source* is read as a file when it names a readable file and used verbatim
    otherwise. ``"-"`` reads stdin, as does ``None`` when stdin is not a
    terminal. Text read from a file or stdin loses one trailing newline.
    """

    if source == STDIN_SOURCE:
        return _read_stdin()
    if source is not None:
        path = Path(source)
        if path.is_file() and os.access(path, os.R_OK):
            LOGGER.debug("Reading input from %s", path)
            return _read_file(path)
        return source
    if sys.stdin is not None and not sys.stdin.isatty():
        LOGGER.debug("Reading input from stdin")
        return _read_stdin()
    raise MissingInputError("No input text provided.")


def _read_stdin() -> str:
    stream = sys.stdin
    if stream is None:
        raise MissingInputError("No input text provided.")
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return _strip_trailing_newline(stream.read())
    return _strip_trailing_newline(buffer.read().decode("utf-8", errors="replace"))


def _read_file(path: Path) -> str:
    try:
        contents = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputError(f"Could not open file '{path}'") from exc
    return _strip_trailing_newline(contents)


def _strip_trailing_newline(text: str) -> str:
    if text.endswith("\n"):
        return text[:-1]
    return text


def write_output(result: str, mode: Mode, destination: Optional[Path]) -> None:
    if destination is None:
        label = "Decoded" if mode is Mode.DECODE else "Encoded"
        print(f"{label}: {result}")
        return
    try:
        with open(destination, "w", encoding="utf-8", newline="") as handle:
            handle.write(result)
    except OSError as exc:
        raise OutputError(f"Could not open file '{destination}' for writing") from exc
    LOGGER.info("Wrote %d characters to %s", len(result), destination)


def convert(text: str, mode: Mode, *, slash_wordspacer: bool = False) -> str:
    if mode is Mode.DECODE:
        return decode(text)
    return encode(text, slash_wordspacer)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level or _DEFAULT_LOG_LEVEL)

    try:
        config = load_config(args.config) if args.config is not None else ConverterConfig()
        if args.log_level is None and config.log_level:
            logging.getLogger().setLevel(getattr(logging, config.log_level, logging.WARNING))

        if args.programmer_info:
            print(json.dumps(config.programmer_info.as_dict(), indent=2))
            return 0

        mode = resolve_mode(args, config)
        slash_wordspacer = resolve_slash_wordspacer(args, config, mode)
        text = read_input(args.input)
        result = convert(text, mode, slash_wordspacer=slash_wordspacer)
        write_output(result, mode, args.out)
    except MissingInputError as exc:
        LOGGER.error("%s", exc)
        parser.print_help()
        raise SystemExit(1) from exc
    except (MorseCLIError, ConfigError) as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc
    return 0


__all__ = [
    "ConflictingOptionsError",
    "InputError",
    "MissingInputError",
    "MorseCLIError",
    "OutputError",
    "build_parser",
    "convert",
    "main",
    "read_input",
    "write_output",
]


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
