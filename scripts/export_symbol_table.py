#!/usr/bin/env python3
"""Export the Morse symbol table in a JSON friendly format."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Sequence

# Ensure local sources are importable when the package isn't installed.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from morse_converter.symbols import DEFAULT_TABLE, SymbolTable


def build_payload(table: SymbolTable) -> dict:
    """Return a JSON serialisable payload for *table*."""

    return {
        "symbols": [
            {
                "character": character,
                "code": table[character],
            }
            for character in table.supported_characters()
        ]
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Export the Morse symbol table in JSON format."
    )
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Optional file path to write. Defaults to stdout.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Number of spaces to indent JSON output (default: 2).",
    )
    args = parser.parse_args(argv)

    json_text = json.dumps(build_payload(DEFAULT_TABLE), indent=args.indent)

    if args.output is None:
        print(json_text)
    else:
        args.output.write_text(json_text + "\n", encoding="utf-8")

    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
