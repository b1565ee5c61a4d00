"""Command line entry point: format a JSON file and report the first error.

Usage:
  jsonfmt [path/to/file.json]
  cat file.json | jsonfmt -
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import DEFAULT_INDENT_SIZE
from . import DEFAULT_MAX_DEPTH
from . import JSONFormatError
from . import format_json

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "dataInput.json"


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    # utf-8-sig drops a leading byte order mark written by some editors
    return Path(path).read_text(encoding="utf-8-sig")


def _report_error(err: JSONFormatError) -> None:
    print("==== PARTIAL FORMATTED OUTPUT ====", file=sys.stderr)
    sys.stdout.write(err.partial_output)
    sys.stdout.write("\n")
    sys.stdout.flush()

    print(
        f"==== JSON ERROR at line:{err.lineno} col:{err.colno} ====",
        file=sys.stderr,
    )
    print(err.msg, file=sys.stderr)
    if err.context_line is not None:
        print(file=sys.stderr)
        print(err.context_line, file=sys.stderr)
        if err.caret_line is not None:
            print(err.caret_line, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonfmt",
        description="Pretty-print a strict JSON document.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"JSON file path or '-' for stdin (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_INDENT_SIZE,
        help="Spaces per nesting level",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Maximum container nesting depth",
    )
    parser.add_argument(
        "--raw-strings",
        action="store_true",
        help="Write decoded string content back without re-escaping it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        content = _read_input(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: failed to read input: {exc}", file=sys.stderr)
        return 2

    try:
        output = format_json(
            content,
            args.indent,
            max_depth=args.max_depth,
            escape_strings=not args.raw_strings,
        )
    except JSONFormatError as err:
        logger.debug(f"{args.path}: {err}")
        _report_error(err)
        return 1
    except (TypeError, ValueError) as exc:
        # Invalid --indent or --max-depth values
        print(f"error: {exc}", file=sys.stderr)
        return 2

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
