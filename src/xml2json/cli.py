"""Command-line converter (``xml2json`` / ``python -m xml2json.cli``)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .converter import DEFAULT_MAX_DEPTH, Converter
from .errors import Xml2JsonError


def _depth_limit(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"depth must be 0 or more, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml2json", description="Convert an XML document to JSON."
    )
    parser.add_argument("file", nargs="?", help="XML file to read (default: stdin)")
    parser.add_argument("-a", "--attributes", action="store_true",
                        help="include XML attributes under @attributes")
    parser.add_argument("--max-depth", type=_depth_limit, default=DEFAULT_MAX_DEPTH,
                        help=f"maximum nesting depth (default: {DEFAULT_MAX_DEPTH})")
    parser.add_argument("--indent", type=int, default=None,
                        help="pretty-print with this many spaces")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug output to stderr")
    return parser


def _read_input(path: str | None, stdin: IO[bytes]) -> bytes:
    # bytes, so the parser honours the document's own encoding declaration
    if path is None or path == "-":
        return stdin.read()
    with open(path, "rb") as fh:
        return fh.read()


def main(argv: list[str] | None = None,
         stdin: IO[bytes] | None = None,
         stdout: IO[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        text = _read_input(args.file, stdin)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 1

    converter = Converter(include_attributes=args.attributes, max_depth=args.max_depth)
    try:
        print(converter.from_xml(text, indent=args.indent), file=stdout)
    except Xml2JsonError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
