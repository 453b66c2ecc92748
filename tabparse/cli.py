"""Command line interface for tabparse."""

from __future__ import annotations

import argparse
import codecs
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import ValidationError

from .encoding import resolve_encoding, strip_bom
from .errors import TabularParseError
from .models import ParserConfig
from .parser import Record, TabularParser
from .rules import ENCODING_RAW
from .settings import Settings, configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _dialect_char(value: str) -> str:
    # Allow "\t" and friends on the command line.
    try:
        decoded = codecs.decode(value, "unicode_escape")
    except UnicodeDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid escape in {value!r}") from exc
    if len(decoded) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return decoded


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tabparse", description="Parse delimited text into records.")
    parser.add_argument("path", nargs="?", default="-", help="input file, or - for stdin")
    parser.add_argument("--delimiter", type=_dialect_char, default=",")
    parser.add_argument("--quote", type=_dialect_char, default='"')
    parser.add_argument(
        "--encoding",
        default=settings.default_encoding,
        help="codec name, 'auto' to detect, or 'raw' to keep bytes",
    )
    parser.add_argument("--format", choices=("lines", "json"), default="lines")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    return parser


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as handle:
        return handle.read()


def _printable(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


def _print_records(records: List[Record], fmt: str) -> None:
    if fmt == "json":
        rows = [[_printable(item) for item in record] for record in records]
        print(json.dumps(rows, ensure_ascii=False))
        return
    for line_num, record in enumerate(records, start=1):
        for item in record:
            print(f"line {line_num}: {_printable(item)}")


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        print(f"tabparse: invalid environment settings: {exc}", file=sys.stderr)
        return EXIT_USAGE

    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level)

    try:
        raw = _read_input(args.path)
    except OSError as exc:
        print(f"tabparse: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.encoding == ENCODING_RAW:
        source = raw
    else:
        source = strip_bom(raw)
    used, detection = resolve_encoding(raw, args.encoding)
    logger.debug("encoding: %s", detection)

    try:
        config = ParserConfig(delimiter=args.delimiter, quote=args.quote, encoding=used)
    except ValidationError as exc:
        print(f"tabparse: invalid dialect: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        records = TabularParser(config).parse(source)
    except TabularParseError as exc:
        print(f"tabparse: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    _print_records(records, args.format)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
