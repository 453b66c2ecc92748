"""
Byte-driven tabular parser.

Responsibilities:
- quoted fields, doubled quote escapes, delimiters and newlines inside quotes
- \\r ignored everywhere, \\n terminates records
- field count of every record checked against the first record
- fail fast: the first violation aborts the parse
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Union

from .cursor import ByteCursor
from .errors import (
    FieldDecodeError,
    UnexpectedQuoteError,
    UnexpectedTrailingDataError,
    UnmatchedQuoteError,
    WrongFieldCountError,
)
from .models import ParserConfig
from .rules import CARRIAGE_RETURN, LINE_FEED

logger = logging.getLogger(__name__)

Field = Union[str, bytes]
Record = List[Field]


@dataclass
class ParserState:
    """Mutable state of a single parse call; also builds the output records."""

    encoding: Optional[str] = None
    buffer: bytearray = field(default_factory=bytearray)
    record: Record = field(default_factory=list)
    in_quotes: bool = False
    just_closed_quote: bool = False
    line: int = 1
    column: int = 0
    expected_field_count: Optional[int] = None

    @property
    def has_pending(self) -> bool:
        return bool(self.buffer) or bool(self.record) or self.just_closed_quote

    def close_field(self) -> None:
        raw = bytes(self.buffer)
        self.buffer.clear()
        self.just_closed_quote = False
        if self.encoding is None:
            self.record.append(raw)
            return
        try:
            self.record.append(raw.decode(self.encoding))
        except UnicodeDecodeError as exc:
            raise FieldDecodeError(line=self.line, encoding=self.encoding, reason=exc.reason) from exc

    def close_record(self) -> Record:
        """Close the current field and record, checking the field count."""
        self.close_field()
        record = self.record
        if self.expected_field_count is None:
            self.expected_field_count = len(record)
        elif len(record) != self.expected_field_count:
            raise WrongFieldCountError(
                line=self.line,
                expected=self.expected_field_count,
                actual=len(record),
            )
        self.record = []
        self.line += 1
        self.column = 0
        return record


class TabularParser:
    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, source: Any) -> List[Record]:
        """Parse the whole input. Nothing is returned if any row is invalid."""
        records = list(self.iter_records(source))
        logger.debug("parsed %d records", len(records))
        return records

    def iter_records(self, source: Any) -> Iterator[Record]:
        """Yield records as they complete; raise at the first invalid row."""
        cursor = ByteCursor.wrap(source)
        delimiter = self.config.delimiter_byte
        quote = self.config.quote_byte
        state = ParserState(encoding=self.config.encoding)

        while True:
            byte = cursor.next_byte()
            if byte is None:
                break
            if byte == CARRIAGE_RETURN:
                continue
            state.column += 1

            if byte == quote:
                if state.in_quotes:
                    if cursor.peek_byte() == quote:
                        cursor.next_byte()
                        state.column += 1
                        state.buffer.append(quote)
                    else:
                        state.in_quotes = False
                        state.just_closed_quote = True
                elif state.buffer:
                    raise UnexpectedQuoteError(line=state.line, column=state.column)
                else:
                    state.in_quotes = True
                    state.just_closed_quote = False

            elif byte == delimiter:
                if state.in_quotes:
                    state.buffer.append(byte)
                else:
                    state.close_field()

            elif byte == LINE_FEED:
                if state.in_quotes:
                    state.buffer.append(byte)
                    state.column = 0
                else:
                    yield state.close_record()

            else:
                if state.just_closed_quote:
                    raise UnexpectedTrailingDataError(line=state.line, column=state.column, byte=byte)
                state.buffer.append(byte)

        if state.in_quotes:
            raise UnmatchedQuoteError(line=state.line)
        if state.has_pending:
            yield state.close_record()


def parse(source: Any, config: Optional[ParserConfig] = None) -> List[Record]:
    return TabularParser(config).parse(source)


def iter_records(source: Any, config: Optional[ParserConfig] = None) -> Iterator[Record]:
    return TabularParser(config).iter_records(source)
