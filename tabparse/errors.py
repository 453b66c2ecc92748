"""
Parse error taxonomy.

Every failure is terminal: the parse stops at the first violation and no
partial result is returned. Read failures from the input stream are not part
of this hierarchy; they propagate as the original ``OSError``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TabularParseError(Exception):
    """Base class for structural errors found while parsing."""

    kind = "parse_error"

    def __init__(self, message: str, *, line: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "line": self.line, "message": self.message}


class QuoteError(TabularParseError):
    """Misplaced or unbalanced quote character."""

    kind = "quote_error"


class UnmatchedQuoteError(QuoteError):
    kind = "unmatched_quote"

    def __init__(self, *, line: int) -> None:
        super().__init__(f"unmatched quote: input ended inside a quoted field at line {line}", line=line)


class UnexpectedQuoteError(QuoteError):
    kind = "unexpected_quote"

    def __init__(self, *, line: int, column: int) -> None:
        super().__init__(f"unexpected quote at line {line}, column {column}", line=line)
        self.column = column

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["column"] = self.column
        return data


class UnexpectedTrailingDataError(TabularParseError):
    """A byte followed a closing quote before the next delimiter or newline."""

    kind = "unexpected_trailing_data"

    def __init__(self, *, line: int, column: int, byte: int) -> None:
        super().__init__(
            f"unexpected data after closing quote at line {line}, column {column}: {bytes([byte])!r}",
            line=line,
        )
        self.column = column
        self.byte = byte

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["column"] = self.column
        data["byte"] = self.byte
        return data


class WrongFieldCountError(TabularParseError):
    kind = "wrong_field_count"

    def __init__(self, *, line: int, expected: int, actual: int) -> None:
        super().__init__(
            f"wrong number of fields at line {line}, expected {expected}, got {actual}",
            line=line,
        )
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected"] = self.expected
        data["actual"] = self.actual
        return data


class FieldDecodeError(TabularParseError):
    """A completed field is not valid in the configured encoding."""

    kind = "field_decode"

    def __init__(self, *, line: int, encoding: str, reason: Optional[str] = None) -> None:
        super().__init__(f"cannot decode field at line {line} as {encoding}: {reason}", line=line)
        self.encoding = encoding
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["encoding"] = self.encoding
        data["reason"] = self.reason
        return data
