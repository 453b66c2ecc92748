from __future__ import annotations

import codecs
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .rules import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_QUOTE,
    MULTI_BYTE_ENCODINGS,
    RESERVED_BYTES,
    SINGLE_BYTE_ENCODINGS,
)


class ParserConfig(BaseModel):
    """
    Dialect for one parser instance.

    Rules:
    - delimiter and quote are single bytes; a 1-char str, a 1-byte bytes or an
      int in 0..255 is accepted and stored as bytes.
    - delimiter and quote must differ and may not be \\r or \\n.
    - encoding decodes completed fields; None keeps them as bytes. Only
      single-byte codecs and UTF-8 are allowed since parsing is byte-wise.
    - with UTF-8, delimiter and quote must be ASCII bytes so they can never
      fall inside a multi-byte character.
    """

    model_config = ConfigDict(frozen=True)

    delimiter: bytes = Field(default=DEFAULT_DELIMITER)
    quote: bytes = Field(default=DEFAULT_QUOTE)
    encoding: Optional[str] = Field(default=DEFAULT_ENCODING)

    @field_validator("delimiter", "quote", mode="before")
    @classmethod
    def _single_byte(cls, value: Any) -> bytes:
        if isinstance(value, bool):
            raise ValueError("must be a single byte, not a bool")
        if isinstance(value, int):
            if not 0 <= value <= 255:
                raise ValueError("must be in range 0..255")
            value = bytes([value])
        elif isinstance(value, str):
            try:
                value = value.encode("latin-1")
            except UnicodeEncodeError:
                raise ValueError("must be a single-byte character") from None
        elif isinstance(value, (bytearray, memoryview)):
            value = bytes(value)

        if not isinstance(value, bytes) or len(value) != 1:
            raise ValueError("must be exactly one byte")
        if value in RESERVED_BYTES:
            raise ValueError("cannot be a line terminator")
        return value

    @field_validator("encoding")
    @classmethod
    def _byte_wise_codec(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            name = codecs.lookup(value).name
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        if name not in SINGLE_BYTE_ENCODINGS and name not in MULTI_BYTE_ENCODINGS:
            raise ValueError(f"encoding {value} is not a single-byte codec or UTF-8")
        return value

    @model_validator(mode="after")
    def _distinct_bytes(self) -> "ParserConfig":
        if self.delimiter == self.quote:
            raise ValueError("delimiter and quote must be different bytes")
        if self.encoding is not None and codecs.lookup(self.encoding).name in MULTI_BYTE_ENCODINGS:
            if self.delimiter_byte >= 0x80 or self.quote_byte >= 0x80:
                raise ValueError(f"delimiter and quote must be ASCII bytes with {self.encoding}")
        return self

    @property
    def delimiter_byte(self) -> int:
        return self.delimiter[0]

    @property
    def quote_byte(self) -> int:
        return self.quote[0]


class ParseSummary(BaseModel):
    rows: int = 0
    columns: Optional[int] = Field(default=None, examples=[None])
    delimiter: str
    quote: str
    encoding: Optional[str] = None
    detection: Dict[str, Any] = Field(default_factory=dict)


class ParseResponse(BaseModel):
    records: List[List[str]] = Field(default_factory=list)
    summary: ParseSummary


class HealthResponse(BaseModel):
    ok: bool = True
