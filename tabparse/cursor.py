from __future__ import annotations

import io
from typing import Any, BinaryIO, Optional

from .rules import READ_CHUNK_SIZE


class ByteCursor:
    """
    Sequential byte reader with one byte of lookahead.

    The stream is read in chunks; once a read returns nothing the stream is
    considered exhausted and is never read again. Errors raised by the
    stream's ``read`` propagate unchanged.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = b""
        self._pos = 0
        self._eof = False

    @classmethod
    def wrap(cls, source: Any, chunk_size: int = READ_CHUNK_SIZE) -> "ByteCursor":
        """Build a cursor over bytes-like data or a binary file-like object."""
        if isinstance(source, ByteCursor):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls(io.BytesIO(bytes(source)), chunk_size)
        if isinstance(source, str):
            raise TypeError("expected bytes or a binary stream, got str")
        if isinstance(source, io.TextIOBase):
            raise TypeError("expected a binary stream, got a text stream")
        if not callable(getattr(source, "read", None)):
            raise TypeError(f"expected bytes or a binary stream, got {type(source).__name__}")
        return cls(source, chunk_size)

    def _fill(self) -> bool:
        if self._eof:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        if isinstance(chunk, str):
            raise TypeError("stream returned str; open it in binary mode")
        self._buffer = bytes(chunk)
        self._pos = 0
        return True

    def next_byte(self) -> Optional[int]:
        if self._pos >= len(self._buffer) and not self._fill():
            return None
        byte = self._buffer[self._pos]
        self._pos += 1
        return byte

    def peek_byte(self) -> Optional[int]:
        if self._pos >= len(self._buffer) and not self._fill():
            return None
        return self._buffer[self._pos]
