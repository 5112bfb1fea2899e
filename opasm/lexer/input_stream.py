"""
Byte-level input stream for the opasm lexer.

Wraps any readable byte source and hands out one byte at a time, keeping
the last byte as a one-byte lookahead and tracking line/column so callers
can produce positioned diagnostics.
"""

import dataclasses
import io
import logging
from typing import BinaryIO, Optional, Union

from ..config import LexerConfig
from .tokens import SourceLocation

LOG = logging.getLogger("opasm.lexer.input_stream")

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


class InputStream:
    """
    Single-pass byte reader with position tracking.

    End of input and read failures both surface as ``None`` from ``next()``;
    a failure is kept in ``error`` for callers that need to tell them apart.
    Once ``None`` has been returned the stream stays exhausted.
    """

    def __init__(self, source: ByteSource, config: Optional[LexerConfig] = None):
        """
        Initialize the stream over a byte source.

        Args:
            source: bytes-like object, or a binary file object with read()
            config: Lexer configuration (filename, read chunk size)
        """
        self.config = config or LexerConfig()
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._buffer = b""
        self._index = 0
        self._exhausted = False

        self.last: Optional[int] = None
        self.last_location: Optional[SourceLocation] = None
        self.error: Optional[BaseException] = None
        self.line = 1
        self.column = 1
        self.offset = 0

    @classmethod
    def open(cls, path: str, config: Optional[LexerConfig] = None) -> "InputStream":
        """Open a file in binary mode; the stream owns and closes it."""
        if config is None:
            config = LexerConfig(filename=str(path))
        elif config.filename == LexerConfig.filename:
            config = dataclasses.replace(config, filename=str(path))
        return cls(open(path, "rb"), config)

    @property
    def filename(self) -> str:
        return self.config.filename

    def next(self) -> Optional[int]:
        """Read one byte, or None if the source is exhausted or failed."""
        if self._exhausted:
            return self._consume(None)

        if self._index >= len(self._buffer) and not self._fill():
            self._exhausted = True
            return self._consume(None)

        byte = self._buffer[self._index]
        self._index += 1

        self.last_location = self.location()
        self.offset += 1
        if byte == 0x0A:  # \n
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return self._consume(byte)

    def peek(self) -> Optional[int]:
        """Return the last byte produced by next() without reading further."""
        return self.last

    def eof(self) -> bool:
        return self.peek() is None

    def location(self) -> SourceLocation:
        """Snapshot of the current position."""
        return SourceLocation(self.filename, self.line, self.column, self.offset)

    def screech(self, message) -> str:
        """Format a diagnostic prefixed with the current [line:col]."""
        return f"[{self.line}:{self.column}] {message}"

    def close(self):
        self._exhausted = True
        self._consume(None)
        self._source.close()

    def __enter__(self) -> "InputStream":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _fill(self) -> bool:
        """Refill the chunk buffer. Returns False on end of input or failure."""
        try:
            chunk = self._source.read(self.config.chunk_size)
        except (OSError, ValueError) as e:
            self.error = e
            LOG.debug("read from %s failed at %s: %s", self.filename, self.location(), e)
            return False

        if not chunk:
            return False

        self._buffer = chunk
        self._index = 0
        return True

    def _consume(self, byte: Optional[int]) -> Optional[int]:
        self.last = byte
        if byte is None:
            self.last_location = None
        return byte
