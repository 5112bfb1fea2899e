"""
opasm Tokenizer - groups bytes from an InputStream into tokens

Pull-based: each call to next()/scan() skips whitespace, looks at the lead
byte and hands off to the recognizer for that token kind. Only names and
opcodes are recognized so far; numbers, strings, paths and punctuation get
their own arm in _classify() built on read_while/read_until.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional

from ..config import LexerConfig
from .input_stream import ByteSource, InputStream
from .tokens import Atom, Token, SourceLocation, OPCODES
from .errors import (
    LexerError, create_invalid_character_error,
    create_unterminated_identifier_error, create_source_error
)

LOG = logging.getLogger("opasm.lexer.tokenizer")

Check = Callable[[int], bool]

# ASCII whitespace; vertical tab is not included
WHITESPACE = frozenset(b" \t\n\f\r")


def is_whitespace(byte: int) -> bool:
    return byte in WHITESPACE


def is_name_start(byte: int) -> bool:
    return byte == 0x5F or 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_name(byte: int) -> bool:
    return is_name_start(byte) or 0x30 <= byte <= 0x39


class ScanStatus(Enum):
    """Outcome of a single scan() call."""
    TOKEN = auto()
    END_OF_INPUT = auto()
    SOURCE_ERROR = auto()
    LEXICAL_ERROR = auto()


@dataclass(frozen=True)
class ScanResult:
    """
    Tagged result of scanning one token.

    ``token`` is set for TOKEN; ``error`` is set for SOURCE_ERROR and
    LEXICAL_ERROR and carries the location and reason.
    """
    status: ScanStatus
    token: Optional[Token] = None
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.status == ScanStatus.TOKEN

    @property
    def location(self) -> Optional[SourceLocation]:
        if self.token is not None:
            return self.token.location
        if self.error is not None:
            return self.error.location
        return None

    @property
    def reason(self) -> Optional[str]:
        return self.error.diagnostic.message if self.error is not None else None

    @property
    def cause(self) -> Optional[BaseException]:
        return self.error.cause if self.error is not None else None


END_OF_INPUT = ScanResult(ScanStatus.END_OF_INPUT)


class Tokenizer:
    """
    opasm tokenizer.

    Owns one InputStream and turns its bytes into Tokens, telling reserved
    opcodes apart from user-defined names.
    """

    def __init__(self, stream: InputStream):
        self.stream = stream
        self.keywords = OPCODES
        self.last: Optional[Token] = None

    @classmethod
    def from_bytes(cls, data: ByteSource, config: Optional[LexerConfig] = None) -> "Tokenizer":
        return cls(InputStream(data, config))

    @classmethod
    def from_path(cls, path: str, config: Optional[LexerConfig] = None) -> "Tokenizer":
        return cls(InputStream.open(path, config))

    def next(self) -> Optional[Token]:
        """Produce the next token, or None at end of input or on any error."""
        result = self.scan()
        return result.token if result.ok else None

    def scan(self) -> ScanResult:
        """
        Scan the next token.

        Returns:
            ScanResult tagged TOKEN, END_OF_INPUT, SOURCE_ERROR or
            LEXICAL_ERROR. A lexical error discards the offending byte so
            the following scan resumes after it.
        """
        # Whitespace is insignificant; drop it
        self.read_while(is_whitespace)
        if self.stream.eof():
            return self._consume(self._end())

        return self._consume(self._classify(self.stream.peek()))

    def _classify(self, lead: int) -> ScanResult:
        # Atom::Name or Keyword
        if is_name_start(lead):
            return self.read_name()

        return self._lexical_error(
            create_invalid_character_error(lead, self.stream.last_location)
        )

    def read_while(self, check: Check) -> bytes:
        """
        Consume bytes while check holds, starting with the byte in peek().

        Stops on the first byte that fails the check (left in peek()) or at
        end of input. If nothing has been read yet, reading starts here.
        """
        buf = bytearray()
        byte = self.stream.peek()
        if byte is None:
            byte = self.stream.next()
        while byte is not None and check(byte):
            buf.append(byte)
            byte = self.stream.next()
        return bytes(buf)

    def read_until(self, check: Check, end: Check) -> Optional[bytes]:
        """read_while(check), then require end of input or end(peek())."""
        read = self.read_while(check)
        if self.stream.eof() or end(self.stream.peek()):
            return read
        return None

    def read_name(self) -> ScanResult:
        location = self.stream.last_location
        name = self.read_until(is_name, is_whitespace)

        if name is None:
            return self._lexical_error(create_unterminated_identifier_error(
                self.stream.peek(), self.stream.last_location
            ))

        spelling = name.decode("ascii")
        if spelling in self.keywords:
            token = Token.keyword(spelling, location)
        else:
            token = Token.atom(Atom.name(spelling), location)
        return ScanResult(ScanStatus.TOKEN, token)

    def _end(self) -> ScanResult:
        if self.stream.error is None:
            return END_OF_INPUT
        error = create_source_error(self.stream.error, self.stream.location())
        LOG.debug("source error: %s", error.diagnostic.message)
        return ScanResult(ScanStatus.SOURCE_ERROR, error=error)

    def _lexical_error(self, error: LexerError) -> ScanResult:
        LOG.debug("%s", self.stream.screech(error.diagnostic.message))
        self.stream.next()
        return ScanResult(ScanStatus.LEXICAL_ERROR, error=error)

    def _consume(self, result: ScanResult) -> ScanResult:
        self.last = result.token
        return result

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until end of input; raise LexerError on any error."""
        while True:
            result = self.scan()
            if result.status == ScanStatus.END_OF_INPUT:
                return
            if not result.ok:
                raise result.error
            yield result.token

    def tokenize(self) -> List[Token]:
        """Tokenize the rest of the stream."""
        return list(self)

    def close(self):
        self.stream.close()

    def __enter__(self) -> "Tokenizer":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def tokenize_bytes(data: ByteSource, filename: str = "<bytes>") -> List[Token]:
    """
    Convenience function to tokenize an in-memory byte string.

    Args:
        data: Source bytes
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    with Tokenizer.from_bytes(data, LexerConfig(filename=filename)) as tokenizer:
        return tokenizer.tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be opened
    """
    with Tokenizer.from_path(filepath) as tokenizer:
        return tokenizer.tokenize()
