"""
Token definitions for the opasm lexer.

This module defines the token vocabulary shared by the tokenizer and the
statement parser that consumes it:
- Atoms (integers, strings, names)
- Keywords (the fixed set of reserved opcodes)
- Paths (include targets)
- Punctuation (single structural bytes)
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional, Union


class TokenType(Enum):
    """Enumeration of all token kinds the tokenizer can emit."""

    ATOM = auto()                   # 42, "text", main
    KEYWORD = auto()                # put, jump, outl
    PATH = auto()                   # include target
    PUNCTUATION = auto()            # single structural byte


class AtomKind(Enum):
    """Scalar literal kinds carried by an ATOM token."""

    INT = auto()
    STR = auto()
    NAME = auto()


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source byte stream.

    Line and column are 1-based; offset is the 0-based byte offset.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Atom:
    """A scalar literal value: an integer, a string, or a name."""
    kind: AtomKind
    value: Union[int, str]

    @classmethod
    def integer(cls, value: int) -> "Atom":
        return cls(AtomKind.INT, value)

    @classmethod
    def string(cls, value: str) -> "Atom":
        return cls(AtomKind.STR, value)

    @classmethod
    def name(cls, value: str) -> "Atom":
        return cls(AtomKind.NAME, value)

    def __repr__(self) -> str:
        return f"{self.kind.name.capitalize()}({self.value!r})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of the assembly language.

    Carries the token type, the lexeme as spelled in the source, its
    semantic value, and the location of its first byte. The location does
    not take part in equality, so two tokens spelled the same way compare
    equal wherever they were read.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Atom, opcode spelling, path, or byte
    location: Optional[SourceLocation] = field(default=None, compare=False)

    @classmethod
    def atom(cls, atom: Atom, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.ATOM, str(atom.value), atom, location)

    @classmethod
    def keyword(cls, opcode: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.KEYWORD, opcode, opcode, location)

    @classmethod
    def path(cls, path: str, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.PATH, path, path, location)

    @classmethod
    def punctuation(cls, byte: int, location: Optional[SourceLocation] = None) -> "Token":
        return cls(TokenType.PUNCTUATION, chr(byte), byte, location)

    def __str__(self) -> str:
        if self.type == TokenType.ATOM:
            return f"Atom({self.value!r})"
        return f"{self.type.name.capitalize()}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved opcode."""
        return self.type == TokenType.KEYWORD

    @property
    def is_atom(self) -> bool:
        """Check if this token is a literal or name."""
        return self.type == TokenType.ATOM

    @property
    def is_name(self) -> bool:
        """Check if this token is a user-defined identifier."""
        return self.is_atom and self.value.kind == AtomKind.NAME


# Reserved opcode spellings, matched exactly and case-sensitively
OPCODES = frozenset({
    # Data movement
    "put",

    # Arithmetic
    "add", "sub", "mul", "div", "mod",

    # Comparison
    "gth", "lth", "geq", "leq", "eq", "neq",

    # Input / output
    "ini", "ins", "out", "outl", "nl",

    # Conversion and logic
    "con", "sti", "not", "and", "or",

    # Control flow
    "jump", "jmpt", "jmpf", "br", "brt", "brf", "back",

    # Termination
    "err", "end",
})
