"""
opasm Lexer Package

Streaming lexical analyzer for the opasm assembly language.

Key Features:
- Byte-level input stream over any readable source
- One-byte lookahead with line/column tracking for diagnostics
- Reserved opcode vs. identifier classification
- Tagged scan results that tell end of input, source failures and
  malformed tokens apart
"""

from .tokens import Token, TokenType, Atom, AtomKind, SourceLocation, OPCODES
from .input_stream import InputStream
from .tokenizer import Tokenizer, ScanResult, ScanStatus, tokenize_bytes, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "InputStream",
    "Tokenizer",
    "ScanResult",
    "ScanStatus",
    "Token",
    "TokenType",
    "Atom",
    "AtomKind",
    "SourceLocation",
    "OPCODES",
    "LexerError",
    "Diagnostic",
    "tokenize_bytes",
    "tokenize_file",
]
