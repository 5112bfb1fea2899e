"""
opasm Package

Lexical front end for a small assembly-style language: turns a byte stream
into keyword, atom, path and punctuation tokens for the statement parser.

Architecture:
    opasm/
    ├── config.py        # Lexer configuration
    ├── lexer/           # Input stream, tokenizer, token vocabulary
    └── parser/          # Statement nodes built from tokens

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import LexerConfig
from .lexer import InputStream, Tokenizer, Token, TokenType, Atom, LexerError

__all__ = [
    # Core classes
    "InputStream",
    "Tokenizer",
    "Token",
    "TokenType",
    "Atom",
    "LexerError",
    "LexerConfig",

    # Version info
    "__version__",
    "__license__",
]
