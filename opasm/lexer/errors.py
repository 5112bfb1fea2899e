"""
Error handling for the opasm lexer.

Provides error reporting with source location information. The input
stream and tokenizer never raise these themselves while scanning; they are
built by the tokenizer's iteration helpers and by callers that turn a
failed scan into a user-facing message.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when tokenizing cannot continue.

    Contains the diagnostic for error reporting and, for failures of the
    underlying byte source, the exception that caused them.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.cause = cause

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L005": "Unexpected character in identifier",
    "L011": "Source read failure",
}


def describe_byte(byte: int) -> str:
    """Render a raw byte for a message: printable ASCII as-is, else hex."""
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    return f"0x{byte:02X}"


def create_invalid_character_error(byte: int, location: SourceLocation) -> LexerError:
    """Create an error for a byte that cannot start any token."""
    return LexerError(
        message=f"Invalid character: {describe_byte(byte)}",
        location=location,
        code="L001",
        help_text="Tokens start with a letter or '_'."
    )


def create_unterminated_identifier_error(byte: int, location: SourceLocation) -> LexerError:
    """Create an error for an identifier run glued to a non-identifier byte."""
    return LexerError(
        message=f"Unexpected character {describe_byte(byte)} after identifier",
        location=location,
        code="L005",
        help_text="Identifiers must be followed by whitespace or the end of input."
    )


def create_source_error(cause: BaseException, location: SourceLocation) -> LexerError:
    """Create an error for a failed read of the underlying byte source."""
    return LexerError(
        message=f"Failed to read source: {cause}",
        location=location,
        code="L011",
        cause=cause
    )
