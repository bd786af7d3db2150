"""
Error handling for the jdecl lexer.

Provides error reporting with source location information and
IDE-friendly diagnostics.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters an invalid construct.

    The lexer stops at the first such construct; no partial token list is
    returned alongside it.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def category(self) -> Optional[str]:
        return ERROR_CODES.get(self.diagnostic.code)

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def column(self) -> int:
        return self.diagnostic.location.column

    def __str__(self) -> str:
        return self.diagnostic.message


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Invalid char literal",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token production accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in a declaration."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char[0]):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character '{char}' at line {location.line}, column {location.column}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_invalid_char_literal_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a char literal holding more than one character."""
    return LexerError(
        message=(f"Invalid char literal {lexeme} at line {location.line}, column {location.column}. "
                 f"Char literals can only contain ONE character."),
        location=location,
        code="L002",
        help_text="Use double quotes for text longer than one character.",
        suggestions=[f'Did you mean "{lexeme[1:-1]}"?'],
    )
