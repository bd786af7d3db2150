"""
Error handling for the jdecl parser.

Provides error reporting for malformed declarations. The parser works on
comment-stripped text split at semicolons, so its errors carry the offending
fragment rather than a source location.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a malformed declaration.

    Parsing stops at the first malformed statement; no partial tree is
    returned alongside it.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        statement: Optional[str] = None,
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
        self.statement = statement

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def category(self) -> Optional[str]:
        return PARSER_ERROR_CODES.get(self.diagnostic.code)

    def __str__(self) -> str:
        return self.diagnostic.message


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Invalid statement",
    "P002": "Invalid type",
    "P003": "Identifier starts with a digit",
    "P004": "Invalid identifier character",
}


def create_invalid_statement_error(statement: str) -> ParseError:
    """Create an error for a fragment that is not a declaration."""
    return ParseError(
        message=(f"Syntax error: Invalid statement '{statement}'. "
                 f"Expected format: type identifier = value;"),
        statement=statement,
        code="P001",
        help_text="Every statement must declare exactly one variable with an initializer.",
        suggestions=["Check for a missing semicolon", "Check for a missing '=' or value"]
    )


def create_invalid_type_error(type_name: str, statement: str) -> ParseError:
    """Create an error for a declared type that is not a primitive."""
    return ParseError(
        message=f"Syntax error: '{type_name}' is not a valid Java type",
        statement=statement,
        code="P002",
        help_text="Declared types must be one of the primitive types or String.",
    )


def create_identifier_starts_with_digit_error(identifier: str, statement: str) -> ParseError:
    return ParseError(
        message=f"Syntax error: Identifier '{identifier}' cannot start with a number",
        statement=statement,
        code="P003",
        suggestions=[f"Rename it to '_{identifier}'"]
    )


def create_invalid_identifier_error(identifier: str, statement: str) -> ParseError:
    return ParseError(
        message=f"Syntax error: Identifier '{identifier}' contains invalid characters",
        statement=statement,
        code="P004",
        help_text="Identifiers may only contain letters, digits and underscores.",
    )
