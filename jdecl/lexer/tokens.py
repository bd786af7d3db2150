"""
Token definitions and grammar tables for the jdecl lexer.

This module defines the token kinds produced by the lexer and the read-only
tables shared by all three analysis phases:
- Primitive type names and reserved keywords
- Operators and punctuation
- The precedence-ordered token pattern

Author: xwest
"""

import re
from enum import Enum
from dataclasses import dataclass


class TokenKind(Enum):
    """
    Enumeration of the token kinds recognized by the lexer.

    Numeric lexemes all share NUMBER; suffix disambiguation happens later
    during type inference.
    """

    IDENTIFIER = "identifier"       # total, _tmp, x1
    KEYWORD = "keyword"             # int, double, String
    STRING = "string"               # "hello", "say \"hi\""
    CHAR = "char"                   # 'a', '\n'
    NUMBER = "number"               # 42, -7, 3.14, 2.5f, 10L
    BOOLEAN = "boolean"             # true, false
    OPERATOR = "operator"           # =
    PUNCTUATION = "punctuation"     # ; ,


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for rendering token positions.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<string>") -> "SourceLocation":
        """Compute the 1-based line and column of an offset into source."""
        line = source.count('\n', 0, offset) + 1
        column = offset - source.rfind('\n', 0, offset)
        return cls(filename, line, column, offset)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    start/end are half-open offsets into the original source, so
    source[start:end] == lexeme for every token the lexer returns.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    start: int
    end: int
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.start}, {self.end})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in {
            TokenKind.STRING, TokenKind.CHAR,
            TokenKind.NUMBER, TokenKind.BOOLEAN,
        }

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "lexeme": self.lexeme,
            "start": self.start,
            "end": self.end,
            "line": self.location.line,
            "column": self.location.column,
        }


# Grammar tables shared by the lexer, parser and semantic analyzer

PRIMITIVE_TYPES = frozenset({
    "int",
    "double",
    "float",
    "boolean",
    "char",
    "byte",
    "short",
    "long",
    "String",
})

BOOLEAN_LITERALS = frozenset({"true", "false"})

# Reserved words: every primitive type name plus the boolean literals
KEYWORDS = PRIMITIVE_TYPES | BOOLEAN_LITERALS

OPERATORS = frozenset({"="})

PUNCTUATION = frozenset({";", ","})

# Numeric widening ladder, narrowest first
NUMERIC_HIERARCHY = ("byte", "short", "int", "long", "float", "double")

# Types a char literal widens to (char does not widen to byte/short)
CHAR_WIDENING_TARGETS = frozenset({"int", "long", "float", "double"})

# Alternation order is the match precedence:
# string, char, float+suffix, float, integer+suffix, integer,
# identifier/keyword, single-character operator or punctuation
TOKEN_PATTERN = re.compile(
    r'"(?:[^"\\]|\\.)*"'
    r"|'(?:[^'\\]|\\.)*'"
    r'|-?\d+\.\d+[fFdD]'
    r'|-?\d+\.\d+'
    r'|-?\d+[lLfFdD]'
    r'|-?\d+'
    r'|[A-Za-z_][A-Za-z0-9_]*'
    r'|[=;,+\-*/(){}\[\]<>!&|]',
    re.ASCII,
)

NUMBER_PATTERN = re.compile(r'-?\d+\.\d+[fFdD]?|-?\d+[lLfFdD]?', re.ASCII)

IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*', re.ASCII)
