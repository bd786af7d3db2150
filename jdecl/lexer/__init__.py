"""
jdecl Lexer Package

Implements the lexical phase: source text to a position-exact token list.

Key Features:
- Whitespace, line comment and block comment exclusion
- Precedence-ordered token matching
- Char literal validation
- Full coverage check so every character is accounted for

Author: xwest
"""

from .tokens import (
    Token, TokenKind, SourceLocation, PRIMITIVE_TYPES, KEYWORDS,
    OPERATORS, PUNCTUATION, NUMERIC_HIERARCHY
)
from .lexer import Lexer, lex, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "lex",
    "tokenize_file",
    "Token",
    "TokenKind",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "PRIMITIVE_TYPES",
    "KEYWORDS",
    "OPERATORS",
    "PUNCTUATION",
    "NUMERIC_HIERARCHY",
]
