"""
jdecl - static analysis for typed variable declarations

Checks source files made of declarations of the form

    <type> <identifier> = <expression>;

in three independent phases.

Architecture:
    jdecl/
    ├── lexer/           # Tokenization with exact source offsets
    ├── parser/          # Declaration syntax tree
    ├── analyzer/        # Type validation, redeclaration and widening checks
    ├── pipeline.py      # Phase gating and fixture driver
    ├── render.py        # Token tables, trees and findings for the terminal
    └── cli.py           # jdecl command

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, LexerError, lex, tokenize_file
from .parser import Parser, Program, ParseError, parse, parse_file
from .analyzer import SemanticAnalyzer, SemanticFinding, FindingLevel, check

__all__ = [
    # Phase entry points
    "lex",
    "parse",
    "check",
    "tokenize_file",
    "parse_file",

    # Core classes
    "Lexer",
    "Parser",
    "SemanticAnalyzer",
    "Token",
    "TokenKind",
    "Program",
    "SemanticFinding",
    "FindingLevel",

    # Errors
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
