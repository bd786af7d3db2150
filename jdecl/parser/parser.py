"""
jdecl Parser Implementation

Builds the syntax tree straight from source text: strip comments, split at
semicolons and match each fragment against the declaration shape. It does
not consume the lexer's tokens, so its error messages are independent of
the lexical phase.

Author: xwest
"""

import logging
import re
from typing import List

from ..lexer.tokens import PRIMITIVE_TYPES, IDENTIFIER_PATTERN
from .ast_nodes import (
    Program, Statement, VariableDeclaration, TypeRef, Identifier, Expression, Empty
)
from .errors import (
    ParseError, create_invalid_statement_error, create_invalid_type_error,
    create_identifier_starts_with_digit_error, create_invalid_identifier_error
)

logger = logging.getLogger(__name__)


# Comment removal is plain text substitution; a comment delimiter inside a
# string literal is stripped as well.
LINE_COMMENT_PATTERN = re.compile(r'//.*$', re.MULTILINE)
BLOCK_COMMENT_PATTERN = re.compile(r'/\*.*?\*/', re.DOTALL)

# type identifier = expression (the expression may not span lines, and
# \r, \u2028 and \u2029 all end a line)
DECLARATION_PATTERN = re.compile(r'(\w+)\s+(\w+)\s*=\s*([^\r\n\u2028\u2029]+)', re.ASCII)

LEADING_DIGIT_PATTERN = re.compile(r'\d', re.ASCII)


class Parser:
    """
    Declaration-list parser.

    Produces a Program whose children are VariableDeclaration nodes in
    source order, or a single Empty node when the source declares nothing.
    """

    def __init__(self, source: str):
        """
        Initialize parser with source text.

        Args:
            source: Raw source text (comments included)
        """
        self.source = source

    def parse(self) -> Program:
        """
        Parse the source into a Program.

        Raises:
            ParseError: On the first malformed statement
        """
        statements: List[Statement] = [
            self._parse_statement(fragment) for fragment in self._split_statements()
        ]
        logger.debug("Parsed %d declarations", len(statements))

        if not statements:
            return Program((Empty(),))
        return Program(tuple(statements))

    def _strip_comments(self) -> str:
        without_line_comments = LINE_COMMENT_PATTERN.sub('', self.source)
        return BLOCK_COMMENT_PATTERN.sub('', without_line_comments)

    def _split_statements(self) -> List[str]:
        fragments = (fragment.strip() for fragment in self._strip_comments().split(';'))
        return [fragment for fragment in fragments if fragment]

    def _parse_statement(self, statement: str) -> VariableDeclaration:
        match = DECLARATION_PATTERN.fullmatch(statement)
        if not match:
            raise create_invalid_statement_error(statement)

        type_name, identifier, expression = match.groups()

        if type_name not in PRIMITIVE_TYPES:
            raise create_invalid_type_error(type_name, statement)

        if LEADING_DIGIT_PATTERN.match(identifier):
            raise create_identifier_starts_with_digit_error(identifier, statement)

        if not IDENTIFIER_PATTERN.fullmatch(identifier):
            raise create_invalid_identifier_error(identifier, statement)

        return VariableDeclaration(
            type=TypeRef(type_name),
            identifier=Identifier(identifier),
            expression=Expression(expression.strip()),
        )


def parse(source: str) -> Program:
    """
    Parse a source string into a syntax tree.

    Raises:
        ParseError: If any statement is malformed
    """
    return Parser(source).parse()


def parse_file(filepath: str) -> Program:
    """
    Parse a source file into a syntax tree.

    Raises:
        ParseError: If any statement is malformed
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse(source)
