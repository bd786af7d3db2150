"""
jdecl Lexer - turns declaration source text into tokens

Works in three passes over the source: mark whitespace and comments, match
tokens with the precedence-ordered pattern, then make sure every
non-whitespace character ended up inside some token. The third pass is what
catches stray characters the pattern never even tries to match, like '#'
or an unterminated string quote.

xwest
"""

import logging
from typing import List, Set

from .tokens import (
    Token, TokenKind, SourceLocation, TOKEN_PATTERN, NUMBER_PATTERN,
    IDENTIFIER_PATTERN, BOOLEAN_LITERALS, KEYWORDS, OPERATORS, PUNCTUATION
)
from .errors import (
    LexerError, create_invalid_character_error, create_invalid_char_literal_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Declaration-language lexical analyzer.

    Converts source text into a list of tokens with exact source offsets.
    Fails on the first invalid construct.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []
        self._processed: Set[int] = set()

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens (no EOF marker)

        Raises:
            LexerError: On the first invalid character or char literal
        """
        self.tokens = []
        self._processed = set()

        self._mark_whitespace_and_comments()
        tokens = self._scan_tokens()
        self._check_coverage()

        self.tokens = tokens
        logger.debug("Lexed %s into %d tokens", self.filename, len(tokens))
        return tokens

    def _mark_whitespace_and_comments(self):
        """Mark every index covered by whitespace or a comment."""
        source = self.source
        length = len(source)
        i = 0

        while i < length:
            if source[i].isspace():
                self._processed.add(i)
                i += 1
                continue

            if source.startswith('//', i):
                newline = source.find('\n', i)
                end = length if newline == -1 else newline
                self._processed.update(range(i, end))
                i = end
                continue

            if source.startswith('/*', i):
                close = source.find('*/', i + 2)
                # An unterminated block comment stays unmarked so its
                # characters are reported as invalid later on
                if close != -1:
                    self._processed.update(range(i, close + 2))
                    i = close + 2
                    continue

            i += 1

    def _scan_tokens(self) -> List[Token]:
        tokens: List[Token] = []

        for match in TOKEN_PATTERN.finditer(self.source):
            start, end = match.span()
            if start in self._processed:
                continue

            self._processed.update(range(start, end))
            lexeme = match.group(0)
            kind = self._classify(lexeme, start)
            tokens.append(Token(kind, lexeme, start, end, self._location(start)))

        return tokens

    def _classify(self, lexeme: str, start: int) -> TokenKind:
        """Work out the token kind of a matched lexeme."""
        if len(lexeme) >= 2 and lexeme[0] == '"' and lexeme[-1] == '"':
            return TokenKind.STRING

        if len(lexeme) >= 2 and lexeme[0] == "'" and lexeme[-1] == "'":
            content = lexeme[1:-1]
            if len(content) == 1 or (len(content) == 2 and content[0] == '\\'):
                return TokenKind.CHAR
            raise create_invalid_char_literal_error(lexeme, self._location(start))

        if NUMBER_PATTERN.fullmatch(lexeme):
            return TokenKind.NUMBER

        if lexeme in BOOLEAN_LITERALS:
            return TokenKind.BOOLEAN

        if lexeme in KEYWORDS:
            return TokenKind.KEYWORD

        if lexeme in OPERATORS:
            return TokenKind.OPERATOR

        if lexeme in PUNCTUATION:
            return TokenKind.PUNCTUATION

        if IDENTIFIER_PATTERN.fullmatch(lexeme):
            return TokenKind.IDENTIFIER

        raise create_invalid_character_error(lexeme, self._location(start))

    def _check_coverage(self):
        """Every non-whitespace character must belong to a token or comment."""
        for index, char in enumerate(self.source):
            if index not in self._processed and not char.isspace():
                raise create_invalid_character_error(char, self._location(index))

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation.from_offset(self.source, offset, self.filename)


def lex(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return lex(source, str(filepath))
