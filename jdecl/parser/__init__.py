"""
jdecl Parser Package

Implements the syntax phase: source text to a restricted-grammar syntax tree
of variable declarations.

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Program, Statement, VariableDeclaration,
    TypeRef, Identifier, Expression, Empty
)
from .parser import Parser, parse, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse", "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor",
    "Program", "Statement", "VariableDeclaration",
    "TypeRef", "Identifier", "Expression", "Empty",

    # Error handling
    "ParseError",
]
