"""
Semantic analyzer for jdecl.

Walks the declarations of a Program in source order and checks:
- Declared types are recognized primitives
- No name is declared twice
- Literal initializers fit the declared type (with widening)

Author: xwest
"""

import logging
from typing import List

from ..lexer.tokens import PRIMITIVE_TYPES
from ..parser.ast_nodes import Program, VariableDeclaration
from .symbol_table import Scope
from .type_inference import infer_literal_type, is_type_compatible
from .errors import (
    SemanticFinding, create_type_mismatch_finding, create_invalid_type_finding,
    create_redeclaration_finding, create_declared_finding, NO_ERRORS_FINDING
)

logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    """
    Declaration checker.

    Holds no state between calls: each analyze() gets a fresh scope and
    finding list, so analyzing the same tree twice yields the same findings.
    """

    def analyze(self, ast: Program) -> List[SemanticFinding]:
        """
        Check every declaration in the tree.

        Args:
            ast: Program produced by the parser

        Returns:
            Ordered, non-empty list of findings
        """
        findings: List[SemanticFinding] = []
        scope = Scope()

        for node in ast.statements:
            if isinstance(node, VariableDeclaration):
                self._check_declaration(node, scope, findings)

        if not findings:
            findings.append(NO_ERRORS_FINDING)

        logger.debug("Semantic analysis produced %d findings (%d errors)",
                     len(findings), sum(1 for f in findings if f.is_error))
        return findings

    def _check_declaration(self, decl: VariableDeclaration, scope: Scope,
                           findings: List[SemanticFinding]):
        if decl.type is None or decl.identifier is None:
            logger.debug("Skipping declaration without type or identifier: %r", decl)
            return

        declared_type = decl.type.name
        name = decl.identifier.name
        if not declared_type or not name:
            logger.debug("Skipping declaration with blank type or identifier: %r", decl)
            return

        if declared_type not in PRIMITIVE_TYPES:
            findings.append(create_invalid_type_finding(declared_type))
            return

        try:
            scope.define(name, declared_type)
        except KeyError:
            findings.append(create_redeclaration_finding(name))
            return

        findings.append(create_declared_finding(name, declared_type))

        if decl.expression is None or not decl.expression.text:
            return

        value_type = infer_literal_type(decl.expression.text)
        # Non-literal initializers cannot be verified and are accepted
        if value_type is not None and not is_type_compatible(declared_type, value_type):
            findings.append(create_type_mismatch_finding(declared_type, value_type))


def check(ast: Program) -> List[SemanticFinding]:
    """Run semantic analysis on a syntax tree. Never raises."""
    return SemanticAnalyzer().analyze(ast)
