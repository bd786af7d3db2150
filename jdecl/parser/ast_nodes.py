"""
Abstract Syntax Tree node definitions for jdecl.

Each node kind is its own immutable class carrying only the fields valid for
that kind. Every node also exposes a uniform tag/label/children view used by
renderers and by JSON export, and supports the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum


class ASTNodeType(Enum):
    """Enumeration of all AST node tags."""

    PROGRAM = "Program"
    VARIABLE_DECLARATION = "VariableDeclaration"
    TYPE = "Type"
    IDENTIFIER = "Identifier"
    EXPRESSION = "Expression"
    EMPTY = "Empty"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    @property
    def label(self) -> Optional[str]:
        return None

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the tag/label/children form used for JSON output."""
        result: Dict[str, Any] = {"type": self.node_type.value}
        if self.label is not None:
            result["label"] = self.label
        children = self.children()
        if children:
            result["children"] = [child.to_dict() for child in children]
        return result

    def __str__(self) -> str:
        if self.label is None:
            return self.node_type.value
        return f"{self.node_type.value}({self.label})"


# ============================================================================
# Leaves
# ============================================================================

@dataclass(frozen=True)
class TypeRef(ASTNode):
    """Declared type of a variable, e.g. int or String."""
    name: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.TYPE

    @property
    def label(self) -> str:
        return self.name

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Identifier(ASTNode):
    """Name being declared."""
    name: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    @property
    def label(self) -> str:
        return self.name

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Expression(ASTNode):
    """Initializer text, kept verbatim and not parsed any further."""
    text: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION

    @property
    def label(self) -> str:
        return self.text

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


@dataclass(frozen=True)
class VariableDeclaration(Statement):
    """
    Variable declaration statement: <type> <identifier> = <expression>

    The parser always fills all three parts. Trees built by hand may leave
    type or identifier unset; the semantic analyzer skips such declarations.
    """
    type: Optional[TypeRef]
    identifier: Optional[Identifier]
    expression: Optional[Expression]

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_DECLARATION

    @property
    def label(self) -> Optional[str]:
        if self.type is None or self.identifier is None:
            return None
        return f"{self.type.name} {self.identifier.name}"

    def children(self) -> List[ASTNode]:
        return [child for child in (self.type, self.identifier, self.expression)
                if child is not None]


@dataclass(frozen=True)
class Empty(Statement):
    """Placeholder statement for a program without declarations."""

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EMPTY

    @property
    def label(self) -> str:
        return "No statements"

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Top-level
# ============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node; holds declarations in source order, or a single Empty."""
    statements: Tuple[Statement, ...]

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    @property
    def declarations(self) -> List[VariableDeclaration]:
        return [stmt for stmt in self.statements if isinstance(stmt, VariableDeclaration)]

    @property
    def is_empty(self) -> bool:
        return not self.declarations
