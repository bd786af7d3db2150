"""
Rich renderables for tokens, syntax trees, findings and phase results.

Author: xwest
"""

from typing import Iterable, Sequence

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .lexer import Token
from .parser import ASTNode, ASTVisitor
from .analyzer import SemanticFinding, FindingLevel
from .pipeline import PhaseResult


LEVEL_STYLES = {
    FindingLevel.INFO: "green",
    FindingLevel.WARN: "yellow",
    FindingLevel.ERROR: "bold red",
}

STATUS_STYLES = {
    "pass": "green",
    "error": "bold red",
}


def token_table(tokens: Sequence[Token], title: str = "Tokens") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Lexeme")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")

    for index, token in enumerate(tokens, 1):
        table.add_row(str(index), token.kind.value, Text(token.lexeme),
                      str(token.start), str(token.end))
    return table


class TreeBuilder(ASTVisitor):
    """Builds a rich Tree mirroring the syntax tree."""

    def __init__(self):
        self._parent = None

    def visit(self, node: ASTNode) -> Tree:
        text = Text(node.node_type.value, style="bold")
        if node.label is not None:
            text.append(f" {node.label}", style="magenta")

        branch = Tree(text) if self._parent is None else self._parent.add(text)
        outer = self._parent
        self._parent = branch
        for child in node.children():
            child.accept(self)
        self._parent = outer
        return branch


def syntax_tree(ast: ASTNode) -> Tree:
    return ast.accept(TreeBuilder())


def findings_text(findings: Iterable[SemanticFinding]) -> Text:
    text = Text()
    for finding in findings:
        text.append(f"{finding.level.value.upper():<5} ", style=LEVEL_STYLES[finding.level])
        text.append(finding.message)
        text.append("\n")
    return text


def phase_results_text(results: Iterable[PhaseResult]) -> Text:
    text = Text()
    for result in results:
        text.append(result.message, style=STATUS_STYLES.get(result.status, ""))
        text.append("\n")
    return text
