"""
Semantic findings for jdecl.

The semantic analyzer never raises. Everything it has to say, errors
included, is recorded as an ordered list of findings.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class FindingLevel(Enum):
    """Severity of a semantic finding."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class SemanticFinding:
    """One diagnostic record produced by semantic analysis."""
    level: FindingLevel
    message: str
    code: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.level == FindingLevel.ERROR

    @property
    def category(self) -> Optional[str]:
        return SEMANTIC_ERROR_CODES.get(self.code)

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"

    def to_dict(self) -> dict:
        result = {"level": self.level.value, "message": self.message}
        if self.code:
            result["code"] = self.code
            result["category"] = self.category
        return result


# Semantic error codes for categorization
SEMANTIC_ERROR_CODES = {
    "S001": "Type mismatch",
    "S002": "Undefined type",
    "S011": "Symbol redefinition",
}


def create_type_mismatch_finding(declared: str, inferred: str) -> SemanticFinding:
    return SemanticFinding(
        level=FindingLevel.ERROR,
        message=f"Type mismatch: cannot assign {inferred} to {declared}",
        code="S001",
    )


def create_invalid_type_finding(type_name: str) -> SemanticFinding:
    return SemanticFinding(
        level=FindingLevel.ERROR,
        message=f"'{type_name}' is not a valid Java type",
        code="S002",
    )


def create_redeclaration_finding(name: str) -> SemanticFinding:
    return SemanticFinding(
        level=FindingLevel.ERROR,
        message=f"Variable '{name}' is already declared",
        code="S011",
    )


def create_declared_finding(name: str, type_name: str) -> SemanticFinding:
    return SemanticFinding(
        level=FindingLevel.INFO,
        message=f"Variable '{name}' declared as {type_name}",
    )


NO_ERRORS_FINDING = SemanticFinding(
    level=FindingLevel.INFO,
    message="No semantic errors found",
)
