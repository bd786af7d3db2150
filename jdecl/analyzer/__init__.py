"""
jdecl Semantic Analyzer Package

Implements the semantic phase:
- Declared type validation
- Duplicate declaration detection
- Literal type inference and widening checks

Author: xwest
"""

from .semantic_analyzer import SemanticAnalyzer, check
from .symbol_table import Scope
from .type_inference import infer_literal_type, is_type_compatible
from .errors import SemanticFinding, FindingLevel

__all__ = [
    # Main analyzer
    "SemanticAnalyzer", "check",

    # Scope and types
    "Scope", "infer_literal_type", "is_type_compatible",

    # Findings
    "SemanticFinding", "FindingLevel",
]
