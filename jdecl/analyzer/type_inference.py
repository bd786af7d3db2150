"""
Literal type inference and widening rules.

Maps an initializer's text to the primitive type of the literal it spells,
and decides whether a value of one type may be assigned to a variable of
another without a cast.

Author: xwest
"""

import re
from typing import Optional

from ..lexer.tokens import BOOLEAN_LITERALS, NUMERIC_HIERARCHY, CHAR_WIDENING_TARGETS


# Checked in this order; the first match wins
LITERAL_PATTERNS = (
    ("String", re.compile(r'"(?:[^"\\]|\\.)*"')),
    ("char", re.compile(r"'(?:[^'\\]|\\.)'")),
    ("float", re.compile(r'-?\d+(?:\.\d+)?[fF]', re.ASCII)),
    ("double", re.compile(r'-?\d+\.\d+[dD]?', re.ASCII)),
    ("long", re.compile(r'-?\d+[lL]', re.ASCII)),
)

INTEGER_PATTERN = re.compile(r'-?\d+', re.ASCII)

# Narrowest type first; anything beyond int range is a long
INTEGER_RANGES = (
    ("byte", -2 ** 7, 2 ** 7 - 1),
    ("short", -2 ** 15, 2 ** 15 - 1),
    ("int", -2 ** 31, 2 ** 31 - 1),
)


def infer_literal_type(expression: str) -> Optional[str]:
    """
    Infer the primitive type of a literal expression.

    Bare integers are narrowed to the smallest type whose range holds them,
    so 5 is a byte and 300 a short.

    Returns:
        The type name, or None when the expression is not a literal
    """
    expression = expression.strip()

    if expression in BOOLEAN_LITERALS:
        return "boolean"

    for type_name, pattern in LITERAL_PATTERNS:
        if pattern.fullmatch(expression):
            return type_name

    if INTEGER_PATTERN.fullmatch(expression):
        # More than ten significant digits is outside int range
        if len(expression.lstrip("-").lstrip("0")) > 10:
            return "long"
        return narrow_integer(int(expression))

    return None


def narrow_integer(value: int) -> str:
    for type_name, low, high in INTEGER_RANGES:
        if low <= value <= high:
            return type_name
    return "long"


def is_type_compatible(declared: str, inferred: str) -> bool:
    """
    Check whether a value of type inferred may be assigned to declared.

    Numeric types widen along byte < short < int < long < float < double.
    char widens to int, long, float and double but not to byte or short.
    """
    if declared == inferred:
        return True

    if declared in NUMERIC_HIERARCHY and inferred in NUMERIC_HIERARCHY:
        return NUMERIC_HIERARCHY.index(declared) >= NUMERIC_HIERARCHY.index(inferred)

    if inferred == "char":
        return declared in CHAR_WIDENING_TARGETS

    return False
