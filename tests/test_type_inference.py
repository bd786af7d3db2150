"""
Tests for literal type inference and widening compatibility.

Author: xwest
"""

import sys
import os

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jdecl.analyzer.type_inference import infer_literal_type, is_type_compatible, narrow_integer


@pytest.mark.parametrize("expression, expected", [
    ("true", "boolean"),
    ("false", "boolean"),
    ('"hello"', "String"),
    ('""', "String"),
    ('"say \\"hi\\""', "String"),
    ("'a'", "char"),
    ("'\\n'", "char"),
    ("3.14f", "float"),
    ("10F", "float"),
    ("-2.5f", "float"),
    ("3.14", "double"),
    ("3.14d", "double"),
    ("-0.5D", "double"),
    ("10L", "long"),
    ("-5l", "long"),
    ("5", "byte"),
    ("127", "byte"),
    ("-128", "byte"),
    ("128", "short"),
    ("300", "short"),
    ("-32768", "short"),
    ("32768", "int"),
    ("2147483647", "int"),
    ("-2147483648", "int"),
    ("2147483648", "long"),
    ("99999999999999999999", "long"),
    ("9" * 5000, "long"),
    ("-" + "1" * 5000, "long"),
    ("00000000000000000005", "byte"),
    ("  42  ", "byte"),
])
def test_infer_literal_type(expression, expected):
    assert infer_literal_type(expression) == expected


@pytest.mark.parametrize("expression", [
    "x",
    "a + b",
    "TRUE",
    "10d",
    "'ab'",
    "3.",
    ".5",
    "\"unterminated",
    "",
])
def test_non_literals_infer_nothing(expression):
    assert infer_literal_type(expression) is None


def test_narrow_integer_boundaries():
    assert narrow_integer(-129) == "short"
    assert narrow_integer(32767) == "short"
    assert narrow_integer(-32769) == "int"
    assert narrow_integer(-2147483649) == "long"


@pytest.mark.parametrize("declared, inferred", [
    ("int", "int"),
    ("String", "String"),
    ("boolean", "boolean"),
    ("short", "byte"),
    ("int", "byte"),
    ("long", "int"),
    ("float", "long"),
    ("double", "float"),
    ("double", "byte"),
    ("int", "char"),
    ("long", "char"),
    ("float", "char"),
    ("double", "char"),
])
def test_compatible(declared, inferred):
    assert is_type_compatible(declared, inferred)


@pytest.mark.parametrize("declared, inferred", [
    ("byte", "short"),
    ("int", "long"),
    ("int", "double"),
    ("long", "float"),
    ("float", "double"),
    ("byte", "char"),
    ("short", "char"),
    ("char", "byte"),
    ("char", "int"),
    ("boolean", "int"),
    ("int", "boolean"),
    ("String", "char"),
    ("char", "String"),
])
def test_incompatible(declared, inferred):
    assert not is_type_compatible(declared, inferred)
