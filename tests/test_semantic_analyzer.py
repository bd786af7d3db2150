"""
Test suite for the jdecl semantic analyzer.

Tests cover:
- Declaration findings and their order
- Redeclaration detection
- Literal type checking with widening
- Tolerance of hand-built trees

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jdecl.parser import (
    parse, Program, VariableDeclaration, TypeRef, Identifier, Expression, Empty
)
from jdecl.analyzer import SemanticAnalyzer, FindingLevel, Scope, check


class TestSemanticAnalyzer(unittest.TestCase):
    """Test cases for the semantic analyzer."""

    def setUp(self):
        """Set up test fixtures."""
        self.analyzer = SemanticAnalyzer()

    def _analyze_code(self, code: str):
        """Helper to analyze a code snippet."""
        return self.analyzer.analyze(parse(code))

    def _errors(self, findings):
        return [f.message for f in findings if f.level == FindingLevel.ERROR]

    def test_basic_variable_declaration(self):
        """Test that int x = 5; is accepted (byte widens to int)."""
        findings = self._analyze_code("int x = 5;")

        self.assertEqual(len(findings), 1)
        self.assertEqual(findings[0].level, FindingLevel.INFO)
        self.assertEqual(findings[0].message, "Variable 'x' declared as int")

    def test_type_mismatch_error(self):
        """Test detection of a double assigned to an int."""
        findings = self._analyze_code("int x = 3.14;")

        self.assertEqual(
            [(f.level, f.message) for f in findings],
            [
                (FindingLevel.INFO, "Variable 'x' declared as int"),
                (FindingLevel.ERROR, "Type mismatch: cannot assign double to int"),
            ],
        )
        self.assertEqual(findings[1].code, "S001")
        self.assertEqual(findings[1].category, "Type mismatch")
        self.assertEqual(findings[1].to_dict()["category"], "Type mismatch")

    def test_widening_to_float(self):
        findings = self._analyze_code("float f = 10;")
        self.assertEqual(self._errors(findings), [])

    def test_narrowing_to_byte_fails(self):
        """300 infers short, which does not fit in a byte."""
        findings = self._analyze_code("byte b = 300;")
        self.assertEqual(self._errors(findings), ["Type mismatch: cannot assign short to byte"])

    def test_char_widening(self):
        self.assertEqual(self._errors(self._analyze_code("int c = 'A';")), [])
        self.assertEqual(self._errors(self._analyze_code("short c = 'A';")),
                         ["Type mismatch: cannot assign char to short"])

    def test_string_and_boolean_mismatch(self):
        findings = self._analyze_code('boolean flag = "yes"; String s = true;')
        self.assertEqual(self._errors(findings), [
            "Type mismatch: cannot assign String to boolean",
            "Type mismatch: cannot assign boolean to String",
        ])

    def test_duplicate_declaration(self):
        """Test that only the second declaration of a name is an error."""
        findings = self._analyze_code("int x = 5;\ndouble y = 1.5;\nint x = 10;")

        self.assertEqual(
            [(f.level, f.message) for f in findings],
            [
                (FindingLevel.INFO, "Variable 'x' declared as int"),
                (FindingLevel.INFO, "Variable 'y' declared as double"),
                (FindingLevel.ERROR, "Variable 'x' is already declared"),
            ],
        )

    def test_duplicate_is_not_type_checked(self):
        """The redeclaration stops further checks for that statement."""
        findings = self._analyze_code('int x = 5; boolean x = "not checked";')
        self.assertEqual(self._errors(findings), ["Variable 'x' is already declared"])

    def test_duplicate_keeps_first_type(self):
        findings = self._analyze_code("long x = 1L; int x = 2; int x = 3;")
        self.assertEqual(self._errors(findings), [
            "Variable 'x' is already declared",
            "Variable 'x' is already declared",
        ])

    def test_very_long_integer_literal(self):
        """Integers too large for int() conversion still infer long."""
        findings = self._analyze_code("long big = " + "9" * 5000 + "; int small = " + "9" * 5000 + ";")
        self.assertEqual(self._errors(findings), ["Type mismatch: cannot assign long to int"])

    def test_non_literal_expression_is_accepted(self):
        """Expressions that are not literals cannot be verified."""
        findings = self._analyze_code("int a = 1; int b = a * 2; boolean c = b;")
        self.assertEqual(self._errors(findings), [])
        self.assertEqual(len(findings), 3)

    def test_empty_program(self):
        """Test that an empty program still yields one finding."""
        findings = self._analyze_code("// nothing")

        self.assertEqual(len(findings), 1)
        self.assertEqual(findings[0].level, FindingLevel.INFO)
        self.assertEqual(findings[0].message, "No semantic errors found")

    def test_findings_follow_declaration_order(self):
        findings = self._analyze_code("int a = 1; byte b = 1000; char c = 'c';")
        self.assertEqual([f.message for f in findings], [
            "Variable 'a' declared as int",
            "Variable 'b' declared as byte",
            "Type mismatch: cannot assign short to byte",
            "Variable 'c' declared as char",
        ])

    def test_analysis_is_idempotent(self):
        """Test that analyzing the same tree twice gives the same findings."""
        ast = parse("int x = 5; int x = 6; byte b = 300;")

        first = self.analyzer.analyze(ast)
        second = self.analyzer.analyze(ast)

        self.assertEqual(first, second)
        self.assertEqual(check(ast), first)


class TestHandBuiltTrees(unittest.TestCase):
    """Trees that the parser would never produce."""

    def test_invalid_type_is_reported(self):
        ast = Program((
            VariableDeclaration(TypeRef("Integer"), Identifier("n"), Expression("1")),
            VariableDeclaration(TypeRef("int"), Identifier("n"), Expression("2")),
        ))
        findings = check(ast)

        self.assertEqual(findings[0].message, "'Integer' is not a valid Java type")
        self.assertEqual(findings[0].level, FindingLevel.ERROR)
        # The invalid declaration never entered the scope
        self.assertEqual(findings[1].message, "Variable 'n' declared as int")

    def test_declaration_without_identifier_is_skipped(self):
        ast = Program((
            VariableDeclaration(TypeRef("int"), None, Expression("1")),
            VariableDeclaration(None, Identifier("y"), Expression("1")),
        ))
        findings = check(ast)

        self.assertEqual(len(findings), 1)
        self.assertEqual(findings[0].message, "No semantic errors found")

    def test_declaration_without_expression(self):
        ast = Program((VariableDeclaration(TypeRef("int"), Identifier("x"), None),))
        findings = check(ast)
        self.assertEqual([f.message for f in findings], ["Variable 'x' declared as int"])

    def test_empty_node_is_ignored(self):
        findings = check(Program((Empty(),)))
        self.assertEqual([f.message for f in findings], ["No semantic errors found"])


class TestScope(unittest.TestCase):
    """Test cases for the flat declaration scope."""

    def test_define_and_lookup(self):
        scope = Scope()
        scope.define("x", "int")
        scope.define("name", "String")

        self.assertIn("x", scope)
        self.assertEqual(scope.lookup("name"), "String")
        self.assertIsNone(scope.lookup("missing"))
        self.assertEqual(len(scope), 2)
        self.assertEqual(list(scope), [("x", "int"), ("name", "String")])

    def test_redefinition_raises(self):
        scope = Scope()
        scope.define("x", "int")

        with self.assertRaises(KeyError):
            scope.define("x", "double")
        self.assertEqual(scope.lookup("x"), "int")


if __name__ == '__main__':
    unittest.main()
