#!/usr/bin/env python3
"""
Fixture test runner for jdecl.

Runs every fixture in tests/fixtures through lex -> parse -> check and
compares the per-phase outcome with the expected one.

Author: xwest
"""

import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run the jdecl fixture suite."""

    print("🔍 jdecl Fixture Test Suite")
    print("=" * 60)

    try:
        from jdecl.pipeline import run_fixture_suite
    except ImportError as e:
        print(f"❌ Failed to import jdecl: {e}")
        return False

    fixture_dir = os.path.join(project_root, "tests", "fixtures")
    report = run_fixture_suite(fixture_dir)

    for result in report.results:
        case, outcome = result.case, result.outcome
        print(f"📄 Testing: {case.file}")
        for message in outcome.messages:
            print(f"   ❌ {message}")

        if result.passed:
            print(f"   ✅ PASS (Lex: {outcome.lexical}, Syntax: {outcome.syntax}, "
                  f"Semantic: {outcome.semantic})\n")
        else:
            print("   ❌ FAIL")
            print(f"      Expected: Lex={case.expect_lex}, Syntax={case.expect_syntax}, "
                  f"Semantic={case.expect_semantic}")
            print(f"      Got:      Lex={outcome.lexical}, Syntax={outcome.syntax}, "
                  f"Semantic={outcome.semantic}\n")

    print("═" * 60)
    print(f"\n📊 Results: {report.passed} passed, {report.failed} failed "
          f"out of {len(report.results)} tests")

    if report.ok:
        print("🎉 ALL TESTS PASSED!\n")
    else:
        print("💥 SOME TESTS FAILED!\n")
    return report.ok


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
