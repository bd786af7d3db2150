"""
jdecl analysis pipeline

Sequences the three phases the way callers are expected to: lex first,
parse only after a clean lex, check only after a clean parse. The phases
themselves do not enforce this; the session and the fixture driver here do.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .lexer import Token, LexerError, lex
from .parser import Program, ParseError, parse
from .analyzer import SemanticFinding, check

logger = logging.getLogger(__name__)


class PhaseState(Enum):
    """How far a session has progressed."""
    IDLE = "idle"
    LEXED = "lexed"
    PARSED = "parsed"
    CHECKED = "checked"


@dataclass(frozen=True)
class PhaseResult:
    """Outcome line for one phase run."""
    phase: str      # "lexical", "syntax", "semantic"
    status: str     # "pass", "error"
    message: str

    @property
    def passed(self) -> bool:
        return self.status == "pass"


class CompilerSession:
    """
    Phase-gated analysis of one source text.

    Each run_* method only does something when the previous phase has
    passed; otherwise it returns None and leaves the session untouched.

    Usage::

        session = CompilerSession()
        session.load_file("decls.txt")
        session.run_lexical()
        session.run_syntax()
        session.run_semantic()
        for result in session.phase_results:
            print(result.message)
    """

    def __init__(self):
        self.clear()

    def clear(self):
        """Forget the loaded source and every phase output."""
        self.source_name = ""
        self.source = ""
        self._reset()

    def _reset(self):
        self.phase = PhaseState.IDLE
        self.tokens: List[Token] = []
        self.ast: Optional[Program] = None
        self.findings: List[SemanticFinding] = []
        self.phase_results: List[PhaseResult] = []

    def load_source(self, source: str, name: str = "<string>"):
        self.source_name = name
        self.source = source
        self._reset()

    def load_file(self, path: Union[str, Path]):
        path = Path(path)
        self.load_source(path.read_text(encoding='utf-8'), path.name)

    # -- gating -------------------------------------------------------------

    @property
    def has_source(self) -> bool:
        return len(self.source) > 0

    @property
    def can_lex(self) -> bool:
        return self.has_source and self.phase == PhaseState.IDLE

    @property
    def can_parse(self) -> bool:
        return self.phase == PhaseState.LEXED

    @property
    def can_check(self) -> bool:
        return self.phase == PhaseState.PARSED

    @property
    def can_clear(self) -> bool:
        return self.has_source

    # -- phases -------------------------------------------------------------

    def run_lexical(self) -> Optional[PhaseResult]:
        if not self.can_lex:
            return None

        try:
            tokens = lex(self.source, self.source_name)
        except LexerError as e:
            result = PhaseResult("lexical", "error", f"Lexical Analysis: ERROR - {e.message}")
        else:
            self.tokens = tokens
            self.ast = None
            self.findings = []
            self.phase = PhaseState.LEXED
            result = PhaseResult(
                "lexical", "pass",
                f"Lexical Analysis: PASS - {len(tokens)} tokens generated")

        # A lexical run starts a fresh result list
        self.phase_results = [result]
        logger.debug("%s: %s", self.source_name, result.message)
        return result

    def run_syntax(self) -> Optional[PhaseResult]:
        if not self.can_parse:
            return None

        try:
            tree = parse(self.source)
        except ParseError as e:
            result = PhaseResult("syntax", "error", f"Syntax Analysis: ERROR - {e.message}")
        else:
            self.ast = tree
            self.findings = []
            self.phase = PhaseState.PARSED
            result = PhaseResult("syntax", "pass", "Syntax Analysis: PASS - AST generated successfully")

        self.phase_results.append(result)
        logger.debug("%s: %s", self.source_name, result.message)
        return result

    def run_semantic(self) -> Optional[PhaseResult]:
        if not self.can_check or self.ast is None:
            return None

        self.findings = check(self.ast)
        self.phase = PhaseState.CHECKED

        if any(f.is_error for f in self.findings):
            result = PhaseResult("semantic", "error", "Semantic Analysis: ERROR - Type errors found")
        else:
            result = PhaseResult("semantic", "pass", "Semantic Analysis: PASS - No errors found")

        self.phase_results.append(result)
        logger.debug("%s: %s", self.source_name, result.message)
        return result

    def run_all(self) -> List[PhaseResult]:
        """Run every phase that the gating allows, in order."""
        self.run_lexical()
        self.run_syntax()
        self.run_semantic()
        return list(self.phase_results)


# ---------------------------------------------------------------------------
# Fixture driver
# ---------------------------------------------------------------------------

PASS = "PASS"
ERROR = "ERROR"
NOT_RUN = "N/A"


@dataclass
class PipelineOutcome:
    """PASS/ERROR/N/A per phase plus the error messages collected on the way."""
    lexical: str = NOT_RUN
    syntax: str = NOT_RUN
    semantic: str = NOT_RUN
    messages: List[str] = field(default_factory=list)

    def as_tuple(self):
        return (self.lexical, self.syntax, self.semantic)


def analyze_source(source: str, filename: str = "<string>") -> PipelineOutcome:
    """Run lex, parse and check with caller-side sequencing."""
    outcome = PipelineOutcome()

    try:
        lex(source, filename)
        outcome.lexical = PASS
    except LexerError as e:
        outcome.lexical = ERROR
        outcome.messages.append(f"Lexical: {e.message}")
        return outcome

    try:
        ast = parse(source)
        outcome.syntax = PASS
    except ParseError as e:
        outcome.syntax = ERROR
        outcome.messages.append(f"Syntax: {e.message}")
        return outcome

    errors = [f.message for f in check(ast) if f.is_error]
    if errors:
        outcome.semantic = ERROR
        outcome.messages.append(f"Semantic: {', '.join(errors)}")
    else:
        outcome.semantic = PASS

    return outcome


@dataclass(frozen=True)
class FixtureCase:
    """One fixture file and the per-phase outcome it must produce."""
    file: str
    expect_lex: str
    expect_syntax: str
    expect_semantic: str

    def matches(self, outcome: PipelineOutcome) -> bool:
        # N/A in a later phase means "don't care"
        return (self.expect_lex == outcome.lexical
                and self.expect_syntax in (outcome.syntax, NOT_RUN)
                and self.expect_semantic in (outcome.semantic, NOT_RUN))


@dataclass
class FixtureResult:
    case: FixtureCase
    outcome: PipelineOutcome

    @property
    def passed(self) -> bool:
        return self.case.matches(self.outcome)


@dataclass
class FixtureReport:
    results: List[FixtureResult]

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0


DEFAULT_FIXTURES = (
    FixtureCase("01-all-pass.txt", PASS, PASS, PASS),
    FixtureCase("02-syntax-error-invalid-identifier.txt", PASS, ERROR, NOT_RUN),
    FixtureCase("03-semantic-error-type-mismatch.txt", PASS, PASS, ERROR),
    FixtureCase("04-lexical-error-invalid-char.txt", ERROR, NOT_RUN, NOT_RUN),
    FixtureCase("05-lexical-error-invalid-char-literal.txt", ERROR, NOT_RUN, NOT_RUN),
    FixtureCase("06-syntax-error-missing-semicolon.txt", PASS, ERROR, NOT_RUN),
    FixtureCase("07-syntax-error-invalid-type.txt", PASS, ERROR, NOT_RUN),
    FixtureCase("08-semantic-error-duplicate-variable.txt", PASS, PASS, ERROR),
    FixtureCase("09-all-types-valid.txt", PASS, PASS, PASS),
    FixtureCase("10-widening-conversion-valid.txt", PASS, PASS, PASS),
    FixtureCase("11-escape-sequences.txt", PASS, PASS, PASS),
    FixtureCase("12-negative-numbers.txt", PASS, PASS, PASS),
)


def run_fixture_suite(base_dir: Union[str, Path],
                      cases: Sequence[FixtureCase] = DEFAULT_FIXTURES) -> FixtureReport:
    """
    Run each fixture through the pipeline and compare with its expectations.

    Raises:
        IOError: If a fixture file cannot be read
    """
    base_dir = Path(base_dir)
    results = []

    for case in cases:
        path = base_dir / case.file
        outcome = analyze_source(path.read_text(encoding='utf-8'), str(path))
        results.append(FixtureResult(case, outcome))
        logger.debug("%s -> %s", case.file, outcome.as_tuple())

    return FixtureReport(results)
