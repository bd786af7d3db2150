"""
jdecl command line interface

Usage:
    jdecl lex FILE [--json]
    jdecl parse FILE [--json]
    jdecl check FILE [--json]
    jdecl run FILE...
    jdecl fixtures DIR
    jdecl --version

Options:
    -v, --verbose    Debug logging from every phase
    --json           JSON output instead of tables
"""

import json
import logging
import sys
from pathlib import Path
from typing import Union

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .lexer import LexerError, lex
from .parser import ParseError, parse
from .analyzer import check
from .pipeline import CompilerSession, run_fixture_suite
from .render import token_table, syntax_tree, findings_text, phase_results_text


def _read(path: str) -> str:
    return Path(path).read_text(encoding='utf-8')


def _fail(console: Console, phase: str, error: Union[LexerError, ParseError]):
    console.print(f"[bold red]{phase} Analysis: ERROR[/] - {escape(str(error))}", highlight=False)
    if error.code:
        console.print(f"[dim]{error.code}: {error.category}[/]", highlight=False)
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="jdecl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Lexical, syntax and semantic analysis of typed variable declarations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("lex")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print tokens as JSON.")
def lex_command(file, as_json):
    """Tokenize FILE."""
    console = Console()
    try:
        tokens = lex(_read(file), file)
    except LexerError as e:
        _fail(console, "Lexical", e)

    if as_json:
        click.echo(json.dumps([token.to_dict() for token in tokens], indent=2))
    else:
        console.print(token_table(tokens, title=f"Tokens: {file}"))


@cli.command("parse")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the syntax tree as JSON.")
def parse_command(file, as_json):
    """Build the syntax tree of FILE."""
    console = Console()
    try:
        ast = parse(_read(file))
    except ParseError as e:
        _fail(console, "Syntax", e)

    if as_json:
        click.echo(json.dumps(ast.to_dict(), indent=2))
    else:
        console.print(syntax_tree(ast))


@cli.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print findings as JSON.")
def check_command(file, as_json):
    """Run all three phases on FILE and print the semantic findings."""
    console = Console()
    source = _read(file)
    try:
        lex(source, file)
    except LexerError as e:
        _fail(console, "Lexical", e)
    try:
        ast = parse(source)
    except ParseError as e:
        _fail(console, "Syntax", e)

    findings = check(ast)
    if as_json:
        click.echo(json.dumps([f.to_dict() for f in findings], indent=2))
    else:
        console.print(findings_text(findings), end="")

    if any(f.is_error for f in findings):
        sys.exit(1)


@cli.command("run")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def run_command(files):
    """Run the gated pipeline on each FILE and report per-phase results."""
    console = Console()
    session = CompilerSession()
    all_passed = True

    for file in files:
        session.load_file(file)
        results = session.run_all()
        console.print(f"[bold]{escape(file)}[/]", highlight=False)
        console.print(phase_results_text(results), end="")
        all_passed = all_passed and len(results) == 3 and all(r.passed for r in results)

    if not all_passed:
        sys.exit(1)


@cli.command("fixtures")
@click.argument("directory", type=click.Path(exists=True, file_okay=False))
def fixtures_command(directory):
    """Run the fixture suite found in DIRECTORY."""
    console = Console()
    report = run_fixture_suite(directory)

    for result in report.results:
        case, outcome = result.case, result.outcome
        status = "[green]PASS[/]" if result.passed else "[bold red]FAIL[/]"
        console.print(
            f"{status} {escape(case.file)} (Lex: {outcome.lexical}, Syntax: {outcome.syntax}, "
            f"Semantic: {outcome.semantic})", highlight=False)
        for message in outcome.messages:
            console.print(f"    {message}", highlight=False, markup=False)

    console.print(f"{report.passed} passed, {report.failed} failed out of {len(report.results)} tests")
    if not report.ok:
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
