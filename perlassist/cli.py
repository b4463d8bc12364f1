"""perlassist CLI entry point."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

import typer

from perlassist.errors import PerlAssistError
from perlassist.schema import DEFAULT_MODES, LookupMode

app = typer.Typer(
    name="perlassist",
    help="perlassist: perldoc lookups and perlcritic diagnostics from the command line.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    table = "table"


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Shorthand for --verbosity 2")
    ] = False,
    verbosity: Annotated[
        int, typer.Option("--verbosity", help="Log verbosity: 0=quiet 1=normal 2=verbose 3=debug")
    ] = -1,  # -1 means "not set by user"; resolved below
) -> None:
    """Look up Perl documentation and lint Perl files."""
    from perlassist.config import output_config
    from perlassist.logging_config import configure_logging

    # Explicit --verbosity always wins; --verbose bumps to 2; default comes from config.
    if verbosity >= 0:
        effective_verbosity = verbosity
    elif verbose:
        effective_verbosity = 2
    else:
        effective_verbosity = output_config.verbosity

    configure_logging(effective_verbosity, force=True)


@app.command("help")
def help_(
    term: Annotated[str, typer.Argument(help="Function, variable, module or FAQ keyword to look up")],
    mode: Annotated[
        Optional[list[LookupMode]],
        typer.Option("--mode", "-m", help="Lookup mode to try (repeatable, in order); default tries all"),
    ] = None,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", help="Seconds allowed per perldoc attempt")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
) -> None:
    """Show perldoc help for TERM (function, then variable, general and faq help)."""
    from perlassist.reporting.console import ConsoleReporter
    from perlassist.tools.perldoc import lookup_help

    try:
        result = lookup_help(term, modes=mode or DEFAULT_MODES, timeout=timeout)
    except PerlAssistError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    ConsoleReporter().show_lookup(result, as_json=as_json)


@app.command()
def lint(
    path: Annotated[str, typer.Argument(help="Perl source file to check")],
    severity: Annotated[
        Optional[str],
        typer.Option("--severity", "-s", help="1 (brutal) to 5 (gentle), or a severity name"),
    ] = None,
    fmt: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.text,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", help="Seconds to wait for perlcritic")
    ] = None,
) -> None:
    """Run perlcritic on PATH and print its diagnostics ordered by position."""
    from perlassist.config import lint_config
    from perlassist.reporting.console import ConsoleReporter
    from perlassist.tools.perlcritic import run_lint

    try:
        result = run_lint(
            path,
            lint_config.severity if severity is None else severity,
            timeout=timeout,
        )
    except PerlAssistError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    ConsoleReporter().show_lint(result, fmt=fmt.value)


@app.command()
def severities() -> None:
    """List perlcritic severity levels."""
    from perlassist.reporting.console import ConsoleReporter

    ConsoleReporter().show_severities()


if __name__ == "__main__":
    app()
