"""ConsoleReporter: terminal output for lookup and lint results using ``rich``."""

from __future__ import annotations

import json
from typing import Literal

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from perlassist.schema import SEVERITY_NAMES, LintResult, LookupResult

LintFormat = Literal["text", "json", "table"]

NOT_FOUND_MESSAGE = "No information available"
CLEAN_MESSAGE = "No issues found"


class ConsoleReporter:
    """Renders results to stdout.

    Everything other than the ``table`` format is written with
    ``Console.out`` so tool output reaches the terminal unstyled and
    unwrapped.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    # ── Help lookup ───────────────────────────────────────────────────────

    def show_lookup(self, result: LookupResult, as_json: bool = False) -> None:
        if as_json:
            self._out(result.model_dump_json())
        elif result.found:
            self._out(result.text)
        else:
            self._out(NOT_FOUND_MESSAGE)

    # ── Lint ──────────────────────────────────────────────────────────────

    def show_lint(self, result: LintResult, fmt: LintFormat = "text") -> None:
        if fmt == "json":
            # JSON lines; a clean file prints nothing
            for d in result.diagnostics:
                self._out(json.dumps({
                    "file": result.file_path,
                    "line": d.line,
                    "column": d.column,
                    "message": d.message,
                }))
            return

        if result.clean:
            self._out(CLEAN_MESSAGE)
            return

        if fmt == "table":
            table = Table(
                title=escape(f"{result.file_path} (severity {result.severity})"),
                show_header=True,
                header_style="bold",
            )
            table.add_column("Line", justify="right", style="cyan")
            table.add_column("Col", justify="right", style="cyan")
            table.add_column("Message")
            for d in result.diagnostics:
                table.add_row(str(d.line), str(d.column), Text(d.message))
            self._console.print(table)
        else:
            for d in result.diagnostics:
                self._out(f"{result.file_path}:{d.line}:{d.column}: {d.message}")

    # ── Severities ────────────────────────────────────────────────────────

    def show_severities(self) -> None:
        table = Table(title="perlcritic severity levels", show_header=True, header_style="bold")
        table.add_column("Level", justify="right", style="cyan")
        table.add_column("Name")
        table.add_column("Reports")
        for level, name in SEVERITY_NAMES.items():
            reports = "only the most serious policies" if level == 5 else f"policies of severity {level}-5"
            table.add_row(str(level), name, reports)
        self._console.print(table)

    # ── Helpers ───────────────────────────────────────────────────────────

    def _out(self, text: str) -> None:
        self._console.out(text, highlight=False)
