"""perlcritic runner and output parser."""

from __future__ import annotations

import logging
import re
from typing import Any

from perlassist.config import tool_config
from perlassist.errors import FileNotAssociated, InvalidSeverity, ToolTimeout
from perlassist.schema import SEVERITY_NAMES, Diagnostic, LintRequest, LintResult
from perlassist.tools.runner import run_tool

logger = logging.getLogger(__name__)

# "<prefix> at line <N>, column <M><suffix>", first position segment wins
_POSITION_RE = re.compile(r"^(?P<prefix>.*?) at line (?P<line>\d+), column (?P<column>\d+)(?P<suffix>.*)$")
_WHITESPACE_RE = re.compile(r"\s+")
# printed by perlcritic itself when a file has no violations
_SOURCE_OK_RE = re.compile(r"^.* source OK\s*$")

_SEVERITY_BY_NAME: dict[str, int] = {name: level for level, name in SEVERITY_NAMES.items()}


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


def parse_severity(value: Any) -> int:
    """
    Resolve a severity level from an int, a string starting with a digit 1-5
    (e.g. ``"5 (gentle)"``), or a perlcritic severity name.

    Raises:
        InvalidSeverity: for anything else.
    """
    if isinstance(value, bool):
        raise InvalidSeverity(value)
    if isinstance(value, int):
        if 1 <= value <= 5:
            return value
        raise InvalidSeverity(value)
    if isinstance(value, str):
        text = value.strip()
        if text and text[0] in "12345":
            return int(text[0])
        if text.lower() in _SEVERITY_BY_NAME:
            return _SEVERITY_BY_NAME[text.lower()]
    raise InvalidSeverity(value)


def build_command(perlcritic: str, severity: int, file_path: str) -> list[str]:
    return [perlcritic, "--severity", str(severity), file_path]


# ---------------------------------------------------------------------------
# Output parsing
# ---------------------------------------------------------------------------


def parse_diagnostic(line: str) -> Diagnostic:
    """Parse one perlcritic output line; lines without a position go to (1, 1)."""
    m = _POSITION_RE.match(line)
    if m is None:
        return Diagnostic(line=1, column=1, message=line, positioned=False)
    message = _WHITESPACE_RE.sub(" ", m.group("prefix") + m.group("suffix")).strip()
    return Diagnostic(
        line=max(1, int(m.group("line"))),
        column=max(1, int(m.group("column"))),
        message=message,
    )


def _trim_trailing_blank_lines(lines: list[str]) -> list[str]:
    end = len(lines)
    while end and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


def parse_output(text: str) -> list[Diagnostic]:
    """Parse perlcritic stdout into diagnostics ordered by (line, column).

    The sort is stable, so diagnostics at the same position keep the order
    perlcritic printed them in.
    """
    lines = _trim_trailing_blank_lines(text.splitlines())
    if len(lines) == 1 and _SOURCE_OK_RE.match(lines[0]):
        return []
    diagnostics = [parse_diagnostic(line) for line in lines if line.strip()]
    return sorted(diagnostics, key=lambda d: d.sort_key)


# ---------------------------------------------------------------------------
# Lint run
# ---------------------------------------------------------------------------


def run_lint(
    file_path: str,
    severity: Any,
    *,
    perlcritic: str | None = None,
    timeout: float | None = None,
) -> LintResult:
    """
    Run perlcritic on ``file_path`` and return its parsed diagnostics.

    perlcritic's exit status is ignored: it is not reliable, and output
    alone decides the result. No output means a clean file.

    Args:
        file_path: Perl source file to check.
        severity: 1-5, a string starting with 1-5, or a severity name.
        perlcritic: perlcritic executable (default from config).
        timeout: Seconds to wait for perlcritic (default from config).

    Raises:
        InvalidSeverity: severity could not be resolved.
        FileNotAssociated: file_path is empty.
        ToolUnavailable: perlcritic is not installed.
        ToolTimeout: perlcritic did not finish in time.
    """
    level = parse_severity(severity)
    if not file_path:
        raise FileNotAssociated()
    request = LintRequest(file_path=str(file_path), severity=level)

    perlcritic = perlcritic or tool_config.perlcritic
    timeout = tool_config.perlcritic_timeout if timeout is None else timeout

    run = run_tool(build_command(perlcritic, request.severity, request.file_path), timeout=timeout)
    if run.timed_out:
        raise ToolTimeout(perlcritic, timeout)

    diagnostics = parse_output(run.stdout)
    if not diagnostics and run.exit_status != 0 and run.stderr.strip():
        logger.warning("%s exited with status %s: %s", perlcritic, run.exit_status, run.stderr.strip())

    logger.info("%d diagnostic(s) for %s at severity %d", len(diagnostics), request.file_path, request.severity)
    return LintResult(
        file_path=request.file_path,
        severity=request.severity,
        diagnostics=diagnostics,
    )
