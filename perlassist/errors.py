"""Exceptions raised by perlassist tools.

Only fatal conditions are exceptions. "No documentation found" and
"no diagnostics" are ordinary results.
"""

from __future__ import annotations

from typing import Any


class PerlAssistError(Exception):
    """Base class for every fatal perlassist condition."""


class ToolUnavailable(PerlAssistError):
    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"'{tool}' is not available (is it installed and on PATH?)")


class ToolTimeout(PerlAssistError):
    def __init__(self, tool: str, timeout: float) -> None:
        self.tool = tool
        self.timeout = timeout
        super().__init__(f"'{tool}' timed out after {timeout:g}s")


class InvalidSeverity(PerlAssistError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"invalid severity {value!r}: expected 1-5 or gentle/stern/harsh/cruel/brutal")


class FileNotAssociated(PerlAssistError):
    def __init__(self) -> None:
        super().__init__("no file path given")
