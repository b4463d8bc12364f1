"""Pydantic models for perlassist requests and results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Help lookup
# ---------------------------------------------------------------------------


class LookupMode(str, Enum):
    """A perldoc lookup mode. Declaration order is the lookup priority."""

    FUNCTION = "function"
    VARIABLE = "variable"
    GENERAL = "general"
    FAQ = "faq"

    @property
    def flags(self) -> list[str]:
        return list(_MODE_FLAGS[self])


_MODE_FLAGS: dict[LookupMode, tuple[str, ...]] = {
    LookupMode.FUNCTION: ("-f",),
    LookupMode.VARIABLE: ("-v",),
    LookupMode.GENERAL: (),
    LookupMode.FAQ: ("-q",),
}

DEFAULT_MODES: tuple[LookupMode, ...] = tuple(LookupMode)


class LookupRequest(BaseModel):
    term: str

    @property
    def is_blank(self) -> bool:
        return not self.term.strip()


class LookupResult(BaseModel):
    term: str
    found: bool = False
    mode: LookupMode | None = None  # set only when found
    lines: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# ---------------------------------------------------------------------------
# Lint
# ---------------------------------------------------------------------------

# perlcritic's own names for its severity levels
SEVERITY_NAMES: dict[int, str] = {
    1: "brutal",
    2: "cruel",
    3: "harsh",
    4: "stern",
    5: "gentle",
}


class LintRequest(BaseModel):
    file_path: str
    severity: int = Field(ge=1, le=5)


class Diagnostic(BaseModel):
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str
    positioned: bool = True  # False for lines that carried no position

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.line, self.column)


class LintResult(BaseModel):
    file_path: str
    severity: int
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.diagnostics
