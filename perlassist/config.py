"""perlassist configuration.

Settings are loaded in this priority order (highest wins):
  1. Environment variables  (PERLASSIST_*)
  2. perlassist.toml in the current working directory
  3. ~/.config/perlassist/perlassist.toml
  4. Built-in defaults

Example perlassist.toml:
  [tools]
  perldoc            = "/usr/bin/perldoc"
  perlcritic         = "/opt/perl/bin/perlcritic"
  perldoc_timeout    = 5     # seconds per lookup attempt
  perlcritic_timeout = 30

  [lint]
  severity = 3  # 1=brutal ... 5=gentle

  [output]
  verbosity = 1  # 0=quiet  1=normal  2=verbose  3=debug
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path


_CONFIG_SEARCH_PATHS: list[Path] = [
    Path("perlassist.toml"),
    Path.home() / ".config" / "perlassist" / "perlassist.toml",
]


def _load_toml_full() -> dict:
    """Return the full parsed toml dict (all sections), or {} if no config file found."""
    for path in _CONFIG_SEARCH_PATHS:
        if path.exists():
            with path.open("rb") as f:
                return tomllib.load(f)
    return {}


_TOOL_DEFAULTS: dict[str, str | float] = {
    "perldoc":            "perldoc",
    "perlcritic":         "perlcritic",
    "perldoc_timeout":    5.0,
    "perlcritic_timeout": 30.0,
}


class ToolConfig:
    """Resolved external tool locations and timeouts."""

    def __init__(self) -> None:
        tools = _load_toml_full().get("tools", {})

        self.perldoc: str = (
            os.environ.get("PERLASSIST_PERLDOC")
            or tools.get("perldoc")
            or str(_TOOL_DEFAULTS["perldoc"])
        )
        self.perlcritic: str = (
            os.environ.get("PERLASSIST_PERLCRITIC")
            or tools.get("perlcritic")
            or str(_TOOL_DEFAULTS["perlcritic"])
        )
        self.perldoc_timeout: float = float(
            os.environ.get("PERLASSIST_PERLDOC_TIMEOUT")
            or tools.get("perldoc_timeout", _TOOL_DEFAULTS["perldoc_timeout"])
        )
        self.perlcritic_timeout: float = float(
            os.environ.get("PERLASSIST_PERLCRITIC_TIMEOUT")
            or tools.get("perlcritic_timeout", _TOOL_DEFAULTS["perlcritic_timeout"])
        )


class LintConfig:
    """Resolved lint defaults."""

    def __init__(self) -> None:
        lint = _load_toml_full().get("lint", {})
        # Kept raw; parse_severity validates it when a lint actually runs.
        self.severity: int | str = os.environ.get("PERLASSIST_SEVERITY") or lint.get("severity", 5)


class OutputConfig:
    """Resolved output / verbosity configuration."""

    def __init__(self) -> None:
        out = _load_toml_full().get("output", {})
        self.verbosity: int = int(
            os.environ.get("PERLASSIST_VERBOSITY") or out.get("verbosity", 1)
        )


# Module-level singletons — loaded once per process.
tool_config = ToolConfig()
lint_config = LintConfig()
output_config = OutputConfig()
