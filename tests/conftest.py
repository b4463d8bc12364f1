"""Shared fixtures: fake perldoc / perlcritic executables."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tool(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write an executable Python script standing in for an external tool.

    ``body`` runs with ``sys`` imported; each invocation appends its argv
    (minus the program name) to ``<name>.calls`` next to the script.
    """

    def _make(name: str, body: str) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        path = bin_dir / name
        calls = bin_dir / f"{name}.calls"
        header = (
            f"#!{sys.executable}\n"
            "import sys\n"
            f"with open({str(calls)!r}, 'a') as _log:\n"
            "    _log.write(' '.join(sys.argv[1:]) + '\\n')\n"
        )
        path.write_text(header + textwrap.dedent(body))
        path.chmod(0o755)
        return path

    return _make


def read_calls(tool: Path) -> list[str]:
    calls = tool.parent / f"{tool.name}.calls"
    if not calls.exists():
        return []
    return calls.read_text().splitlines()
