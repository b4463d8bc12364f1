"""End-to-end CLI tests with fake perldoc / perlcritic executables."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from perlassist.cli import app
from perlassist.config import lint_config, tool_config

from conftest import read_calls

runner = CliRunner()


@pytest.fixture
def fake_perldoc(make_tool, monkeypatch: pytest.MonkeyPatch) -> Path:
    tool = make_tool(
        "perldoc",
        """
        if sys.argv[1:] == ["-f", "chomp"]:
            print("    chomp VARIABLE")
            print("            Removes any trailing string.")
            sys.exit(0)
        sys.exit(1)
        """,
    )
    monkeypatch.setattr(tool_config, "perldoc", str(tool))
    monkeypatch.setattr(tool_config, "perldoc_timeout", 10.0)
    return tool


@pytest.fixture
def fake_perlcritic(make_tool, monkeypatch: pytest.MonkeyPatch) -> Path:
    tool = make_tool(
        "perlcritic",
        """
        print("Useless interpolation of literal string at line 9, column 9.  (Severity: 1)")
        print("Code before strictures are enabled at line 2, column 1.  (Severity: 5)")
        print("")
        sys.exit(2)
        """,
    )
    monkeypatch.setattr(tool_config, "perlcritic", str(tool))
    monkeypatch.setattr(tool_config, "perlcritic_timeout", 10.0)
    monkeypatch.setattr(lint_config, "severity", 5)
    return tool


class TestHelpCommand:
    def test_found(self, fake_perldoc: Path) -> None:
        result = runner.invoke(app, ["help", "chomp"])
        assert result.exit_code == 0, result.output
        assert "Removes any trailing string." in result.output
        assert read_calls(fake_perldoc) == ["-f chomp"]

    def test_not_found(self, fake_perldoc: Path) -> None:
        result = runner.invoke(app, ["help", "nothing"])
        assert result.exit_code == 0
        assert "No information available" in result.output
        assert len(read_calls(fake_perldoc)) == 4

    def test_blank_term(self, fake_perldoc: Path) -> None:
        result = runner.invoke(app, ["help", "   "])
        assert result.exit_code == 0
        assert "No information available" in result.output
        assert read_calls(fake_perldoc) == []

    def test_mode_option(self, fake_perldoc: Path) -> None:
        result = runner.invoke(app, ["help", "chomp", "--mode", "faq", "--mode", "variable"])
        assert result.exit_code == 0
        assert read_calls(fake_perldoc) == ["-q chomp", "-v chomp"]

    def test_json(self, fake_perldoc: Path) -> None:
        result = runner.invoke(app, ["help", "chomp", "--json"])
        data = json.loads(result.stdout)
        assert data["found"] is True
        assert data["mode"] == "function"

    def test_tool_unavailable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(tool_config, "perldoc", str(tmp_path / "missing-perldoc"))
        result = runner.invoke(app, ["help", "print"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "missing-perldoc" in result.output


class TestLintCommand:
    def test_text_output(self, fake_perlcritic: Path) -> None:
        result = runner.invoke(app, ["lint", "script.pl", "--severity", "1"])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "script.pl:2:1: Code before strictures are enabled. (Severity: 5)",
            "script.pl:9:9: Useless interpolation of literal string. (Severity: 1)",
        ]
        assert read_calls(fake_perlcritic) == ["--severity 1 script.pl"]

    def test_default_severity_from_config(self, fake_perlcritic: Path) -> None:
        runner.invoke(app, ["lint", "script.pl"])
        assert read_calls(fake_perlcritic) == ["--severity 5 script.pl"]

    def test_json_output(self, fake_perlcritic: Path) -> None:
        result = runner.invoke(app, ["lint", "script.pl", "--format", "json"])
        rows = [json.loads(line) for line in result.stdout.splitlines()]
        assert [(r["line"], r["column"]) for r in rows] == [(2, 1), (9, 9)]

    def test_clean(self, make_tool, monkeypatch: pytest.MonkeyPatch) -> None:
        tool = make_tool("perlcritic", "pass\n")
        monkeypatch.setattr(tool_config, "perlcritic", str(tool))
        result = runner.invoke(app, ["lint", "script.pl", "-s", "3"])
        assert result.exit_code == 0
        assert "No issues found" in result.output

    @pytest.mark.parametrize("severity", ["0", "6", "x=unknown"])
    def test_invalid_severity(self, fake_perlcritic: Path, severity: str) -> None:
        result = runner.invoke(app, ["lint", "script.pl", "--severity", severity])
        assert result.exit_code == 1
        assert "invalid severity" in result.output
        assert read_calls(fake_perlcritic) == []

    def test_empty_path(self, fake_perlcritic: Path) -> None:
        result = runner.invoke(app, ["lint", ""])
        assert result.exit_code == 1
        assert "no file path" in result.output
        assert read_calls(fake_perlcritic) == []

    def test_unknown_format_rejected(self, fake_perlcritic: Path) -> None:
        result = runner.invoke(app, ["lint", "script.pl", "--format", "xml"])
        assert result.exit_code != 0
        assert read_calls(fake_perlcritic) == []

    def test_tool_unavailable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(tool_config, "perlcritic", str(tmp_path / "missing-perlcritic"))
        result = runner.invoke(app, ["lint", "script.pl", "--severity", "5"])
        assert result.exit_code == 1
        assert "missing-perlcritic" in result.output


class TestSeveritiesCommand:
    def test_lists_levels(self) -> None:
        result = runner.invoke(app, ["severities"])
        assert result.exit_code == 0
        assert "gentle" in result.output
        assert "brutal" in result.output
