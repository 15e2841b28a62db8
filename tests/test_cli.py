"""Tests for the scalaextract CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from scalaextract.cli import app

runner = CliRunner()


def _write(tmp_path: Path, name: str, code: str) -> Path:
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return path


class TestParseCommand:
    def test_json_output(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = _write(tmp_path, "Main.scala", "package demo\n\nimport a.b._\n\nobject Main\n")
        result = runner.invoke(app, ["parse", "--json", str(path)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout.strip().splitlines()[-1])
        assert data == {
            "file": str(path),
            "package": "demo",
            "imports": ["a.b._"],
            "symbols": ["Main"],
            "hasMain": False,
        }

    def test_table_output(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = _write(tmp_path, "Main.scala", "package demo\n\nobject Main\n")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 0, result.output
        assert "demo" in result.output
        assert "Main" in result.output

    def test_duplicate_package_exits_nonzero(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = _write(tmp_path, "Bad.scala", "package a\npackage b\n")
        result = runner.invoke(app, ["parse", "--json", str(path)])
        assert result.exit_code == 1
        assert "Multiple package declarations" in result.output

    def test_missing_file_exits_nonzero(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["parse", str(tmp_path / "Nope.scala")])
        assert result.exit_code == 1

    def test_invalid_log_level(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = _write(tmp_path, "Main.scala", "object Main\n")
        result = runner.invoke(app, ["parse", "--log-level", "loud", str(path)])
        assert result.exit_code == 1

    def test_syntax_errors_are_reported(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = _write(tmp_path, "Broken.scala", "class A {\n")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 0, result.output
        assert "Broken.scala:" in result.output


class TestConfigCommand:
    def test_shows_effective_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        _write(tmp_path, ".scalaextract.toml", "max_snippet_length = 12\n")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0, result.output
        assert "max_snippet_length = 12" in result.output
        assert "report_unknown_symbols = True" in result.output

    def test_bad_config_exits_nonzero(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        _write(tmp_path, ".scalaextract.toml", "nonsense = 1\n")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1
