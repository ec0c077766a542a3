"""CLI error-handling tests for concise diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from aitextclean.cli import app


def test_clean_command_reports_missing_input_file(tmp_path: Path) -> None:
    """Missing inputs should fail at the read stage with exit code 1."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "clean failed at stage `read`" in result.output
    assert "Input file not found" in result.output
    assert "Hint: Pass an existing text file or pipe text via stdin." in result.output
    assert "stage=read event=failure error_type=CommandStageError" in result.output


def test_preview_command_reports_unknown_rule_category() -> None:
    """Misspelled categories should fail at the options stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["preview", "--enable", "smart-quotes"], input="x")

    assert result.exit_code == 1
    assert "preview failed at stage `options`" in result.output
    assert "Unknown rule category `smart-quotes`" in result.output
    assert "aitextclean rules" in result.output


def test_rules_command_reports_missing_config(tmp_path: Path) -> None:
    """Missing config files should fail at the config stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["rules", "--config", str(tmp_path / "nope.yml")])

    assert result.exit_code == 1
    assert "rules failed at stage `config`" in result.output
    assert "Config file not found" in result.output


def test_validate_command_reports_invalid_config(tmp_path: Path) -> None:
    """Invalid config payloads should name the offending key."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("rules: all\nmode: fast\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["validate", "--config", str(config_path)], input="x")

    assert result.exit_code == 1
    assert "validate failed at stage `config`" in result.output
    assert "unsupported key(s): mode" in result.output


def test_clean_command_reports_invalid_environment_encoding() -> None:
    """Bad environment values should fail before any input is read."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["clean"], input="x", env={"AITEXTCLEAN_ENCODING": "not-a-codec"}
    )

    assert result.exit_code == 1
    assert "clean failed at stage `config`" in result.output
    assert "AITEXTCLEAN_ENCODING" in result.output


def test_clean_command_reports_undecodable_input(tmp_path: Path) -> None:
    """Input bytes invalid for the configured encoding should fail at read."""

    input_path = tmp_path / "latin.txt"
    input_path.write_bytes(b"caf\xe9")
    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(input_path)])

    assert result.exit_code == 1
    assert "clean failed at stage `read`" in result.output
    assert "is not valid `utf-8` text" in result.output


def test_clean_command_reports_non_stage_error(
    monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    """Unexpected writer failures should still exit with code 1."""

    def _failing_write(*_: object, **__: object) -> Path:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("disk unavailable")

    monkeypatch.setattr("aitextclean.cli.write_text_exact", _failing_write)
    runner = CliRunner()

    result = runner.invoke(
        app, ["clean", "--out", str(tmp_path / "out.txt")], input="text"
    )

    assert result.exit_code == 1
    assert "clean failed: disk unavailable" in result.output


def test_clean_command_reports_undecodable_stdin() -> None:
    """Stdin bytes invalid for the configured encoding should fail at read."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean"], input=b"caf\xe9")

    assert result.exit_code == 1
    assert "clean failed at stage `read`" in result.output
    assert "Input from stdin is not valid `utf-8` text." in result.output
    assert "stage=read event=failure error_type=CommandStageError" in result.output


def test_clean_command_reports_directory_input(tmp_path: Path) -> None:
    """Passing a directory as input should fail at read with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["clean", str(tmp_path)])

    assert result.exit_code == 1
    assert "clean failed at stage `read`" in result.output
    assert "Failed to read input from" in result.output
    assert "Hint: Pass a readable text file or pipe text via stdin." in result.output
