"""Basic smoke tests for project wiring.

These tests verify only import-level wiring and default object creation.
"""

from typer.testing import CliRunner

import aitextclean
from aitextclean.cli import app
from aitextclean.config import CleanerSettings


def test_public_api_cleans_with_defaults() -> None:
    """Top-level `clean` should work without an explicit configuration."""

    result = aitextclean.clean("x\u2026")

    assert result.text == "x..."
    assert isinstance(result.stats, aitextclean.CleaningStatistics)


def test_settings_dataclass_defaults() -> None:
    """Settings should enable every rule and read UTF-8 by default."""

    settings = CleanerSettings()

    assert settings.rules == aitextclean.CleaningConfiguration()
    assert settings.output_dir is None
    assert settings.encoding == "utf-8"


def test_cli_help_lists_commands() -> None:
    """Top-level help should advertise every command."""

    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0, result.output
    for command in ("clean", "preview", "validate", "rules"):
        assert command in result.output
