"""Command-line interface for aitextclean.

Responsibilities:
- Expose user-facing commands for cleaning, previewing, and validating text.
- Convert CLI arguments and config files into a `CleaningConfiguration`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_issues,
    echo_rule_catalog,
    echo_statistics,
    echo_validation,
    exit_with_command_error,
)
from .config import CleanerSettings, CleaningConfiguration, ConfigLoader
from .errors import CommandStageError
from .io.storage import CleanedTextStore, read_text_exact, write_text_exact
from .parsing import parse_rule_category
from .telemetry.logger import RunLogger
from .text.cleaner import TextCleaner
from .text.inspection import text_profile, validate_text
from .text.rules import canonical_order

app = typer.Typer(
    name="aitextclean",
    no_args_is_help=True,
    help="Normalize invisible characters, smart punctuation, and mojibake to ASCII-safe text.",
)

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Text file to read. Reads stdin when omitted or `-`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with rule toggles."),
]
EnableOption = Annotated[
    list[str] | None,
    typer.Option("--enable", help="Enable a rule category (repeatable)."),
]
DisableOption = Annotated[
    list[str] | None,
    typer.Option("--disable", help="Disable a rule category (repeatable)."),
]
NoRulesOption = Annotated[
    bool,
    typer.Option("--none", help="Start from all rules disabled before applying `--enable`."),
]


def _load_settings(config_path: Path | None) -> CleanerSettings:
    """Load settings from YAML when requested, else from the environment."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Check `AITEXTCLEAN_RULES` and `AITEXTCLEAN_ENCODING`.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_rules(
    settings: CleanerSettings,
    enable: list[str] | None,
    disable: list[str] | None,
    no_rules: bool,
) -> CleaningConfiguration:
    """Apply CLI rule overrides on top of the loaded configuration."""

    base = CleaningConfiguration.none() if no_rules else settings.rules
    try:
        enabled = [parse_rule_category(name) for name in enable or []]
        disabled = [parse_rule_category(name) for name in disable or []]
    except ValueError as exc:
        raise CommandStageError(
            stage="options",
            detail=str(exc),
            hint="Run `aitextclean rules` to list category names.",
        ) from exc
    return base.with_overrides(enable=enabled, disable=disabled)


def _read_input(input_file: Path | None, encoding: str) -> str:
    """Read input text from a file or stdin without translating line endings."""

    from_stdin = input_file is None or str(input_file) == "-"
    source = "stdin" if from_stdin else f"`{input_file}`"
    try:
        if from_stdin:
            return typer.get_binary_stream("stdin").read().decode(encoding)
        return read_text_exact(input_file, encoding)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input file not found: `{input_file}`.",
            hint="Pass an existing text file or pipe text via stdin.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input from {source} is not valid `{encoding}` text.",
            hint="Set `encoding` in the config file or `AITEXTCLEAN_ENCODING`.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Failed to read input from {source}: {exc}",
            hint="Pass a readable text file or pipe text via stdin.",
        ) from exc


@app.command("clean")
def clean_command(
    input_file: InputArgument = None,
    config_file: ConfigOption = None,
    enable: EnableOption = None,
    disable: DisableOption = None,
    no_rules: NoRulesOption = False,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write cleaned text to this file instead of stdout."),
    ] = None,
    out_dir: Annotated[
        Path | None,
        typer.Option(
            "--out-dir",
            help="Write cleaned text to a timestamped file in this directory.",
        ),
    ] = None,
    show_stats: Annotated[
        bool,
        typer.Option("--stats/--no-stats", help="Print cleaning statistics to stderr."),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log per-rule counts to stderr."),
    ] = False,
) -> None:
    """Clean text and write the result."""

    run_logger = RunLogger(sink=sys.stderr, level="DEBUG" if verbose else "INFO")
    try:
        if out is not None and out_dir is not None:
            raise CommandStageError(
                stage="options",
                detail="`--out` and `--out-dir` cannot be combined.",
                hint="Pass one output target, or neither to write to stdout.",
            )
        settings = _load_settings(config_file)
        rules = _resolve_rules(settings, enable, disable, no_rules)
        raw_text = _read_input(input_file, settings.encoding)
        result = TextCleaner(run_logger=run_logger).clean(raw_text, rules)

        target_dir = out_dir if out_dir is not None else settings.output_dir
        written: Path | None = None
        if out is not None:
            written = write_text_exact(out, result.text, settings.encoding)
        elif target_dir is not None:
            written = CleanedTextStore(target_dir, settings.encoding).save(result.text)
        else:
            stdout_payload = result.text.encode(settings.encoding)
    except Exception as exc:
        stage = exc.stage if isinstance(exc, CommandStageError) else "write"
        run_logger.log_stage_failure(stage, error_type=type(exc).__name__)
        exit_with_command_error("clean", exc)

    if written is None:
        typer.echo(stdout_payload, nl=False)
    else:
        typer.echo(f"Cleaned text: {written}", err=True)
    if show_stats:
        echo_statistics(result.stats)


@app.command("preview")
def preview_command(
    input_file: InputArgument = None,
    config_file: ConfigOption = None,
    enable: EnableOption = None,
    disable: DisableOption = None,
    no_rules: NoRulesOption = False,
) -> None:
    """List what enabled rules would change, without changing anything."""

    try:
        settings = _load_settings(config_file)
        rules = _resolve_rules(settings, enable, disable, no_rules)
        raw_text = _read_input(input_file, settings.encoding)
        issues = TextCleaner().preview(raw_text, rules)
    except Exception as exc:
        exit_with_command_error("preview", exc)

    echo_issues(issues)


@app.command("validate")
def validate_command(
    input_file: InputArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Report whether text is clean under the configured rules."""

    try:
        settings = _load_settings(config_file)
        raw_text = _read_input(input_file, settings.encoding)
        report = validate_text(raw_text, settings.rules)
    except Exception as exc:
        exit_with_command_error("validate", exc)

    echo_validation(report, text_profile(raw_text))


@app.command("rules")
def rules_command(config_file: ConfigOption = None) -> None:
    """List rule categories in the order they are applied."""

    try:
        settings = _load_settings(config_file)
    except Exception as exc:
        exit_with_command_error("rules", exc)

    echo_rule_catalog(canonical_order(), settings.rules.enabled_categories())


def main() -> None:
    """Run the CLI application."""

    app()
