"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
cleaning statistics, preview issues, and validation summaries.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import (
    CleaningStatistics,
    Issue,
    RuleCategory,
    TextProfile,
    ValidationReport,
)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_statistics(stats: CleaningStatistics, err: bool = True) -> None:
    """Print the four cleaning counters."""

    typer.echo(f"Removed: {stats.removed_count}", err=err)
    typer.echo(f"Replaced: {stats.replaced_count}", err=err)
    typer.echo(f"Original length: {stats.original_length}", err=err)
    typer.echo(f"Final length: {stats.final_length}", err=err)


def echo_issues(issues: Iterable[Issue]) -> None:
    """Print one preview issue per line, or a clean notice."""

    found = False
    for issue in issues:
        found = True
        typer.echo(f"- {issue.description}")
    if not found:
        typer.echo("No issues found.")


def echo_validation(report: ValidationReport, profile: TextProfile) -> None:
    """Print validation verdict, issues, and text size metrics."""

    verdict = "clean" if report.is_clean else f"{report.total_issues} issue(s)"
    typer.echo(f"Status: {verdict}")
    if report.issues:
        echo_issues(report.issues)
    typer.echo(
        f"Characters: {profile.characters} "
        f"(non-whitespace {profile.characters_no_spaces})"
    )
    typer.echo(f"Words: {profile.words}")
    typer.echo(f"Lines: {profile.lines}")
    typer.echo(f"Paragraphs: {profile.paragraphs}")


def echo_rule_catalog(categories: Iterable[RuleCategory], enabled: Iterable[RuleCategory]) -> None:
    """Print numbered rule categories in application order with their state."""

    enabled_set = set(enabled)
    for index, category in enumerate(categories, start=1):
        state = "on" if category in enabled_set else "off"
        typer.echo(f"{index}. {category.value} [{state}]")
