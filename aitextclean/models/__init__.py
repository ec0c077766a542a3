"""Typed data models used by the cleaning pipeline."""

from .datatypes import (
    ChangeKind,
    CleaningResult,
    CleaningStatistics,
    Issue,
    RuleCategory,
    RuleOutcome,
    TextProfile,
    ValidationReport,
)

__all__ = [
    "RuleCategory",
    "ChangeKind",
    "RuleOutcome",
    "CleaningStatistics",
    "CleaningResult",
    "Issue",
    "TextProfile",
    "ValidationReport",
]
