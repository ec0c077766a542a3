"""Read-only text diagnostics.

Responsibilities:
- Report whether a text would be changed by the default rule set.
- Provide simple size metrics for display next to cleaning statistics.
"""

from __future__ import annotations

import re

from ..models.datatypes import TextProfile, ValidationReport
from .cleaner import ConfigurationInput, preview


_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def validate_text(text: object, config: ConfigurationInput = None) -> ValidationReport:
    """Summarize preview issues into a clean/not-clean report."""

    issues = tuple(preview(text, config))
    return ValidationReport(
        is_clean=not issues,
        issues=issues,
        total_issues=sum(issue.count for issue in issues),
    )


def text_profile(text: object) -> TextProfile:
    """Count characters, words, lines, and paragraphs in `text`."""

    if not isinstance(text, str) or not text:
        return TextProfile()

    paragraphs = [block for block in _PARAGRAPH_BREAK_RE.split(text) if block.strip()]
    return TextProfile(
        characters=len(text),
        characters_no_spaces=sum(1 for character in text if not character.isspace()),
        words=len(text.split()),
        lines=len(text.split("\n")),
        paragraphs=len(paragraphs),
    )
