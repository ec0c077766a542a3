"""Core datatypes shared across aitextclean modules.

Responsibilities:
- Name every normalization concern with a stable enumerated identity.
- Represent immutable records returned by cleaning and preview calls.

Key types:
- `RuleCategory`, `ChangeKind`, `RuleOutcome`, `CleaningStatistics`,
  `CleaningResult`, `Issue`, `TextProfile`, and `ValidationReport`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RuleCategory(str, Enum):
    """Normalization concerns, each independently toggled.

    Values double as configuration keys in YAML files and CLI flags.
    """

    HIDDEN_CHARACTERS = "hidden_characters"
    ENCODING_ISSUES = "encoding_issues"
    NON_BREAKING_SPACE = "non_breaking_space"
    DASHES = "dashes"
    QUOTES = "quotes"
    ELLIPSIS = "ellipsis"
    MATH_SYMBOLS = "math_symbols"
    UNICODE_PUNCTUATION = "unicode_punctuation"
    SPACING = "spacing"
    AI_ARTIFACTS = "ai_artifacts"
    TRAILING_WHITESPACE = "trailing_whitespace"


class ChangeKind(str, Enum):
    """Which statistics counter a rule contributes to."""

    REMOVED = "removed"
    REPLACED = "replaced"


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Result of applying one rule to one text value.

    Attributes:
        text: Transformed text.
        count: Non-negative delta for the counter named by `kind`.
        kind: Counter the delta belongs to.
    """

    text: str
    count: int
    kind: ChangeKind


@dataclass(frozen=True, slots=True)
class CleaningStatistics:
    """Aggregate counters for one cleaning call.

    Lengths and character counts are Python `len()` values, i.e. Unicode code
    points, not UTF-16 code units: an astral character such as an emoji
    counts as 1.

    Attributes:
        removed_count: Characters deleted with no substitute.
        replaced_count: Matched spans substituted with different content.
        original_length: Code-point length of the input text.
        final_length: Code-point length of the cleaned text.
    """

    removed_count: int = 0
    replaced_count: int = 0
    original_length: int = 0
    final_length: int = 0

    @property
    def total_changes(self) -> int:
        """Return removed plus replaced counts."""

        return self.removed_count + self.replaced_count

    def as_dict(self) -> dict[str, int]:
        """Return counters keyed by stable snake_case names."""

        return {
            "removed_count": self.removed_count,
            "replaced_count": self.replaced_count,
            "original_length": self.original_length,
            "final_length": self.final_length,
        }


@dataclass(frozen=True, slots=True)
class CleaningResult:
    """Cleaned text paired with the statistics snapshot of the call."""

    text: str
    stats: CleaningStatistics

    @property
    def changed(self) -> bool:
        """Return whether any enabled rule removed or replaced content."""

        return self.stats.total_changes > 0


@dataclass(frozen=True, slots=True)
class Issue:
    """A preview finding: what one rule would change, without changing it.

    Attributes:
        category: Rule category reporting the finding.
        count: Number of occurrences in the inspected text.
        description: Human-readable message, e.g. `3 smart quote(s) found`.
    """

    category: RuleCategory
    count: int
    description: str

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class TextProfile:
    """Simple size metrics for a text value."""

    characters: int = 0
    characters_no_spaces: int = 0
    words: int = 0
    lines: int = 0
    paragraphs: int = 0


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Whether a text is already clean, with the issues that say otherwise.

    Attributes:
        is_clean: `True` when no enabled rule would change the text.
        issues: Findings in canonical rule order.
        total_issues: Sum of all finding counts.
    """

    is_clean: bool
    issues: tuple[Issue, ...]
    total_issues: int
