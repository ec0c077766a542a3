"""Rule pipeline orchestration.

Responsibilities:
- Apply enabled catalog rules in canonical order and accumulate statistics.
- Inspect text read-only under the same configuration for preview display.

Key public functions:
- `clean`: transform text and return a `CleaningResult`.
- `preview`: list what each enabled rule would change.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from ..config import CleaningConfiguration
from ..models.datatypes import (
    ChangeKind,
    CleaningResult,
    CleaningStatistics,
    Issue,
    RuleCategory,
    RuleOutcome,
)
from ..telemetry.logger import RunLogger
from .rules import RULE_CATALOG, CleanerRule


ConfigurationInput = CleaningConfiguration | Mapping[RuleCategory | str, object] | None


def resolve_configuration(config: ConfigurationInput) -> CleaningConfiguration:
    """Coerce `None` or a `{category: flag}` mapping into a configuration."""

    if config is None:
        return CleaningConfiguration()
    if isinstance(config, CleaningConfiguration):
        return config
    return CleaningConfiguration.from_mapping(config)


class _StatisticsAccumulator:
    """Counters owned by exactly one `clean` call."""

    __slots__ = ("removed_count", "replaced_count", "original_length")

    def __init__(self, original_length: int) -> None:
        self.removed_count = 0
        self.replaced_count = 0
        self.original_length = original_length

    def record(self, outcome: RuleOutcome) -> None:
        """Add one rule delta to its counter."""

        if outcome.kind is ChangeKind.REMOVED:
            self.removed_count += outcome.count
        else:
            self.replaced_count += outcome.count

    def snapshot(self, final_length: int) -> CleaningStatistics:
        """Freeze the counters into a statistics record."""

        return CleaningStatistics(
            removed_count=self.removed_count,
            replaced_count=self.replaced_count,
            original_length=self.original_length,
            final_length=final_length,
        )


class IssuePreview:
    """Lazy, restartable view of the issues found in one text.

    Every iteration re-runs the read-only checks against the original text,
    so repeated iteration yields equal issues in canonical rule order.
    """

    def __init__(self, text: str, rules: Sequence[CleanerRule]) -> None:
        """Initialize with the inspected text and the enabled rules."""

        self._text = text
        self._rules = tuple(rules)

    def __iter__(self) -> Iterator[Issue]:
        for rule in self._rules:
            count = rule.count_issues(self._text)
            if count:
                yield Issue(category=rule.category, count=count, description=rule.describe(count))

    def messages(self) -> list[str]:
        """Return issue descriptions as plain strings."""

        return [issue.description for issue in self]

    def total(self) -> int:
        """Return the summed occurrence count of all issues."""

        return sum(issue.count for issue in self)


class TextCleaner:
    """Apply catalog rules selected by a `CleaningConfiguration`.

    The cleaner holds only its rule table; statistics are created per call so
    one instance can serve concurrent callers.
    """

    def __init__(
        self,
        rules: Sequence[CleanerRule] | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with a custom rule table or the canonical catalog."""

        self.rules: tuple[CleanerRule, ...] = tuple(rules) if rules is not None else RULE_CATALOG
        self._run_logger = run_logger

    def clean(self, text: object, config: ConfigurationInput = None) -> CleaningResult:
        """Apply every enabled rule in order and return text with statistics.

        Non-string input yields an empty result with zeroed statistics.
        """

        if not isinstance(text, str):
            return CleaningResult(text="", stats=CleaningStatistics())

        active_rules = self._active_rules(resolve_configuration(config))
        accumulator = _StatisticsAccumulator(original_length=len(text))
        if self._run_logger is not None:
            self._run_logger.log_stage_start(
                "clean", original_length=len(text), rules=len(active_rules)
            )

        current = text
        for rule in active_rules:
            outcome = rule.apply(current)
            accumulator.record(outcome)
            if self._run_logger is not None and outcome.count:
                self._run_logger.log_rule_applied(
                    rule.category.value, outcome.kind.value, outcome.count
                )
            current = outcome.text

        stats = accumulator.snapshot(final_length=len(current))
        if self._run_logger is not None:
            self._run_logger.log_clean_summary(stats)
        return CleaningResult(text=current, stats=stats)

    def preview(self, text: object, config: ConfigurationInput = None) -> IssuePreview:
        """Return the issues each enabled rule would fix in `text`."""

        if not isinstance(text, str):
            return IssuePreview("", ())
        return IssuePreview(text, self._active_rules(resolve_configuration(config)))

    def _active_rules(self, config: CleaningConfiguration) -> tuple[CleanerRule, ...]:
        """Return rules whose category is enabled, in table order."""

        return tuple(rule for rule in self.rules if config.is_enabled(rule.category))


_DEFAULT_CLEANER = TextCleaner()


def clean(text: object, config: ConfigurationInput = None) -> CleaningResult:
    """Clean `text` with the canonical rule catalog."""

    return _DEFAULT_CLEANER.clean(text, config)


def preview(text: object, config: ConfigurationInput = None) -> IssuePreview:
    """Preview issues in `text` with the canonical rule catalog."""

    return _DEFAULT_CLEANER.preview(text, config)
