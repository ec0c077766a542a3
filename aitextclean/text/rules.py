"""Data-driven normalization rules.

Responsibilities:
- Provide one stateless rule per `RuleCategory`.
- Keep the catalog in canonical application order so cleaning and preview
  read the same table.

Each rule exposes `apply(text) -> RuleOutcome` for transformation and
`count_issues(text) -> int` for read-only inspection.
"""

from __future__ import annotations

import re
from typing import Mapping, Protocol

from ..models.datatypes import ChangeKind, RuleCategory, RuleOutcome


class CleanerRule(Protocol):
    """Protocol for text normalization rules."""

    category: RuleCategory
    kind: ChangeKind

    def apply(self, text: str) -> RuleOutcome:
        """Apply a single normalization transformation."""

    def count_issues(self, text: str) -> int:
        """Count occurrences this rule would change, without changing them."""

    def describe(self, count: int) -> str:
        """Render a human-readable preview message for `count` occurrences."""


class _DescribedRule:
    """Shared preview wording for catalog rules."""

    noun = "issue(s)"

    def describe(self, count: int) -> str:
        """Return `<count> <noun> found`."""

        return f"{count} {self.noun} found"


class CharacterDeletionRule(_DescribedRule):
    """Delete every character matched by a single-character class."""

    kind = ChangeKind.REMOVED

    def __init__(self, category: RuleCategory, pattern: str, noun: str) -> None:
        """Initialize with a regex character class and preview noun."""

        self.category = category
        self.noun = noun
        self._pattern = re.compile(pattern)

    def apply(self, text: str) -> RuleOutcome:
        """Delete matched characters and count one removal per character."""

        cleaned, count = self._pattern.subn("", text)
        return RuleOutcome(text=cleaned, count=count, kind=self.kind)

    def count_issues(self, text: str) -> int:
        """Count matched characters."""

        return sum(1 for _ in self._pattern.finditer(text))


class ReplacementTableRule(_DescribedRule):
    """Substitute sequences from a fixed lookup table.

    Longer sequences are tried first so a table can hold both a sequence and
    one of its prefixes.
    """

    kind = ChangeKind.REPLACED

    def __init__(
        self,
        category: RuleCategory,
        table: Mapping[str, str],
        noun: str,
    ) -> None:
        """Initialize with a `{matched: replacement}` table and preview noun."""

        self.category = category
        self.noun = noun
        self.table = dict(table)
        alternatives = sorted(self.table, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(item) for item in alternatives))

    def apply(self, text: str) -> RuleOutcome:
        """Replace each table match and count one replacement per match."""

        cleaned, count = self._pattern.subn(self._substitute, text)
        return RuleOutcome(text=cleaned, count=count, kind=self.kind)

    def count_issues(self, text: str) -> int:
        """Count table matches."""

        return sum(1 for _ in self._pattern.finditer(text))

    def _substitute(self, match: re.Match[str]) -> str:
        return self.table[match.group(0)]


class MojibakeRepairRule(ReplacementTableRule):
    """Repair mis-decoded sequences until none remain.

    A repair can expose a new sequence (a doubled U+00C2 prefix repairs to a
    single one), so the table is re-applied until a pass finds no match.
    """

    def apply(self, text: str) -> RuleOutcome:
        """Replace table matches to a fixed point, counting every replacement."""

        total = 0
        cleaned, count = self._pattern.subn(self._substitute, text)
        while count:
            total += count
            cleaned, count = self._pattern.subn(self._substitute, cleaned)
        return RuleOutcome(text=cleaned, count=total, kind=self.kind)


class SpacingRule(_DescribedRule):
    """Map typographic spaces to ASCII space, then collapse space runs."""

    category = RuleCategory.SPACING
    kind = ChangeKind.REPLACED
    noun = "spacing issue(s)"

    # En quad through hair space, plus ideographic space.
    _UNICODE_SPACE_RE = re.compile(r"[\u2000-\u200a\u3000]")
    _SPACE_RUN_RE = re.compile(r" {2,}")
    _ISSUE_RE = re.compile(r"[\u2000-\u200a\u3000]| {2,}")

    def apply(self, text: str) -> RuleOutcome:
        """Count one replacement per converted space and per collapsed run."""

        converted, space_count = self._UNICODE_SPACE_RE.subn(" ", text)
        collapsed, run_count = self._SPACE_RUN_RE.subn(" ", converted)
        return RuleOutcome(text=collapsed, count=space_count + run_count, kind=self.kind)

    def count_issues(self, text: str) -> int:
        """Count typographic spaces and runs of two or more ASCII spaces."""

        return sum(1 for _ in self._ISSUE_RE.finditer(text))


class AIArtifactsRule(_DescribedRule):
    """Strip copy-paste debris and excessive blank lines."""

    category = RuleCategory.AI_ARTIFACTS
    kind = ChangeKind.REMOVED
    noun = "AI artifact(s)"

    # Soft hyphen, replacement char, C0 controls except TAB/LF/CR, DEL, C1 controls.
    _ARTIFACT_RE = re.compile(r"[\u00ad\ufffd\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
    _LINE_BREAK_RUN_RE = re.compile(r"\n{3,}")
    _ISSUE_RE = re.compile(r"[\u00ad\ufffd\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]|\n{3,}")

    def apply(self, text: str) -> RuleOutcome:
        """Delete artifact chars and squeeze line-feed runs down to two."""

        cleaned, removed = self._ARTIFACT_RE.subn("", text)
        before = len(cleaned)
        cleaned = self._LINE_BREAK_RUN_RE.sub("\n\n", cleaned)
        removed += before - len(cleaned)
        return RuleOutcome(text=cleaned, count=removed, kind=self.kind)

    def count_issues(self, text: str) -> int:
        """Count artifact chars and excessive line-feed runs."""

        return sum(1 for _ in self._ISSUE_RE.finditer(text))


class TrailingWhitespaceRule(_DescribedRule):
    """Strip trailing whitespace from every line-feed separated line."""

    category = RuleCategory.TRAILING_WHITESPACE
    kind = ChangeKind.REMOVED
    noun = "line(s) with trailing whitespace"

    # Tab, VT, FF, CR, space, NBSP, Unicode space separators, LS, PS, BOM.
    _TRAILING_SPACE_RE = re.compile(
        r"[\t\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+$"
    )

    def apply(self, text: str) -> RuleOutcome:
        """Count every stripped character across all lines."""

        lines = text.split("\n")
        stripped_lines = [self._TRAILING_SPACE_RE.sub("", line) for line in lines]
        removed = sum(
            len(line) - len(stripped) for line, stripped in zip(lines, stripped_lines)
        )
        return RuleOutcome(text="\n".join(stripped_lines), count=removed, kind=self.kind)

    def count_issues(self, text: str) -> int:
        """Count lines that end in whitespace."""

        return sum(1 for line in text.split("\n") if self._TRAILING_SPACE_RE.search(line))


HIDDEN_CHARACTERS_PATTERN = (
    r"[\u200b\u200c\u200d"  # zero-width space, non-joiner, joiner
    r"\u2060\ufeff"  # word joiner, BOM
    r"\u200e\u200f\u202a-\u202e"  # directional marks, embeddings, overrides
    r"\u061c\u180e\u034f]"  # Arabic letter mark, Mongolian vowel separator, CGJ
)

# Windows-1252 renderings of UTF-8 encoded punctuation and accented letters.
ENCODING_FIXES: dict[str, str] = {
    "\u00e2\u20ac\u2122": "'",
    "\u00e2\u20ac\u02dc": "'",
    "\u00e2\u20ac\u0153": '"',
    "\u00e2\u20ac\u009d": '"',
    "\u00e2\u20ac\u201d": "\u2014",
    "\u00e2\u20ac\u201c": "\u2013",
    "\u00e2\u20ac\u00a6": "...",
    "\u00e2\u20ac": '"',
    "\u00c2\u00a0": " ",
    "\u00c2 ": " ",
    "\u00c3\u00a1": "\u00e1",
    "\u00c3\u00a9": "\u00e9",
    "\u00c3\u00ad": "\u00ed",
    "\u00c3\u00b3": "\u00f3",
    "\u00c3\u00ba": "\u00fa",
    "\u00c3\u00b1": "\u00f1",
    "\u00e2\u201e\u00a2": "\u2122",
    "\u00c2\u00a9": "\u00a9",
    "\u00c2\u00ae": "\u00ae",
}

DASHES: dict[str, str] = {
    "\u2014": "-",  # em dash
    "\u2013": "-",  # en dash
    "\u2212": "-",  # minus sign
}

QUOTES: dict[str, str] = {
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u201e": '"',
    "\u201a": "'",
}

MATH_SYMBOLS: dict[str, str] = {
    "\u00d7": "*",
    "\u00f7": "/",
    "\u2264": "<=",
    "\u2265": ">=",
    "\u2260": "!=",
    "\u00b1": "+/-",
    "\u221e": "infinity",
    "\u00b0": " degrees",
    "\u2032": "'",  # prime
    "\u2033": '"',  # double prime
    "\u2030": "%o",  # per mille
    "\u2211": "sum",
    "\u220f": "product",
    "\u221a": "sqrt",
    "\u2206": "delta",
    "\u03c0": "pi",
    "\u00b5": "micro",
}

UNICODE_PUNCTUATION: dict[str, str] = {
    "\u201a": ",",
    "\u201e": '"',
    "\u2039": "<",
    "\u203a": ">",
    "\u00ab": "<<",
    "\u00bb": ">>",
    "\u00a1": "!",
    "\u00bf": "?",
    "\u203e": "_",  # overline
    "\u2044": "/",  # fraction slash
    "\u2215": "/",  # division slash
    "\u29f8": "/",  # big solidus
    "\u29f9": "\\",  # big reverse solidus
    "\uff3c": "\\",  # fullwidth reverse solidus
    "\uff0f": "/",  # fullwidth solidus
}


RULE_CATALOG: tuple[CleanerRule, ...] = (
    CharacterDeletionRule(
        RuleCategory.HIDDEN_CHARACTERS,
        HIDDEN_CHARACTERS_PATTERN,
        noun="hidden character(s)",
    ),
    # Mojibake repair must see raw sequences before quotes and dashes are touched.
    MojibakeRepairRule(
        RuleCategory.ENCODING_ISSUES,
        ENCODING_FIXES,
        noun="encoding issue(s)",
    ),
    ReplacementTableRule(
        RuleCategory.NON_BREAKING_SPACE,
        {"\u00a0": " "},
        noun="non-breaking space(s)",
    ),
    ReplacementTableRule(RuleCategory.DASHES, DASHES, noun="dash(es) to normalize"),
    ReplacementTableRule(RuleCategory.QUOTES, QUOTES, noun="smart quote(s)"),
    ReplacementTableRule(
        RuleCategory.ELLIPSIS,
        {"\u2026": "..."},
        noun="ellipsis character(s)",
    ),
    ReplacementTableRule(
        RuleCategory.MATH_SYMBOLS,
        MATH_SYMBOLS,
        noun="mathematical symbol(s)",
    ),
    ReplacementTableRule(
        RuleCategory.UNICODE_PUNCTUATION,
        UNICODE_PUNCTUATION,
        noun="Unicode punctuation mark(s)",
    ),
    SpacingRule(),
    AIArtifactsRule(),
    # Last, so it sees line endings produced by every other substitution.
    TrailingWhitespaceRule(),
)

RULES_BY_CATEGORY: dict[RuleCategory, CleanerRule] = {
    rule.category: rule for rule in RULE_CATALOG
}


def canonical_order() -> tuple[RuleCategory, ...]:
    """Return rule categories in the fixed order they are applied."""

    return tuple(rule.category for rule in RULE_CATALOG)


def rule_for(category: RuleCategory) -> CleanerRule:
    """Return the catalog rule registered for `category`."""

    return RULES_BY_CATEGORY[category]
