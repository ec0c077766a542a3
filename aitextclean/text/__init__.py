"""Text normalization components.

This package provides the rule catalog, the cleaning pipeline built on it,
and read-only diagnostics that share the same rule table.
"""

from .cleaner import IssuePreview, TextCleaner, clean, preview
from .inspection import text_profile, validate_text
from .rules import (
    RULE_CATALOG,
    AIArtifactsRule,
    CharacterDeletionRule,
    CleanerRule,
    MojibakeRepairRule,
    ReplacementTableRule,
    SpacingRule,
    TrailingWhitespaceRule,
    canonical_order,
    rule_for,
)

__all__ = [
    "TextCleaner",
    "IssuePreview",
    "clean",
    "preview",
    "validate_text",
    "text_profile",
    "RULE_CATALOG",
    "CleanerRule",
    "CharacterDeletionRule",
    "MojibakeRepairRule",
    "ReplacementTableRule",
    "SpacingRule",
    "AIArtifactsRule",
    "TrailingWhitespaceRule",
    "canonical_order",
    "rule_for",
]
