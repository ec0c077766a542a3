"""Top-level package for aitextclean.

This package normalizes free-form text by rewriting invisible marks, smart
punctuation, fancy dashes, and mis-decoded encoding artifacts into ASCII-safe
equivalents. The main entry points are `clean` and `preview`.
"""

from .config import CleaningConfiguration
from .models.datatypes import CleaningResult, CleaningStatistics, Issue, RuleCategory
from .text.cleaner import TextCleaner, clean, preview

__all__ = [
    "clean",
    "preview",
    "TextCleaner",
    "CleaningConfiguration",
    "CleaningResult",
    "CleaningStatistics",
    "Issue",
    "RuleCategory",
    "__version__",
]

__version__ = "0.1.0"
