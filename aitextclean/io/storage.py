"""Cleaned-text file storage.

Responsibilities:
- Write cleaned text byte-exact without newline translation.
- Produce deterministic timestamped file names for saved results.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path


class CleanedTextStore:
    """Filesystem-backed store for cleaned text files."""

    FILE_PREFIX = "cleaned-text"

    def __init__(self, root: Path, encoding: str = "utf-8") -> None:
        """Initialize the store with a root output directory."""

        self.root = root
        self.encoding = encoding

    @classmethod
    def timestamped_name(cls, now: datetime | None = None) -> str:
        """Return `cleaned-text-YYYY-MM-DDTHH-MM-SS.txt` for `now` (UTC by default)."""

        moment = now or datetime.now(timezone.utc)
        return f"{cls.FILE_PREFIX}-{moment.strftime('%Y-%m-%dT%H-%M-%S')}.txt"

    def save(self, content: str, name: str | None = None) -> Path:
        """Save cleaned text and return the final path."""

        path = self.root / (name or self.timestamped_name())
        return write_text_exact(path, content, self.encoding)


def write_text_exact(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Write `content` to `path` without translating line endings."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return path


def read_text_exact(path: Path, encoding: str = "utf-8") -> str:
    """Read `path` without translating line endings."""

    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()
