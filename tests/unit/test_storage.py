"""Unit tests for cleaned-text file storage."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from aitextclean.io.storage import CleanedTextStore, read_text_exact, write_text_exact


def test_timestamped_name_uses_filesystem_safe_iso_format() -> None:
    """File names should replace time colons with dashes."""

    name = CleanedTextStore.timestamped_name(datetime(2024, 3, 9, 7, 5, 1))

    assert name == "cleaned-text-2024-03-09T07-05-01.txt"


def test_save_creates_root_and_writes_content(tmp_path: Path) -> None:
    """Saving should create missing directories and return the written path."""

    store = CleanedTextStore(tmp_path / "nested" / "out")

    path = store.save("clean text\n", name="result.txt")

    assert path == tmp_path / "nested" / "out" / "result.txt"
    assert path.read_text(encoding="utf-8") == "clean text\n"


def test_save_without_name_uses_timestamped_file(tmp_path: Path) -> None:
    """Default names should carry the cleaned-text prefix."""

    path = CleanedTextStore(tmp_path).save("x")

    assert path.name.startswith("cleaned-text-")
    assert path.suffix == ".txt"


def test_exact_io_preserves_crlf_line_endings(tmp_path: Path) -> None:
    """Line endings should survive a write/read cycle byte-for-byte."""

    path = write_text_exact(tmp_path / "crlf.txt", "a\r\nb\rc\n")

    assert path.read_bytes() == b"a\r\nb\rc\n"
    assert read_text_exact(path) == "a\r\nb\rc\n"


def test_store_honors_configured_encoding(tmp_path: Path) -> None:
    """Stores should encode with their configured codec."""

    path = CleanedTextStore(tmp_path, encoding="latin-1").save("caf\u00e9", name="l1.txt")

    assert path.read_bytes() == b"caf\xe9"
    assert read_text_exact(path, "latin-1") == "caf\u00e9"
