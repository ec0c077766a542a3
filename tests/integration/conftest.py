"""Integration-test fixtures for deterministic CLI configuration."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_aitextclean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient `AITEXTCLEAN_*` variables from leaking into CLI runs."""

    for name in ("AITEXTCLEAN_RULES", "AITEXTCLEAN_OUTPUT_DIR", "AITEXTCLEAN_ENCODING"):
        monkeypatch.delenv(name, raising=False)
