"""Module entrypoint for running aitextclean as ``python -m aitextclean``."""

from __future__ import annotations

from aitextclean.cli import main


if __name__ == "__main__":
    main()
