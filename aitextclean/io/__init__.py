"""Filesystem input/output helpers."""

from .storage import CleanedTextStore

__all__ = ["CleanedTextStore"]
