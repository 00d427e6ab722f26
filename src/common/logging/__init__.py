"""Convenience exports for logging and filesystem helpers."""

from .utils import ensure_directory

__all__ = ["ensure_directory"]
