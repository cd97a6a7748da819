"""Plaintext scanning API domain."""

from .scan_text import scan_text
from .trim_trailing import trim_trailing

__all__ = ["scan_text", "trim_trailing"]
