"""Utility helpers for link_scraper."""

from .logger import configure_logging

__all__ = ["configure_logging"]
