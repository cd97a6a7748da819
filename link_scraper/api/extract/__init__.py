"""Extraction engine API."""

from .ContainerUnreadable import ContainerUnreadable
from .extract import extract
from .ExtractionError import ExtractionError
from .scrape_from_file import scrape_from_file
from .UnsupportedFormat import UnsupportedFormat

__all__ = [
    "ContainerUnreadable",
    "ExtractionError",
    "UnsupportedFormat",
    "extract",
    "scrape_from_file",
]
