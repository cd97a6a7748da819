"""API module for link_scraper.

Each domain (sniff, scan, link, extract, config) lives in its own
subpackage; this module re-exports the public surface.
"""

from .config import ScraperConfig, get_home_dir
from .extract import ContainerUnreadable, ExtractionError, UnsupportedFormat, extract, scrape_from_file
from .link import ExtractionResult, Link, LinkKind, Location, PartialError, Provenance, normalize_uri
from .scan import scan_text
from .sniff import FormatTag, guess_mime_type, sniff

__all__ = [
    "ContainerUnreadable",
    "ExtractionError",
    "ExtractionResult",
    "FormatTag",
    "Link",
    "LinkKind",
    "Location",
    "PartialError",
    "Provenance",
    "ScraperConfig",
    "UnsupportedFormat",
    "extract",
    "get_home_dir",
    "guess_mime_type",
    "normalize_uri",
    "scan_text",
    "scrape_from_file",
    "sniff",
]
