"""Format-dispatching link extraction for documents of any supported type."""

from .api import (
    ContainerUnreadable,
    ExtractionError,
    ExtractionResult,
    FormatTag,
    Link,
    LinkKind,
    Location,
    PartialError,
    Provenance,
    ScraperConfig,
    UnsupportedFormat,
    extract,
    guess_mime_type,
    normalize_uri,
    scan_text,
    scrape_from_file,
    sniff,
)
from .utils import configure_logging

__version__ = "0.1.0"

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
    "configure_logging",
    "extract",
    "guess_mime_type",
    "normalize_uri",
    "scan_text",
    "scrape_from_file",
    "sniff",
]
