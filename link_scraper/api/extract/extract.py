"""Format-dispatching extraction entry point."""

import logging
from typing import BinaryIO

from ..config.ScraperConfig import ScraperConfig
from ..link.ExtractionResult import ExtractionResult
from ..sniff.FormatTag import FormatTag
from ..sniff.sniff import sniff
from ._dedup_links import _dedup_links
from ._EXTRACTORS import EXTRACTORS
from .UnsupportedFormat import UnsupportedFormat

logger = logging.getLogger(__name__)


def _select_format(data: bytes, format_hint: FormatTag | None, config: ScraperConfig) -> FormatTag:
    if format_hint is not None:
        format_tag = FormatTag(format_hint)
        logger.debug("Using format hint %s", format_tag.value)
    else:
        format_tag = sniff(data)
        logger.debug("Sniffed format %s", format_tag.value)

    if format_tag is FormatTag.UNKNOWN:
        if format_hint is None and config.unknown_fallback and config.is_enabled(FormatTag.PLAIN_TEXT):
            logger.debug("Unrecognized buffer, falling back to plain text scan")
            return FormatTag.PLAIN_TEXT
        raise UnsupportedFormat(format_tag, "no signature matched" if format_hint is None else "hinted")

    if not config.is_enabled(format_tag):
        raise UnsupportedFormat(format_tag, "disabled in configuration")
    return format_tag


def extract(
    data: bytes | BinaryIO, format_hint: FormatTag | None = None, config: ScraperConfig | None = None
) -> ExtractionResult:
    """Extract links from a document buffer of any supported format.

    The format is taken from ``format_hint`` when given, otherwise sniffed
    from the bytes. Links found by the format's extractor are deduplicated
    by normalized URI; structural evidence wins over textual evidence and
    the first-seen location is kept.

    Args:
        data: The complete document bytes, or a binary stream read to its end
        format_hint: Skip sniffing and use this format
        config: Engine configuration (defaults when omitted)

    Returns:
        Deduplicated links plus every partial error met on the way

    Raises:
        UnsupportedFormat: If the format is unknown or not enabled
        ContainerUnreadable: If the top-level container cannot be opened
    """
    if config is None:
        config = ScraperConfig()
    buffer = bytes(data) if isinstance(data, (bytes, bytearray, memoryview)) else data.read()
    format_tag = _select_format(buffer, format_hint, config)

    result = EXTRACTORS[format_tag](buffer, config)
    links = _dedup_links(result.links)
    logger.debug(
        "Extracted %d links (%d before dedup) from %s", len(links), len(result.links), format_tag.value
    )
    for error in result.errors:
        logger.warning("Partial extraction error in %s document: %s", format_tag.value, error)
    return ExtractionResult.of(links, result.errors)
