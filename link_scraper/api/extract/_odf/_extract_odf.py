"""OpenDocument (ODF) extractor."""

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...sniff.FormatTag import FormatTag
from .._xml._extract_xml import _extract_xml_document
from .._xml._XmlWalker import _XmlWalker
from .._zip._extract_zip_entries import _extract_zip_entries


def _extract_odf(data: bytes, config: ScraperConfig) -> ExtractionResult:
    """Extract links from the XML parts of an ODF package (``text:a/@xlink:href`` and text)."""
    walker = _XmlWalker(scan_attributes=False, scan_comments=config.scan_comments)

    def parse_entry(name: str, payload: bytes) -> ExtractionResult:  # noqa: ARG001
        return _extract_xml_document(payload, walker)

    return _extract_zip_entries(data, config, FormatTag.ODF, config.odf_entries, parse_entry)
