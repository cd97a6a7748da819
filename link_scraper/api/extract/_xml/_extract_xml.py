"""Generic XML extractor."""

import logging

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Location import Location
from ...link.PartialError import PartialError
from ...scan.scan_text import scan_text
from ...sniff.mime import decode_text
from ._parse_xml import _parse_xml
from ._XmlWalker import _XmlWalker

logger = logging.getLogger(__name__)


def _extract_xml_document(data: bytes, walker: _XmlWalker) -> ExtractionResult:
    """Parse and walk one XML document.

    When no tree can be recovered at all, the whole document degrades to a
    single PartialError plus a plaintext scan of the raw bytes. When the
    parser recovered from errors, the raw bytes are scanned as well; the
    engine's dedup folds links found both ways.
    """
    root, issues = _parse_xml(data)
    raw = Location.of("raw()")
    if root is None:
        detail = "; ".join(str(issue) for issue in issues) or "no root element"
        logger.warning("XML document unparseable: %s", detail)
        error = PartialError(location=Location.of("/"), message=f"XML document unparseable: {detail}")
        links = scan_text(decode_text(data, errors="replace"), raw)
        return ExtractionResult.of(links, [error])
    result = walker.walk(root, issues)
    if not issues:
        return result
    logger.debug("XML recovered from %d errors, scanning raw text", len(issues))
    recovered = ExtractionResult.of(scan_text(decode_text(data, errors="replace"), raw))
    return ExtractionResult.concat([result, recovered])


def _extract_xml(data: bytes, config: ScraperConfig) -> ExtractionResult:
    walker = _XmlWalker(
        scan_comments=config.scan_comments,
        include_namespaces=config.include_namespaces,
    )
    return _extract_xml_document(data, walker)
