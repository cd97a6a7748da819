"""PDF extractor backed by PyMuPDF."""

import logging

import fitz

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Link import Link
from ...link.Location import Location
from ...link.PartialError import PartialError
from ...scan.scan_text import scan_text
from ...sniff.FormatTag import FormatTag
from .._structural_link import _structural_link
from ..ContainerUnreadable import ContainerUnreadable

logger = logging.getLogger(__name__)

_HEADER_WINDOW = 1024

# fitz.FileDataError derives from RuntimeError
_PDF_ERRORS = (RuntimeError, ValueError)


def _open_document(data: bytes) -> fitz.Document:
    if b"%PDF-" not in data[:_HEADER_WINDOW]:
        raise ContainerUnreadable(FormatTag.PDF, "no %PDF- header in the first 1024 bytes")
    try:
        return fitz.open(stream=data, filetype="pdf")
    except _PDF_ERRORS as exc:
        raise ContainerUnreadable(FormatTag.PDF, str(exc)) from exc


def _extract_page(doc: fitz.Document, index: int) -> ExtractionResult:
    page_location = Location.of(f"page[{index}]")
    links: list[Link] = []
    try:
        page = doc.load_page(index)
        for annot_index, annotation in enumerate(page.get_links()):
            if annotation.get("kind") != fitz.LINK_URI:
                continue
            link = _structural_link(annotation.get("uri") or "", page_location.child(f"annot[{annot_index}]"))
            if link is not None:
                links.append(link)
        links.extend(scan_text(page.get_text(), page_location.child("text()")))
    except _PDF_ERRORS as exc:
        logger.warning("Cannot read PDF page %d: %s", index, exc)
        error = PartialError(location=page_location, message=f"Page unreadable: {exc}")
        return ExtractionResult.of(links, [error])
    return ExtractionResult.of(links)


def _extract_outline(doc: fitz.Document) -> ExtractionResult:
    try:
        entries = doc.get_toc(simple=False)
    except _PDF_ERRORS as exc:
        logger.warning("Cannot read PDF outline: %s", exc)
        return ExtractionResult.failure(Location.of("outline"), f"Outline unreadable: {exc}")
    links = []
    for index, entry in enumerate(entries):
        destination = entry[3] if len(entry) > 3 and isinstance(entry[3], dict) else {}
        if destination.get("kind") != fitz.LINK_URI:
            continue
        link = _structural_link(destination.get("uri") or "", Location.of(f"outline[{index}]"))
        if link is not None:
            links.append(link)
    return ExtractionResult.of(links)


def _extract_pdf(data: bytes, config: ScraperConfig) -> ExtractionResult:  # noqa: ARG001
    """Extract URI annotations, outline URIs and scanned page text.

    Pages are processed one after another; a page that fails yields a
    PartialError for its index and the next page is still read.

    Raises:
        ContainerUnreadable: If the buffer has no PDF header or cannot be opened
    """
    with _open_document(data) as doc:
        logger.debug("PDF with %d pages", doc.page_count)
        results = [_extract_page(doc, index) for index in range(doc.page_count)]
        results.append(_extract_outline(doc))
    return ExtractionResult.concat(results)
