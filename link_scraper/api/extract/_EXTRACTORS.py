"""Structural extractor registry."""

from collections.abc import Callable

from ..config.ScraperConfig import ScraperConfig
from ..link.ExtractionResult import ExtractionResult
from ..sniff.FormatTag import FormatTag
from ._image._extract_image import _extract_image
from ._odf._extract_odf import _extract_odf
from ._ooxml._extract_ooxml import _extract_ooxml
from ._pdf._extract_pdf import _extract_pdf
from ._plaintext._extract_plaintext import _extract_plaintext
from ._rtf._extract_rtf import _extract_rtf
from ._svg._extract_svg import _extract_svg
from ._xlink._extract_xlink import _extract_xlink
from ._xml._extract_xml import _extract_xml

Extractor = Callable[[bytes, ScraperConfig], ExtractionResult]

# One extractor per format; Unknown has none
EXTRACTORS: dict[FormatTag, Extractor] = {
    FormatTag.PLAIN_TEXT: _extract_plaintext,
    FormatTag.PDF: _extract_pdf,
    FormatTag.RTF: _extract_rtf,
    FormatTag.IMAGE: _extract_image,
    FormatTag.XML: _extract_xml,
    FormatTag.SVG: _extract_svg,
    FormatTag.XLINK: _extract_xlink,
    FormatTag.OOXML: _extract_ooxml,
    FormatTag.ODF: _extract_odf,
}
