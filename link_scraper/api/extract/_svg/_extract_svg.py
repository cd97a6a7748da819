"""SVG extractor."""

import re
from collections.abc import Iterator

from lxml import etree

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Link import Link
from ...link.Location import Location
from .._structural_link import _structural_link
from .._xml._extract_xml import _extract_xml_document
from .._xml._XmlWalker import XML_NAMESPACE, _XmlWalker, href_or_src

# SVG attributes holding IRIs besides href/src
_SVG_REFERENCE_ATTRIBUTES = frozenset({"data", "action", "requiredExtensions"})

_CSS_URL = re.compile(r"""url\(\s*(['"]?)(.*?)\1\s*\)""", re.IGNORECASE)


def _is_svg_reference(element: etree._Element, name: str, value: str) -> bool:
    if href_or_src(element, name, value):
        return True
    if name == f"{{{XML_NAMESPACE}}}base":
        return True
    return name in _SVG_REFERENCE_ATTRIBUTES


def _style_references(
    element: etree._Element, location: Location, ancestors: tuple[etree._Element, ...]  # noqa: ARG001
) -> Iterator[Link]:
    """Yield ``url(...)`` references of an inline style that leave the document."""
    style = element.get("style")
    if not style:
        return
    for match in _CSS_URL.finditer(style):
        link = _structural_link(match.group(2), location.child("@style", f"url[{match.start()}]"))
        if link is not None:
            yield link


def _extract_svg(data: bytes, config: ScraperConfig) -> ExtractionResult:
    walker = _XmlWalker(
        is_structural=_is_svg_reference,
        scan_comments=config.scan_comments,
        include_namespaces=config.include_namespaces,
        element_hook=_style_references,
    )
    return _extract_xml_document(data, walker)
