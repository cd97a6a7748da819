"""XLink extractor."""

from collections.abc import Iterator

from lxml import etree

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Location import Location
from ...link.PartialError import PartialError
from .._xml._extract_xml import _extract_xml_document
from .._xml._XmlWalker import _XmlWalker, href_or_src

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

_TYPE = f"{{{XLINK_NAMESPACE}}}type"
_HREF = f"{{{XLINK_NAMESPACE}}}href"

# xlink:href, xlink:role and xlink:arcrole all hold IRIs
_XLINK_REFERENCES = frozenset({_HREF, f"{{{XLINK_NAMESPACE}}}role", f"{{{XLINK_NAMESPACE}}}arcrole"})

_KNOWN_TYPES = frozenset({"simple", "extended", "locator", "arc", "resource", "title", "none"})

_EXTENDED_ONLY = frozenset({"locator", "arc", "resource"})


def _is_xlink_reference(element: etree._Element, name: str, value: str) -> bool:
    return name in _XLINK_REFERENCES or href_or_src(element, name, value)


def _validate_xlink_element(
    element: etree._Element, location: Location, ancestors: tuple[etree._Element, ...]
) -> Iterator[PartialError]:
    """Check an element's xlink:type against its position in the tree."""
    link_type = element.get(_TYPE)
    if link_type is None:
        return

    in_extended = any(ancestor.get(_TYPE) == "extended" for ancestor in ancestors)

    if link_type not in _KNOWN_TYPES:
        yield PartialError(location=location, message=f"Unknown xlink:type value: {link_type!r}")
    elif link_type in _EXTENDED_ONLY and not in_extended:
        yield PartialError(location=location, message=f"Found a {link_type}-element outside of an extended element")
    elif link_type in ("simple", "extended") and in_extended:
        yield PartialError(location=location, message=f"Found a {link_type}-element inside of an extended element")

    if link_type == "locator" and not element.get(_HREF):
        yield PartialError(location=location, message="Locator element is missing required attribute xlink:href")


def _extract_xlink(data: bytes, config: ScraperConfig) -> ExtractionResult:
    walker = _XmlWalker(
        is_structural=_is_xlink_reference,
        scan_comments=config.scan_comments,
        include_namespaces=config.include_namespaces,
        element_hook=_validate_xlink_element,
    )
    return _extract_xml_document(data, walker)
