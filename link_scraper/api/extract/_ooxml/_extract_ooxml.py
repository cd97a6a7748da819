"""Office Open XML (docx/xlsx/pptx) extractor."""

from collections.abc import Iterator

from lxml import etree

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Link import Link
from ...link.Location import Location
from ...sniff.FormatTag import FormatTag
from .._field_instruction import _parse_field_instruction
from .._structural_link import _structural_link
from .._xml._extract_xml import _extract_xml_document
from .._xml._XmlWalker import _XmlWalker, local_name
from .._zip._extract_zip_entries import _extract_zip_entries

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_PARAGRAPH = f"{{{WORD_NAMESPACE}}}p"
_FIELD_SIMPLE = f"{{{WORD_NAMESPACE}}}fldSimple"
_FIELD_CHAR = f"{{{WORD_NAMESPACE}}}fldChar"
_FIELD_CHAR_TYPE = f"{{{WORD_NAMESPACE}}}fldCharType"
_INSTRUCTION = f"{{{WORD_NAMESPACE}}}instr"
_INSTRUCTION_TEXT = f"{{{WORD_NAMESPACE}}}instrText"


def _is_relationship_target(element: etree._Element, name: str, value: str) -> bool:  # noqa: ARG001
    """Accept every relationship Target, external or not.

    Internal part references such as ``media/image1.png`` carry no scheme and
    come out as unknown-scheme links without a normalized URI.
    """
    return local_name(element.tag) == "Relationship" and name == "Target"


def _complex_field_instructions(paragraph: etree._Element) -> Iterator[str]:
    """Join ``w:instrText`` runs between a ``begin`` and ``separate``/``end`` field char."""
    buffer: list[str] | None = None
    for node in paragraph.iter(_FIELD_CHAR, _INSTRUCTION_TEXT):
        if node.tag == _INSTRUCTION_TEXT:
            if buffer is not None:
                buffer.append(node.text or "")
            continue
        char_type = node.get(_FIELD_CHAR_TYPE)
        if char_type == "begin":
            buffer = []
        elif char_type in ("separate", "end") and buffer is not None:
            yield "".join(buffer)
            buffer = None
    if buffer:
        yield "".join(buffer)


def _field_links(
    element: etree._Element, location: Location, ancestors: tuple[etree._Element, ...]  # noqa: ARG001
) -> Iterator[Link]:
    """Yield HYPERLINK field targets of simple and complex Word fields."""
    if element.tag == _FIELD_SIMPLE:
        target = _parse_field_instruction(element.get(_INSTRUCTION, ""))
        if target is not None:
            link = _structural_link(target, location.child("@w:instr"))
            if link is not None:
                yield link
    elif element.tag == _PARAGRAPH:
        for index, instruction in enumerate(_complex_field_instructions(element), start=1):
            target = _parse_field_instruction(instruction)
            if target is None:
                continue
            link = _structural_link(target, location.child(f"field[{index}]"))
            if link is not None:
                yield link


def _extract_ooxml(data: bytes, config: ScraperConfig) -> ExtractionResult:
    """Extract links from the allowlisted parts of an OOXML package.

    Relationship parts contribute every target; content parts
    contribute field-code hyperlinks and scanned text.
    """
    relationships = _XmlWalker(
        is_structural=_is_relationship_target, scan_attributes=False, scan_comments=config.scan_comments
    )
    content = _XmlWalker(scan_attributes=False, scan_comments=config.scan_comments, element_hook=_field_links)

    def parse_entry(name: str, payload: bytes) -> ExtractionResult:
        walker = relationships if name.endswith(".rels") else content
        return _extract_xml_document(payload, walker)

    return _extract_zip_entries(data, config, FormatTag.OOXML, config.ooxml_entries, parse_entry)
