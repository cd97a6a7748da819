"""Classify an XML buffer as generic XML, SVG or XLink-bearing XML."""

import re

from .FormatTag import FormatTag

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

_PROLOG = re.compile(
    r"\A(?:\s+|<\?.*?\?>|<!--.*?-->|<!DOCTYPE(?:[^\[>]|\[.*?\])*>)*",
    re.DOTALL | re.IGNORECASE,
)

_DECLARATION = re.compile(r"\A\s*<\?xml[\s?]")

_NAME = r"[A-Za-z_][\w.\-]*"
_ATTRIBUTE = rf"\s+{_NAME}(?::{_NAME})?\s*=\s*(?:\"[^\"<]*\"|'[^'<]*')"

# A complete, well-formed root start tag: name, quoted attributes, closing '>'
_ROOT = re.compile(rf"<({_NAME}:)?({_NAME})((?:{_ATTRIBUTE})*)\s*/?>")

_XML_HEAD_CHARS = 16384


def sniff_xml(text: str) -> FormatTag:
    """Pick the XML-family tag from the prolog and root start tag.

    Text is only taken for XML when it carries an ``<?xml`` declaration or
    opens with a well-formed root start tag, so prose starting with ``<``
    (``<john@x.example> wrote:``) stays plain text.

    Returns:
        SVG, XLINK or XML; PLAIN_TEXT when the text is not recognizably XML
    """
    head = text[:_XML_HEAD_CHARS].lstrip("\ufeff")
    declared = _DECLARATION.match(head) is not None
    prolog = _PROLOG.match(head)
    rest = head[prolog.end() :] if prolog else head
    root = _ROOT.match(rest)
    if root is None:
        return FormatTag.XML if declared else FormatTag.PLAIN_TEXT

    local_name = root.group(2)
    start_tag = root.group(0)
    doctype = prolog.group(0) if prolog else ""

    if local_name.lower() == "svg" or SVG_NAMESPACE in start_tag or "DTD SVG" in doctype:
        return FormatTag.SVG
    if XLINK_NAMESPACE in head:
        return FormatTag.XLINK
    return FormatTag.XML
