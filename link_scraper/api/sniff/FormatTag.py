"""Closed set of document formats the engine can dispatch on."""

from enum import Enum


class FormatTag(str, Enum):
    PLAIN_TEXT = "plaintext"
    PDF = "pdf"
    RTF = "rtf"
    IMAGE = "image"
    XML = "xml"
    SVG = "svg"
    XLINK = "xlink"
    OOXML = "ooxml"
    ODF = "odf"
    UNKNOWN = "unknown"

    @classmethod
    def supported(cls) -> list["FormatTag"]:
        """All tags that map to an extractor."""
        return [tag for tag in cls if tag is not cls.UNKNOWN]
