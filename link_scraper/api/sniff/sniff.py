"""Format sniffing."""

import logging
import re

from ._sniff_xml import sniff_xml
from ._sniff_zip import sniff_zip
from .FormatTag import FormatTag
from .mime import ZIP_MIME_TYPES, decode_text, format_for_mime, guess_mime_type

logger = logging.getLogger(__name__)

_ZIP_SIGNATURES = (b"PK\x03\x04", b"PK\x05\x06")

_PDF_HEADER_WINDOW = 1024

_RTF_PREAMBLE = re.compile(rb"\A(?:\xef\xbb\xbf)?[ \t\r\n]*\{\\rtf")

_TEXT_HEAD_BYTES = 8192


def _looks_like_text(data: bytes) -> bool:
    head = data[:_TEXT_HEAD_BYTES]
    is_utf16 = head.startswith((b"\xff\xfe", b"\xfe\xff"))
    if b"\x00" in head and not is_utf16:
        return False
    try:
        decode_text(head)
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut at the head boundary is still text
        return exc.start >= len(head) - 4 and len(data) > len(head)
    return True


def sniff(data: bytes) -> FormatTag:
    """Classify a byte buffer into exactly one format tag.

    Checks, in priority order: zip containers (OOXML vs ODF), PDF header,
    RTF preamble, image types reported by libmagic, XML root element, then
    decodable text. Never mutates the input and fails closed to UNKNOWN.

    Args:
        data: Raw document bytes

    Returns:
        The detected FormatTag
    """
    mime_type = guess_mime_type(data)
    mime_format = format_for_mime(mime_type)
    logger.debug("Sniffed MIME type %s for %d bytes", mime_type, len(data))

    is_zip = data.startswith(_ZIP_SIGNATURES) or mime_type in ZIP_MIME_TYPES
    if is_zip or mime_format in (FormatTag.OOXML, FormatTag.ODF):
        return sniff_zip(data)

    if mime_format is FormatTag.PDF or b"%PDF-" in data[:_PDF_HEADER_WINDOW]:
        return FormatTag.PDF

    if mime_format is FormatTag.RTF or _RTF_PREAMBLE.match(data):
        return FormatTag.RTF

    if mime_format is FormatTag.IMAGE:
        return FormatTag.IMAGE

    if _looks_like_text(data):
        return sniff_xml(decode_text(data[:65536], errors="ignore"))

    return FormatTag.UNKNOWN
