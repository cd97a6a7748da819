"""Best-guess MIME classification of a byte buffer via libmagic."""

import logging

import magic

from .FormatTag import FormatTag

logger = logging.getLogger(__name__)

_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xff\xfe", "utf-16"),
    (b"\xfe\xff", "utf-16"),
)

ZIP_MIME_TYPES = frozenset({"application/zip", "application/x-zip-compressed"})

_OOXML_MIME_PREFIX = "application/vnd.openxmlformats-officedocument."
_ODF_MIME_PREFIX = "application/vnd.oasis.opendocument."

_MIME_TO_FORMAT: dict[str, FormatTag] = {
    "application/pdf": FormatTag.PDF,
    "application/x-pdf": FormatTag.PDF,
    "application/rtf": FormatTag.RTF,
    "text/rtf": FormatTag.RTF,
    "image/svg+xml": FormatTag.SVG,
    "application/xml": FormatTag.XML,
    "text/xml": FormatTag.XML,
    "text/plain": FormatTag.PLAIN_TEXT,
    "application/x-empty": FormatTag.PLAIN_TEXT,
}


def decode_text(data: bytes, errors: str = "strict") -> str:
    """Decode a text buffer honouring a leading byte order mark (UTF-8 otherwise)."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding, errors=errors)
    return data.decode("utf-8", errors=errors)


def guess_mime_type(data: bytes) -> str:
    """Guess a MIME type for a byte buffer with a stable fallback.

    Classification is libmagic's content sniffing; container internals
    (zip entries, XML roots) are left to the format sniffer.

    Returns:
        MIME type string, "application/octet-stream" when libmagic fails
    """
    try:
        return magic.from_buffer(data, mime=True)
    except magic.MagicException as exc:
        logger.warning("Error detecting MIME type with libmagic: %s", exc)
        return "application/octet-stream"


def format_for_mime(mime_type: str) -> FormatTag:
    """Map a MIME type to the format tag of its extractor."""
    mime_type = mime_type.strip().lower()
    if mime_type in _MIME_TO_FORMAT:
        return _MIME_TO_FORMAT[mime_type]
    if mime_type.startswith(_OOXML_MIME_PREFIX):
        return FormatTag.OOXML
    if mime_type.startswith(_ODF_MIME_PREFIX):
        return FormatTag.ODF
    if mime_type.startswith("image/"):
        return FormatTag.IMAGE
    return FormatTag.UNKNOWN


__all__ = [
    "ZIP_MIME_TYPES",
    "decode_text",
    "format_for_mime",
    "guess_mime_type",
]
