"""Raster image metadata extractor backed by Pillow."""

import io
import logging
from collections.abc import Iterator

from PIL import Image, UnidentifiedImageError

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Location import Location
from ...link.PartialError import PartialError
from ...scan.scan_text import scan_text
from ...sniff.FormatTag import FormatTag
from ..ContainerUnreadable import ContainerUnreadable

logger = logging.getLogger(__name__)

EXIF_IFD = 0x8769
USER_COMMENT = 0x9286

# IFD0 string tags: ImageDescription, Software, Artist, Copyright
_TEXT_TAGS = (0x010E, 0x0131, 0x013B, 0x8298)

# Windows XP tags, UTF-16LE: XPTitle, XPComment, XPAuthor, XPKeywords, XPSubject
_XP_TAGS = (0x9C9B, 0x9C9C, 0x9C9D, 0x9C9E, 0x9C9F)

_USER_COMMENT_CODES = {
    b"ASCII\x00\x00\x00": "ascii",
    b"JIS\x00\x00\x00\x00\x00": "shift_jis",
}


def _decode_tag_value(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return None


def _decode_xp(value: object) -> str | None:
    if isinstance(value, tuple):
        value = bytes(value)
    if not isinstance(value, bytes):
        return _decode_tag_value(value)
    return value.decode("utf-16-le", errors="replace").rstrip("\x00")


def _decode_user_comment(value: object) -> str | None:
    """Decode UserComment, whose first 8 bytes name its character code."""
    if not isinstance(value, bytes):
        return _decode_tag_value(value)
    prefix, payload = value[:8], value[8:]
    if prefix == b"UNICODE\x00":
        encoding = "utf-16-be" if payload[:1] == b"\x00" else "utf-16-le"
        return payload.decode(encoding, errors="replace").rstrip("\x00")
    encoding = _USER_COMMENT_CODES.get(prefix)
    if encoding is None:
        # Undefined code: best effort
        encoding = "utf-8"
        if prefix.strip(b"\x00"):
            payload = value
    return payload.decode(encoding, errors="replace").rstrip("\x00")


def _metadata_texts(image: Image.Image) -> Iterator[tuple[str, str]]:
    """Yield (location part, text) for every string-valued metadata field."""
    exif = image.getexif()
    for tag in _TEXT_TAGS:
        text = _decode_tag_value(exif.get(tag))
        if text:
            yield f"exif[0x{tag:04X}]", text
    for tag in _XP_TAGS:
        text = _decode_xp(exif.get(tag))
        if text:
            yield f"exif[0x{tag:04X}]", text

    text = _decode_user_comment(exif.get_ifd(EXIF_IFD).get(USER_COMMENT))
    if text:
        yield f"exif[0x{USER_COMMENT:04X}]", text

    for key, value in image.info.items():
        if key == "comment":
            text = _decode_tag_value(value)
            if text:
                yield "comment", text
        elif isinstance(value, str) and value:
            # PNG tEXt/iTXt/zTXt chunks
            yield f"text[{key}]", value


def _extract_image(data: bytes, config: ScraperConfig) -> ExtractionResult:  # noqa: ARG001
    """Scan string-valued image metadata (EXIF, PNG text, comments).

    Images carry no hyperlink mechanism of their own, so every link is
    textual. Absent tags contribute nothing.

    Raises:
        ContainerUnreadable: If Pillow cannot identify the image
    """
    try:
        image = Image.open(io.BytesIO(data))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ContainerUnreadable(FormatTag.IMAGE, str(exc)) from exc

    links = []
    errors = []
    with image:
        logger.debug("Image format %s", image.format)
        try:
            for part, text in _metadata_texts(image):
                links.extend(scan_text(text, Location.of(part)))
        except (OSError, ValueError) as exc:
            logger.warning("Cannot read image metadata: %s", exc)
            errors.append(PartialError(location=Location.of("metadata"), message=f"Metadata unreadable: {exc}"))
    return ExtractionResult.of(links, errors)
