"""Classify a zip container as OOXML, ODF or a generic archive."""

import io
import logging
import zipfile

from .FormatTag import FormatTag

logger = logging.getLogger(__name__)

_LEADING_ENTRIES = 8

_ODF_MIME_PREFIX = "application/vnd.oasis.opendocument."
_OOXML_MARKER = "[Content_Types].xml"
_ODF_MANIFEST = "META-INF/manifest.xml"


def _is_odf_mimetype(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bool:
    try:
        payload = archive.read(info)[:128]
    except (zipfile.BadZipFile, OSError, RuntimeError) as exc:
        logger.debug("Unreadable mimetype entry: %s", exc)
        return False
    return payload.decode("ascii", errors="replace").strip().startswith(_ODF_MIME_PREFIX)


def _classify(archive: zipfile.ZipFile) -> FormatTag:
    entries = archive.infolist()

    # Packages put their discriminating entry first; check those before the rest
    for info in entries[:_LEADING_ENTRIES]:
        if info.filename == "mimetype" and _is_odf_mimetype(archive, info):
            return FormatTag.ODF
        if info.filename == _OOXML_MARKER:
            return FormatTag.OOXML

    names = {info.filename for info in entries}
    if _OOXML_MARKER in names:
        return FormatTag.OOXML
    if "mimetype" in names and _is_odf_mimetype(archive, archive.getinfo("mimetype")):
        return FormatTag.ODF
    if _ODF_MANIFEST in names:
        return FormatTag.ODF
    return FormatTag.UNKNOWN


def sniff_zip(data: bytes) -> FormatTag:
    """Disambiguate a zip buffer by its entry names.

    Returns:
        FormatTag.ODF, FormatTag.OOXML, or FormatTag.UNKNOWN for any other
        or unreadable archive
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            return _classify(archive)
    except (zipfile.BadZipFile, OSError, ValueError) as exc:
        logger.debug("Zip central directory unreadable: %s", exc)
        return FormatTag.UNKNOWN
