"""Shared zip-container traversal for OOXML and ODF."""

import fnmatch
import io
import logging
import zipfile
import zlib
from collections.abc import Callable, Sequence

from lxml import etree

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Location import Location
from ...sniff.FormatTag import FormatTag
from .._map_bounded import _map_bounded
from ..ContainerUnreadable import ContainerUnreadable

logger = logging.getLogger(__name__)

# (entry name, entry bytes) -> result with entry-relative locations
EntryParser = Callable[[str, bytes], ExtractionResult]

_DECOMPRESSION_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, OSError, RuntimeError, NotImplementedError)


def _list_entries(data: bytes, format_tag: FormatTag) -> list[zipfile.ZipInfo]:
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            return archive.infolist()
    except (zipfile.BadZipFile, OSError, ValueError) as exc:
        raise ContainerUnreadable(format_tag, f"not a valid zip archive: {exc}") from exc


def _is_allowed(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def _extract_zip_entries(
    data: bytes,
    config: ScraperConfig,
    format_tag: FormatTag,
    patterns: Sequence[str],
    parse_entry: EntryParser,
) -> ExtractionResult:
    """Extract every allowlisted entry of a zip container.

    Entries outside the allowlist are never opened. An entry that fails to
    decompress or parse becomes one PartialError scoped to its path; the
    other entries are still processed. Workers each open their own reader
    over the shared, read-only buffer.

    Raises:
        ContainerUnreadable: If the buffer is not a readable zip archive
    """
    entries = [info for info in _list_entries(data, format_tag) if not info.is_dir()]
    selected = [info for info in entries if _is_allowed(info.filename, patterns)]
    logger.debug("%s archive: %d of %d entries selected", format_tag.value, len(selected), len(entries))

    def process(info: zipfile.ZipInfo) -> ExtractionResult:
        entry = Location.of(info.filename)
        if info.file_size > config.max_entry_bytes:
            return ExtractionResult.failure(
                entry, f"Entry skipped: {info.file_size} bytes exceeds limit of {config.max_entry_bytes}"
            )
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                payload = archive.read(info)
        except _DECOMPRESSION_ERRORS as exc:
            logger.warning("Cannot decompress %s: %s", info.filename, exc)
            return ExtractionResult.failure(entry, f"Cannot decompress entry: {exc}")
        try:
            return parse_entry(info.filename, payload).prefixed(info.filename)
        except (etree.LxmlError, ValueError) as exc:
            logger.warning("Cannot parse %s: %s", info.filename, exc)
            return ExtractionResult.failure(entry, f"Cannot parse entry: {exc}")

    return ExtractionResult.concat(_map_bounded(process, selected, config.max_workers))
