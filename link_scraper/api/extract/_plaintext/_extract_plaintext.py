"""Plain text extractor."""

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Location import Location
from ...scan.scan_text import scan_text
from ...sniff.mime import decode_text


def _extract_plaintext(data: bytes, config: ScraperConfig) -> ExtractionResult:  # noqa: ARG001
    """Scan a text buffer line by line.

    Invalid byte sequences are replaced rather than rejected, so any buffer
    can be scanned. Locations are ``line[n]!char[m]`` with 1-based lines.
    """
    text = decode_text(data, errors="replace")
    links = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        links.extend(scan_text(line, Location.of(f"line[{line_number}]")))
    return ExtractionResult.of(links)
