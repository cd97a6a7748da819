"""Plaintext link scanner shared by every extractor."""

from collections.abc import Iterable, Iterator

from ..link.Link import Link
from ..link.Location import Location
from ..link.normalize_uri import classify_kind, normalize_uri
from ..link.Provenance import Provenance
from ._patterns import PATTERNS, SCHEME_URL_PATTERN, known_scheme_offset, protected_prefix_length
from .trim_trailing import trim_trailing


def _candidates(text: str) -> Iterator[tuple[int, str]]:
    for pattern in PATTERNS:
        for match in pattern.finditer(text):
            start, raw = match.start(), match.group(0)
            if pattern is SCHEME_URL_PATTERN:
                shift = known_scheme_offset(raw)
                start, raw = start + shift, raw[shift:]
            trimmed = trim_trailing(raw, protected_prefix_length(raw))
            if trimmed:
                yield start, trimmed


def _resolve_overlaps(candidates: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Keep the longest of every group of overlapping spans (ties: earliest)."""
    chosen: list[tuple[int, int, str]] = []
    for start, raw in sorted(set(candidates), key=lambda item: (-len(item[1]), item[0])):
        end = start + len(raw)
        if any(start < other_end and other_start < end for other_start, other_end, _ in chosen):
            continue
        chosen.append((start, end, raw))
    return [(start, raw) for start, _, raw in sorted(chosen)]


def scan_text(text: str, location: Location | None = None) -> Iterator[Link]:
    """Scan decoded text for URL, URI and email shaped substrings.

    Each yielded Link is textual and located at ``location`` plus the
    character offset of the match (``char[N]``). Stateless: every call
    returns a fresh generator.

    Args:
        text: Any decoded text, possibly empty
        location: Locator of the text run inside its document

    Yields:
        Textual links in order of appearance
    """
    if not text:
        return
    base = location if location is not None else Location()
    for start, raw in _resolve_overlaps(_candidates(text)):
        yield Link(
            raw_text=raw,
            kind=classify_kind(raw),
            provenance=Provenance.TEXTUAL,
            location=base.child(f"char[{start}]"),
            normalized_uri=normalize_uri(raw),
        )
