"""Collapse duplicate links."""

from collections.abc import Iterable

from ..link.Link import Link
from ..link.Provenance import Provenance


def _dedup_links(links: Iterable[Link]) -> list[Link]:
    """Collapse links sharing a normalized URI (raw text when unnormalized).

    The first occurrence keeps its place, raw text and location; provenance
    becomes structural if any collapsed occurrence was structural.
    """
    merged: dict[tuple[str, str], Link] = {}
    for link in links:
        key = link.dedup_key()
        seen = merged.get(key)
        if seen is None:
            merged[key] = link
        elif link.is_structural and not seen.is_structural:
            merged[key] = seen.with_provenance(Provenance.STRUCTURAL)
    return list(merged.values())
