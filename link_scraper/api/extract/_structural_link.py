"""Build structural links from explicitly encoded references."""

from ..link.Link import Link
from ..link.Location import Location
from ..link.normalize_uri import classify_kind, normalize_uri
from ..link.Provenance import Provenance


def _structural_link(value: str, location: Location) -> Link | None:
    """Create a structural link for a reference value.

    Empty values and fragment-only references (``#id``) point inside the
    document itself and yield None.
    """
    target = value.strip()
    if not target or target.startswith("#"):
        return None
    return Link(
        raw_text=target,
        kind=classify_kind(target),
        provenance=Provenance.STRUCTURAL,
        location=location,
        normalized_uri=normalize_uri(target),
    )
