from dataclasses import dataclass, replace

from .LinkKind import LinkKind
from .Location import Location
from .Provenance import Provenance


@dataclass(frozen=True)
class Link:
    """A reference discovered in a document.

    ``raw_text`` is the exact matched substring and is never empty.
    ``normalized_uri`` is only set when normalization succeeded.
    """

    raw_text: str
    kind: LinkKind
    provenance: Provenance
    location: Location
    normalized_uri: str | None = None

    def __post_init__(self):
        if not isinstance(self.raw_text, str):
            raise TypeError("Link raw_text must be a string")
        if not self.raw_text:
            raise ValueError("Link raw_text must not be empty")

    @property
    def is_structural(self) -> bool:
        return self.provenance is Provenance.STRUCTURAL

    def dedup_key(self) -> tuple[str, str]:
        """Identity used when collapsing duplicate links."""
        if self.normalized_uri is not None:
            return ("uri", self.normalized_uri)
        return ("raw", self.raw_text)

    def with_provenance(self, provenance: Provenance) -> "Link":
        return replace(self, provenance=provenance)

    def with_location(self, location: Location) -> "Link":
        return replace(self, location=location)
