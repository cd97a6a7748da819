from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._LinkRecord import _LinkRecord, _PartialErrorRecord
from .Link import Link
from .Location import Location
from .PartialError import PartialError


@dataclass(frozen=True)
class ExtractionResult:
    """Links found in one document plus the localized failures met on the way.

    Links keep discovery order. Errors never abort an extraction; callers
    can tell "readable but link-free" (no links, no errors) apart from
    "readable with glitches" (errors present).
    """

    links: tuple[Link, ...] = ()
    errors: tuple[PartialError, ...] = ()

    @classmethod
    def of(cls, links: Iterable[Link] = (), errors: Iterable[PartialError] = ()) -> "ExtractionResult":
        return cls(tuple(links), tuple(errors))

    @classmethod
    def concat(cls, results: Iterable["ExtractionResult"]) -> "ExtractionResult":
        """Fold sub-results into one, keeping successes and errors of every part."""
        links: list[Link] = []
        errors: list[PartialError] = []
        for result in results:
            links.extend(result.links)
            errors.extend(result.errors)
        return cls(tuple(links), tuple(errors))

    @classmethod
    def failure(cls, location: Location, message: str) -> "ExtractionResult":
        return cls((), (PartialError(location=location, message=message),))

    def prefixed(self, part: str) -> "ExtractionResult":
        """Scope every location of this result under an outer container part."""
        return ExtractionResult(
            tuple(link.with_location(link.location.prefixed(part)) for link in self.links),
            tuple(error.with_location(error.location.prefixed(part)) for error in self.errors),
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def normalized_uris(self) -> set[str]:
        return {link.normalized_uri for link in self.links if link.normalized_uri is not None}

    def link_records(self) -> list[dict[str, Any]]:
        return [
            _LinkRecord(
                raw_text=link.raw_text,
                normalized_uri=link.normalized_uri or "",
                kind=link.kind.value,
                provenance=link.provenance.value,
                location=str(link.location),
            ).model_dump(mode="python")
            for link in self.links
        ]

    def error_records(self) -> list[dict[str, Any]]:
        return [
            _PartialErrorRecord(
                location=str(error.location),
                message=error.message,
                recoverable=error.recoverable,
            ).model_dump(mode="python")
            for error in self.errors
        ]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Flat list-of-records representation of links and errors."""
        return {"links": self.link_records(), "errors": self.error_records()}
