"""Localized, non-fatal extraction failure."""

from dataclasses import dataclass, replace

from .Location import Location


@dataclass(frozen=True)
class PartialError:
    location: Location
    message: str
    recoverable: bool = True

    def __str__(self):
        where = str(self.location) or "<document>"
        return f"{where}: {self.message}"

    def with_location(self, location: Location) -> "PartialError":
        return replace(self, location=location)
