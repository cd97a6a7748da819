from dataclasses import dataclass

SEPARATOR = "!"


@dataclass(frozen=True)
class Location:
    """Format-specific locator built from ordered parts.

    Parts go from the outermost container inwards, e.g. a zip entry path
    followed by an XML element path followed by an attribute name.
    """

    parts: tuple[str, ...] = ()

    def __str__(self):
        return SEPARATOR.join(self.parts)

    def __repr__(self):
        return f"Location('{self}')"

    def child(self, *parts: str) -> "Location":
        """Return a location nested below this one."""
        return Location(self.parts + parts)

    def prefixed(self, part: str) -> "Location":
        """Return this location scoped under an outer container part."""
        return Location((part,) + self.parts)

    @classmethod
    def of(cls, *parts: str) -> "Location":
        return cls(tuple(parts))
