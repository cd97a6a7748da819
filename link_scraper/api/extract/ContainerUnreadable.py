"""Container unreadable error."""

from ..sniff.FormatTag import FormatTag
from .ExtractionError import ExtractionError


class ContainerUnreadable(ExtractionError):
    """Raised when the top-level container cannot be opened at all."""

    def __init__(self, format_tag: FormatTag, reason: str):
        self.format_tag = format_tag
        self.reason = reason
        super().__init__(f"Cannot open {format_tag.value} container: {reason}")
