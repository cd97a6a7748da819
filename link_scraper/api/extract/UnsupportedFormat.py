"""Unsupported format error."""

from ..sniff.FormatTag import FormatTag
from .ExtractionError import ExtractionError


class UnsupportedFormat(ExtractionError):
    """Raised when the hinted or sniffed format has no enabled extractor."""

    def __init__(self, format_tag: FormatTag, detail: str = ""):
        self.format_tag = format_tag
        message = f"Unsupported format: {format_tag.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
