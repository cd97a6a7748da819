"""Format sniffing API domain."""

from .FormatTag import FormatTag
from .mime import decode_text, guess_mime_type
from .sniff import sniff

__all__ = ["FormatTag", "decode_text", "guess_mime_type", "sniff"]
