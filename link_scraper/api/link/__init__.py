"""Link result model."""

from .ExtractionResult import ExtractionResult
from .Link import Link
from .LinkKind import LinkKind
from .Location import Location
from .normalize_uri import classify_kind, normalize_uri
from .PartialError import PartialError
from .Provenance import Provenance

__all__ = [
    "ExtractionResult",
    "Link",
    "LinkKind",
    "Location",
    "PartialError",
    "Provenance",
    "classify_kind",
    "normalize_uri",
]
