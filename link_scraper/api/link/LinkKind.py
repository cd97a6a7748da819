"""Link kind enum."""

from enum import Enum


class LinkKind(str, Enum):
    URL = "url"
    EMAIL = "email"
    UNKNOWN_SCHEME = "unknown-scheme"
