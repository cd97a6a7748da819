"""How a link was discovered."""

from enum import Enum


class Provenance(str, Enum):
    STRUCTURAL = "structural"
    TEXTUAL = "textual"
