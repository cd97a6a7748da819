"""Flat serialization records for extraction results."""

from pydantic import BaseModel, ConfigDict


class _LinkRecord(BaseModel):
    """Serialized form of a Link."""

    model_config = ConfigDict(extra="forbid")

    raw_text: str
    normalized_uri: str = ""
    kind: str
    provenance: str
    location: str


class _PartialErrorRecord(BaseModel):
    """Serialized form of a PartialError."""

    model_config = ConfigDict(extra="forbid")

    location: str
    message: str
    recoverable: bool = True
