"""Top-level link_scraper configuration."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import CONFIG_FILE_NAME
from ..sniff.FormatTag import FormatTag
from .get_home_dir import get_home_dir

_DEFAULT_OOXML_ENTRIES = [
    "*/document.xml",
    "*/*.rels",
    "word/footnotes.xml",
    "word/endnotes.xml",
    "word/header*.xml",
    "word/footer*.xml",
    "ppt/slides/*.xml",
    "xl/sharedStrings.xml",
    "xl/worksheets/*.xml",
]

_DEFAULT_ODF_ENTRIES = ["content.xml", "styles.xml"]


class ScraperConfig(BaseModel):
    """Extraction engine configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled_formats: list[FormatTag] = Field(
        default_factory=FormatTag.supported, description="Formats with an active extractor"
    )
    unknown_fallback: bool = Field(True, description="Scan unrecognized buffers as plain text")
    max_workers: int = Field(4, ge=1, description="Upper bound of the zip entry worker pool")
    max_entry_bytes: int = Field(64 * 1024 * 1024, gt=0, description="Largest uncompressed zip entry to inspect")
    ooxml_entries: list[str] = Field(default_factory=lambda: list(_DEFAULT_OOXML_ENTRIES))
    odf_entries: list[str] = Field(default_factory=lambda: list(_DEFAULT_ODF_ENTRIES))
    rtf_brace_recovery: int = Field(2, ge=0, description="Stray or unclosed RTF groups tolerated")
    include_namespaces: bool = Field(False, description="Report XML namespace URIs as links")
    scan_comments: bool = Field(True, description="Scan XML comments for textual links")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")

    @field_validator("enabled_formats")
    @classmethod
    def _reject_unknown(cls, value: list[FormatTag]) -> list[FormatTag]:
        if FormatTag.UNKNOWN in value:
            raise ValueError("'unknown' has no extractor and cannot be enabled")
        return value

    def is_enabled(self, format_tag: FormatTag) -> bool:
        return format_tag in self.enabled_formats

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on LINK_SCRAPER_HOME or default to ~/.link_scraper."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> "ScraperConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
