"""Extract links from a file on disk."""

import logging
from pathlib import Path

from ..config.ScraperConfig import ScraperConfig
from ..link.ExtractionResult import ExtractionResult
from ...utils.logger import configure_logging
from ..sniff.FormatTag import FormatTag
from .extract import extract

logger = logging.getLogger(__name__)


def scrape_from_file(
    path: str | Path, format_hint: FormatTag | None = None, config: ScraperConfig | None = None
) -> ExtractionResult:
    """Read a file fully and extract its links.

    When ``config`` is omitted the configuration is loaded from the home
    directory (see ``ScraperConfig.load``) and file logging is set up at
    its ``log_level``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the configuration file is invalid
        UnsupportedFormat: If the format is unknown or not enabled
        ContainerUnreadable: If the top-level container cannot be opened
    """
    path = Path(path).expanduser()
    if config is None:
        config = ScraperConfig.load()
        configure_logging(level=config.log_level)
    logger.debug("Scraping %s", path)
    return extract(path.read_bytes(), format_hint=format_hint, config=config)
