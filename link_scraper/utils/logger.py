import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> Path:
    """Configure unified link_scraper logging.

    Args:
        home: Directory receiving the log file. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR

    Returns:
        Path to the log file
    """
    global _CONFIGURED

    if home is None:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    log_file = home / LOG_FILE_NAME
    if _CONFIGURED:
        return log_file

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("link_scraper")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
    return log_file


def reset_logging() -> None:
    """Detach handlers added by configure_logging (used by tests)."""
    global _CONFIGURED
    root_logger = logging.getLogger("link_scraper")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
