"""Shared constants for link_scraper home directory and artefact locations."""

LINK_SCRAPER_HOME_EXT = ".link_scraper"  # user-level state/config directory suffix

LINK_SCRAPER_HOME_ENV = "LINK_SCRAPER_HOME"

LOG_FILE_NAME = "link_scraper.log"

CONFIG_FILE_NAME = "config.json"
