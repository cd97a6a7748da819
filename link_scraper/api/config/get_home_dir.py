"""Get link_scraper home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LINK_SCRAPER_HOME_ENV, LINK_SCRAPER_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get link_scraper home directory path or path under it.

    Checks LINK_SCRAPER_HOME environment variable first, defaults to
    ~/.link_scraper if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.link_scraper")
        >>> get_home_dir("config.json")
        Path("/Users/user/.link_scraper/config.json")
    """
    home_env = os.environ.get(LINK_SCRAPER_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / LINK_SCRAPER_HOME_EXT if user_home else Path.home() / LINK_SCRAPER_HOME_EXT

    return home / Path(*parts) if parts else home
