"""Configuration API domain."""

from .get_home_dir import get_home_dir
from .ScraperConfig import ScraperConfig

__all__ = ["ScraperConfig", "get_home_dir"]
