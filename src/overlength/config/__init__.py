"""Configuration management."""

from overlength.config.loader import ConfigError, load_config
from overlength.config.settings import Settings

__all__ = ["ConfigError", "Settings", "load_config"]
