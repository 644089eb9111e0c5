"""Configuration loading for doclinks."""

from rules.config import CONFIG_FILENAME, ConfigError, DocLinksConfig, load_config

__all__ = ["CONFIG_FILENAME", "ConfigError", "DocLinksConfig", "load_config"]
