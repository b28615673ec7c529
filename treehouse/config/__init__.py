"""Configuration module for treehouse."""

from treehouse.config.settings import DeskConfig, LoggingConfig, load_config

__all__ = ["DeskConfig", "LoggingConfig", "load_config"]
