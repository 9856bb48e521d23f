"""Configuration: TOML profiles and logging setup."""

from zenguess.config.settings import Settings, configure_logging, get_settings, load_config

__all__ = ["Settings", "get_settings", "load_config", "configure_logging"]
