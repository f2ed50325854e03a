"""Configuration loading utilities for UICONS."""

from .loader import ConfigError, ConfigLoader, UiconsConfig, load_config

__all__ = ["ConfigError", "ConfigLoader", "UiconsConfig", "load_config"]
