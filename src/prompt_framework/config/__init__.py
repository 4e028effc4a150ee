"""Configuration package."""

from .logging_config import configure_logging
from .settings import ConfigLoadError, Settings, load_settings

__all__ = [
    "configure_logging",
    "ConfigLoadError",
    "Settings",
    "load_settings",
]
