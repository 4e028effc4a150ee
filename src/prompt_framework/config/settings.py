"""
Configuration management for text-to-json-mcp.

Uses Pydantic settings for environment variable support, with an optional
YAML file layered on top.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import yaml
from pydantic_settings import BaseSettings

from .. import __version__

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Raised when configuration loading fails."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "text-to-json-mcp"
    APP_VERSION: str = __version__

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # MCP server
    SERVER_NAME: str = "text-to-json-mcp"

    # CLI
    DEFAULT_OUTPUT_FORMAT: Literal["json", "pretty"] = "json"

    model_config = {
        "env_prefix": "TEXT2JSON_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def log_dir_path(self) -> Path:
        """Get the log directory as a Path object."""
        return Path(self.LOG_DIR).expanduser()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(path, f"Invalid YAML: {e}")
    except OSError as e:
        raise ConfigLoadError(path, str(e))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(path, f"Expected mapping, got {type(data).__name__}")

    return {str(key).upper(): value for key, value in data.items()}


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings, overlaying a YAML file on environment and defaults.

    Args:
        config_path: Optional YAML file. Keys are field names, any case.

    Returns:
        Settings instance

    Raises:
        ConfigLoadError: If the file exists but cannot be parsed
    """
    if config_path is None:
        return Settings()

    path = Path(config_path)
    if not path.exists():
        logger.debug(f"Config file not found, using defaults: {path}")
        return Settings()

    overrides = _read_yaml(path)
    logger.debug(f"Loaded YAML config: {path}")
    return Settings(**overrides)
