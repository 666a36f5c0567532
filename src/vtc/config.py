"""
vtc Configuration
=================

This module handles configuration loading for the vtc encoders and CLI.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. vtc.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    VTC_DEFAULT_FORMAT   -> graphics.default_format
    VTC_CHUNK_SIZE       -> graphics.chunk_size
    VTC_QUERY_IMAGE_ID   -> graphics.query_image_id
    VTC_LOG_LEVEL        -> logging.level
    VTC_LOG_FORMAT       -> logging.format

Example:
    from vtc.config import load_config

    settings = load_config()

    print(settings.graphics.chunk_size)
    print(settings.logging.level)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from vtc.errors import ConfigError
from vtc.models.options import DEFAULT_CHUNK_SIZE, DEFAULT_QUERY_IMAGE_ID
from vtc.models.wire import WireFormat


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class GraphicsConfig(BaseModel):
    """Graphics protocol defaults."""

    default_format: WireFormat = Field(
        default=WireFormat.PNG,
        description="Wire format used when none is requested",
    )
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Max base64 characters per frame",
    )
    query_image_id: int = Field(
        default=DEFAULT_QUERY_IMAGE_ID,
        gt=0,
        description="Image id used by the support query",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for vtc.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    graphics: GraphicsConfig = Field(default_factory=GraphicsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None, required: bool = False) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to vtc.yaml. If None, searches common locations.
        required: Fail when config_path does not exist instead of
            falling back to defaults

    Returns:
        Settings: Loaded configuration

    Raises:
        ConfigError: If a required file is missing, unreadable or not YAML
        pydantic.ValidationError: If a file or environment value is invalid
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("vtc.yaml"),
            Path("vtc.yml"),
            Path.home() / ".config" / "vtc" / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break
    elif required and not Path(config_path).is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {config_path}: {e}") from e
        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    # Build settings object
    settings = Settings.model_validate(config_data)

    return settings


def _apply_env_overrides(config_data: dict) -> None:
    """
    Apply environment variable overrides to config data.

    Values stay strings; pydantic coerces and validates them, so a bad
    VTC_CHUNK_SIZE surfaces as a ValidationError like a bad file value.
    """

    # Graphics settings
    if env_format := os.environ.get("VTC_DEFAULT_FORMAT"):
        config_data.setdefault("graphics", {})["default_format"] = env_format
    if env_chunk := os.environ.get("VTC_CHUNK_SIZE"):
        config_data.setdefault("graphics", {})["chunk_size"] = env_chunk
    if env_query_id := os.environ.get("VTC_QUERY_IMAGE_ID"):
        config_data.setdefault("graphics", {})["query_image_id"] = env_query_id

    # Logging settings
    if env_log := os.environ.get("VTC_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_log_format := os.environ.get("VTC_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_log_format


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings. Logs always go to stderr."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
