"""Configuration loading.

Settings come from the packaged defaults.yaml, optionally overlaid with a
user YAML file, and are validated with pydantic.
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.twilight import Precision
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"


class LocationConfig(BaseModel):
    """Default observer position, used when a request names none."""
    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
    accuracy: Optional[float] = Field(default=None, ge=0)  # metres


class ServerConfig(BaseModel):
    """HTTP server binding."""
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)


class TwilightConfig(BaseModel):
    """Top-level configuration."""
    location: Optional[LocationConfig] = None
    precision: Precision = Precision.DOUBLE
    time_format: str = "%H:%M"
    log_level: str = "INFO"
    location_timeout: float = Field(default=10.0, gt=0)
    server: ServerConfig = Field(default_factory=ServerConfig)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read configuration file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> TwilightConfig:
    """Load configuration.

    Args:
        path: Optional user configuration file merged over the defaults

    Returns:
        Validated TwilightConfig

    Raises:
        ConfigError: If a file cannot be read or a value is invalid
    """
    data = _read_yaml(DEFAULTS_PATH)
    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        data = _merge(data, _read_yaml(Path(path)))

    try:
        return TwilightConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
