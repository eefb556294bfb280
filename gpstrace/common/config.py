"""
Trace Configuration Loader

Loads the trace YAML configuration (config/trace.yml by default) and
validates it into a TraceConfig.

Resolution order for the configuration file:
1. explicit `path` argument
2. GPSTRACE_CONFIG environment variable
3. config/trace.yml

GPSTRACE_LOG_LEVEL, when set, overrides the file's log_level.
"""

from typing import Any, Dict, Optional
from pathlib import Path
import logging

import yaml
from pydantic import BaseModel, Field, field_validator

from gpstrace.core.trace.models import GeodeticSample
from gpstrace.utils.constants import (
    EARTH_RADIUS_M,
    DEFAULT_LOG_LEVEL,
    DEFAULT_CONFIG_PATH,
    CONFIG_PATH_ENV,
    LOG_LEVEL_ENV,
    MIN_LATITUDE_DEG,
    MAX_LATITUDE_DEG,
    MIN_LONGITUDE_DEG,
    MAX_LONGITUDE_DEG,
)
from gpstrace.utils.env import env_optional_str

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class OriginConfig(BaseModel):
    """
    Fixed reference point for a trace's coordinate system.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
    """
    lat: float = Field(..., ge=MIN_LATITUDE_DEG, le=MAX_LATITUDE_DEG, description="Latitude (deg)")
    lon: float = Field(..., ge=MIN_LONGITUDE_DEG, le=MAX_LONGITUDE_DEG, description="Longitude (deg)")

    def as_sample(self) -> GeodeticSample:
        return GeodeticSample(lat=self.lat, lon=self.lon)


class TraceConfig(BaseModel):
    """
    Trace loading configuration.

    Attributes:
        origin: Optional fixed reference; when None the first track point is used
        earth_radius_m: Sphere radius used by the projection (metres)
        log_level: Logging level name for the command line tool
    """
    origin: Optional[OriginConfig] = Field(default=None, description="Fixed reference point")
    earth_radius_m: float = Field(default=EARTH_RADIUS_M, gt=0, description="Earth radius in metres")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to upper case and reject unknown names."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Must be one of: {sorted(_LOG_LEVELS)}")
        return level


def resolve_config_path(path: Optional[str] = None) -> Path:
    """Pick the configuration file path from the argument, environment or default."""
    if path:
        return Path(path)
    env_path = env_optional_str(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_PATH)


def load_trace_config(path: Optional[str] = None) -> TraceConfig:
    """
    Load and validate the trace configuration.

    Args:
        path: Optional configuration file path

    Returns:
        TraceConfig

    Raises:
        FileNotFoundError: If the configuration file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If a value is out of range
    """
    config_path = resolve_config_path(path)
    logger.debug(f"Loading trace config from: {config_path.absolute()}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"Trace config not found at {config_path}. "
            f"Pass --config or set {CONFIG_PATH_ENV}."
        )

    with config_path.open("r", encoding="utf-8") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Trace config {config_path} must be a mapping, got {type(raw).__name__}")

    env_level = env_optional_str(LOG_LEVEL_ENV)
    if env_level:
        raw["log_level"] = env_level

    config = TraceConfig(**raw)
    logger.info(f"Loaded trace config from {config_path} (origin={config.origin})")
    return config
