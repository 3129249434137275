"""
Configuration for the BlurHash encoder.

Defaults can be overridden through environment variables prefixed with
``BLURHASH_``, e.g. ``BLURHASH_COMPONENTS_X=5``.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9


class EncoderSettings(BaseSettings):
    """Encoder defaults."""

    components_x: int = Field(
        default=4,
        ge=MIN_COMPONENTS,
        le=MAX_COMPONENTS,
        description="Default number of horizontal components",
    )
    components_y: int = Field(
        default=3,
        ge=MIN_COMPONENTS,
        le=MAX_COMPONENTS,
        description="Default number of vertical components",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(env_prefix="BLURHASH_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


@lru_cache()
def get_settings() -> EncoderSettings:
    """
    Get cached settings instance.

    Returns:
        EncoderSettings object with validated configuration
    """
    settings = EncoderSettings()
    logger.debug(
        "Loaded encoder settings: %dx%d components, log level %s",
        settings.components_x,
        settings.components_y,
        settings.log_level,
    )
    return settings


def reload_settings() -> EncoderSettings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh EncoderSettings object
    """
    get_settings.cache_clear()
    return get_settings()
