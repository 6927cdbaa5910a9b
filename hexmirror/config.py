"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexmirror.errors import ConfigurationError


class Settings(BaseSettings):
    hexmirror_env: str = "development"
    hexmirror_log_level: str = "info"

    # Capture / display
    camera_index: int = 0
    window_name: str = "hexmirror"
    wait_key_ms: int = 10
    empty_frame_backoff_s: float = 0.05
    max_empty_frames: int = 100

    # Mosaic
    radius: int = 64
    mirror: bool = True
    background: tuple[float, float, float, float] = (192.0, 192.0, 192.0, 0.0)
    boot_animation: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("radius")
    @classmethod
    def _radius_positive(cls, v: int) -> int:
        # Geometry below is undefined for r <= 0
        if v <= 0:
            raise ValueError(f"radius must be positive, got {v}")
        return v

    @field_validator("wait_key_ms", "max_empty_frames")
    @classmethod
    def _strictly_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"must be positive, got {v}")
        return v

    @field_validator("empty_frame_backoff_s")
    @classmethod
    def _non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"must not be negative, got {v}")
        return v


def build_settings(**overrides: Any) -> Settings:
    """Load settings from the environment, apply overrides, and validate.

    Overrides whose value is ``None`` are ignored so CLI flags that were not
    given fall through to the environment.

    Raises:
        ConfigurationError: if any field fails validation.
    """
    updates = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**updates)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
