"""
Simian Configuration

Loads configuration from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simian.core.constants import (
    ACTUATOR_ACK_TIMEOUT_SECS_DEFAULT,
    ALERT_INTERVAL_TICKS_DEFAULT,
    FRAME_HEIGHT_DEFAULT,
    FRAME_WIDTH_DEFAULT,
    FRAME_X_DEFAULT,
    FRAME_Y_DEFAULT,
    GESTURE_LONG_PRESS_PROBABILITY_DEFAULT,
    GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
    PCG_SEED_MAX,
)
from simian.core.geometry import Rect
from simian.core.models import Preset


class Settings(BaseSettings):
    """Simian settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIMIAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Seed: unset means derive one from the wall clock (non-reproducible)
    seed: int | None = Field(default=None, ge=0, le=PCG_SEED_MAX)

    # Frame the events are generated in (device screen, in points)
    frame_x: float = FRAME_X_DEFAULT
    frame_y: float = FRAME_Y_DEFAULT
    frame_width: float = Field(default=FRAME_WIDTH_DEFAULT, gt=0)
    frame_height: float = Field(default=FRAME_HEIGHT_DEFAULT, gt=0)

    # Run bounds: iterations wins over duration, neither means run forever
    iterations: int | None = Field(default=None, ge=1)
    duration_secs: float | None = Field(default=None, ge=0)

    # Actions
    preset: Preset = Preset.STANDARD
    alert_interval: int = Field(default=ALERT_INTERVAL_TICKS_DEFAULT, ge=0)  # 0 disables
    multiple_tap_probability: float = Field(
        default=GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT, ge=0, le=1
    )
    multiple_touch_probability: float = Field(
        default=GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT, ge=0, le=1
    )
    long_press_probability: float = Field(
        default=GESTURE_LONG_PRESS_PROBABILITY_DEFAULT, ge=0, le=1
    )

    # Actuator
    actuator_timeout_secs: float = Field(default=ACTUATOR_ACK_TIMEOUT_SECS_DEFAULT, gt=0)

    # Logging
    log_level: str = "INFO"

    @property
    def frame(self) -> Rect:
        """The configured frame as a Rect."""
        return Rect(self.frame_x, self.frame_y, self.frame_width, self.frame_height)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
