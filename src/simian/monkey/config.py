"""
MonkeyConfig - Run Configuration

TigerStyle: Explicit configuration, seed from environment for reproducibility.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.config import Settings
from ..core.constants import (
    FRAME_HEIGHT_DEFAULT,
    FRAME_WIDTH_DEFAULT,
    FRAME_X_DEFAULT,
    FRAME_Y_DEFAULT,
    PCG_SEED_MAX,
)
from ..core.errors import ConfigurationError
from ..core.geometry import Rect
from .scheduler import seed_from_time

logger = logging.getLogger(__name__)


def _default_frame() -> Rect:
    return Rect(FRAME_X_DEFAULT, FRAME_Y_DEFAULT, FRAME_WIDTH_DEFAULT, FRAME_HEIGHT_DEFAULT)


@dataclass(frozen=True)
class MonkeyConfig:
    """Configuration for one monkey run.

    TigerStyle: All configuration is explicit. Seeds are always logged.
    """

    # Seed for deterministic randomness
    seed: int

    # Frame events are generated in
    frame: Rect = field(default_factory=_default_frame)

    @classmethod
    def from_env_or_random(cls, settings: Optional[Settings] = None) -> MonkeyConfig:
        """Create config from SIMIAN_SEED or generate a seed from the clock.

        TigerStyle: Always log the seed for reproducibility.
        Replay any run by setting SIMIAN_SEED=<seed>.

        Args:
            settings: Settings to read. Defaults to a fresh read of the
                environment, so changes to SIMIAN_* variables are seen.
        """
        settings = settings if settings is not None else Settings()

        if settings.seed is not None:
            seed = settings.seed
            logger.info(f"Using seed from environment: {seed}")
        else:
            seed = seed_from_time()
            logger.info(f"Generated seed (replay with SIMIAN_SEED={seed})")

        return cls(seed=seed, frame=settings.frame)

    @classmethod
    def with_seed(cls, seed: int, frame: Optional[Rect] = None) -> MonkeyConfig:
        """Create config with explicit seed.

        Args:
            seed: The deterministic seed to use.
            frame: Frame to generate events in. Defaults to 320x480 at the origin.
        """
        return cls(seed=seed, frame=frame if frame is not None else _default_frame())

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not 0 <= self.seed <= PCG_SEED_MAX:
            raise ConfigurationError(f"seed ({self.seed}) must be an unsigned 32-bit value")
        if self.frame.width <= 0 or self.frame.height <= 0:
            raise ConfigurationError(
                f"frame must not be empty (got {self.frame.width}x{self.frame.height})"
            )
