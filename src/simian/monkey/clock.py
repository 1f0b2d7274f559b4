"""
Clocks - Time Sources for Duration-Bounded Runs

TigerStyle: Time is explicit and swappable.
WallClock measures real elapsed time; SimClock only moves when told to,
so duration-bounded runs can be tested without sleeping.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..core.constants import TIME_ADVANCE_MS_MAX, TIME_EPOCH_MS


@runtime_checkable
class Clock(Protocol):
    """Protocol for time sources used by the scheduler."""

    def now_secs(self) -> float:
        """Get the current time in seconds. Only differences are meaningful."""
        ...


class WallClock:
    """Monotonic wall clock."""

    def now_secs(self) -> float:
        return time.monotonic()


@dataclass
class SimClock:
    """Manually driven clock for duration-bounded runs in tests.

    TigerStyle: Integer milliseconds, forward only, every step counted.
    A test action that calls advance_ms() stands in for the time an
    injected gesture would take on a device.
    """

    _now_ms: int = field(default=TIME_EPOCH_MS)
    _advances_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        assert self._now_ms >= 0, f"start time ({self._now_ms}ms) must be non-negative"

    def now_ms(self) -> int:
        return self._now_ms

    def now_secs(self) -> float:
        return self._now_ms / 1000.0

    def advance_ms(self, delta_ms: int) -> int:
        """Move the clock forward.

        Args:
            delta_ms: Step size, 0 to TIME_ADVANCE_MS_MAX.

        Returns:
            The time after the step, in milliseconds.
        """
        assert 0 <= delta_ms <= TIME_ADVANCE_MS_MAX, \
            f"step ({delta_ms}ms) must be in [0, {TIME_ADVANCE_MS_MAX}]ms"

        self._now_ms += delta_ms
        self._advances_count += 1
        return self._now_ms

    def advance_secs(self, delta_secs: float) -> int:
        """Move the clock forward by seconds, truncated to whole milliseconds."""
        return self.advance_ms(int(delta_secs * 1000))

    def advances_count(self) -> int:
        return self._advances_count
