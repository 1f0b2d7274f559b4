"""
Monkey - Weighted and Fixed-Interval Action Scheduler

TigerStyle: One seed, one PRNG, one loop.
Each tick fires exactly one weighted action (chosen with probability
weight / total_weight) and then every interval action that is due.
Actions are zero-argument callables; whatever they raise ends the run.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional

from ..core.constants import (
    GEOMETRY_PANEL_BOTTOM_HEIGHT,
    GEOMETRY_PANEL_TOP_HEIGHT,
    GEOMETRY_SIZE_FRACTION_DEFAULT,
    MONKEY_DURATION_SECS_UNBOUNDED,
    MONKEY_ITERATIONS_MIN,
    PCG_SEED_MAX,
)
from ..core.errors import ConfigurationError
from ..core.geometry import Point, Rect, rect_around
from .clock import Clock, WallClock
from .rng import PcgRandom

logger = logging.getLogger(__name__)

Action = Callable[[], None]


@dataclass(frozen=True)
class WeightedAction:
    """A random action and the upper bound of its slice of the weight line."""

    cumulative_weight: float
    action: Action


@dataclass(frozen=True)
class IntervalAction:
    """An action fired whenever the tick counter is a multiple of interval."""

    interval: int
    action: Action


def seed_from_time() -> int:
    """Derive a 32-bit seed from the wall clock in milliseconds."""
    return int(time.time() * 1000) & PCG_SEED_MAX


class Monkey:
    """Randomised UI test scheduler.

    Register actions, then drive the loop with run(), run_for() or
    run_forever(). Actions draw their coordinates from the random_* helpers
    so a fixed seed reproduces the whole event stream.

    Usage:
        monkey = Monkey(frame=Rect(0, 0, 320, 480), seed=123)
        monkey.register_weighted(25, tap)
        monkey.register_weighted(1, drag)
        monkey.register_interval(100, dismiss_alerts)
        monkey.run(1000)
    """

    def __init__(
        self,
        frame: Rect,
        seed: Optional[int] = None,
        clock: Optional[Clock] = None,
    ):
        """Create a scheduler.

        Args:
            frame: The frame to generate events in, usually the device screen.
            seed: Unsigned 32-bit seed. None derives one from the wall clock,
                giving a different event stream on each run.
            clock: Time source for run_for(). Defaults to the wall clock.

        Raises:
            ConfigurationError: If seed is not an unsigned 32-bit int.
        """
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, int):
                raise ConfigurationError(f"seed must be an int (got {seed!r})")
            if not 0 <= seed <= PCG_SEED_MAX:
                raise ConfigurationError(f"seed ({seed}) must be in [0, {PCG_SEED_MAX}]")

        if seed is None:
            seed = seed_from_time()
            logger.info(f"Monkey seeded from clock: {seed} (pass seed={seed} to replay)")
        else:
            logger.info(f"Monkey seeded with: {seed}")

        self._rng = PcgRandom(_seed=seed)
        self._frame = frame
        self._clock = clock if clock is not None else WallClock()

        self._random_actions: list[WeightedAction] = []
        self._total_weight: float = 0.0

        self._regular_actions: list[IntervalAction] = []
        self._tick_counter: int = 0

        # Statistics
        self._random_fired_count: int = 0
        self._regular_fired_count: int = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def seed(self) -> int:
        return self._rng.seed

    @property
    def frame(self) -> Rect:
        return self._frame

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def total_weight(self) -> float:
        return self._total_weight

    @property
    def tick_counter(self) -> int:
        return self._tick_counter

    @property
    def random_actions(self) -> tuple[WeightedAction, ...]:
        return tuple(self._random_actions)

    @property
    def regular_actions(self) -> tuple[IntervalAction, ...]:
        return tuple(self._regular_actions)

    # =========================================================================
    # Registration
    # =========================================================================

    def register_weighted(self, weight: float, action: Action) -> None:
        """Add an action for generating randomised events.

        Args:
            weight: Relative probability of this action. Any finite value
                above zero; probabilities are normalised to the sum of all
                weights at draw time.
            action: Callable run when this action is chosen.

        Raises:
            ConfigurationError: If weight is not a finite positive number.
        """
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise ConfigurationError(f"weight must be a number (got {weight!r})")
        if not (math.isfinite(weight) and weight > 0):
            raise ConfigurationError(f"weight ({weight}) must be finite and > 0")
        if not callable(action):
            raise ConfigurationError(f"action must be callable (got {action!r})")

        self._total_weight += float(weight)
        self._random_actions.append(
            WeightedAction(cumulative_weight=self._total_weight, action=action)
        )

    def register_interval(self, interval: int, action: Action) -> None:
        """Add an action for fixed-interval events.

        Args:
            interval: Fire this action every `interval` ticks. Must be > 0.
            action: Callable run when the interval elapses.

        Raises:
            ConfigurationError: If interval is not a positive integer.
        """
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ConfigurationError(f"interval must be an int (got {interval!r})")
        if interval <= 0:
            raise ConfigurationError(f"interval ({interval}) must be > 0")
        if not callable(action):
            raise ConfigurationError(f"action must be callable (got {action!r})")

        self._regular_actions.append(IntervalAction(interval=interval, action=action))

    # =========================================================================
    # Dispatch
    # =========================================================================

    def act_randomly(self) -> Optional[Action]:
        """Fire one weighted action.

        Returns:
            The action that fired, or None when nothing is registered.
            The PRNG is not advanced in that case.
        """
        if not self._random_actions:
            return None

        x = self._rng.double_in_unit_interval() * self._total_weight
        for entry in self._random_actions:
            if x < entry.cumulative_weight:
                self._random_fired_count += 1
                entry.action()
                return entry.action

        # Unreachable: x < total_weight == last cumulative weight
        raise AssertionError(f"draw {x} fell outside total weight {self._total_weight}")

    def act_regularly(self) -> list[Action]:
        """Advance the tick counter and fire every interval action that is due.

        All due actions fire, in registration order, so colliding intervals
        never starve each other.

        Returns:
            The actions that fired.
        """
        self._tick_counter += 1

        fired: list[Action] = []
        for entry in self._regular_actions:
            if self._tick_counter % entry.interval == 0:
                self._regular_fired_count += 1
                entry.action()
                fired.append(entry.action)
        return fired

    def tick(self) -> None:
        """Run one iteration: a weighted draw, then the interval check."""
        self.act_randomly()
        self.act_regularly()

    # =========================================================================
    # Run Loops
    # =========================================================================

    def run(self, iterations: int) -> None:
        """Generate a fixed number of ticks.

        Args:
            iterations: Number of ticks. Interval actions fired during these
                ticks are not counted separately.

        Raises:
            ConfigurationError: If iterations is not an int >= 1.
        """
        if isinstance(iterations, bool) or not isinstance(iterations, int):
            raise ConfigurationError(f"iterations must be an int (got {iterations!r})")
        if iterations < MONKEY_ITERATIONS_MIN:
            raise ConfigurationError(
                f"iterations ({iterations}) must be >= {MONKEY_ITERATIONS_MIN}"
            )

        logger.debug(f"Running {iterations} ticks (seed={self.seed})")
        for _ in range(iterations):
            self.tick()

    def run_for(self, duration_secs: float = MONKEY_DURATION_SECS_UNBOUNDED) -> None:
        """Generate ticks until the clock shows duration_secs elapsed.

        Elapsed time is checked after each tick, so at least one tick runs.

        Raises:
            ConfigurationError: If duration_secs is negative or NaN.
        """
        if not duration_secs >= 0:
            raise ConfigurationError(f"duration_secs ({duration_secs}) must be >= 0")

        logger.debug(f"Running for {duration_secs}s (seed={self.seed})")
        start = self._clock.now_secs()
        while True:
            self.tick()
            if self._clock.now_secs() - start >= duration_secs:
                break

    def run_forever(self) -> None:
        """Generate ticks until an action raises or the process ends."""
        logger.debug(f"Running until stopped (seed={self.seed})")
        while True:
            self.tick()

    # =========================================================================
    # Scalar Draws
    # =========================================================================

    def random_uint32(self) -> int:
        """Generate a raw 32-bit value."""
        return self._rng.next_uint32()

    def random_double(self) -> float:
        """Generate a float in [0, 1)."""
        return self._rng.double_in_unit_interval()

    def random_int(self, less_than: int) -> int:
        """Generate an int in [0, less_than)."""
        return self._rng.int_less_than(less_than)

    def random_uint(self, less_than: int) -> int:
        """Generate a non-negative int in [0, less_than)."""
        return self._rng.uint_less_than(less_than)

    def random_fraction(self, less_than: float = 1.0) -> float:
        """Generate a float in [0, less_than)."""
        return self._rng.double_less_than(less_than)

    # =========================================================================
    # Geometry Draws
    # =========================================================================

    def random_point(self, in_rect: Optional[Rect] = None) -> Point:
        """Generate a point inside the given rect, or inside the frame."""
        rect = in_rect if in_rect is not None else self._frame
        x = rect.x + self.random_fraction(rect.width)
        y = rect.y + self.random_fraction(rect.height)
        return Point(x, y)

    def random_point_avoiding_panel_areas(self) -> Point:
        """Generate a point in the frame, outside the strips at the top and
        bottom of the screen that pull out system panels."""
        return self.random_point(
            self._frame.inset(top=GEOMETRY_PANEL_TOP_HEIGHT, bottom=GEOMETRY_PANEL_BOTTOM_HEIGHT)
        )

    def random_rect(self, size_fraction: float = GEOMETRY_SIZE_FRACTION_DEFAULT) -> Rect:
        """Generate a square inside the frame around a random point.

        Args:
            size_fraction: Side is min(frame width, frame height) / size_fraction.
        """
        return rect_around(self.random_point(), self._frame, size_fraction)

    def random_clustered_points(self, count: int) -> list[Point]:
        """Generate a loose cluster of points, e.g. for multi-finger touches.

        The first point is the cluster centre; the rest are uniform inside a
        rect around it.

        Raises:
            ConfigurationError: If count is not an int >= 1.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise ConfigurationError(f"count must be an int (got {count!r})")
        if count < 1:
            raise ConfigurationError(f"count ({count}) must be >= 1")

        centre = self.random_point()
        cluster = rect_around(centre, self._frame)

        points = [centre]
        for _ in range(count - 1):
            points.append(self.random_point(cluster))
        return points

    # =========================================================================
    # Statistics
    # =========================================================================

    def stats(self) -> dict[str, float]:
        """Get scheduler statistics.

        TigerStyle: Explicit stats for debugging.
        """
        return {
            "ticks_count": self._tick_counter,
            "random_fired_count": self._random_fired_count,
            "regular_fired_count": self._regular_fired_count,
            "random_actions_count": len(self._random_actions),
            "regular_actions_count": len(self._regular_actions),
            "total_weight": self._total_weight,
            "draws_count": self._rng.draws_count(),
        }
