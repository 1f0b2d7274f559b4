"""
Simian Monkey - Seedable Action Scheduler

Weighted-random and fixed-interval action dispatch driven by a PCG PRNG.

Usage:
    from simian.monkey import Monkey, Rect

    monkey = Monkey(frame=Rect(0, 0, 320, 480), seed=0)
    monkey.register_weighted(25, tap)
    monkey.register_interval(100, dismiss_alerts)
    monkey.run(1000)

Or through the harness:
    with create_session(seed=0).with_preset(Preset.STANDARD).run() as env:
        env.monkey.run(1000)

Run with seed:
    SIMIAN_SEED=12345 pytest tests/
"""

from ..core.geometry import Point, Rect, rect_around
from .clock import Clock, SimClock, WallClock
from .config import MonkeyConfig
from .rng import PcgRandom
from .scheduler import IntervalAction, Monkey, WeightedAction, seed_from_time
from .session import MonkeyEnvironment, MonkeySession, create_session, monkey_test

__all__ = [
    # Config
    "MonkeyConfig",
    # Primitives
    "PcgRandom",
    "Clock",
    "SimClock",
    "WallClock",
    "Point",
    "Rect",
    "rect_around",
    # Scheduler
    "Monkey",
    "WeightedAction",
    "IntervalAction",
    "seed_from_time",
    # Session
    "MonkeySession",
    "MonkeyEnvironment",
    "monkey_test",
    "create_session",
]
