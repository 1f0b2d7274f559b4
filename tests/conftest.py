"""
Shared test fixtures for the Simian test suite.

Provides fixtures for:
- Frames and seeded monkeys
- Recording actuators and action contexts
- A clean SIMIAN_* environment
"""

import pytest

from simian.actions import ActionContext, RecordingActuator
from simian.core.config import get_settings
from simian.core.geometry import Rect
from simian.monkey import Monkey, SimClock


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from SIMIAN_* variables and any .env file."""
    import os

    for name in list(os.environ):
        if name.startswith("SIMIAN_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Monkey Fixtures
# =============================================================================


@pytest.fixture
def frame() -> Rect:
    """Phone-sized frame at the origin."""
    return Rect(0, 0, 320, 480)


@pytest.fixture
def clock() -> SimClock:
    """Simulated clock starting at epoch."""
    return SimClock()


@pytest.fixture
def monkey(frame, clock) -> Monkey:
    """Monkey with seed 0 and a simulated clock."""
    return Monkey(frame=frame, seed=0, clock=clock)


@pytest.fixture
def actuator() -> RecordingActuator:
    """Actuator that records events in memory."""
    return RecordingActuator()


@pytest.fixture
def ctx(monkey, actuator) -> ActionContext:
    """Action context over the seeded monkey and recording actuator."""
    return ActionContext(monkey=monkey, actuator=actuator)
