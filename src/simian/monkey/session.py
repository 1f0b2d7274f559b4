"""
MonkeySession - Monkey Test Harness

TigerStyle: Harness that wires a seeded Monkey to an actuator.
Includes @monkey_test decorator for seeded test functions.
"""

from __future__ import annotations

import functools
import inspect
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, TypeVar

from ..actions.actuator import Actuator, RecordingActuator
from ..actions.gestures import ActionContext, add_alert_action, add_preset_actions
from ..core.models import Preset, RunReport
from .clock import Clock
from .config import MonkeyConfig
from .scheduler import Action, Monkey

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class MonkeyEnvironment:
    """Environment provided to monkey tests.

    TigerStyle: All run resources in one place.
    """

    config: MonkeyConfig
    monkey: Monkey
    actuator: Actuator
    context: ActionContext
    started_at_secs: float = field(default_factory=time.monotonic)

    def report(self) -> RunReport:
        """Summarise the run so far."""
        stats = self.monkey.stats()
        events = self.actuator.stats() if isinstance(self.actuator, RecordingActuator) else {}
        return RunReport(
            seed=self.config.seed,
            frame=self.config.frame,
            ticks=stats["ticks_count"],
            random_actions_count=stats["random_fired_count"],
            regular_actions_count=stats["regular_fired_count"],
            events=events,
            elapsed_secs=time.monotonic() - self.started_at_secs,
        )


@dataclass
class MonkeySession:
    """Monkey test harness.

    TigerStyle:
    - Single seed controls all randomness
    - Actions are registered explicitly, in a fixed order
    - Environment is provided to the test body

    Usage:
        session = MonkeySession(MonkeyConfig.from_env_or_random())
        session.with_preset(Preset.STANDARD).with_alert_action(100)

        with session.run(actuator) as env:
            env.monkey.run(1000)
    """

    config: MonkeyConfig
    _presets: list[tuple[Preset, dict[str, float]]] = field(default_factory=list)
    _weighted: list[tuple[float, Action]] = field(default_factory=list)
    _alert_interval: Optional[int] = None

    def with_preset(self, preset: Preset, **probabilities: float) -> MonkeySession:
        """Register a preset action set when the run starts.

        TigerStyle: Fluent API for action registration.
        """
        self._presets.append((preset, probabilities))
        return self

    def with_action(self, weight: float, action: Action) -> MonkeySession:
        """Register a custom weighted action when the run starts."""
        self._weighted.append((weight, action))
        return self

    def with_alert_action(self, interval: int) -> MonkeySession:
        """Dismiss alerts every `interval` ticks."""
        self._alert_interval = interval
        return self

    @contextmanager
    def run(
        self,
        actuator: Optional[Actuator] = None,
        clock: Optional[Clock] = None,
    ) -> Iterator[MonkeyEnvironment]:
        """Build the monkey and provide the environment.

        TigerStyle: Context manager ensures the seed is always logged.

        Args:
            actuator: Where events go. Defaults to a RecordingActuator.
            clock: Time source for duration-bounded runs.
        """
        actuator = actuator if actuator is not None else RecordingActuator()
        monkey = Monkey(frame=self.config.frame, seed=self.config.seed, clock=clock)
        context = ActionContext(monkey=monkey, actuator=actuator)

        for preset, probabilities in self._presets:
            add_preset_actions(context, preset, **probabilities)
        for weight, action in self._weighted:
            monkey.register_weighted(weight, action)
        if self._alert_interval:
            add_alert_action(context, self._alert_interval)

        env = MonkeyEnvironment(
            config=self.config,
            monkey=monkey,
            actuator=actuator,
            context=context,
        )

        try:
            yield env
        except Exception:
            # Log the seed so the failing run can be replayed
            logger.error(
                f"Monkey run failed after {monkey.tick_counter} ticks "
                f"(replay with SIMIAN_SEED={self.config.seed})"
            )
            raise
        finally:
            logger.info(f"Monkey stats (seed={self.config.seed}): {monkey.stats()}")

    def run_with(self, test_fn: Callable[[MonkeyEnvironment], T]) -> T:
        """Run a test function with the environment.

        Alternative to context manager for simple tests.
        """
        with self.run() as env:
            return test_fn(env)


def monkey_test(
    func: Callable[..., None] | None = None,
    *,
    seed: int | None = None,
    preset: Preset = Preset.NONE,
    alert_interval: int | None = None,
):
    """Decorator for seeded monkey test functions.

    The environment is passed as the first argument when the function's
    first parameter is named env, environment or monkey_env.

    Usage:
        @monkey_test(seed=123, preset=Preset.STANDARD)
        def exercise(env: MonkeyEnvironment):
            env.monkey.run(500)
            assert env.actuator.events

    Note: pytest treats the env parameter as a fixture, so call decorated
    functions from a test instead of collecting them directly.
    """
    def decorator(test_func: Callable[..., None]):
        names = list(inspect.signature(test_func).parameters)
        is_method = bool(names) and names[0] == "self"
        params = names[1:] if is_method else names
        wants_env = bool(params) and params[0] in ("env", "environment", "monkey_env")

        @functools.wraps(test_func)
        def wrapper(*args, **kwargs):
            session = create_session(seed)
            session.with_preset(preset)
            if alert_interval:
                session.with_alert_action(alert_interval)

            with session.run() as env:
                if not wants_env:
                    return test_func(*args, **kwargs)
                # For methods, args[0] is self
                if is_method and args:
                    return test_func(args[0], env, *args[1:], **kwargs)
                return test_func(env, *args, **kwargs)

        return wrapper

    # Handle both @monkey_test and @monkey_test() syntax
    if func is not None:
        return decorator(func)
    return decorator


def create_session(seed: int | None = None) -> MonkeySession:
    """Create a new session with optional explicit seed.

    TigerStyle: Factory function for common case.

    Usage:
        session = create_session()  # Seed from SIMIAN_SEED or the clock
        session = create_session(12345)  # Explicit seed
    """
    if seed is not None:
        config = MonkeyConfig.with_seed(seed)
    else:
        config = MonkeyConfig.from_env_or_random()
    return MonkeySession(config)
