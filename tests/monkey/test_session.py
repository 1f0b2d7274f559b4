"""
Monkey Harness Tests

Tests for MonkeyConfig, SimClock, MonkeySession and the @monkey_test decorator.
"""

import logging

import pytest

from simian.actions import RecordingActuator
from simian.core.errors import ConfigurationError
from simian.core.geometry import Rect
from simian.core.models import ActionKind, Preset, RunReport
from simian.monkey import (
    MonkeyConfig,
    MonkeyEnvironment,
    MonkeySession,
    SimClock,
    create_session,
    monkey_test,
)


# =============================================================================
# MonkeyConfig Tests
# =============================================================================


class TestMonkeyConfig:
    """Tests for MonkeyConfig."""

    def test_explicit_seed(self):
        """Test creating config with explicit seed."""
        config = MonkeyConfig.with_seed(12345)

        assert config.seed == 12345
        assert config.frame == Rect(0, 0, 320, 480)

    def test_explicit_frame(self):
        """Test the frame can be overridden."""
        config = MonkeyConfig.with_seed(1, frame=Rect(0, 0, 768, 1024))

        assert config.frame.width == 768

    def test_seed_from_env(self, monkeypatch):
        """Test SIMIAN_SEED is honoured."""
        monkeypatch.setenv("SIMIAN_SEED", "4242")

        config = MonkeyConfig.from_env_or_random()

        assert config.seed == 4242

    def test_frame_from_env(self, monkeypatch):
        """Test SIMIAN_FRAME_* variables shape the frame."""
        monkeypatch.setenv("SIMIAN_FRAME_WIDTH", "1024")
        monkeypatch.setenv("SIMIAN_FRAME_HEIGHT", "768")

        config = MonkeyConfig.from_env_or_random()

        assert config.frame == Rect(0, 0, 1024, 768)

    def test_random_seed_logged(self, caplog):
        """Test a generated seed is logged with replay instructions."""
        with caplog.at_level(logging.INFO, logger="simian.monkey.config"):
            config = MonkeyConfig.from_env_or_random()

        assert 0 <= config.seed <= 0xFFFFFFFF
        assert f"SIMIAN_SEED={config.seed}" in caplog.text

    @pytest.mark.parametrize("seed", [-1, 2**32])
    def test_invalid_seed_fails(self, seed):
        """Test seeds outside 32 bits are rejected."""
        with pytest.raises(ConfigurationError):
            MonkeyConfig.with_seed(seed)

    def test_empty_frame_fails(self):
        """Test an empty frame is rejected."""
        with pytest.raises(ConfigurationError):
            MonkeyConfig.with_seed(0, frame=Rect(0, 0, 0, 480))


# =============================================================================
# SimClock Tests
# =============================================================================


class TestSimClock:
    """Tests for SimClock."""

    def test_starts_at_epoch(self):
        """Test clock starts at epoch by default."""
        clock = SimClock()

        assert clock.now_ms() == 0
        assert clock.now_secs() == 0.0

    def test_advance(self):
        """Test advancing time in ms and seconds."""
        clock = SimClock(_now_ms=500)

        assert clock.advance_ms(250) == 750
        assert clock.advance_secs(1.5) == 2250
        assert clock.now_secs() == 2.25
        assert clock.advances_count() == 2

    def test_negative_advance_fails(self):
        """Test time cannot go backwards."""
        clock = SimClock()

        with pytest.raises(AssertionError):
            clock.advance_ms(-1)


# =============================================================================
# MonkeySession Tests
# =============================================================================


class TestMonkeySession:
    """Tests for the session harness."""

    def test_standard_preset(self):
        """Test the standard preset registers taps plus five gestures."""
        session = create_session(0).with_preset(Preset.STANDARD)

        with session.run() as env:
            assert env.monkey.total_weight == 30
            assert len(env.monkey.random_actions) == 6

    def test_extended_preset(self):
        """Test the extended preset registers taps plus nine gestures."""
        session = create_session(0).with_preset(Preset.EXTENDED)

        with session.run() as env:
            assert env.monkey.total_weight == 59
            assert len(env.monkey.random_actions) == 10

    def test_none_preset(self):
        """Test Preset.NONE registers nothing."""
        with create_session(0).with_preset(Preset.NONE).run() as env:
            assert env.monkey.random_actions == ()

    def test_custom_action(self):
        """Test custom actions are registered after presets."""
        calls = []
        session = create_session(0).with_action(5, lambda: calls.append(1))

        with session.run() as env:
            env.monkey.run(20)

        assert len(calls) == 20

    def test_alert_action(self):
        """Test alerts are tapped on the interval."""
        actuator = RecordingActuator(alerts=[2, 3])
        session = create_session(0).with_alert_action(10)

        with session.run(actuator) as env:
            env.monkey.run(20)

        taps = [event for event in actuator.events if event.kind == ActionKind.ALERT_BUTTON]
        assert len(taps) == 4
        assert [event.alert_index for event in taps] == [0, 1, 0, 1]
        for event in taps:
            assert 0 <= event.button_index < actuator.alerts[event.alert_index]

    def test_default_actuator_records(self):
        """Test the default actuator is a RecordingActuator."""
        with create_session(1).with_preset(Preset.STANDARD).run() as env:
            env.monkey.run(50)

        assert isinstance(env.actuator, RecordingActuator)
        assert len(env.actuator.events) == 50

    def test_report(self):
        """Test the run report counts ticks and events."""
        session = create_session(9).with_preset(Preset.STANDARD).with_alert_action(10)
        actuator = RecordingActuator(alerts=[1])

        with session.run(actuator) as env:
            env.monkey.run(100)
            report = env.report()

        assert isinstance(report, RunReport)
        assert report.seed == 9
        assert report.ticks == 100
        assert report.random_actions_count == 100
        assert report.regular_actions_count == 10
        assert report.events_count == 110
        assert report.events["alert_button"] == 10

    def test_same_seed_same_events(self):
        """Test two sessions with one seed produce identical events."""
        def record(seed):
            session = create_session(seed).with_preset(Preset.EXTENDED)
            with session.run(clock=SimClock()) as env:
                env.monkey.run(300)
            return env.actuator.events

        assert record(77) == record(77)
        assert record(77) != record(78)

    def test_failure_logs_seed(self, caplog):
        """Test a failing run logs the seed and re-raises."""
        def explode():
            raise RuntimeError("crash")

        session = create_session(31337).with_action(1, explode)

        with caplog.at_level(logging.ERROR, logger="simian.monkey.session"):
            with pytest.raises(RuntimeError):
                with session.run() as env:
                    env.monkey.run(10)

        assert "SIMIAN_SEED=31337" in caplog.text

    def test_run_with(self):
        """Test the callable alternative to the context manager."""
        session = MonkeySession(MonkeyConfig.with_seed(5)).with_preset(Preset.STANDARD)

        ticks = session.run_with(lambda env: (env.monkey.run(15), env.monkey.tick_counter)[1])

        assert ticks == 15

    def test_duration_with_sim_clock(self):
        """Test duration-bounded runs against a simulated clock."""
        clock = SimClock()
        session = create_session(0).with_action(1, lambda: clock.advance_ms(250))

        with session.run(clock=clock) as env:
            env.monkey.run_for(1.0)

        assert env.monkey.tick_counter == 4


# =============================================================================
# Decorator Tests
# =============================================================================


class TestMonkeyTestDecorator:
    """Tests for @monkey_test."""

    def test_env_passed(self):
        """Test the environment is injected as the first argument."""
        seen = {}

        @monkey_test(seed=123, preset=Preset.STANDARD)
        def exercise(env: MonkeyEnvironment):
            env.monkey.run(10)
            seen["seed"] = env.monkey.seed
            seen["events"] = len(env.actuator.events)

        exercise()

        assert seen == {"seed": 123, "events": 10}

    def test_extra_args_forwarded(self):
        """Test arguments after env are passed through."""
        @monkey_test(seed=1)
        def exercise(env, ticks):
            env.monkey.run(ticks)
            return env.monkey.tick_counter

        assert exercise(7) == 7

    def test_without_env(self):
        """Test functions without an env parameter still run."""
        @monkey_test
        def exercise():
            return "ran"

        assert exercise() == "ran"

    def test_method(self):
        """Test methods receive self then env."""
        class Suite:
            @monkey_test(seed=2, alert_interval=5)
            def exercise(self, env):
                return self, env.monkey.regular_actions

        suite = Suite()
        instance, regular = suite.exercise()

        assert instance is suite
        assert len(regular) == 1

    def test_preserves_name(self):
        """Test functools.wraps keeps the name."""
        @monkey_test(seed=0)
        def exercise_login(env):
            pass

        assert exercise_login.__name__ == "exercise_login"
