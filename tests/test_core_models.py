"""
Tests for Simian core data models.

Tests Pydantic model validation, serialization, and enum types.
"""

import pytest
from pydantic import ValidationError

from simian.core.geometry import Point, Rect
from simian.core.models import (
    ActionKind,
    ActuatorEvent,
    Orientation,
    Preset,
    RunReport,
)


class TestEnums:
    """Test enum values."""

    def test_orientation_values(self):
        """Test Orientation enum values."""
        assert Orientation.PORTRAIT == "portrait"
        assert Orientation.LANDSCAPE_LEFT == "landscape_left"
        assert len(Orientation) == 6

    def test_action_kind_values(self):
        """Test ActionKind enum values."""
        assert ActionKind.TAP == "tap"
        assert ActionKind.ALERT_BUTTON == "alert_button"

    def test_preset_from_string(self):
        """Test presets parse from their values."""
        assert Preset("extended") is Preset.EXTENDED
        assert Preset("none") is Preset.NONE


class TestActuatorEvent:
    """Test ActuatorEvent model."""

    def test_defaults(self):
        """Test only kind is required."""
        event = ActuatorEvent(kind=ActionKind.SHAKE)

        assert event.points == []
        assert event.rect is None
        assert event.taps == 1
        assert event.duration_secs == 0.0
        assert event.orientation is None

    def test_kind_from_string(self):
        """Test kinds coerce from their string values."""
        event = ActuatorEvent(kind="drag", points=[Point(1, 2), Point(3, 4)])

        assert event.kind is ActionKind.DRAG
        assert event.points[1] == Point(3, 4)

    def test_invalid_kind(self):
        """Test unknown kinds are rejected."""
        with pytest.raises(ValidationError):
            ActuatorEvent(kind="teleport")

    def test_serialization(self):
        """Test events dump to plain data."""
        event = ActuatorEvent(
            kind=ActionKind.PINCH,
            rect=Rect(0, 0, 160, 160),
            scale=0.5,
            velocity=1.0,
            orientation=Orientation.FACE_UP,
        )

        data = event.model_dump(mode="json")

        assert data["kind"] == "pinch"
        assert data["rect"] == {"x": 0, "y": 0, "width": 160, "height": 160}
        assert data["orientation"] == "face_up"

    def test_equality(self):
        """Test events compare by value."""
        first = ActuatorEvent(kind=ActionKind.TAP, points=[Point(5, 5)])
        second = ActuatorEvent(kind=ActionKind.TAP, points=[Point(5, 5)])

        assert first == second


class TestRunReport:
    """Test RunReport model."""

    def test_events_count(self):
        """Test the event total sums every kind."""
        report = RunReport(
            seed=1,
            frame=Rect(0, 0, 320, 480),
            ticks=10,
            events={"tap": 8, "drag": 2, "alert_button": 1},
        )

        assert report.events_count == 11

    def test_empty_report(self):
        """Test defaults."""
        report = RunReport(seed=0, frame=Rect(0, 0, 1, 1))

        assert report.ticks == 0
        assert report.events == {}
        assert report.events_count == 0
