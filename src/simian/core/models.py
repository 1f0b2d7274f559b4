"""
Simian Core Data Models

These models define the data exchanged between gestures and actuators:
- Enums: device orientations, action kinds, presets
- Events: abstract input events handed to an actuator
- Reports: summaries of a finished monkey run
"""

from enum import Enum

from pydantic import BaseModel, Field

from simian.core.geometry import Point, Rect


# =============================================================================
# Enums
# =============================================================================


class Orientation(str, Enum):
    """Physical device orientations."""

    PORTRAIT = "portrait"
    PORTRAIT_UPSIDE_DOWN = "portrait_upside_down"
    LANDSCAPE_LEFT = "landscape_left"
    LANDSCAPE_RIGHT = "landscape_right"
    FACE_UP = "face_up"
    FACE_DOWN = "face_down"


class ActionKind(str, Enum):
    """Kinds of abstract events a gesture can emit."""

    TAP = "tap"
    LONG_PRESS = "long_press"
    DRAG = "drag"
    FLICK = "flick"
    PINCH = "pinch"
    ROTATE = "rotate"
    ORIENTATION = "orientation"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    SHAKE = "shake"
    LOCK = "lock"
    ALERT_BUTTON = "alert_button"


class Preset(str, Enum):
    """Named default action sets."""

    STANDARD = "standard"  # Touch gestures only
    EXTENDED = "extended"  # Touch plus hardware buttons and device motion
    NONE = "none"  # Register nothing


# =============================================================================
# Event Models
# =============================================================================


class ActuatorEvent(BaseModel):
    """One abstract input event.

    Only the fields relevant to the kind are set: a tap has points and taps,
    a pinch has rect, scale and velocity, and so on.
    """

    kind: ActionKind
    points: list[Point] = Field(default_factory=list)
    rect: Rect | None = None
    taps: int = 1
    duration_secs: float = 0.0
    scale: float | None = None
    velocity: float | None = None
    angle: float | None = None
    orientation: Orientation | None = None
    alert_index: int | None = None
    button_index: int | None = None


# =============================================================================
# Report Models
# =============================================================================


class RunReport(BaseModel):
    """Summary of a monkey run."""

    seed: int
    frame: Rect
    ticks: int = 0
    random_actions_count: int = 0
    regular_actions_count: int = 0
    events: dict[str, int] = Field(default_factory=dict)
    elapsed_secs: float = 0.0

    @property
    def events_count(self) -> int:
        return sum(self.events.values())
