"""
Gestures - Random Actions for a Monkey

Each gesture is a plain function of an ActionContext: it draws whatever it
needs from the context's monkey and hands one ActuatorEvent to the context's
actuator. The add_*_action helpers bind a gesture to its context with
functools.partial and register it, so registered actions hold no hidden
references.

Draw order inside each gesture is part of the reproducibility contract:
changing it changes every recorded run for a given seed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

from ..core.constants import (
    GESTURE_DRAG_VELOCITY,
    GESTURE_FLICK_DURATION_SECS,
    GESTURE_LOCK_DURATION_SECS_MAX,
    GESTURE_LONG_PRESS_DURATION_SECS,
    GESTURE_LONG_PRESS_PROBABILITY_DEFAULT,
    GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
    GESTURE_ORIENTATION_SETTLE_SECS,
    GESTURE_PINCH_CLOSE_VELOCITY,
    GESTURE_PINCH_OPEN_VELOCITY,
    GESTURE_PINCH_SCALE_RANGE,
    GESTURE_PINCH_SIZE_FRACTION,
    GESTURE_ROTATE_VELOCITY,
    PRESET_EXTENDED_TAP_WEIGHT,
    PRESET_GESTURE_WEIGHT,
    PRESET_STANDARD_TAP_WEIGHT,
)
from ..core.errors import ActuatorError, ConfigurationError
from ..core.models import ActionKind, ActuatorEvent, Orientation, Preset
from .actuator import Actuator

if TYPE_CHECKING:
    from ..monkey.scheduler import Monkey

logger = logging.getLogger(__name__)

ORIENTATIONS: tuple[Orientation, ...] = (
    Orientation.PORTRAIT,
    Orientation.PORTRAIT_UPSIDE_DOWN,
    Orientation.LANDSCAPE_LEFT,
    Orientation.LANDSCAPE_RIGHT,
    Orientation.FACE_UP,
    Orientation.FACE_DOWN,
)


@dataclass
class DeviceState:
    """Device state shared by the gestures of one context."""

    orientation: Orientation = Orientation.PORTRAIT


@dataclass
class ActionContext:
    """Everything a gesture needs: where to draw randomness, where to send
    events, and the device state they read and update."""

    monkey: Monkey
    actuator: Actuator
    device: DeviceState = field(default_factory=DeviceState)


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} ({value}) must be in [0, 1]")


# =============================================================================
# Touch Gestures
# =============================================================================


def tap(
    ctx: ActionContext,
    multiple_tap_probability: float = GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    multiple_touch_probability: float = GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
    long_press_probability: float = 0.0,
) -> None:
    """Tap, occasionally several times, with several fingers, or held down."""
    monkey = ctx.monkey

    taps = 1
    if monkey.random_double() < multiple_tap_probability:
        taps = monkey.random_uint32() % 2 + 2

    if monkey.random_double() < multiple_touch_probability:
        touches = monkey.random_uint32() % 3 + 2
        rect = monkey.random_rect()
        points = [monkey.random_point(rect) for _ in range(touches)]
    else:
        points = [monkey.random_point()]

    duration_secs = 0.0
    if long_press_probability > 0 and monkey.random_double() < long_press_probability:
        duration_secs = GESTURE_LONG_PRESS_DURATION_SECS

    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.TAP,
        points=points,
        taps=taps,
        duration_secs=duration_secs,
        orientation=ctx.device.orientation,
    ))


def single_tap(ctx: ActionContext) -> None:
    """Tap once with one finger."""
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.TAP,
        points=[ctx.monkey.random_point()],
        orientation=ctx.device.orientation,
    ))


def long_press(ctx: ActionContext) -> None:
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.LONG_PRESS,
        points=[ctx.monkey.random_point()],
        duration_secs=GESTURE_LONG_PRESS_DURATION_SECS,
        orientation=ctx.device.orientation,
    ))


def drag(ctx: ActionContext) -> None:
    """Drag between two random points, starting clear of the panel strips."""
    start = ctx.monkey.random_point_avoiding_panel_areas()
    end = ctx.monkey.random_point()
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.DRAG,
        points=[start, end],
        velocity=GESTURE_DRAG_VELOCITY,
        orientation=ctx.device.orientation,
    ))


def flick(ctx: ActionContext) -> None:
    start = ctx.monkey.random_point_avoiding_panel_areas()
    end = ctx.monkey.random_point()
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.FLICK,
        points=[start, end],
        duration_secs=GESTURE_FLICK_DURATION_SECS,
        orientation=ctx.device.orientation,
    ))


def pinch_close(ctx: ActionContext) -> None:
    """Pinch inwards to a scale in (1/5, 1]."""
    rect = ctx.monkey.random_rect(GESTURE_PINCH_SIZE_FRACTION)
    scale = 1 / (ctx.monkey.random_double() * GESTURE_PINCH_SCALE_RANGE + 1)
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.PINCH,
        rect=rect,
        scale=scale,
        velocity=GESTURE_PINCH_CLOSE_VELOCITY,
        orientation=ctx.device.orientation,
    ))


def pinch_open(ctx: ActionContext) -> None:
    """Pinch outwards to a scale in [1, 5)."""
    rect = ctx.monkey.random_rect(GESTURE_PINCH_SIZE_FRACTION)
    scale = ctx.monkey.random_double() * GESTURE_PINCH_SCALE_RANGE + 1
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.PINCH,
        rect=rect,
        scale=scale,
        velocity=GESTURE_PINCH_OPEN_VELOCITY,
        orientation=ctx.device.orientation,
    ))


def rotate(ctx: ActionContext) -> None:
    """Two-finger rotation over an angle in [0, 2π)."""
    rect = ctx.monkey.random_rect(GESTURE_PINCH_SIZE_FRACTION)
    angle = ctx.monkey.random_double() * 2 * math.pi
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.ROTATE,
        rect=rect,
        angle=angle,
        velocity=GESTURE_ROTATE_VELOCITY,
        orientation=ctx.device.orientation,
    ))


# =============================================================================
# Device Gestures
# =============================================================================


def change_orientation(ctx: ActionContext) -> None:
    """Rotate the device. Later touch gestures carry the new orientation."""
    index = ctx.monkey.random_uint32() % len(ORIENTATIONS)
    ctx.device.orientation = ORIENTATIONS[index]
    ctx.actuator.perform(ActuatorEvent(
        kind=ActionKind.ORIENTATION,
        orientation=ctx.device.orientation,
        duration_secs=GESTURE_ORIENTATION_SETTLE_SECS,
    ))


def click_volume_up(ctx: ActionContext) -> None:
    ctx.actuator.perform(ActuatorEvent(kind=ActionKind.VOLUME_UP))


def click_volume_down(ctx: ActionContext) -> None:
    ctx.actuator.perform(ActuatorEvent(kind=ActionKind.VOLUME_DOWN))


def shake(ctx: ActionContext) -> None:
    ctx.actuator.perform(ActuatorEvent(kind=ActionKind.SHAKE))


def lock(ctx: ActionContext) -> None:
    """Lock the device for a random time; the actuator unlocks it afterwards."""
    duration_secs = ctx.monkey.random_fraction(GESTURE_LOCK_DURATION_SECS_MAX)
    ctx.actuator.perform(ActuatorEvent(kind=ActionKind.LOCK, duration_secs=duration_secs))


def tap_alerts(ctx: ActionContext) -> None:
    """Tap a random button on every alert on screen.

    Raises:
        ActuatorError: If an alert has no buttons, since the run cannot
            get past it.
    """
    for alert_index, buttons_count in enumerate(ctx.actuator.pending_alerts()):
        if buttons_count <= 0:
            raise ActuatorError(f"alert {alert_index} has no buttons")
        button_index = ctx.monkey.random_int(buttons_count)
        logger.debug(f"Tapping button {button_index} of alert {alert_index}")
        ctx.actuator.perform(ActuatorEvent(
            kind=ActionKind.ALERT_BUTTON,
            alert_index=alert_index,
            button_index=button_index,
        ))


# =============================================================================
# Registration
# =============================================================================


def add_tap_action(
    ctx: ActionContext,
    weight: float,
    multiple_tap_probability: float = GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    multiple_touch_probability: float = GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
    long_press_probability: float = 0.0,
) -> None:
    """Register a tap with a chance of multiple taps, fingers or a long hold.

    Args:
        ctx: Context the action runs in.
        weight: Relative probability of this action.
        multiple_tap_probability: Chance of 2-3 taps instead of one.
        multiple_touch_probability: Chance of 2-4 fingers instead of one.
        long_press_probability: Chance of holding each tap down.
    """
    _check_probability("multiple_tap_probability", multiple_tap_probability)
    _check_probability("multiple_touch_probability", multiple_touch_probability)
    _check_probability("long_press_probability", long_press_probability)
    ctx.monkey.register_weighted(weight, partial(
        tap,
        ctx,
        multiple_tap_probability=multiple_tap_probability,
        multiple_touch_probability=multiple_touch_probability,
        long_press_probability=long_press_probability,
    ))


def add_single_tap_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(single_tap, ctx))


def add_long_press_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(long_press, ctx))


def add_drag_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(drag, ctx))


def add_flick_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(flick, ctx))


def add_pinch_close_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(pinch_close, ctx))


def add_pinch_open_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(pinch_open, ctx))


def add_rotate_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(rotate, ctx))


def add_orientation_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(change_orientation, ctx))


def add_volume_up_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(click_volume_up, ctx))


def add_volume_down_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(click_volume_down, ctx))


def add_shake_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(shake, ctx))


def add_lock_action(ctx: ActionContext, weight: float) -> None:
    ctx.monkey.register_weighted(weight, partial(lock, ctx))


def add_alert_action(ctx: ActionContext, interval: int) -> None:
    """Check for alerts every `interval` ticks and tap a random button on each."""
    ctx.monkey.register_interval(interval, partial(tap_alerts, ctx))


def add_default_actions(
    ctx: ActionContext,
    multiple_tap_probability: float = GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    multiple_touch_probability: float = GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
) -> None:
    """Register a sane default set of touch gestures.

    Use this when you just want events and have no strong requirements on
    exactly which ones.
    """
    add_tap_action(
        ctx,
        PRESET_STANDARD_TAP_WEIGHT,
        multiple_tap_probability=multiple_tap_probability,
        multiple_touch_probability=multiple_touch_probability,
    )
    add_long_press_action(ctx, PRESET_GESTURE_WEIGHT)
    add_drag_action(ctx, PRESET_GESTURE_WEIGHT)
    add_pinch_close_action(ctx, PRESET_GESTURE_WEIGHT)
    add_pinch_open_action(ctx, PRESET_GESTURE_WEIGHT)
    add_rotate_action(ctx, PRESET_GESTURE_WEIGHT)


def add_extended_actions(
    ctx: ActionContext,
    multiple_tap_probability: float = GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT,
    multiple_touch_probability: float = GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT,
    long_press_probability: float = GESTURE_LONG_PRESS_PROBABILITY_DEFAULT,
) -> None:
    """Register touch gestures plus hardware buttons and device motion."""
    add_tap_action(
        ctx,
        PRESET_EXTENDED_TAP_WEIGHT,
        multiple_tap_probability=multiple_tap_probability,
        multiple_touch_probability=multiple_touch_probability,
        long_press_probability=long_press_probability,
    )
    add_drag_action(ctx, PRESET_GESTURE_WEIGHT)
    add_flick_action(ctx, PRESET_GESTURE_WEIGHT)
    add_pinch_close_action(ctx, PRESET_GESTURE_WEIGHT)
    add_pinch_open_action(ctx, PRESET_GESTURE_WEIGHT)
    add_orientation_action(ctx, PRESET_GESTURE_WEIGHT)
    add_volume_up_action(ctx, PRESET_GESTURE_WEIGHT)
    add_volume_down_action(ctx, PRESET_GESTURE_WEIGHT)
    add_shake_action(ctx, PRESET_GESTURE_WEIGHT)
    add_lock_action(ctx, PRESET_GESTURE_WEIGHT)


def add_preset_actions(ctx: ActionContext, preset: Preset, **probabilities: float) -> None:
    """Register the named preset. Preset.NONE registers nothing."""
    if preset == Preset.STANDARD:
        probabilities.pop("long_press_probability", None)
        add_default_actions(ctx, **probabilities)
    elif preset == Preset.EXTENDED:
        add_extended_actions(ctx, **probabilities)
