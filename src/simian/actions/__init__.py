"""
Simian Actions - Gestures and Actuators

Gestures decide what to do with the monkey's randomness; actuators do it.

Usage:
    from simian.actions import ActionContext, RecordingActuator, add_default_actions

    actuator = RecordingActuator()
    ctx = ActionContext(monkey=monkey, actuator=actuator)
    add_default_actions(ctx)
    add_alert_action(ctx, interval=100)
    monkey.run(1000)
"""

from .actuator import Actuator, AsyncActuator, BlockingActuator, RecordingActuator
from .gestures import (
    ActionContext,
    DeviceState,
    add_alert_action,
    add_default_actions,
    add_drag_action,
    add_extended_actions,
    add_flick_action,
    add_lock_action,
    add_long_press_action,
    add_orientation_action,
    add_pinch_close_action,
    add_pinch_open_action,
    add_preset_actions,
    add_rotate_action,
    add_shake_action,
    add_single_tap_action,
    add_tap_action,
    add_volume_down_action,
    add_volume_up_action,
)

__all__ = [
    # Actuators
    "Actuator",
    "AsyncActuator",
    "BlockingActuator",
    "RecordingActuator",
    # Context
    "ActionContext",
    "DeviceState",
    # Registration
    "add_alert_action",
    "add_default_actions",
    "add_drag_action",
    "add_extended_actions",
    "add_flick_action",
    "add_lock_action",
    "add_long_press_action",
    "add_orientation_action",
    "add_pinch_close_action",
    "add_pinch_open_action",
    "add_preset_actions",
    "add_rotate_action",
    "add_shake_action",
    "add_single_tap_action",
    "add_tap_action",
    "add_volume_down_action",
    "add_volume_up_action",
]
