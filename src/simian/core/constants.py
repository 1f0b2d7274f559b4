"""
Simian Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: GESTURE_DRAG_VELOCITY not DRAG_VELOCITY_GESTURE.
"""

import math

# =============================================================================
# PRNG (PCG-XSH-RR 64/32)
# =============================================================================

PCG_MULTIPLIER: int = 6364136223846793005  # Load-bearing, never change
PCG_STATE_MASK: int = 0xFFFF_FFFF_FFFF_FFFF  # 64-bit wraparound
PCG_OUTPUT_MASK: int = 0xFFFF_FFFF  # 32-bit output
PCG_OUTPUT_RANGE: int = 2**32  # Divisor for unit-interval doubles
PCG_SEED_MAX: int = 0xFFFF_FFFF  # Seeds are unsigned 32-bit
PCG_SEQUENCE_DEFAULT: int = 0

# =============================================================================
# Scheduler Limits
# =============================================================================

MONKEY_ITERATIONS_MIN: int = 1
MONKEY_DURATION_SECS_UNBOUNDED: float = math.inf

# =============================================================================
# Geometry
# =============================================================================

GEOMETRY_SIZE_FRACTION_DEFAULT: float = 3.0  # Side = min(w, h) / 3
GEOMETRY_SIZE_FRACTION_MIN: float = 1.0  # Larger rects cannot fit the frame
GEOMETRY_TOLERANCE: float = 1e-9  # Float slack for containment checks
GEOMETRY_PANEL_TOP_HEIGHT: float = 20.0  # Pull-down panel strip
GEOMETRY_PANEL_BOTTOM_HEIGHT: float = 20.0  # Pull-up panel strip

FRAME_X_DEFAULT: float = 0.0
FRAME_Y_DEFAULT: float = 0.0
FRAME_WIDTH_DEFAULT: float = 320.0
FRAME_HEIGHT_DEFAULT: float = 480.0

# =============================================================================
# Gestures
# =============================================================================

GESTURE_MULTIPLE_TAP_PROBABILITY_DEFAULT: float = 0.05
GESTURE_MULTIPLE_TOUCH_PROBABILITY_DEFAULT: float = 0.05
GESTURE_LONG_PRESS_PROBABILITY_DEFAULT: float = 0.05
GESTURE_LONG_PRESS_DURATION_SECS: float = 0.5
GESTURE_DRAG_VELOCITY: float = 1000.0  # Points per second
GESTURE_FLICK_DURATION_SECS: float = 0.5
GESTURE_PINCH_SIZE_FRACTION: float = 2.0
GESTURE_PINCH_SCALE_RANGE: float = 4.0  # Scale in [1, 5) or its inverse
GESTURE_PINCH_CLOSE_VELOCITY: float = 1.0
GESTURE_PINCH_OPEN_VELOCITY: float = 3.0
GESTURE_ROTATE_VELOCITY: float = 5.0
GESTURE_ORIENTATION_SETTLE_SECS: float = 0.9
GESTURE_LOCK_DURATION_SECS_MAX: float = 3.0

# =============================================================================
# Presets
# =============================================================================

PRESET_STANDARD_TAP_WEIGHT: float = 25.0
PRESET_EXTENDED_TAP_WEIGHT: float = 50.0
PRESET_GESTURE_WEIGHT: float = 1.0
ALERT_INTERVAL_TICKS_DEFAULT: int = 100

# =============================================================================
# Actuator
# =============================================================================

ACTUATOR_ACK_TIMEOUT_SECS_DEFAULT: float = 10.0  # Max wait for injection ack

# =============================================================================
# Time Constants
# =============================================================================

TIME_EPOCH_MS: int = 0  # Simulated clock start time
TIME_ADVANCE_MS_MAX: int = 86_400_000  # Max single advance = 1 day
