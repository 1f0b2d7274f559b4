"""
Geometry - Points and Rects for Gesture Targets

TigerStyle: Immutable value types, explicit bounds, no hidden clamping.
The random sampling helpers live on Monkey because they draw from its PRNG;
this module only holds the deterministic parts.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    GEOMETRY_SIZE_FRACTION_DEFAULT,
    GEOMETRY_SIZE_FRACTION_MIN,
    GEOMETRY_TOLERANCE,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class Point:
    """A point in screen coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by origin and size."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Reject negative sizes at construction."""
        if self.width < 0 or self.height < 0:
            raise ConfigurationError(
                f"rect size must be non-negative (got {self.width}x{self.height})"
            )

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains_point(self, point: Point) -> bool:
        """Check whether the point lies in [min, max) on both axes."""
        return (
            self.min_x <= point.x < self.max_x
            and self.min_y <= point.y < self.max_y
        )

    def contains_rect(self, other: Rect, tolerance: float = GEOMETRY_TOLERANCE) -> bool:
        """Check whether another rect lies fully inside this one.

        Args:
            other: The rect to test.
            tolerance: Float slack allowed on every edge.
        """
        return (
            other.min_x >= self.min_x - tolerance
            and other.min_y >= self.min_y - tolerance
            and other.max_x <= self.max_x + tolerance
            and other.max_y <= self.max_y + tolerance
        )

    def inset(self, top: float = 0.0, bottom: float = 0.0) -> Rect:
        """Shrink the rect vertically.

        Used to keep gestures out of the pull-down and pull-up panel strips.
        """
        height = max(self.height - top - bottom, 0.0)
        return Rect(self.x, self.y + top, self.width, height)


def rect_around(
    point: Point,
    frame: Rect,
    size_fraction: float = GEOMETRY_SIZE_FRACTION_DEFAULT,
) -> Rect:
    """Build a square sub-rect of the frame that contains the point.

    The side is min(frame.width, frame.height) / size_fraction. The origin is
    the point mapped proportionally into the space the square can occupy, so
    a point at the frame's left edge yields a square at the left edge and a
    point near the right edge yields one touching the right edge. Points
    outside the frame are clamped.

    Args:
        point: Point the rect should be positioned around.
        frame: Bounding frame; the result always lies inside it.
        size_fraction: Divisor for the side length. Must be >= 1.

    Returns:
        The sub-rect.

    Raises:
        ConfigurationError: If size_fraction < 1.
    """
    if not size_fraction >= GEOMETRY_SIZE_FRACTION_MIN:
        raise ConfigurationError(
            f"size_fraction ({size_fraction}) must be >= {GEOMETRY_SIZE_FRACTION_MIN}"
        )

    size = min(frame.width, frame.height) / size_fraction
    x0 = _place(point.x, frame.x, frame.width, size)
    y0 = _place(point.y, frame.y, frame.height, size)

    return Rect(x0, y0, size, size)


def _place(value: float, origin: float, extent: float, size: float) -> float:
    if extent <= 0:
        return origin
    free = extent - size
    start = (value - origin) * free / extent + origin
    # Clamp for points outside the frame
    return min(max(start, origin), origin + free)
