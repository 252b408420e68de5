from __future__ import annotations

from dataclasses import dataclass

from .point import X_AXIS, Point2D


@dataclass(frozen=True)
class RectHV:
    """Axis-aligned rectangle with closed boundaries.

    No ordering is enforced on the corners: a rectangle with
    ``xmin > xmax`` or ``ymin > ymax`` is empty and contains nothing.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def is_empty(self) -> bool:
        return not (self.xmin <= self.xmax and self.ymin <= self.ymax)

    def contains(self, p: Point2D) -> bool:
        return (
            self.xmin <= p.x <= self.xmax
            and self.ymin <= p.y <= self.ymax
        )

    def intersects(self, other: "RectHV") -> bool:
        return (
            self.xmax >= other.xmin
            and self.ymax >= other.ymin
            and other.xmax >= self.xmin
            and other.ymax >= self.ymin
        )

    def split_low(self, axis: int, value: float) -> "RectHV":
        """Part of this rectangle on the low side of the line at ``value``."""
        if axis == X_AXIS:
            return RectHV(self.xmin, self.ymin, value, self.ymax)
        return RectHV(self.xmin, self.ymin, self.xmax, value)

    def split_high(self, axis: int, value: float) -> "RectHV":
        """Part of this rectangle on the high side of the line at ``value``."""
        if axis == X_AXIS:
            return RectHV(value, self.ymin, self.xmax, self.ymax)
        return RectHV(self.xmin, value, self.xmax, self.ymax)

    def __str__(self) -> str:
        return f"[{self.xmin}, {self.xmax}] x [{self.ymin}, {self.ymax}]"


UNIT_SQUARE = RectHV(0.0, 0.0, 1.0, 1.0)
