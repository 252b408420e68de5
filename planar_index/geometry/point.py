from __future__ import annotations

import math
from dataclasses import dataclass, field

X_AXIS = 0
Y_AXIS = 1


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float
    payload: object = field(default=None, compare=False)

    def distance_squared_to(self, other: "Point2D") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "Point2D") -> float:
        return self.distance_squared_to(other) ** 0.5

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def coord(self, axis: int) -> float:
        return self.x if axis == X_AXIS else self.y

    def compare_to(self, other: "Point2D", axis: int) -> int:
        """Order ``self`` against ``other`` on ``axis``.

        Axis 0 compares x first and breaks ties on y; axis 1 compares y first
        and breaks ties on x. Returns -1, 0 or 1. Only coordinate-equal points
        compare as 0. NaN never orders, so it also yields 0; indexes reject
        non-finite points before comparing.
        """
        if axis == X_AXIS:
            return _compare_pair(self.x, self.y, other.x, other.y)
        return _compare_pair(self.y, self.x, other.y, other.x)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Point2D":
        return cls(float(data["x"]), float(data["y"]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _compare_pair(a1: float, a2: float, b1: float, b2: float) -> int:
    if a1 < b1:
        return -1
    if a1 > b1:
        return 1
    if a2 < b2:
        return -1
    if a2 > b2:
        return 1
    return 0


def next_axis(axis: int) -> int:
    return (axis + 1) % 2
