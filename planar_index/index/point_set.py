from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..geometry import Point2D, RectHV


class PointSet:
    """Linear-scan point collection with the same queries as KdTree."""

    def __init__(self) -> None:
        self._points: Dict[Tuple[float, float], Point2D] = {}

    def is_empty(self) -> bool:
        return not self._points

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, p: object) -> bool:
        return isinstance(p, Point2D) and self.contains(p)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(list(self._points.values()))

    def insert(self, p: Optional[Point2D]) -> None:
        if p is None or not p.is_finite():
            return
        self._points[(p.x, p.y)] = p

    def contains(self, p: Optional[Point2D]) -> bool:
        if p is None or not p.is_finite():
            return False
        return (p.x, p.y) in self._points

    def range(self, rect: Optional[RectHV]) -> List[Point2D]:
        if rect is None:
            return []
        return [p for p in self._points.values() if rect.contains(p)]

    def nearest(self, q: Optional[Point2D]) -> Optional[Point2D]:
        if q is None or not q.is_finite() or not self._points:
            return None
        best = None
        best_dist = float("inf")
        for p in self._points.values():
            dist = p.distance_squared_to(q)
            if best is None or dist < best_dist:
                best = p
                best_dist = dist
        return best
