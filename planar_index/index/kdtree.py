from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core import logger
from ..geometry import UNIT_SQUARE, X_AXIS, Point2D, RectHV, next_axis

_log = logger.get_logger("kdtree")


@dataclass
class _Node:
    point: Point2D
    rect: RectHV
    axis: int
    lb: Optional["_Node"] = None
    rt: Optional["_Node"] = None

    def split_value(self) -> float:
        return self.point.coord(self.axis)

    def split_distance_squared(self, q: Point2D) -> float:
        # Perpendicular distance to the split line. Not clipped to ``rect``:
        # stored points may lie outside their node's region.
        delta = q.coord(self.axis) - self.split_value()
        return delta * delta


class KdTree:
    """2-d tree over the unit square.

    Each node splits its region on x (axis 0) or y (axis 1), alternating with
    depth. Points equal to a stored point replace it. Walks use explicit
    stacks because the tree is never rebalanced and sorted input degrades it
    to a chain.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, p: object) -> bool:
        return isinstance(p, Point2D) and self.contains(p)

    def __iter__(self) -> Iterator[Point2D]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.point
            if node.rt is not None:
                stack.append(node.rt)
            if node.lb is not None:
                stack.append(node.lb)

    def insert(self, p: Optional[Point2D]) -> None:
        if p is None or not p.is_finite():
            _log.debug("Ignoring insert of %s", p)
            return

        if self._root is None:
            self._root = _Node(p, UNIT_SQUARE, X_AXIS)
            self._size = 1
            return

        node = self._root
        while True:
            cmp = p.compare_to(node.point, node.axis)
            if cmp == 0:
                _log.debug("Replacing stored point %s", node.point)
                node.point = p
                return
            if cmp < 0:
                if node.lb is None:
                    rect = node.rect.split_low(node.axis, node.split_value())
                    node.lb = _Node(p, rect, next_axis(node.axis))
                    self._size += 1
                    return
                node = node.lb
            else:
                if node.rt is None:
                    rect = node.rect.split_high(node.axis, node.split_value())
                    node.rt = _Node(p, rect, next_axis(node.axis))
                    self._size += 1
                    return
                node = node.rt

    def contains(self, p: Optional[Point2D]) -> bool:
        if self._root is None or p is None or not p.is_finite():
            return False

        node = self._root
        while node is not None:
            cmp = p.compare_to(node.point, node.axis)
            if cmp == 0:
                return True
            node = node.lb if cmp < 0 else node.rt
        return False

    def range(self, rect: Optional[RectHV]) -> List[Point2D]:
        """All stored points inside ``rect`` (closed), in preorder."""
        found: List[Point2D] = []
        if rect is None or rect.is_empty():
            _log.debug("Range query with empty rectangle %s", rect)
            return found

        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            # The node rectangle bounds the whole subtree, not just its point.
            if not node.rect.intersects(rect):
                continue
            if rect.contains(node.point):
                found.append(node.point)
            if node.rt is not None:
                stack.append(node.rt)
            if node.lb is not None:
                stack.append(node.lb)
        return found

    def nearest(self, q: Optional[Point2D]) -> Optional[Point2D]:
        """Stored point closest to ``q``, or None when empty.

        The nearer child is searched first. The farther child is searched only
        while its split distance is strictly below the best squared distance
        found so far; since its entry sits below the whole nearer subtree on
        the stack, that check runs once the nearer side is exhausted. The
        split distance only bounds points by the side of the line they were
        sorted to, so points outside the unit square are still found. The root
        always seeds the best point, so distances that overflow to infinity
        still give an answer. Queries with a non-finite coordinate get None.
        """
        if self._root is None or q is None or not q.is_finite():
            return None

        best: Optional[Point2D] = None
        best_dist = float("inf")
        stack: List[Tuple[_Node, float]] = [(self._root, 0.0)]
        while stack:
            node, bound = stack.pop()
            if not bound < best_dist:
                continue

            dist = node.point.distance_squared_to(q)
            if best is None or dist < best_dist:
                best = node.point
                best_dist = dist

            cmp = q.compare_to(node.point, node.axis)
            if cmp == 0:
                break
            if cmp < 0:
                near, far = node.lb, node.rt
            else:
                near, far = node.rt, node.lb

            if far is not None:
                stack.append((far, node.split_distance_squared(q)))
            if near is not None:
                stack.append((near, 0.0))
        return best
