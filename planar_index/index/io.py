from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Union

from ..core import logger
from ..geometry import Point2D
from .kdtree import KdTree
from .point_set import PointSet

_log = logger.get_logger("io")

PathLike = Union[str, Path]


def parse_points(text: str) -> List[Point2D]:
    """Parse whitespace-separated coordinates taken in (x, y) pairs."""
    values: List[float] = []
    for idx, token in enumerate(text.split()):
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"Invalid coordinate {token!r} at token {idx}") from None
    if len(values) % 2:
        raise ValueError(f"Odd number of coordinates: {len(values)}")
    return [Point2D(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def load_points(path: PathLike) -> List[Point2D]:
    points = parse_points(Path(path).read_text(encoding="utf-8"))
    _log.debug("Loaded %d points from %s", len(points), path)
    return points


def save_points(path: PathLike, points: Iterable[Point2D]) -> int:
    lines = [f"{p.x!r} {p.y!r}" for p in points]
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return len(lines)


def dump_points_json(points: Iterable[Point2D]) -> str:
    return json.dumps([p.to_dict() for p in points])


def parse_points_json(raw: str) -> List[Point2D]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        _log.warning("Point data is not valid JSON")
        return []
    if not isinstance(data, list):
        return []

    points: List[Point2D] = []
    skipped = 0
    for item in data:
        if not isinstance(item, dict):
            skipped += 1
            continue
        try:
            points.append(Point2D.from_dict(item))
        except (KeyError, TypeError, ValueError):
            skipped += 1
    if skipped:
        _log.warning("Skipped %d malformed point entries", skipped)
    return points


def load_points_json(path: PathLike) -> List[Point2D]:
    return parse_points_json(Path(path).read_text(encoding="utf-8"))


def build_tree(points: Iterable[Point2D]) -> KdTree:
    tree = KdTree()
    for p in points:
        tree.insert(p)
    return tree


def build_point_set(points: Iterable[Point2D]) -> PointSet:
    point_set = PointSet()
    for p in points:
        point_set.insert(p)
    return point_set
