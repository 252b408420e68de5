from .io import (
    build_point_set,
    build_tree,
    dump_points_json,
    load_points,
    load_points_json,
    parse_points,
    parse_points_json,
    save_points,
)
from .kdtree import KdTree
from .point_set import PointSet

__all__ = [
    "KdTree",
    "PointSet",
    "build_point_set",
    "build_tree",
    "dump_points_json",
    "load_points",
    "load_points_json",
    "parse_points",
    "parse_points_json",
    "save_points",
]
