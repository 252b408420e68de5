import sys

from planar_index import Point2D, RectHV
from planar_index.core import apply_settings, get_settings, logger
from planar_index.index import build_tree, load_points, load_points_json


def main(argv) -> int:
    if len(argv) < 2:
        print("usage: load_points.py <points.txt|points.json>")
        return 2

    apply_settings(get_settings())
    path = argv[1]
    try:
        points = load_points_json(path) if path.endswith(".json") else load_points(path)
    except (OSError, ValueError) as exc:
        logger.logger.error("Could not load %s: %s", path, exc)
        return 1

    tree = build_tree(points)
    center = Point2D(0.5, 0.5)
    nearest = tree.nearest(center)
    inner = tree.range(RectHV(0.25, 0.25, 0.75, 0.75))

    print(f"read={len(points)} size={tree.size()} nearest_to_center={nearest} inner={len(inner)}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
