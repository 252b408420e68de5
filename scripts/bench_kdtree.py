import random
import time

from planar_index import Point2D
from planar_index.core import apply_settings, get_settings
from planar_index.index import build_point_set, build_tree


def _time_queries(index, queries) -> float:
    start = time.perf_counter()
    for q in queries:
        index.nearest(q)
    return (time.perf_counter() - start) * 1000.0


def main() -> None:
    settings = get_settings()
    apply_settings(settings)
    rng = random.Random(settings.seed)

    points = [Point2D(rng.random(), rng.random()) for _ in range(settings.bench_points)]
    queries = [Point2D(rng.random(), rng.random()) for _ in range(settings.bench_queries)]

    start = time.perf_counter()
    tree = build_tree(points)
    build_ms = (time.perf_counter() - start) * 1000.0
    baseline = build_point_set(points)

    tree_ms = _time_queries(tree, queries)
    scan_ms = _time_queries(baseline, queries)

    print(
        f"points={tree.size()} queries={len(queries)} build_ms={build_ms:.3f} "
        f"kdtree_ms={tree_ms:.3f} scan_ms={scan_ms:.3f}"
    )


if __name__ == "__main__":
    main()
