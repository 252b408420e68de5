import random

from planar_index import KdTree, Point2D, PointSet, RectHV
from planar_index.core import apply_settings, get_settings, logger


def _random_point(rng: random.Random) -> Point2D:
    # Coarse grid so that duplicates and shared coordinates show up.
    return Point2D(rng.randint(0, 20) / 20.0, rng.randint(0, 20) / 20.0)


def main() -> None:
    settings = get_settings()
    apply_settings(settings)
    rng = random.Random(settings.seed)

    for trial in range(50):
        tree = KdTree()
        baseline = PointSet()
        for _ in range(rng.randint(1, 200)):
            p = _random_point(rng)
            tree.insert(p)
            baseline.insert(p)
        assert tree.size() == baseline.size()

        for _ in range(50):
            q = Point2D(rng.uniform(-0.5, 1.5), rng.uniform(-0.5, 1.5))
            got = tree.nearest(q)
            want = baseline.nearest(q)
            assert got.distance_squared_to(q) == want.distance_squared_to(q), (trial, q, got, want)

            x0, x1 = sorted((rng.random(), rng.random()))
            y0, y1 = sorted((rng.random(), rng.random()))
            rect = RectHV(x0, y0, x1, y1)
            assert set(tree.range(rect)) == set(baseline.range(rect)), (trial, rect)

            probe = _random_point(rng)
            assert tree.contains(probe) == baseline.contains(probe), (trial, probe)

        logger.logger.debug("Trial %d ok with %d points", trial, tree.size())

    print(f"seed={settings.seed} trials=50 ok")


if __name__ == "__main__":
    main()
