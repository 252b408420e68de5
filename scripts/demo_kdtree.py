from planar_index import KdTree, Point2D, RectHV


def main() -> None:
    tree = KdTree()
    for x, y in [(0.5, 0.5), (0.25, 0.75), (0.75, 0.25)]:
        tree.insert(Point2D(x, y))

    found = tree.range(RectHV(0.0, 0.0, 0.6, 0.6))
    nearest = tree.nearest(Point2D(0.4, 0.4))

    assert tree.size() == 3
    assert found == [Point2D(0.5, 0.5)]
    assert nearest == Point2D(0.5, 0.5)

    print(f"size={tree.size()} range={[str(p) for p in found]} nearest={nearest}")


if __name__ == "__main__":
    main()
