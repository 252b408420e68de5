import math

from planar_index.geometry import UNIT_SQUARE, X_AXIS, Y_AXIS, Point2D, RectHV, next_axis

def test_point_distances():
    a = Point2D(0.0, 0.0)
    b = Point2D(3.0, 4.0)
    assert a.distance_squared_to(b) == 25.0
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0

def test_point_equality_ignores_payload():
    a = Point2D(0.1, 0.2, payload="a")
    b = Point2D(0.1, 0.2, payload="b")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert Point2D(0.1, 0.2) != Point2D(0.2, 0.1)

def test_compare_by_x_breaks_ties_on_y():
    p = Point2D(0.5, 0.5)
    assert Point2D(0.4, 0.9).compare_to(p, X_AXIS) == -1
    assert Point2D(0.6, 0.1).compare_to(p, X_AXIS) == 1
    assert Point2D(0.5, 0.4).compare_to(p, X_AXIS) == -1
    assert Point2D(0.5, 0.6).compare_to(p, X_AXIS) == 1
    assert Point2D(0.5, 0.5).compare_to(p, X_AXIS) == 0

def test_compare_by_y_breaks_ties_on_x():
    p = Point2D(0.5, 0.5)
    assert Point2D(0.9, 0.4).compare_to(p, Y_AXIS) == -1
    assert Point2D(0.1, 0.6).compare_to(p, Y_AXIS) == 1
    assert Point2D(0.4, 0.5).compare_to(p, Y_AXIS) == -1
    assert Point2D(0.6, 0.5).compare_to(p, Y_AXIS) == 1
    assert Point2D(0.5, 0.5).compare_to(p, Y_AXIS) == 0

def test_nan_never_orders():
    nan = Point2D(math.nan, math.nan)
    assert nan.compare_to(Point2D(0.5, 0.5), X_AXIS) == 0
    assert nan.compare_to(Point2D(0.5, 0.5), Y_AXIS) == 0

def test_next_axis_alternates():
    assert next_axis(X_AXIS) == Y_AXIS
    assert next_axis(Y_AXIS) == X_AXIS

def test_point_dict_round_trip():
    p = Point2D.from_dict({"x": "0.25", "y": 1})
    assert p == Point2D(0.25, 1.0)
    assert p.to_dict() == {"x": 0.25, "y": 1.0}

def test_rect_contains_closed_boundary():
    rect = RectHV(0.0, 0.0, 0.5, 0.5)
    assert rect.contains(Point2D(0.5, 0.5))
    assert rect.contains(Point2D(0.0, 0.25))
    assert not rect.contains(Point2D(0.5000001, 0.5))

def test_rect_intersects_touching_edges():
    a = RectHV(0.0, 0.0, 0.5, 0.5)
    assert a.intersects(RectHV(0.5, 0.5, 1.0, 1.0))
    assert a.intersects(RectHV(0.1, 0.1, 0.2, 0.2))
    assert RectHV(0.1, 0.1, 0.2, 0.2).intersects(a)
    assert not a.intersects(RectHV(0.6, 0.0, 1.0, 1.0))
    assert not a.intersects(RectHV(0.0, 0.6, 1.0, 1.0))

def test_inverted_rect_is_empty():
    rect = RectHV(0.6, 0.6, 0.4, 0.4)
    assert rect.is_empty()
    assert not UNIT_SQUARE.is_empty()
    assert not rect.contains(Point2D(0.5, 0.5))
    assert not rect.contains(Point2D(0.6, 0.6))

def test_rect_splits():
    rect = RectHV(0.0, 0.0, 1.0, 0.5)
    assert rect.split_low(X_AXIS, 0.3) == RectHV(0.0, 0.0, 0.3, 0.5)
    assert rect.split_high(X_AXIS, 0.3) == RectHV(0.3, 0.0, 1.0, 0.5)
    assert rect.split_low(Y_AXIS, 0.2) == RectHV(0.0, 0.0, 1.0, 0.2)
    assert rect.split_high(Y_AXIS, 0.2) == RectHV(0.0, 0.2, 1.0, 0.5)


def test_is_finite():
    assert Point2D(0.0, -1e300).is_finite()
    assert not Point2D(math.nan, 0.5).is_finite()
    assert not Point2D(0.5, math.inf).is_finite()
    assert not Point2D(-math.inf, -math.inf).is_finite()
