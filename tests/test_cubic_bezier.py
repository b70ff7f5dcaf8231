import pytest

from massive.cubic_bezier import (
    BezierTail,
    CubicBezier,
    NormalizedSpans,
    basis_functions,
)
from massive.line import Line
from massive.point import Point


def straight() -> CubicBezier:
    # Evenly spaced control points: point_at_t(t) == (100 t, 0).
    return CubicBezier(Point(0, 0), Point(100 / 3, 0), Point(200 / 3, 0), Point(100, 0))


def curved() -> CubicBezier:
    return CubicBezier(Point(0, 0), Point(10, 30), Point(40, -20), Point(50, 5))


def test_point_at_ends():
    b = curved()
    assert b.point_at_t(0.0) == b.start
    assert b.point_at_t(1.0) == b.end


def test_point_at_t_on_straight_curve():
    p = straight().point_at_t(0.25)
    assert p.x == pytest.approx(25.0)
    assert p.y == pytest.approx(0.0)


def test_basis_functions_partition_of_unity():
    assert basis_functions(0.0) == (1.0, 0.0, 0.0, 0.0)
    assert basis_functions(1.0) == (0.0, 0.0, 0.0, 1.0)
    for t in (0.1, 0.37, 0.5, 0.9):
        assert sum(basis_functions(t)) == pytest.approx(1.0)


def test_tangent_and_theta_of_horizontal_curve():
    b = straight()
    tangent = b.tangent_at_t(0.4)
    assert tangent.y == pytest.approx(0.0)
    assert tangent.x > 0
    assert b.theta_at_t(0.4) == pytest.approx(0.0)


def test_normal_is_unit_and_perpendicular():
    b = curved()
    for t in (0.0, 0.3, 0.8):
        normal = b.normal_at_t(t)
        tangent = b.tangent_at_t(t)
        assert normal.length() == pytest.approx(1.0)
        assert normal.x * tangent.x + normal.y * tangent.y == pytest.approx(0.0, abs=1e-9)


def test_normal_of_horizontal_curve():
    assert tuple(straight().normal_at_t(0.5)) == pytest.approx((0.0, 1.0))


def test_to_points_and_indexing():
    b = curved()
    assert b.to_points() == (b.start, b.span1, b.span2, b.end)
    assert b[0] == b.start
    assert b[3] == b.end
    b[1] = (1.0, 2.0)
    assert b.span1 == Point(1.0, 2.0)
    with pytest.raises(IndexError):
        b[4]
    with pytest.raises(IndexError):
        b[-1] = Point()


def test_from_line_spans():
    line = Line(Point(1, 2), Point(3, 4))
    b = CubicBezier.from_line_spans(line, Point(5, 6), Point(7, 8))
    assert b.to_points() == (Point(1, 2), Point(5, 6), Point(7, 8), Point(3, 4))


def test_nearest_t_on_straight_curve():
    assert straight().nearest_t_of_point((30.0, 10.0)) == pytest.approx(0.3, abs=1e-6)


def test_intersect_with_from_start():
    t = straight().intersect_with(BezierTail.START, lambda p: p.x < 50)
    assert t == pytest.approx(0.5, abs=0.01)


def test_intersect_with_from_end():
    t = straight().intersect_with(BezierTail.END, lambda p: p.x > 50)
    assert t == pytest.approx(0.5, abs=0.01)


def test_intersect_with_degenerate_start_outside():
    assert straight().intersect_with(BezierTail.START, lambda p: False) == 0.0
    assert straight().intersect_with(BezierTail.END, lambda p: False) == 1.0


def test_march_forward_and_backward():
    b = straight()
    assert b.march(0.2, 10.0) == pytest.approx(0.3, abs=0.01)
    assert b.march(0.5, -10.0) == pytest.approx(0.4, abs=0.01)


@pytest.mark.parametrize("t", [0.2, 0.3, 0.5, 0.7, 0.8])
def test_bend_moves_point_to_target(t):
    b = curved()
    target = Point(20.0, 40.0)
    bent = b.bend(t, target)
    p = bent.point_at_t(t)
    assert p.x == pytest.approx(target.x)
    assert p.y == pytest.approx(target.y)
    assert bent.start == b.start
    assert bent.end == b.end


def test_bounds_within_control_point_bounds():
    b = curved()
    tight = b.bounds()
    loose = b.control_point_bounds()
    assert loose.min.x <= tight.min.x and loose.min.y <= tight.min.y
    assert loose.max.x >= tight.max.x and loose.max.y >= tight.max.y
    for i in range(101):
        p = b.point_at_t(i / 100)
        assert tight.min.x - 1e-9 <= p.x <= tight.max.x + 1e-9
        assert tight.min.y - 1e-9 <= p.y <= tight.max.y + 1e-9


def test_bounds_of_symmetric_bump():
    b = CubicBezier(Point(0, 0), Point(1, 3), Point(2, 3), Point(3, 0))
    bounds = b.bounds()
    assert bounds.max.y == pytest.approx(b.point_at_t(0.5).y)
    assert bounds.min.y == pytest.approx(0.0)
    assert b.control_point_bounds().max.y == 3.0


def test_normalized_spans_round_trip():
    b = curved()
    spans = b.normalized_spans()
    restored = CubicBezier.from_line_and_normalized_spans(Line(b.start, b.end), spans)
    for original, back in zip(b.to_points(), restored.to_points()):
        assert back.x == pytest.approx(original.x)
        assert back.y == pytest.approx(original.y)


def test_normalized_spans_follow_moved_line():
    b = curved()
    spans = b.normalized_spans()
    offset = Point(7.0, -3.0)
    moved = CubicBezier.from_line_and_normalized_spans(
        (b.start + offset, b.end + offset), spans
    )
    assert moved.span1.x == pytest.approx(b.span1.x + offset.x)
    assert moved.span2.y == pytest.approx(b.span2.y + offset.y)


def test_denormalize_of_default_spans_gives_line_ends():
    line = Line(Point(2, 3), Point(10, 7))
    span1, span2 = NormalizedSpans().denormalize(line)
    assert tuple(span1) == pytest.approx((2.0, 3.0))
    assert tuple(span2) == pytest.approx((10.0, 7.0))