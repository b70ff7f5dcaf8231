import pytest

from massive.bezier_algorithms import (
    nearest_point_on_cubic_bezier,
    nearest_t_on_cubic_bezier,
)
from massive.point import Point

ARCH = [Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0), Point(1.0, 0.0)]
STRAIGHT = [Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0), Point(3.0, 0.0)]

OFF_CURVE = [
    Point(0.3, 1.5),
    Point(0.9, 0.2),
    Point(-0.2, 0.5),
    Point(0.6, 0.5),
    Point(1.7, 0.9),
]


def test_straight_line_parameter():
    t = nearest_t_on_cubic_bezier(STRAIGHT, Point(1.2, 2.0))
    assert t == pytest.approx(0.4, abs=1e-9)


def test_straight_line_point_is_projection():
    nearest = nearest_point_on_cubic_bezier(STRAIGHT, Point(1.2, 2.0))
    assert nearest.x == pytest.approx(1.2, abs=1e-9)
    assert nearest.y == pytest.approx(0.0, abs=1e-12)


def test_accepts_tuples():
    t_points = nearest_t_on_cubic_bezier(STRAIGHT, Point(1.2, 2.0))
    t_tuples = nearest_t_on_cubic_bezier([tuple(q) for q in STRAIGHT], (1.2, 2.0))
    assert t_tuples == t_points


def test_point_before_start_gives_zero():
    assert nearest_t_on_cubic_bezier(ARCH, Point(-5.0, -5.0)) == 0.0


def test_point_after_end_gives_one():
    assert nearest_t_on_cubic_bezier(ARCH, Point(6.0, -5.0)) == 1.0


def test_nearest_point_of_endpoint_is_endpoint():
    assert nearest_point_on_cubic_bezier(ARCH, ARCH[0]) == ARCH[0]


@pytest.mark.parametrize("p", OFF_CURVE)
def test_parameter_in_unit_range(p):
    t = nearest_t_on_cubic_bezier(ARCH, p)
    assert 0.0 <= t <= 1.0


@pytest.mark.parametrize("p", OFF_CURVE)
def test_nearest_point_not_farther_than_endpoints(p):
    nearest = nearest_point_on_cubic_bezier(ARCH, p)
    dist = (p - nearest).length()
    assert dist <= (p - ARCH[0]).length() + 1e-12
    assert dist <= (p - ARCH[3]).length() + 1e-12


@pytest.mark.parametrize("p", OFF_CURVE)
def test_projection_is_idempotent(p):
    once = nearest_point_on_cubic_bezier(ARCH, p)
    twice = nearest_point_on_cubic_bezier(ARCH, once)
    assert twice.x == pytest.approx(once.x, abs=1e-6)
    assert twice.y == pytest.approx(once.y, abs=1e-6)


@pytest.mark.parametrize("p", OFF_CURVE)
def test_point_and_parameter_agree(p):
    t = nearest_t_on_cubic_bezier(ARCH, p)
    nearest = nearest_point_on_cubic_bezier(ARCH, p)
    t_again = nearest_t_on_cubic_bezier(ARCH, nearest)
    assert t_again == pytest.approx(t, abs=1e-5)


def test_wrong_number_of_points_raises():
    with pytest.raises(ValueError):
        nearest_t_on_cubic_bezier(ARCH[:3], Point(0.5, 0.5))