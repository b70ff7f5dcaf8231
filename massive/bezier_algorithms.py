"""Nearest point on a cubic Bezier curve.

Uses Schneider's method: the problem is turned into a fifth-degree polynomial in
Bernstein-Bezier form whose roots in [0, 1] are found by recursive subdivision.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple, Union

from .point import Point

MAX_DEPTH = 64
# Flatness control value: 2 ** -(MAX_DEPTH + 1).
EPSILON = 2.0 ** -(MAX_DEPTH + 1)

DEGREE = 3
W_DEGREE = 5

# Precomputed "z" factors for cubics.
_Z = (
    (1.0, 0.6, 0.3, 0.1),
    (0.4, 0.6, 0.6, 0.4),
    (0.1, 0.3, 0.6, 1.0),
)

PointLike = Union[Point, Sequence[float]]


def nearest_point_on_cubic_bezier(points: Sequence[PointLike], p: PointLike) -> Point:
    """Return the point on the cubic Bezier nearest to `p`."""
    control = _control_points(points)
    t = nearest_t_on_cubic_bezier(control, p)
    return _bezier(control, t)[0]


def nearest_t_on_cubic_bezier(points: Sequence[PointLike], p: PointLike) -> float:
    """Return the parameter `t` in [0, 1] of the point on the curve nearest to `p`."""
    control = _control_points(points)
    p = _to_point(p)

    w = _convert_to_bezier_form(p, control)
    candidates = _find_roots(w, 0)

    best_t = 0.0
    best_dist = (p - control[0]).squared_length()

    for candidate in candidates:
        dist = (p - _bezier(control, candidate)[0]).squared_length()
        if dist < best_dist:
            best_dist = dist
            best_t = candidate

    if (p - control[DEGREE]).squared_length() < best_dist:
        best_t = 1.0

    return best_t


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def _control_points(points: Sequence[PointLike]) -> Tuple[Point, ...]:
    control = tuple(_to_point(q) for q in points)
    if len(control) != DEGREE + 1:
        raise ValueError(f"a cubic Bezier needs {DEGREE + 1} points, got {len(control)}")
    return control


def _convert_to_bezier_form(p: Point, v: Sequence[Point]) -> List[Point]:
    """Build the fifth-degree Bezier equation whose roots give the nearest point."""
    c = [q - p for q in v]
    d = [(b - a) * 3.0 for a, b in zip(v, v[1:])]
    cd_table = [[_dot(row, column) for column in c] for row in d]

    n = DEGREE
    m = DEGREE - 1
    ys = [
        sum(
            cd_table[k - i][i] * _Z[k - i][i]
            for i in range(max(0, k - m), min(k, n) + 1)
        )
        for k in range(n + m + 1)
    ]
    return [Point(k / W_DEGREE, y) for k, y in enumerate(ys)]


def _find_roots(w: Sequence[Point], depth: int) -> List[float]:
    """Find the roots in [0, 1] of a polynomial in Bernstein-Bezier form."""
    crossings = _crossing_count(w)
    if crossings == 0:
        return []
    if crossings == 1:
        if depth >= MAX_DEPTH:
            return [(w[0].x + w[-1].x) / 2.0]
        if _control_polygon_flat_enough(w):
            return [_compute_x_intercept(w)]

    _, left, right = _bezier(w, 0.5)
    return _find_roots(left, depth + 1) + _find_roots(right, depth + 1)


def _signum(value: float) -> float:
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


def _crossing_count(v: Sequence[Point]) -> int:
    """Count how often the control polygon crosses the 0-axis."""
    signs = [_signum(q.y) for q in v]
    return sum(1 for a, b in zip(signs, signs[1:]) if a != b)


def _control_polygon_flat_enough(v: Sequence[Point]) -> bool:
    first, last = v[0], v[-1]

    # Implicit equation of the line from the first to the last control point.
    a = first.y - last.y
    b = last.x - first.x
    c = first.x * last.y - last.x * first.y
    ab_squared = a * a + b * b

    max_distance_above = 0.0
    max_distance_below = 0.0
    for q in v[1:-1]:
        distance = a * q.x + b * q.y + c
        if distance > 0.0:
            distance = _fdiv(distance * distance, ab_squared)
        if distance < 0.0:
            distance = -_fdiv(distance * distance, ab_squared)
        if distance < 0.0:
            max_distance_below = min(max_distance_below, distance)
        if distance > 0.0:
            max_distance_above = max(max_distance_above, distance)

    # Zero line.
    a1, b1, c1 = 0.0, 1.0, 0.0

    c2 = c + max_distance_above
    det = a1 * b - a * b1
    intercept_1 = (b1 * c2 - b * c1) * _fdiv(1.0, det)

    c2 = c + max_distance_below
    det = a1 * b - a * b1
    intercept_2 = (b1 * c2 - b * c1) * _fdiv(1.0, det)

    left_intercept = _fmin(intercept_1, intercept_2)
    right_intercept = _fmax(intercept_1, intercept_2)

    error = 0.5 * (right_intercept - left_intercept)
    return error < EPSILON


def _compute_x_intercept(v: Sequence[Point]) -> float:
    """Intersection of the chord from first to last control point with the 0-axis."""
    xlk, ylk = 1.0, 0.0
    xnm = v[-1].x - v[0].x
    ynm = v[-1].y - v[0].y
    xmk = v[0].x - 0.0
    ymk = v[0].y - 0.0

    det = xnm * ylk - ynm * xlk
    s = (xnm * ymk - ynm * xmk) * _fdiv(1.0, det)
    return 0.0 + xlk * s


def _bezier(v: Sequence[Point], t: float) -> Tuple[Point, List[Point], List[Point]]:
    """Evaluate a Bezier curve at `t` and return the point and both sub-curves."""
    rows = [list(v)]
    while len(rows[-1]) > 1:
        previous = rows[-1]
        rows.append(
            [
                Point((1.0 - t) * a.x + t * b.x, (1.0 - t) * a.y + t * b.y)
                for a, b in zip(previous, previous[1:])
            ]
        )
    left = [row[0] for row in rows]
    right = [row[-1] for row in reversed(rows)]
    return rows[-1][0], left, right


def _dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def _fdiv(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics for a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)