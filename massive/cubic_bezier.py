"""Cubic Bezier curves: evaluation, nearest points, bisection, bending and bounds."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence, Tuple, Union

from .bezier_algorithms import nearest_t_on_cubic_bezier
from .line import Line
from .point import Point
from .rect import Bounds

PointLike = Union[Point, Sequence[float]]
LineLike = Union[Line, Tuple[PointLike, PointLike]]

DEFAULT_INTERSECTION_ITERATIONS = 64
DEFAULT_INTERSECTION_TOLERANCE = 0.25

# Reference positions on the chord for the two span points. Keeping them at the
# ends feels more natural than 1/3 and 2/3, which make connectors look bumpy.
_SPAN1_DEFAULT_T = 0.0
_SPAN2_DEFAULT_T = 1.0


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def _to_line(value: LineLike) -> Line:
    if isinstance(value, Line):
        return value
    p1, p2 = value
    return Line(_to_point(p1), _to_point(p2))


def _fdiv(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics for a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def basis_functions(t: float) -> Tuple[float, float, float, float]:
    """The influence of each of the four control points at `t`."""
    omt = 1.0 - t
    return (
        omt * omt * omt,
        3.0 * omt * omt * t,
        3.0 * omt * t * t,
        t * t * t,
    )


class BezierTail(enum.Enum):
    """One of the two ends of a curve."""

    START = "start"
    END = "end"


def _linear_bisect(
    inside: float,
    outside: float,
    max_iterations: int,
    is_significant_change: Callable[[float, float], bool],
    is_inside: Callable[[float], bool],
) -> float:
    current = inside
    next_step = (outside - inside) / 2.0
    previous = None

    # Degenerate case: the starting value is not inside, exit early.
    if not is_inside(current):
        return current

    for _ in range(max_iterations):
        if previous is not None and not is_significant_change(previous, current):
            return current
        previous = current
        if is_inside(current):
            current += next_step
        else:
            current -= next_step
        next_step /= 2.0

    return current


def _axis_extreme_ts(a: float, b: float, c: float, d: float) -> List[float]:
    """Parameters in (0, 1) where the derivative of one axis vanishes."""
    p, q, r = b - a, c - b, d - c
    qa = p - 2.0 * q + r
    qb = 2.0 * (q - p)
    qc = p
    roots: List[float] = []
    if abs(qa) < 1e-12:
        if qb != 0.0:
            roots.append(-qc / qb)
    else:
        discriminant = qb * qb - 4.0 * qa * qc
        if discriminant >= 0.0:
            root = math.sqrt(discriminant)
            roots.append((-qb + root) / (2.0 * qa))
            roots.append((-qb - root) / (2.0 * qa))
    return [t for t in roots if 0.0 < t < 1.0]


def _bounds_of_points(points: Iterable[Point]) -> Bounds:
    points = list(points)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bounds(Point(min(xs), min(ys)), Point(max(xs), max(ys)))


@dataclass
class CubicBezier:
    """A cubic Bezier curve from `start` to `end` with two span points."""

    start: Point
    span1: Point
    span2: Point
    end: Point

    def __post_init__(self) -> None:
        self.start = _to_point(self.start)
        self.span1 = _to_point(self.span1)
        self.span2 = _to_point(self.span2)
        self.end = _to_point(self.end)

    @classmethod
    def from_line_spans(cls, line: LineLike, span1: PointLike, span2: PointLike) -> CubicBezier:
        start, end = _to_line(line)
        return cls(start, _to_point(span1), _to_point(span2), end)

    @classmethod
    def from_line_and_normalized_spans(
        cls, line: LineLike, spans: NormalizedSpans
    ) -> CubicBezier:
        line = _to_line(line)
        span1, span2 = spans.denormalize(line)
        return cls(line.p1, span1, span2, line.p2)

    _FIELDS = ("start", "span1", "span2", "end")

    def __getitem__(self, index: int) -> Point:
        if not 0 <= index < 4:
            raise IndexError(f"Invalid index {index}")
        return getattr(self, self._FIELDS[index])

    def __setitem__(self, index: int, value: PointLike) -> None:
        if not 0 <= index < 4:
            raise IndexError(f"Invalid index {index}")
        setattr(self, self._FIELDS[index], _to_point(value))

    def to_points(self) -> Tuple[Point, Point, Point, Point]:
        return (self.start, self.span1, self.span2, self.end)

    def nearest_t_of_point(self, p: PointLike) -> float:
        return nearest_t_on_cubic_bezier(self.to_points(), _to_point(p))

    def point_at_t(self, t: float) -> Point:
        b0, b1, b2, b3 = basis_functions(t)
        s, c1, c2, e = self.to_points()
        return Point(
            b0 * s.x + b1 * c1.x + b2 * c2.x + b3 * e.x,
            b0 * s.y + b1 * c1.y + b2 * c2.y + b3 * e.y,
        )

    def tangent_at_t(self, t: float) -> Point:
        s, c1, c2, e = self.to_points()
        p, q, r = (c1 - s) * 3.0, (c2 - c1) * 3.0, (e - c2) * 3.0
        omt = 1.0 - t
        a, b, c = omt * omt, 2.0 * omt * t, t * t
        return Point(a * p.x + b * q.x + c * r.x, a * p.y + b * q.y + c * r.y)

    def theta_at_t(self, t: float) -> float:
        return Line(Point(0.0, 0.0), self.tangent_at_t(t)).theta()

    def normal_at_t(self, t: float) -> Point:
        """The unit normal at `t`; the origin where the tangent vanishes."""
        tangent = self.tangent_at_t(t)
        normal = Point(-tangent.y, tangent.x)
        length = normal.length()
        if length == 0.0:
            return Point(0.0, 0.0)
        return normal * (1.0 / length)

    def _is_significant_change(self, a: float, b: float) -> bool:
        return (self.point_at_t(b) - self.point_at_t(a)).length() > DEFAULT_INTERSECTION_TOLERANCE

    def intersect_with(self, at: BezierTail, is_inside: Callable[[Point], bool]) -> float:
        """Bisect for the `t` where the curve leaves a geometry, starting at `at`."""
        start, fin = (0.0, 1.0) if at is BezierTail.START else (1.0, 0.0)
        return _linear_bisect(
            start,
            fin,
            DEFAULT_INTERSECTION_ITERATIONS,
            self._is_significant_change,
            lambda h: is_inside(self.point_at_t(h)),
        )

    def march(self, t: float, distance: float) -> float:
        """Return the `t` whose point lies `distance` away (on the chord) from the point at `t`.

        A positive distance marches towards the end, a negative one towards the start.
        """
        p = self.point_at_t(t)
        abs_distance = abs(distance)
        return _linear_bisect(
            t,
            1.0 if distance >= 0.0 else 0.0,
            DEFAULT_INTERSECTION_ITERATIONS,
            self._is_significant_change,
            lambda h: (self.point_at_t(h) - p).length() < abs_distance,
        )

    def bend(self, t: float, target: PointLike) -> CubicBezier:
        """Move the point at `t` to `target` by adjusting the span points."""
        target = _to_point(target)
        basis = basis_functions(t)
        delta = target - self.point_at_t(t)

        influence1 = basis[1]
        influence2 = basis[2]

        # At t == 1/3 the first span point does everything, at t == 2/3 the second.
        distribution_factor = min(max((t - 1.0 / 3.0) * 3.0, 0.0), 1.0)
        influence_factor1 = 1.0 - distribution_factor
        influence_factor2 = distribution_factor

        influence_scale1 = _fdiv(influence_factor1, influence1)
        influence_scale2 = _fdiv(influence_factor2, influence2)

        return CubicBezier(
            self.start,
            self.span1 + delta.scaled(influence_scale1),
            self.span2 + delta.scaled(influence_scale2),
            self.end,
        )

    def bounds(self) -> Bounds:
        """The tight bounding box of the curve."""
        s, c1, c2, e = self.to_points()
        ts = _axis_extreme_ts(s.x, c1.x, c2.x, e.x) + _axis_extreme_ts(s.y, c1.y, c2.y, e.y)
        return _bounds_of_points([s, e, *(self.point_at_t(t) for t in ts)])

    def control_point_bounds(self) -> Bounds:
        """Bounds of all control points; fast but usually larger."""
        return _bounds_of_points(self.to_points())

    def normalized_spans(self) -> NormalizedSpans:
        param1, param2 = _NormalizationParameters.from_line(Line(self.start, self.end))
        return NormalizedSpans(param1.normalize(self.span1), param2.normalize(self.span2))


@dataclass(frozen=True)
class NormalizedSpans:
    """Span points relative to a unit line between the start and end of a curve.

    This lets start and end points move freely without distorting the curve.
    """

    span1: Point = field(default_factory=Point)
    span2: Point = field(default_factory=Point)

    def denormalize(self, line: LineLike) -> Tuple[Point, Point]:
        param1, param2 = _NormalizationParameters.from_line(_to_line(line))
        return param1.denormalize(self.span1), param2.denormalize(self.span2)


@dataclass(frozen=True)
class _NormalizationParameters:
    center: Point
    scaling: float
    rotation: float

    @classmethod
    def create(cls, line: Line, reference_point: float) -> _NormalizationParameters:
        delta = line.delta()
        return cls(
            center=line.p1 + delta * reference_point,
            scaling=delta.length(),
            rotation=line.theta(),
        )

    @classmethod
    def from_line(
        cls, line: Line
    ) -> Tuple[_NormalizationParameters, _NormalizationParameters]:
        return cls.create(line, _SPAN1_DEFAULT_T), cls.create(line, _SPAN2_DEFAULT_T)

    def normalize(self, p: Point) -> Point:
        return (p - self.center).rotated_right(-self.rotation).scaled(_fdiv(1.0, self.scaling))

    def denormalize(self, p: Point) -> Point:
        return p.scaled(self.scaling).rotated_right(self.rotation) + self.center