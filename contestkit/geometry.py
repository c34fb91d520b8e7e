"""Plane geometry: points, segments, lines and simple polygons.

Comparisons allow a tolerance of ``EPS`` so that floating-point coordinates
behave sensibly; integer coordinates stay exact wherever no division occurs.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

EPS = 1e-9


def _geq(a: float, b: float) -> bool:
    return a - b >= -EPS


def _leq(a: float, b: float) -> bool:
    return b - a >= -EPS


def _gt(a: float, b: float) -> bool:
    return a - b > EPS


def _lt(a: float, b: float) -> bool:
    return b - a > EPS


def _eq(a: float, b: float) -> bool:
    return abs(a - b) <= EPS


@dataclass(frozen=True, eq=False)
class Point:
    """A point, or a vector, in the plane."""

    x: float = 0
    y: float = 0

    __hash__ = None  # equality is approximate, so points are not hashable

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return _eq(self.x, other.x) and _eq(self.y, other.y)

    def __lt__(self, other: Point) -> bool:
        return _lt(self.x, other.x) or (_eq(self.x, other.x) and _lt(self.y, other.y))

    def __gt__(self, other: Point) -> bool:
        return _gt(self.x, other.x) or (_eq(self.x, other.x) and _gt(self.y, other.y))

    def rotate(self, angle: float) -> Point:
        """Return this vector rotated counter-clockwise by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def perp(self) -> Point:
        """Return this vector rotated a quarter turn counter-clockwise."""
        return Point(-self.y, self.x)

    def angle(self) -> float:
        """Return the polar angle in the range [0, 2*pi)."""
        a = math.atan2(self.y, self.x)
        if _lt(a, 0):
            a += 2 * math.pi
        return a

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Point:
        """Return the vector of length one pointing the same way."""
        length = self.length()
        if length == 0:
            raise ValueError("the zero vector has no direction")
        return self / length

    def half(self, other: Point) -> bool:
        """Tell whether this vector lies in the half-plane clockwise of ``other``."""
        c = other.cross(self)
        return _lt(c, 0) or (_eq(c, 0) and _lt(other.dot(self), 0))


class Location(Enum):
    """Where a point lies relative to a polygon."""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    BOUNDARY = "BOUNDARY"


def sgn(value: float) -> int:
    """Return the sign of ``value``, treating anything within EPS of zero as zero."""
    if _gt(value, 0):
        return 1
    if _lt(value, 0):
        return -1
    return 0


def point_in_line(a: Point, v: Point, p: Point) -> bool:
    """Tell whether ``p`` lies on the line ``a + t*v``."""
    return _eq((p - a).cross(v), 0)


def point_in_segment(a: Point, b: Point, p: Point) -> bool:
    """Tell whether ``p`` lies on the closed segment ``ab``."""
    return point_in_line(a, b - a, p) and _leq((a - p).dot(b - p), 0)


def crosses_ray(a: Point, b: Point, p: Point) -> bool:
    """Tell whether edge ``ab`` crosses the rightward ray from ``p``."""
    direction = int(_geq(b.y, p.y)) - int(_geq(a.y, p.y))
    return direction * sgn((a - p).cross(b - p)) > 0


def intersect_segments_info(a: Point, b: Point, c: Point, d: Point) -> int:
    """Classify how segments ``ab`` and ``cd`` meet.

    Returns -1 for infinitely many common points, 0 for none, 1 for exactly one.
    """
    v1 = b - a
    v2 = d - c
    t = sgn(v1.cross(c - a))
    u = sgn(v1.cross(d - a))
    if t == u:
        if t == 0 and (
            point_in_segment(a, b, c)
            or point_in_segment(a, b, d)
            or point_in_segment(c, d, a)
            or point_in_segment(c, d, b)
        ):
            return -1
        return 0
    return int(sgn(v2.cross(a - c)) != sgn(v2.cross(b - c)))


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Tell whether segments ``ab`` and ``cd`` share at least one point."""
    return intersect_segments_info(a, b, c, d) != 0


def intersect_lines(a1: Point, v1: Point, a2: Point, v2: Point) -> Point:
    """Return the meeting point of lines ``a1 + t*v1`` and ``a2 + t*v2``."""
    det = v1.cross(v2)
    if _eq(det, 0):
        raise ValueError("the lines are parallel")
    return a1 + v1 * ((a2 - a1).cross(v2) / det)


def intersect_line_segment_info(a: Point, v: Point, c: Point, d: Point) -> int:
    """Classify how line ``a + t*v`` meets segment ``cd``.

    Returns -1 for infinitely many common points, 0 for none, 1 for exactly one.
    """
    det = v.cross(d - c)
    if _eq(det, 0):
        return -1 if _eq((c - a).cross(v), 0) else 0
    return int(sgn(v.cross(c - a)) != sgn(v.cross(d - a)))


def cut_polygon(points: Sequence[Point], a: Point, v: Point) -> list[Point]:
    """Return the part of convex polygon ``points`` left of line ``a + t*v``."""
    pts = list(points)
    kept: list[Point] = []
    for current, following in zip(pts, pts[1:] + pts[:1]):
        if _geq(v.cross(current - a), 0):
            kept.append(current)
        if intersect_line_segment_info(a, v, current, following) == 1:
            p = intersect_lines(a, v, current, following - current)
            if p != current and p != following:
                kept.append(p)
    return kept


def point_location(p1: Point, p2: Point, p3: Point) -> str:
    """Tell on which side of the directed line ``p1 -> p2`` the point ``p3`` lies.

    Returns ``"LEFT"``, ``"RIGHT"`` or ``"TOUCH"``.
    """
    side = sgn((p2 - p1).cross(p3 - p1))
    if side < 0:
        return "RIGHT"
    if side > 0:
        return "LEFT"
    return "TOUCH"


@dataclass
class Polygon:
    """A simple polygon given by its vertices in order."""

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def _edges(self) -> Iterable[tuple[Point, Point]]:
        return zip(self.points, self.points[1:] + self.points[:1])

    def add(self, point: Point) -> None:
        """Append a vertex."""
        self.points.append(point)

    def doubled_area(self) -> float:
        """Return twice the signed area, positive for counter-clockwise order."""
        pts = self.points
        if not pts:
            return 0
        following = pts[1:] + pts[:1]
        preceding = pts[-1:] + pts[:-1]
        return sum(p.x * (n.y - q.y) for p, n, q in zip(pts, following, preceding))

    def point_in_perimeter(self, point: Point) -> bool:
        """Tell whether ``point`` lies on some edge."""
        return any(point_in_segment(a, b, point) for a, b in self._edges())

    def locate(self, point: Point) -> Location:
        """Tell whether ``point`` is inside, outside or on the boundary."""
        if self.point_in_perimeter(point):
            return Location.BOUNDARY
        rays = sum(crosses_ray(a, b, point) for a, b in self._edges())
        return Location.INSIDE if rays % 2 else Location.OUTSIDE


def polygon_area(points: Iterable[Point]) -> float:
    """Return twice the area of the polygon; an integer for integer vertices."""
    return abs(Polygon(list(points)).doubled_area())