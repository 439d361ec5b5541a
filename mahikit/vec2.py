"""Two-dimensional vectors and planar geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

__all__ = [
    "Vec2",
    "abs_vec",
    "sq_len",
    "magnitude",
    "unit",
    "normal",
    "dot",
    "cross",
    "parallel",
    "perpendicular",
    "intersect",
    "intersection",
    "inside_line",
    "inside_triangle",
    "inside_polygon",
    "polygon_area",
    "is_convex",
    "angle",
    "winding",
]


@dataclass(slots=True)
class Vec2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y)[axis]

    def __setitem__(self, axis: int, value: float) -> None:
        if axis in (0, -2):
            self.x = value
        elif axis in (1, -1):
            self.y = value
        else:
            raise IndexError("Vec2 index out of range")

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)


def abs_vec(v: Vec2) -> Vec2:
    """Return the component-wise absolute value of ``v``."""
    return Vec2(abs(v.x), abs(v.y))


def sq_len(v: Vec2) -> float:
    """Return the squared length of ``v``."""
    return v.x * v.x + v.y * v.y


def magnitude(v: Vec2) -> float:
    """Return the length of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def unit(v: Vec2) -> Vec2:
    """Return ``v`` scaled to length one; the zero vector has no direction."""
    if v == Vec2():
        raise ValueError("cannot normalize the zero vector")
    return v * (1.0 / magnitude(v))


def normal(v: Vec2) -> Vec2:
    """Return ``v`` rotated a quarter turn counter-clockwise."""
    return Vec2(-v.y, v.x)


def dot(lhs: Vec2, rhs: Vec2) -> float:
    """Return the dot product."""
    return lhs.x * rhs.x + lhs.y * rhs.y


def cross(lhs: Vec2, rhs: Vec2) -> float:
    """Return the z component of the 3D cross product."""
    return lhs.x * rhs.y - lhs.y * rhs.x


def parallel(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if line a1-a2 is parallel to line b1-b2."""
    return (a2.y - a1.y) * (b2.x - b1.x) == (b2.y - b1.y) * (a2.x - a1.x)


def perpendicular(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if line a1-a2 is perpendicular to line b1-b2."""
    return (a2.y - a1.y) * (b2.y - b1.y) == (b1.x - b2.x) * (a2.x - a1.x)


def intersect(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if segments a1-a2 and b1-b2 properly cross each other."""
    side_b1 = (b1.x - a1.x) * (a2.y - a1.y) - (b1.y - a1.y) * (a2.x - a1.x)
    side_b2 = (b2.x - a1.x) * (a2.y - a1.y) - (b2.y - a1.y) * (a2.x - a1.x)
    side_a1 = (a1.x - b1.x) * (b2.y - b1.y) - (a1.y - b1.y) * (b2.x - b1.x)
    side_a2 = (a2.x - b1.x) * (b2.y - b1.y) - (a2.y - b1.y) * (b2.x - b1.x)
    return side_b1 * side_b2 < 0 and side_a1 * side_a2 < 0


def intersection(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> Vec2:
    """Return where lines a1-a2 and b1-b2 meet, or (inf, inf) if parallel."""
    v1 = a1.x * a2.y - a1.y * a2.x
    v2 = b1.x * b2.y - b1.y * b2.x
    v3 = (a1.x - a2.x) * (b1.y - b2.y) - (a1.y - a2.y) * (b1.x - b2.x)
    if v3 == 0:
        return Vec2(math.inf, math.inf)
    return Vec2(
        (v1 * (b1.x - b2.x) - v2 * (a1.x - a2.x)) / v3,
        (v1 * (b1.y - b2.y) - v2 * (a1.y - a2.y)) / v3,
    )


def inside_line(l1: Vec2, l2: Vec2, p: Vec2) -> bool:
    """Return True if ``p`` lies on segment l1-l2 (within a small tolerance)."""
    direction = l2 - l1
    offset = p - l1
    if abs(cross(direction, offset)) > 0.1:
        return False
    projection = dot(direction, offset)
    if projection < 0:
        return False
    return projection <= dot(direction, direction)


def inside_triangle(a: Vec2, b: Vec2, c: Vec2, p: Vec2) -> bool:
    """Return True if ``p`` lies strictly inside triangle abc."""
    s = a.y * c.x - a.x * c.y + (c.y - a.y) * p.x + (a.x - c.x) * p.y
    t = a.x * b.y - a.y * b.x + (a.y - b.y) * p.x + (b.x - a.x) * p.y
    if (s < 0) != (t < 0):
        return False
    area = -b.y * c.x + a.y * (c.x - b.x) + a.x * (b.y - c.y) + b.x * c.y
    if area < 0.0:
        s, t, area = -s, -t, -area
    return s > 0 and t > 0 and (s + t) <= area


def _with_previous(poly: Sequence[Vec2]) -> Iterator[tuple[Vec2, Vec2]]:
    """Yield each vertex paired with the one before it, wrapping around."""
    return zip(poly, [*poly[-1:], *poly[:-1]])


def inside_polygon(poly: Sequence[Vec2], point: Vec2) -> bool:
    """Return True if ``point`` is inside ``poly`` by the even-odd rule."""
    inside = False
    for pi, pj in _with_previous(poly):
        if (pi.y > point.y) != (pj.y > point.y) and point.x < (pj.x - pi.x) * (
            point.y - pi.y
        ) / (pj.y - pi.y) + pi.x:
            inside = not inside
    return inside


def polygon_area(polygon: Sequence[Vec2]) -> float:
    """Return the signed area of ``polygon``; positive when counter-clockwise."""
    if len(polygon) < 3:
        raise ValueError("a polygon needs at least three points")
    previous = [*polygon[-1:], *polygon[:-1]]
    following = [*polygon[1:], *polygon[:1]]
    total = sum(
        cur.x * (nxt.y - prv.y) for prv, cur, nxt in zip(previous, polygon, following)
    )
    return total * 0.5


def is_convex(polygon: Sequence[Vec2]) -> bool:
    """Return True if every turn along ``polygon`` has the same direction."""
    negative = positive = False
    count = len(polygon)
    for index, a in enumerate(polygon):
        b = polygon[(index + 1) % count]
        c = polygon[(index + 2) % count]
        product = cross(b - a, c - b)
        if product < 0:
            negative = True
        elif product > 0:
            positive = True
        if negative and positive:
            return False
    return True


def angle(v: Vec2, other: Vec2 | None = None) -> float:
    """Return the direction of ``v``, or the signed angle from ``v`` to ``other``."""
    if other is None:
        return math.atan2(v.y, v.x)
    return math.atan2(cross(v, other), dot(v, other))


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def winding(a: Vec2, b: Vec2, c: Vec2 | None = None) -> int:
    """Return the turn direction (-1, 0 or 1) between two vectors or along three points."""
    if c is None:
        return _sign(cross(a, b))
    return _sign(cross(b - a, c - b))