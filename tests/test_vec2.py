import math

import pytest

from mahikit.vec2 import (
    Vec2,
    abs_vec,
    angle,
    cross,
    dot,
    inside_line,
    inside_polygon,
    inside_triangle,
    intersect,
    intersection,
    is_convex,
    magnitude,
    normal,
    parallel,
    perpendicular,
    polygon_area,
    sq_len,
    unit,
    winding,
)

SQUARE = [Vec2(0, 0), Vec2(2, 0), Vec2(2, 2), Vec2(0, 2)]


def test_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2


def test_in_place_and_indexing():
    v = Vec2(1, 2)
    v += Vec2(1, 1)
    assert v == Vec2(2, 3)
    v[0] = 7
    assert v[0] == 7 and v.x == 7
    assert tuple(v) == (7, 3)
    with pytest.raises(IndexError):
        v[2] = 1


def test_default_is_zero():
    assert Vec2() == Vec2(0, 0)


def test_abs_and_lengths():
    v = Vec2(-3, 4)
    assert abs_vec(v) == Vec2(3, 4)
    assert sq_len(v) == dot(v, v)
    assert magnitude(v) == 5


def test_unit_has_length_one():
    u = unit(Vec2(3, -7))
    assert math.isclose(magnitude(u), 1.0)
    assert math.isclose(cross(u, Vec2(3, -7)), 0.0, abs_tol=1e-12)


def test_unit_of_zero_raises():
    with pytest.raises(ValueError):
        unit(Vec2())


def test_normal_is_orthogonal():
    v = Vec2(2, 5)
    assert dot(v, normal(v)) == 0
    assert normal(normal(v)) == -v


def test_cross_antisymmetric():
    a, b = Vec2(1, 2), Vec2(3, 4)
    assert cross(a, b) == -cross(b, a)
    assert cross(a, a) == 0


def test_parallel_and_perpendicular():
    assert parallel(Vec2(0, 0), Vec2(1, 1), Vec2(0, 1), Vec2(2, 3))
    assert not parallel(Vec2(0, 0), Vec2(1, 0), Vec2(0, 0), Vec2(0, 1))
    assert perpendicular(Vec2(0, 0), Vec2(1, 0), Vec2(0, 0), Vec2(0, 1))
    assert not perpendicular(Vec2(0, 0), Vec2(1, 1), Vec2(0, 1), Vec2(2, 3))


def test_intersect_segments():
    assert intersect(Vec2(0, 0), Vec2(2, 2), Vec2(0, 2), Vec2(2, 0))
    assert not intersect(Vec2(0, 0), Vec2(1, 1), Vec2(3, 0), Vec2(4, -1))


def test_intersection_point_lies_on_both_lines():
    a1, a2, b1, b2 = Vec2(0, 0), Vec2(4, 2), Vec2(0, 3), Vec2(3, 0)
    p = intersection(a1, a2, b1, b2)
    assert math.isclose(cross(a2 - a1, p - a1), 0.0, abs_tol=1e-9)
    assert math.isclose(cross(b2 - b1, p - b1), 0.0, abs_tol=1e-9)


def test_intersection_parallel_is_infinite():
    p = intersection(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), Vec2(1, 1))
    assert p == Vec2(math.inf, math.inf)


def test_inside_line():
    l1, l2 = Vec2(0, 0), Vec2(4, 0)
    assert inside_line(l1, l2, Vec2(2, 0))
    assert not inside_line(l1, l2, Vec2(5, 0))
    assert not inside_line(l1, l2, Vec2(-1, 0))
    assert not inside_line(l1, l2, Vec2(2, 1))


def test_inside_triangle_either_orientation():
    a, b, c = Vec2(0, 0), Vec2(4, 0), Vec2(0, 4)
    p = Vec2(1, 1)
    assert inside_triangle(a, b, c, p)
    assert inside_triangle(a, c, b, p)
    assert not inside_triangle(a, b, c, Vec2(5, 5))


def test_inside_polygon():
    assert inside_polygon(SQUARE, Vec2(1, 1))
    assert not inside_polygon(SQUARE, Vec2(3, 1))
    assert not inside_polygon([], Vec2(0, 0))


def test_polygon_area_sign_follows_orientation():
    area = polygon_area(SQUARE)
    assert area == 4
    assert polygon_area(list(reversed(SQUARE))) == -area


def test_polygon_area_needs_three_points():
    with pytest.raises(ValueError):
        polygon_area([Vec2(0, 0), Vec2(1, 1)])


def test_is_convex():
    assert is_convex(SQUARE)
    dart = [Vec2(0, 0), Vec2(2, 1), Vec2(4, 0), Vec2(2, 4)]
    assert not is_convex(dart)


def test_angle_forms():
    v = Vec2(0, 3)
    assert math.isclose(angle(v), math.pi / 2)
    a, b = Vec2(1, 0), Vec2(0, 1)
    assert math.isclose(angle(a, b), -angle(b, a))
    assert angle(a, a) == 0


def test_winding_forms():
    assert winding(Vec2(1, 0), Vec2(0, 1)) == 1
    assert winding(Vec2(0, 1), Vec2(1, 0)) == -1
    assert winding(Vec2(1, 1), Vec2(2, 2)) == 0
    a, b, c = Vec2(0, 0), Vec2(1, 0), Vec2(1, 1)
    assert winding(a, b, c) == winding(b - a, c - b)
    assert winding(c, b, a) == -winding(a, b, c)