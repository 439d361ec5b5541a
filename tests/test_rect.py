import pytest

from mahikit.rect import Rect
from mahikit.vec2 import Vec2


@pytest.fixture
def rect():
    return Rect(1.0, 2.0, 3.0, 4.0)


def test_default_is_empty():
    assert Rect() == Rect(0, 0, 0, 0)
    assert not Rect().contains(Vec2(0, 0))


def test_from_pos_size_round_trip(rect):
    rebuilt = Rect.from_pos_size(rect.pos(), rect.size())
    assert rebuilt == rect


def test_pos_and_size(rect):
    assert rect.pos() == Vec2(rect.left, rect.top)
    assert rect.size() == Vec2(rect.width, rect.height)
    assert rect.tl() == rect.pos()


def test_corners_relate_by_size(rect):
    size = rect.size()
    assert rect.br() == rect.tl() + size
    assert rect.tr() == rect.tl() + Vec2(size.x, 0)
    assert rect.bl() == rect.tl() + Vec2(0, size.y)


def test_center_is_midpoint(rect):
    assert rect.center() == (rect.tl() + rect.br()) / 2


def test_contains_is_half_open(rect):
    assert rect.contains(rect.tl())
    assert rect.contains(rect.center())
    assert not rect.contains(rect.br())
    assert not rect.contains(rect.tr())
    assert not rect.contains(rect.bl())
    assert not rect.contains(rect.tl() - Vec2(0.5, 0))


def test_equality(rect):
    assert rect == Rect(1.0, 2.0, 3.0, 4.0)
    assert rect != Rect(1.0, 2.0, 3.0, 5.0)