import pytest

from pixelproc.rect import Rect


def test_rejects_empty_rectangle():
    with pytest.raises(ValueError):
        Rect.at(1, 2).of_size(0, 1)


def test_rejects_zero_height():
    with pytest.raises(ValueError):
        Rect.at(1, 2).of_size(1, 0)


def test_corners():
    rect = Rect.at(4, 5).of_size(6, 7)
    assert rect.left == 4
    assert rect.top == 5
    assert rect.right == 9
    assert rect.bottom == 11
    assert rect.width == 6
    assert rect.height == 7
    assert rect.contains(rect.left, rect.top)
    assert rect.contains(rect.right, rect.bottom)


def test_contains_int():
    r = Rect.at(5, 5).of_size(6, 6)
    assert r.contains(5, 5)
    assert r.contains(10, 10)
    assert not r.contains(10, 11)
    assert not r.contains(11, 10)


def test_contains_float():
    r = Rect.at(5, 5).of_size(6, 6)
    assert r.contains(5.0, 5.0)
    assert not r.contains(10.1, 10.0)


def test_intersect_with_self():
    r = Rect.at(4, 5).of_size(6, 7)
    assert r.intersect(r) == r


def test_intersect_overlapping():
    r = Rect.at(0, 0).of_size(5, 5)
    s = Rect.at(1, 4).of_size(10, 12)
    assert r.intersect(s) == Rect.at(1, 4).of_size(4, 1)


def test_intersect_disjoint():
    r = Rect.at(0, 0).of_size(5, 5)
    s = Rect.at(10, 10).of_size(100, 12)
    assert r.intersect(s) is None