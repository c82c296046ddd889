import pytest

from hexcoord.hex import Hex
from hexcoord.transform import (
    ccw_around,
    clockwise,
    counter_clockwise,
    cw_around,
    reflect_x,
    reflect_y,
    reflect_z,
    rotate_ccw,
    rotate_ccw_around,
    rotate_cw,
    rotate_cw_around,
    swizzle,
)


def test_neighbor_rotation():
    neighbors = Hex.ZERO.neighbors()
    for prev, nxt in zip(neighbors, neighbors[1:]):
        assert clockwise(prev) == nxt
        assert counter_clockwise(nxt) == prev


def test_doc_examples():
    p = Hex(1, 2)
    assert counter_clockwise(p) == Hex(3, -1)
    assert clockwise(p) == Hex(-2, 3)


def test_rotate_cw():
    point = Hex(5, 0)
    new = clockwise(point)
    assert new == Hex(0, 5)
    assert rotate_cw(point, 1) == new
    new = clockwise(new)
    assert new == Hex(-5, 5)
    assert rotate_cw(point, 2) == new
    new = clockwise(new)
    assert new == Hex(-5, 0)
    assert rotate_cw(point, 3) == new
    new = clockwise(new)
    assert new == Hex(0, -5)
    assert rotate_cw(point, 4) == new
    new = clockwise(new)
    assert new == Hex(5, -5)
    assert rotate_cw(point, 5) == new
    new = clockwise(new)
    assert new == point
    assert rotate_cw(point, 6) == new
    assert rotate_cw(point, 7) == rotate_cw(point, 1)
    assert rotate_cw(point, 10) == rotate_cw(point, 4)


def test_rotate_ccw():
    point = Hex(5, 0)
    new = counter_clockwise(point)
    assert new == Hex(5, -5)
    assert rotate_ccw(point, 1) == new
    new = counter_clockwise(new)
    assert new == Hex(0, -5)
    assert rotate_ccw(point, 2) == new
    new = counter_clockwise(new)
    assert new == Hex(-5, 0)
    assert rotate_ccw(point, 3) == new
    new = counter_clockwise(new)
    assert new == Hex(-5, 5)
    assert rotate_ccw(point, 4) == new
    new = counter_clockwise(new)
    assert new == Hex(0, 5)
    assert rotate_ccw(point, 5) == new
    new = counter_clockwise(new)
    assert new == point
    assert rotate_ccw(point, 6) == new
    assert rotate_ccw(point, 7) == rotate_ccw(point, 1)
    assert rotate_ccw(point, 10) == rotate_ccw(point, 4)


def test_rotate_negative_count_rejected():
    with pytest.raises(ValueError):
        rotate_cw(Hex(1, 0), -1)
    with pytest.raises(ValueError):
        rotate_ccw(Hex(1, 0), -2)


def test_rotation_around_center():
    center = Hex(3, -2)
    point = center + Hex(5, 0)
    assert cw_around(point, center) == center + Hex(0, 5)
    assert ccw_around(point, center) == center + Hex(5, -5)
    assert rotate_cw_around(point, center, 2) == center + Hex(-5, 5)
    assert rotate_ccw_around(point, center, 4) == center + Hex(-5, 5)
    assert rotate_cw_around(point, center, 6) == point
    assert ccw_around(cw_around(point, center), center) == point


@pytest.mark.parametrize("m", range(12))
def test_rotation_preserves_length(m):
    point = Hex(7, -3)
    assert rotate_cw(point, m).length() == point.length()
    assert rotate_ccw(rotate_cw(point, m), m) == point


def test_reflections():
    p = Hex(1, 2)
    assert reflect_x(p) == Hex(1, -3)
    assert reflect_y(p) == Hex(-3, 2)
    assert reflect_z(p) == Hex(2, 1)
    for reflect in (reflect_x, reflect_y, reflect_z):
        assert reflect(reflect(p)) == p
        assert reflect(p).length() == p.length()


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("xx", Hex(1, 1)),
        ("yy", Hex(2, 2)),
        ("zz", Hex(-3, -3)),
        ("yx", Hex(2, 1)),
        ("yz", Hex(2, -3)),
        ("xz", Hex(1, -3)),
        ("zx", Hex(-3, 1)),
        ("zy", Hex(-3, 2)),
        ("xy", Hex(1, 2)),
        ("rs", Hex(2, -3)),
        ("sq", Hex(-3, 1)),
    ],
)
def test_swizzle(pattern, expected):
    assert swizzle(Hex(1, 2), pattern) == expected


@pytest.mark.parametrize("pattern", ["", "x", "xyz", "xw", "ab"])
def test_swizzle_invalid(pattern):
    with pytest.raises(ValueError):
        swizzle(Hex(1, 2), pattern)