import pytest

from hexcoord.hex import Hex
from hexcoord.ranges import hex_range
from hexcoord.rings import (
    cached_custom_rings,
    cached_rings,
    custom_ring,
    custom_rings,
    custom_spiral_range,
    ring,
    ring_count,
    rings,
    spiral_range,
    wedge_count,
)


def test_ring_count():
    assert ring_count(0) == 1
    assert ring_count(1) == 6
    assert ring_count(5) == 30


def test_ring_count_negative():
    with pytest.raises(ValueError):
        ring_count(-1)


def test_wedge_count():
    assert wedge_count(0) == 1
    assert wedge_count(1) == 3
    assert wedge_count(2) == 6


def test_ring():
    point = Hex.ZERO
    assert list(ring(point, 0)) == [point]
    assert list(ring(point, 1)) == list(point.neighbors())

    radius = 5
    removed = set(hex_range(point, radius - 1))
    expected = [h for h in hex_range(point, radius) if h not in removed]
    result = ring(point, radius)
    assert len(result) == len(expected)
    for h in result:
        assert h in expected


def test_ring_len_decreases():
    it = ring(Hex(3, 4), 3)
    assert len(it) == 18
    next(it)
    assert len(it) == 17


def test_ring_members_at_distance():
    center = Hex(7, -2)
    for h in ring(center, 6):
        assert h.distance_to(center) == 6


def test_cached_rings():
    point = Hex.ZERO
    cache = cached_rings(point, 10)
    assert len(cache) == 10
    for r, cached in enumerate(cache):
        assert cached == list(ring(point, r))


def test_ring_offset():
    target = Hex(14, 7)
    expected = [h + target for h in ring(Hex.ZERO, 10)]
    assert list(ring(target, 10)) == expected


def test_custom_ring():
    point = Hex.ZERO
    assert list(custom_ring(point, 0, 2, True)) == [point]

    expected = list(ring(point, 5))
    expected.reverse()
    expected = expected[-1:] + expected[:-1]
    assert list(custom_ring(point, 5, 0, True)) == expected

    expected = list(ring(point, 5))
    result = custom_ring(point, 5, 2, False)
    assert len(result) == len(expected)
    for h in result:
        assert h in expected


def test_custom_ring_clockwise_radius_one():
    assert list(custom_ring(Hex.ZERO, 1, 0, True)) == [
        Hex(1, 0),
        Hex(1, -1),
        Hex(0, -1),
        Hex(-1, 0),
        Hex(-1, 1),
        Hex(0, 1),
    ]


def test_custom_ring_invalid_direction():
    with pytest.raises(ValueError):
        custom_ring(Hex.ZERO, 2, 6, False)


def test_rings():
    result = list(rings(Hex.ZERO, range(3, 10)))
    assert len(result) == 7
    assert result[0] == list(ring(Hex.ZERO, 3))


def test_custom_rings():
    result = list(custom_rings(Hex.ZERO, range(3, 10), 4, True))
    assert len(result) == 7
    assert result[2] == list(custom_ring(Hex.ZERO, 5, 4, True))


def test_cached_custom_rings():
    cache = cached_custom_rings(Hex.ORIGIN, 10, 4, True)
    assert len(cache) == 10
    for r, cached in enumerate(cache):
        assert cached == list(custom_ring(Hex.ORIGIN, r, 4, True))


def test_spiral_range():
    expected = list(hex_range(Hex.ZERO, 10))
    spiral = list(spiral_range(Hex.ZERO, range(0, 11)))
    assert len(spiral) == len(expected)
    for h in expected:
        assert h in spiral


def test_custom_spiral_range():
    spiral = list(custom_spiral_range(Hex(2, 3), range(0, 3), 1, True))
    assert spiral[0] == Hex(2, 3)
    assert len(spiral) == 19
    assert set(spiral) == set(hex_range(Hex(2, 3), 2))