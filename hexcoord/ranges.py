"""Lines, filled ranges and aggregate helpers over hexagonal coordinates."""

from __future__ import annotations

from typing import Iterable, Iterator

from hexcoord.hex import Hex
from hexcoord.resolution import range_count


class _CountedIterator:
    """An iterator that knows how many items it still has to yield."""

    __slots__ = ("_iterator", "_remaining")

    def __init__(self, iterable: Iterable[Hex], count: int) -> None:
        self._iterator = iter(iterable)
        self._remaining = count

    def __iter__(self) -> "_CountedIterator":
        return self

    def __next__(self) -> Hex:
        self._remaining = max(self._remaining - 1, 0)
        return next(self._iterator)

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining


def line_to(start: Hex, end: Hex) -> _CountedIterator:
    """All coordinates on a straight line from ``start`` to ``end``, both included."""
    distance = start.distance_to(end)
    steps = max(distance, 1)
    points = (start.lerp(end, step / steps) for step in range(distance + 1))
    return _CountedIterator(points, distance + 1)


def _range_points(center: Hex, radius: int) -> Iterator[Hex]:
    for x in range(-radius, radius + 1):
        y_min = max(-radius, -x - radius)
        y_max = min(radius, radius - x)
        for y in range(y_min, y_max + 1):
            yield Hex(center.x + x, center.y + y)


def hex_range(center: Hex, radius: int) -> _CountedIterator:
    """All coordinates within ``radius`` of ``center``, ``center`` included."""
    count = range_count(radius)
    return _CountedIterator(_range_points(center, radius), count)


def excluding_range(center: Hex, radius: int) -> _CountedIterator:
    """All coordinates within ``radius`` of ``center``, ``center`` excluded."""
    count = range_count(radius) - 1
    points = (h for h in _range_points(center, radius) if h != center)
    return _CountedIterator(points, count)


def average(hexes: Iterable[Hex]) -> Hex:
    """The mean coordinate of ``hexes``; ``Hex.ZERO`` when there are none."""
    total = Hex.ZERO
    count = 0
    for h in hexes:
        total = total + h
        count += 1
    return total / max(count, 1)