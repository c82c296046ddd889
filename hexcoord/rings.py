"""Rings and spirals of hexagonal coordinates around a center."""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterable, Iterator, List

from hexcoord.hex import Hex
from hexcoord.ranges import _CountedIterator


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")


def _check_direction(start_index: int) -> None:
    if not 0 <= start_index < 6:
        raise ValueError(f"direction index must be in 0..5, got {start_index}")


def ring_count(radius: int) -> int:
    """Number of coordinates in the ring at ``radius`` (1 for radius 0)."""
    _check_radius(radius)
    return 1 if radius == 0 else 6 * radius


def wedge_count(radius: int) -> int:
    """Number of coordinates in a wedge of rings ``0..=radius``."""
    _check_radius(radius)
    return radius * (radius + 3) // 2 + 1


def _ring_steps(start_index: int, clockwise: bool) -> List[Hex]:
    offsets = list(Hex.NEIGHBORS_COORDS)
    offsets = offsets[start_index:] + offsets[:start_index]
    if clockwise:
        offsets.reverse()
        return offsets[1:] + offsets[:1]
    return offsets[2:] + offsets[:2]


def _ring_points(
    center: Hex, radius: int, start_index: int, clockwise: bool
) -> Iterator[Hex]:
    point = center + Hex.NEIGHBORS_COORDS[start_index] * radius
    yield point
    if radius == 0:
        return
    steps = (
        step
        for step in _ring_steps(start_index, clockwise)
        for _ in range(radius)
    )
    for step in islice(steps, ring_count(radius) - 1):
        point = point + step
        yield point


def custom_ring(
    center: Hex, radius: int, start_index: int = 0, clockwise: bool = False
) -> _CountedIterator:
    """The ring of ``radius`` around ``center``.

    Starts in the edge direction ``start_index`` and turns counter clockwise
    unless ``clockwise`` is set. A radius of 0 yields ``center`` alone.
    """
    _check_radius(radius)
    _check_direction(start_index)
    return _CountedIterator(
        _ring_points(center, radius, start_index, clockwise), ring_count(radius)
    )


def ring(center: Hex, radius: int) -> _CountedIterator:
    """The ring of ``radius`` around ``center``, from direction 0, counter clockwise."""
    return custom_ring(center, radius, 0, False)


def rings(center: Hex, radii: Iterable[int]) -> Iterator[List[Hex]]:
    """One list per radius in ``radii``, each a ring around ``center``."""
    return custom_rings(center, radii, 0, False)


def custom_rings(
    center: Hex, radii: Iterable[int], start_index: int = 0, clockwise: bool = False
) -> Iterator[List[Hex]]:
    """One list per radius in ``radii``, each a custom ring around ``center``."""
    _check_direction(start_index)
    return (list(custom_ring(center, r, start_index, clockwise)) for r in radii)


def cached_rings(center: Hex, count: int) -> List[List[Hex]]:
    """The rings of radius ``0..count`` around ``center``, as a list."""
    return cached_custom_rings(center, count, 0, False)


def cached_custom_rings(
    center: Hex, count: int, start_index: int = 0, clockwise: bool = False
) -> List[List[Hex]]:
    """The custom rings of radius ``0..count`` around ``center``, as a list."""
    if count < 0:
        raise ValueError(f"ring count must be non-negative, got {count}")
    return list(custom_rings(center, range(count), start_index, clockwise))


def spiral_range(center: Hex, radii: Iterable[int]) -> Iterator[Hex]:
    """Successive rings around ``center`` for each radius, flattened."""
    return custom_spiral_range(center, radii, 0, False)


def custom_spiral_range(
    center: Hex, radii: Iterable[int], start_index: int = 0, clockwise: bool = False
) -> Iterator[Hex]:
    """Successive custom rings around ``center`` for each radius, flattened."""
    return chain.from_iterable(custom_rings(center, radii, start_index, clockwise))