"""Multi-resolution hexagonal coordinates: parents, children and wrapping."""

from __future__ import annotations

from hexcoord.hex import Hex


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")


def range_count(radius: int) -> int:
    """Number of coordinates within ``radius`` of a hexagon."""
    _check_radius(radius)
    return 3 * radius * (radius + 1) + 1


def _shift(radius: int) -> int:
    return 3 * radius + 2


def to_lower_res(hex: Hex, radius: int) -> Hex:
    """The parent coordinate of ``hex`` in a grid of chunks of ``radius``."""
    area = range_count(radius)
    shift = _shift(radius)
    x, y, z = hex.to_cubic()
    x, y, z = (
        (y + shift * x) // area,
        (z + shift * y) // area,
        (x + shift * z) // area,
    )
    return Hex((1 + x - y) // 3, (1 + y - z) // 3)


def to_higher_res(hex: Hex, radius: int) -> Hex:
    """The center child coordinate of ``hex`` for chunks of ``radius``."""
    _check_radius(radius)
    x, y, z = hex.to_cubic()
    return Hex(x * (radius + 1) - radius * z, y * (radius + 1) - radius * x)


def to_local(hex: Hex, radius: int) -> Hex:
    """The position of ``hex`` relative to the center of its parent chunk."""
    center = to_higher_res(to_lower_res(hex, radius), radius)
    return hex - center


def wrap_in_range(hex: Hex, radius: int) -> Hex:
    """Wrap ``hex`` into the hexagon of ``radius`` around the origin."""
    return to_local(hex, radius)