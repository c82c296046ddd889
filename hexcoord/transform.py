"""Rotations, reflections and swizzles of hexagonal coordinates."""

from __future__ import annotations

from typing import Callable, Dict

from hexcoord.hex import Hex

_AXES: Dict[str, Callable[[Hex], int]] = {
    "x": lambda h: h.x,
    "q": lambda h: h.x,
    "y": lambda h: h.y,
    "r": lambda h: h.y,
    "z": lambda h: h.z,
    "s": lambda h: h.z,
}


def _steps(m: int) -> int:
    if m < 0:
        raise ValueError(f"rotation count must be non-negative, got {m}")
    return m % 6


def clockwise(hex: Hex) -> Hex:
    """Rotate ``hex`` around the origin by 60 degrees clockwise."""
    return Hex(-hex.y, -hex.z)


def counter_clockwise(hex: Hex) -> Hex:
    """Rotate ``hex`` around the origin by 60 degrees counter clockwise."""
    return Hex(-hex.z, -hex.x)


def cw_around(hex: Hex, center: Hex) -> Hex:
    """Rotate ``hex`` around ``center`` by 60 degrees clockwise."""
    return clockwise(hex - center) + center


def ccw_around(hex: Hex, center: Hex) -> Hex:
    """Rotate ``hex`` around ``center`` by 60 degrees counter clockwise."""
    return counter_clockwise(hex - center) + center


def rotate_cw(hex: Hex, m: int) -> Hex:
    """Rotate ``hex`` around the origin clockwise ``m`` times."""
    steps = _steps(m)
    if steps == 3:
        return -hex
    if steps > 3:
        for _ in range(6 - steps):
            hex = counter_clockwise(hex)
        return hex
    for _ in range(steps):
        hex = clockwise(hex)
    return hex


def rotate_ccw(hex: Hex, m: int) -> Hex:
    """Rotate ``hex`` around the origin counter clockwise ``m`` times."""
    steps = _steps(m)
    if steps == 3:
        return -hex
    if steps > 3:
        for _ in range(6 - steps):
            hex = clockwise(hex)
        return hex
    for _ in range(steps):
        hex = counter_clockwise(hex)
    return hex


def rotate_cw_around(hex: Hex, center: Hex, m: int) -> Hex:
    """Rotate ``hex`` around ``center`` clockwise ``m`` times."""
    return rotate_cw(hex - center, m) + center


def rotate_ccw_around(hex: Hex, center: Hex, m: int) -> Hex:
    """Rotate ``hex`` around ``center`` counter clockwise ``m`` times."""
    return rotate_ccw(hex - center, m) + center


def reflect_x(hex: Hex) -> Hex:
    """Reflect ``hex`` across the ``x`` axis."""
    return Hex(hex.x, hex.z)


def reflect_y(hex: Hex) -> Hex:
    """Reflect ``hex`` across the ``y`` axis."""
    return Hex(hex.z, hex.y)


def reflect_z(hex: Hex) -> Hex:
    """Reflect ``hex`` across the ``z`` axis."""
    return Hex(hex.y, hex.x)


def swizzle(hex: Hex, pattern: str) -> Hex:
    """Build a new coordinate from two cubic axes named in ``pattern``.

    ``pattern`` holds two letters among ``x``, ``y``, ``z`` (or their aliases
    ``q``, ``r``, ``s``), e.g. ``"yz"`` gives ``Hex(hex.y, hex.z)``.
    """
    if len(pattern) != 2:
        raise ValueError(f"swizzle pattern must have two axes, got {pattern!r}")
    try:
        first, second = (_AXES[axis] for axis in pattern.lower())
    except KeyError:
        raise ValueError(f"unknown axis in swizzle pattern {pattern!r}") from None
    return Hex(first(hex), second(hex))