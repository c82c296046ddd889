"""Axial hexagonal coordinates and their arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence, Tuple

_U32_MASK = 0xFFFF_FFFF
_U64_LIMIT = 1 << 64


def _to_i32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed integer."""
    value &= _U32_MASK
    return value - (1 << 32) if value & 0x8000_0000 else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    floored = math.floor(magnitude)
    if magnitude - floored >= 0.5:
        floored += 1
    return math.copysign(floored, value)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Hex:
    """Hexagonal axial coordinates ``(x, y)``; the cubic ``z`` is ``-x - y``."""

    x: int = 0
    y: int = 0

    ORIGIN: ClassVar["Hex"]
    ZERO: ClassVar["Hex"]
    ONE: ClassVar["Hex"]
    NEG_ONE: ClassVar["Hex"]
    X: ClassVar["Hex"]
    NEG_X: ClassVar["Hex"]
    Y: ClassVar["Hex"]
    NEG_Y: ClassVar["Hex"]
    INCR_X: ClassVar[Tuple["Hex", "Hex"]]
    INCR_Y: ClassVar[Tuple["Hex", "Hex"]]
    INCR_Z: ClassVar[Tuple["Hex", "Hex"]]
    DECR_X: ClassVar[Tuple["Hex", "Hex"]]
    DECR_Y: ClassVar[Tuple["Hex", "Hex"]]
    DECR_Z: ClassVar[Tuple["Hex", "Hex"]]
    NEIGHBORS_COORDS: ClassVar[Tuple["Hex", ...]]
    DIAGONAL_COORDS: ClassVar[Tuple["Hex", ...]]

    # Construction -------------------------------------------------------

    @classmethod
    def splat(cls, v: int) -> "Hex":
        """A coordinate with both axes set to ``v``."""
        return cls(v, v)

    @classmethod
    def new_cubic(cls, x: int, y: int, z: int) -> "Hex":
        """Build from cubic coordinates, which must sum to zero."""
        if x + y + z != 0:
            raise ValueError(f"cubic coordinates must sum to zero, got ({x}, {y}, {z})")
        return cls(x, y)

    @classmethod
    def from_u64(cls, value: int) -> "Hex":
        """Unpack from a 64 bit integer: ``x`` in the high half, ``y`` in the low half."""
        if not 0 <= value < _U64_LIMIT:
            raise ValueError(f"value {value} does not fit in 64 unsigned bits")
        return cls(_to_i32(value >> 32), _to_i32(value & _U32_MASK))

    @classmethod
    def round(cls, point: Sequence[float]) -> "Hex":
        """Round fractional axial coordinates to the nearest hexagon."""
        x, y = point
        x_r, y_r = _round_half_away(x), _round_half_away(y)
        x -= x_r
        y -= y_r
        if abs(x) >= abs(y):
            x_r += _round_half_away(0.5 * y + x)
        else:
            y_r += _round_half_away(0.5 * x + y)
        return cls(int(x_r), int(y_r))

    # Accessors and conversions -----------------------------------------

    @property
    def z(self) -> int:
        """The cubic ``z`` coordinate, ``-x - y``."""
        return -self.x - self.y

    def to_cubic(self) -> Tuple[int, int, int]:
        """The cubic coordinates ``(x, y, z)``."""
        return (self.x, self.y, self.z)

    def as_u64(self) -> int:
        """Pack into a 64 bit unsigned integer, ``x`` in the high half."""
        return ((self.x & _U32_MASK) << 32) | (self.y & _U32_MASK)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Hex(x={self.x}, y={self.y}, z={self.z})"

    # Metrics -----------------------------------------------------------

    def length(self) -> int:
        """Distance from the origin in hexagonal steps."""
        return max(abs(self.x), abs(self.y), abs(self.z))

    def distance_to(self, other: "Hex") -> int:
        """Distance to ``other`` in hexagonal steps."""
        return (self - other).length()

    def min(self, other: "Hex") -> "Hex":
        """Component-wise minimum."""
        return Hex(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Hex") -> "Hex":
        """Component-wise maximum."""
        return Hex(max(self.x, other.x), max(self.y, other.y))

    def dot(self, other: "Hex") -> int:
        """Dot product of the axial components."""
        return self.x * other.x + self.y * other.y

    def signum(self) -> "Hex":
        """Component-wise sign: -1, 0 or 1."""
        return Hex(_sign(self.x), _sign(self.y))

    # Neighbourhood -----------------------------------------------------

    def neighbors(self) -> Tuple["Hex", ...]:
        """The six edge neighbours, in direction order."""
        return tuple(self + offset for offset in Hex.NEIGHBORS_COORDS)

    def diagonals(self) -> Tuple["Hex", ...]:
        """The six diagonal neighbours, in direction order."""
        return tuple(self + offset for offset in Hex.DIAGONAL_COORDS)

    def lerp(self, other: "Hex", s: float) -> "Hex":
        """Linear interpolation towards ``other``, extrapolating outside [0, 1]."""
        return Hex.round(
            (
                self.x + (other.x - self.x) * s,
                self.y + (other.y - self.y) * s,
            )
        )

    # Arithmetic --------------------------------------------------------

    def __add__(self, other: object) -> "Hex":
        if isinstance(other, Hex):
            return Hex(self.x + other.x, self.y + other.y)
        if isinstance(other, int):
            return Hex(self.x + other, self.y + other)
        return NotImplemented

    def __radd__(self, other: object) -> "Hex":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Hex":
        if isinstance(other, Hex):
            return Hex(self.x - other.x, self.y - other.y)
        if isinstance(other, int):
            return Hex(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: object) -> "Hex":
        if isinstance(other, Hex):
            return Hex(self.x * other.x, self.y * other.y)
        if isinstance(other, int):
            return Hex(self.x * other, self.y * other)
        if isinstance(other, float):
            return Hex.round((self.x * other, self.y * other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Hex":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Hex":
        if isinstance(other, Hex):
            return Hex(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))
        if isinstance(other, int):
            length = self.length()
            new_length = _trunc_div(length, other)
            return self._scaled_to(length, new_length)
        if isinstance(other, float):
            if other == 0.0:
                raise ZeroDivisionError("division of a hex by zero")
            length = self.length()
            new_length = int(length / other)
            return self._scaled_to(length, new_length)
        return NotImplemented

    def _scaled_to(self, length: int, new_length: int) -> "Hex":
        if length == 0:
            return Hex.ZERO
        return Hex.ZERO.lerp(self, new_length / length)

    def __mod__(self, other: object) -> "Hex":
        if isinstance(other, (Hex, int)) and not isinstance(other, bool):
            return self - (self / other) * other
        return NotImplemented

    def __neg__(self) -> "Hex":
        return Hex(-self.x, -self.y)

    def __abs__(self) -> "Hex":
        return Hex(abs(self.x), abs(self.y))

    # Bitwise -----------------------------------------------------------

    def _componentwise(self, other: object, op) -> "Hex":
        if isinstance(other, Hex):
            return Hex(op(self.x, other.x), op(self.y, other.y))
        if isinstance(other, int):
            return Hex(op(self.x, other), op(self.y, other))
        return NotImplemented

    def __and__(self, other: object) -> "Hex":
        return self._componentwise(other, lambda a, b: a & b)

    def __or__(self, other: object) -> "Hex":
        return self._componentwise(other, lambda a, b: a | b)

    def __xor__(self, other: object) -> "Hex":
        return self._componentwise(other, lambda a, b: a ^ b)

    def __lshift__(self, other: object) -> "Hex":
        return self._componentwise(other, lambda a, b: _to_i32(a << b))

    def __rshift__(self, other: object) -> "Hex":
        return self._componentwise(other, lambda a, b: a >> b)


Hex.ZERO = Hex(0, 0)
Hex.ORIGIN = Hex.ZERO
Hex.ONE = Hex(1, 1)
Hex.NEG_ONE = Hex(-1, -1)
Hex.X = Hex(1, 0)
Hex.NEG_X = Hex(-1, 0)
Hex.Y = Hex(0, 1)
Hex.NEG_Y = Hex(0, -1)
Hex.INCR_X = (Hex(1, 0), Hex(1, -1))
Hex.INCR_Y = (Hex(0, 1), Hex(-1, 1))
Hex.INCR_Z = (Hex(-1, 0), Hex(0, -1))
Hex.DECR_X = (Hex(-1, 0), Hex(-1, 1))
Hex.DECR_Y = (Hex(0, -1), Hex(1, -1))
Hex.DECR_Z = (Hex(1, 0), Hex(0, 1))
Hex.NEIGHBORS_COORDS = (
    Hex(1, 0),
    Hex(0, 1),
    Hex(-1, 1),
    Hex(-1, 0),
    Hex(0, -1),
    Hex(1, -1),
)
Hex.DIAGONAL_COORDS = (
    Hex(2, -1),
    Hex(1, 1),
    Hex(-1, 2),
    Hex(-2, 1),
    Hex(-1, -1),
    Hex(1, -2),
)