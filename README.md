# hexcoord

Hexagonal grid coordinates in axial form: arithmetic, rotations, lines,
filled ranges, rings, spirals and multi-resolution chunks.

## Installation

```
pip install hexcoord
```

The package has no runtime dependencies. To run the tests:

```
pip install "hexcoord[test]"
pytest
```

## Coordinates

`hexcoord.hex.Hex` is an immutable axial coordinate `(x, y)`; the cubic third
axis is the property `z`, equal to `-x - y`.

```python
from hexcoord.hex import Hex

a = Hex(10, -5)
b = Hex(-8, 15)

a.z                   # -5
a.to_cubic()          # (10, -5, -5)
tuple(a)              # (10, -5)
a.distance_to(b)      # hex distance
a.length()            # distance from the origin
a.neighbors()         # the 6 edge neighbours, as a tuple
a.diagonals()         # the 6 diagonal neighbours, as a tuple
a.lerp(b, 0.5)        # rounded linear interpolation
a.min(b), a.max(b)    # component-wise minimum and maximum
a.dot(b), a.signum()

Hex.splat(3)                      # Hex(3, 3)
Hex.round((0.6, 10.2))            # equal to Hex(1, 10)
Hex.new_cubic(3, 5, -8)           # raises ValueError if x + y + z != 0
Hex.from_u64(Hex(0xAA, -0xBB).as_u64())   # round trip through a 64 bit integer
```

Class constants include `Hex.ZERO`, `Hex.ONE`, `Hex.X`, `Hex.Y`, their
negatives, `Hex.NEIGHBORS_COORDS` and `Hex.DIAGONAL_COORDS`.

### Arithmetic

`Hex` supports `+`, `-`, `*`, `%` and the bitwise operators `&`, `|`, `^`,
`<<`, `>>` with another `Hex` or an integer, plus unary `-` and `abs()`.

- Multiplying by a float rounds the result to the nearest hexagon.
- Dividing by a `Hex` divides component-wise, truncating toward zero.
- Dividing by an integer or a float scales the coordinate's length toward the
  origin: `Hex(10, 30) / 2 == Hex(5, 15)`.
- `sum()` works on any iterable of coordinates.

## Rotations, reflections and swizzles

```python
from hexcoord.hex import Hex
from hexcoord.transform import clockwise, rotate_cw_around, reflect_x, swizzle

clockwise(Hex(1, 2))                      # Hex(-2, 3)
rotate_cw_around(Hex(3, 0), Hex(1, 0), 2) # 120 degrees clockwise around Hex(1, 0)
reflect_x(Hex(1, 2))                      # Hex(1, -3)
swizzle(Hex(1, 2), "zy")                  # Hex(-3, 2)
```

`hexcoord.transform` also has `counter_clockwise`, `cw_around`, `ccw_around`,
`rotate_cw`, `rotate_ccw`, `rotate_ccw_around`, `reflect_y` and `reflect_z`.
Rotation counts must be non-negative; swizzle patterns take two letters among
`x`, `y`, `z` (or `q`, `r`, `s`).

## Lines and ranges

```python
from hexcoord.hex import Hex
from hexcoord.ranges import line_to, hex_range, excluding_range, average

list(line_to(Hex(0, 0), Hex(5, 0)))       # 6 coordinates, both ends included
list(hex_range(Hex(12, 34), 1))           # 7 coordinates
list(excluding_range(Hex(12, 34), 1))     # 6 coordinates
average(hex_range(Hex(0, 0), 10))         # Hex(0, 0)
```

The iterators returned by `line_to`, `hex_range` and `excluding_range` support
`len()`, which gives the number of items still to come.

## Rings and spirals

```python
from hexcoord.hex import Hex
from hexcoord.rings import ring, custom_ring, spiral_range, cached_rings, ring_count, wedge_count

list(ring(Hex(0, 0), 1))                  # the 6 neighbours
list(custom_ring(Hex(0, 0), 5, 0, True))  # clockwise ring starting from direction 0
list(spiral_range(Hex(0, 0), range(0, 11)))
cache = cached_rings(Hex(0, 0), 10)       # rings of radius 0 to 9
ring_count(5)                             # 30
wedge_count(13)
```

Directions are given as an index from 0 to 5, in the order of
`Hex.NEIGHBORS_COORDS`. `rings`, `custom_rings`, `cached_custom_rings` and
`custom_spiral_range` are also available.

## Resolutions and chunks

Split a large grid into hexagonal chunks of a given radius:

```python
from hexcoord.hex import Hex
from hexcoord.resolution import to_higher_res, to_lower_res, to_local, wrap_in_range, range_count

chunk = Hex(2, 3)
center = to_higher_res(chunk, 10)         # centre of the chunk in the fine grid
to_lower_res(center, 10)                  # back to Hex(2, 3)
to_local(center, 10)                      # Hex(0, 0)
wrap_in_range(Hex(100, -40), 5)           # wrapped into the radius-5 hexagon around the origin
range_count(15)                           # 721
```

## What the package does not do

`hexcoord` works in hexagonal coordinates only. It does not convert between
hexagons and pixel or world positions, has no direction types, edge or vertex
types, bounding regions, dense map storage, mesh generation or path-finding,
and provides no command-line tool.