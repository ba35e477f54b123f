"""Moore neighborhood enumeration in D dimensions.

Each of the 3^D candidate offsets around a cell is read as a D-digit
base-3 number: digit i is the delta on axis i, with digits {0, 1, 2}
mapping to deltas {-1, 0, +1}. Enumerating 0 .. 3^D - 1 therefore visits
every offset exactly once. The generalisation of the classic 8-cell 2D
neighborhood grows exponentially with D, so D is expected to stay small.
"""

from functools import lru_cache
from typing import List, Tuple

import numpy as np

from .point import Point

Offset = Tuple[int, ...]


@lru_cache(maxsize=None)
def _offset_table(dimension: int) -> np.ndarray:
    """Decode 0 .. 3^D - 1 into a (3^D, D) array of per-axis deltas."""
    if dimension < 1:
        raise ValueError(f"Dimension must be at least 1, got {dimension}")

    n = np.arange(3 ** dimension, dtype=np.int64)
    powers = 3 ** np.arange(dimension, dtype=np.int64)

    # Digit for axis i is (n // 3^i) % 3, shifted into [-1, 1]
    digits = (n[:, None] // powers[None, :]) % 3
    table = digits - 1
    table.setflags(write=False)
    return table


@lru_cache(maxsize=None)
def neighbor_offsets(dimension: int, include_center: bool = False) -> Tuple[Offset, ...]:
    """Per-axis deltas of the Moore neighborhood.

    Args:
        dimension: Number of lattice axes (>= 1)
        include_center: Keep the all-zero offset

    Returns:
        3^D offsets when include_center is set, otherwise 3^D - 1

    Raises:
        ValueError: If dimension < 1
    """
    table = _offset_table(dimension)
    offsets = tuple(tuple(int(d) for d in row) for row in table)
    if include_center:
        return offsets

    center = (0,) * dimension
    return tuple(o for o in offsets if o != center)


def neighbors(point: Point) -> List[Point]:
    """All points at Chebyshev distance exactly 1 from point (3^D - 1 of them)."""
    return [
        candidate
        for candidate in neighbors_with_self(point)
        if candidate != point
    ]


def neighbors_with_self(point: Point) -> List[Point]:
    """The Moore neighborhood of point including point itself (3^D points)."""
    base = point.coords
    return [
        Point(tuple(b + d for b, d in zip(base, delta)))
        for delta in neighbor_offsets(point.dimension, include_center=True)
    ]


def neighborhood_size(dimension: int, include_center: bool = False) -> int:
    """Number of points in the D-dimensional Moore neighborhood."""
    size = 3 ** dimension
    return size if include_center else size - 1
