"""Lattice coordinates for D-dimensional cellular automata.

A Point is an immutable tuple of signed integers, one per axis. Points
compare and hash structurally, so two points with the same axis values
always name the same lattice cell. Arithmetic never mutates an existing
point; every operation returns a new one.
"""

import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from .errors import DimensionMismatchError


@dataclass(frozen=True)
class Point:
    """Immutable integer coordinate on the D-dimensional lattice.

    Attributes:
        coords: One signed integer per axis
    """
    coords: Tuple[int, ...]

    def __post_init__(self):
        # Normalise lists/arrays so hashing is structural; non-integers raise TypeError
        coords = tuple(operator.index(c) for c in self.coords)
        if len(coords) < 1:
            raise ValueError("Point must have at least one axis")
        object.__setattr__(self, "coords", coords)

    @classmethod
    def of(cls, *coords: int) -> 'Point':
        """Build a point from positional axis values."""
        return cls(coords)

    @classmethod
    def origin(cls, dimension: int) -> 'Point':
        """All-zero point with the given number of axes."""
        if dimension < 1:
            raise ValueError(f"Dimension must be at least 1, got {dimension}")
        return cls((0,) * dimension)

    @classmethod
    def from_pair(cls, x0: int, x1: int, dimension: int = 2) -> 'Point':
        """Embed a 2-axis position into a D-dimensional point.

        Axes beyond the first two are zero.

        Args:
            x0: Value on axis 0 (plate row)
            x1: Value on axis 1 (plate column)
            dimension: Number of axes of the resulting point (>= 2)

        Raises:
            ValueError: If dimension is below 2
        """
        if dimension < 2:
            raise ValueError(f"A 2-axis position needs dimension >= 2, got {dimension}")
        return cls((x0, x1) + (0,) * (dimension - 2))

    @property
    def dimension(self) -> int:
        return len(self.coords)

    def offset(self, deltas: Sequence[int]) -> 'Point':
        """Return the point displaced by one delta per axis.

        Raises:
            DimensionMismatchError: If len(deltas) differs from the point's dimension
        """
        if len(deltas) != len(self.coords):
            raise DimensionMismatchError(len(self.coords), len(deltas), "offset")
        return Point(tuple(c + operator.index(d) for c, d in zip(self.coords, deltas)))

    def with_axis(self, axis: int, value: int) -> 'Point':
        """Copy of this point with a single axis replaced."""
        coords = list(self.coords)
        coords[axis] = value
        return Point(tuple(coords))

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return self.offset(other.coords)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return self.offset(tuple(-c for c in other.coords))

    def __getitem__(self, axis: int) -> int:
        return self.coords[axis]

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coords)

    def __repr__(self) -> str:
        return f"Point{self.coords}"


def offset(base: Point, deltas: Sequence[int]) -> Point:
    """Axis-wise displacement of base by deltas."""
    return base.offset(deltas)


def add(a: Point, b: Point) -> Point:
    """Axis-wise sum of two points."""
    return a + b


def check_dimension(points: Iterable[Point], dimension: int) -> None:
    """Raise DimensionMismatchError for the first point not of the given dimension."""
    for point in points:
        if point.dimension != dimension:
            raise DimensionMismatchError(dimension, point.dimension, repr(point))
