"""Unit tests for lattice coordinates.

Covers construction, structural equality and hashing, and axis-wise
arithmetic of D-dimensional points.
"""

import pytest
from hyperlife.core.errors import DimensionMismatchError
from hyperlife.core.point import Point, add, check_dimension, offset


class TestPointConstruction:
    """Test point creation and basic properties."""

    def test_of_and_coords(self):
        """Positional constructor stores axes in order."""
        p = Point.of(1, -2, 3)
        assert p.coords == (1, -2, 3)
        assert p.dimension == 3
        assert p[1] == -2
        assert list(p) == [1, -2, 3]

    def test_coords_normalised_to_tuple(self):
        """Lists are converted so points stay hashable."""
        p = Point([4, 5])
        assert p.coords == (4, 5)
        assert hash(p) == hash(Point.of(4, 5))

    @pytest.mark.parametrize("coords", [(1.7, 0), (0, 2.0), ("1", 0)])
    def test_non_integer_axes_rejected(self, coords):
        """Axis values are never truncated or coerced."""
        with pytest.raises(TypeError):
            Point(coords)

    def test_zero_axes_rejected(self):
        """A point needs at least one axis."""
        with pytest.raises(ValueError, match="at least one axis"):
            Point(())

    def test_origin(self):
        """Origin is all zeros."""
        assert Point.origin(4) == Point.of(0, 0, 0, 0)
        with pytest.raises(ValueError):
            Point.origin(0)

    def test_from_pair_embeds_in_higher_dimension(self):
        """Extra axes of a 2-axis position default to zero."""
        assert Point.from_pair(5, 7) == Point.of(5, 7)
        assert Point.from_pair(5, 7, dimension=4) == Point.of(5, 7, 0, 0)

    def test_from_pair_needs_two_axes(self):
        """A 2-axis position cannot fit a 1D lattice."""
        with pytest.raises(ValueError, match="dimension >= 2"):
            Point.from_pair(1, 2, dimension=1)

    def test_immutable(self):
        """Points cannot be modified after construction."""
        p = Point.of(1, 2)
        with pytest.raises(AttributeError):
            p.coords = (3, 4)


class TestPointEquality:
    """Test structural equality and hashing."""

    def test_equal_points_share_set_slot(self):
        """Points with identical axes are the same lattice cell."""
        cells = {Point.of(1, 2), Point.of(1, 2), Point((1, 2))}
        assert len(cells) == 1

    def test_different_points(self):
        """Any differing axis makes points distinct."""
        assert Point.of(1, 2) != Point.of(2, 1)
        assert Point.of(1, 2) != Point.of(1, 2, 0)

    def test_not_equal_to_tuple(self):
        """Points do not compare equal to raw tuples."""
        assert Point.of(1, 2) != (1, 2)


class TestPointArithmetic:
    """Test offset and addition."""

    def test_offset(self):
        """Offset adds one delta per axis."""
        assert offset(Point.of(1, 2, 3), (-1, 0, 1)) == Point.of(0, 2, 4)

    def test_offset_leaves_base_untouched(self):
        """Arithmetic returns a new point."""
        base = Point.of(1, 1)
        moved = base.offset((1, 1))
        assert base == Point.of(1, 1)
        assert moved == Point.of(2, 2)

    def test_offset_length_mismatch(self):
        """Deltas must cover every axis."""
        with pytest.raises(DimensionMismatchError):
            Point.of(1, 2).offset((1,))

    def test_add_and_subtract(self):
        """Addition and subtraction are axis-wise."""
        a, b = Point.of(1, 2), Point.of(10, -20)
        assert add(a, b) == Point.of(11, -18)
        assert a + b == Point.of(11, -18)
        assert b - a == Point.of(9, -22)

    def test_add_dimension_mismatch(self):
        """Points of different dimension cannot be added."""
        with pytest.raises(DimensionMismatchError):
            Point.of(1, 2) + Point.of(1, 2, 3)

    def test_with_axis(self):
        """Replacing one axis copies the point."""
        p = Point.of(0, 0, 0)
        assert p.with_axis(2, 9) == Point.of(0, 0, 9)
        assert p == Point.of(0, 0, 0)

    def test_large_coordinates(self):
        """Coordinates far from the origin are plain integers."""
        far = Point.of(10**15, -(10**15))
        assert (far + Point.of(1, -1)).coords == (10**15 + 1, -(10**15) - 1)


def test_check_dimension():
    """Mixed dimensionality is reported."""
    check_dimension([Point.of(1, 2), Point.of(3, 4)], 2)
    with pytest.raises(DimensionMismatchError, match="expected 2"):
        check_dimension([Point.of(1, 2), Point.of(3, 4, 5)], 2)
