"""Tests for D-dimensional Moore neighborhood enumeration."""

import pytest
import numpy as np
from hyperlife.core.neighborhood import (
    neighbor_offsets, neighbors, neighbors_with_self, neighborhood_size
)
from hyperlife.core.point import Point


@pytest.mark.parametrize("dimension", [1, 2, 3, 4, 5])
class TestNeighborhoodSize:
    """Neighborhood sizes and uniqueness for several dimensions."""

    def test_neighbors_excludes_center(self, dimension):
        """3^D - 1 distinct neighbors, none equal to the input."""
        center = Point(tuple(range(dimension)))
        result = neighbors(center)

        assert len(result) == 3 ** dimension - 1
        assert len(set(result)) == len(result)
        assert center not in result

    def test_neighbors_with_self_includes_center_once(self, dimension):
        """3^D distinct points, the input exactly once."""
        center = Point(tuple(-c for c in range(dimension)))
        result = neighbors_with_self(center)

        assert len(result) == 3 ** dimension
        assert len(set(result)) == len(result)
        assert result.count(center) == 1

    def test_chebyshev_distance_one(self, dimension):
        """Every neighbor differs by at most 1 on each axis."""
        center = Point.origin(dimension)
        for n in neighbors(center):
            assert max(abs(c) for c in n) == 1

    def test_size_helper(self, dimension):
        """Helper agrees with the enumeration."""
        assert neighborhood_size(dimension) == len(neighbor_offsets(dimension))
        assert neighborhood_size(dimension, include_center=True) == \
            len(neighbor_offsets(dimension, include_center=True))


class TestOffsets:
    """Base-3 decoding of offsets."""

    def test_two_dimensional_moore(self):
        """2D neighborhood is the classic eight cells."""
        expected = {(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(0, 0)}
        assert set(neighbor_offsets(2)) == expected

    def test_base3_order(self):
        """Offset n decodes digit i as (n // 3^i) % 3 - 1."""
        offsets = neighbor_offsets(2, include_center=True)
        assert offsets[0] == (-1, -1)
        assert offsets[1] == (0, -1)
        assert offsets[3] == (-1, 0)
        assert offsets[4] == (0, 0)
        assert offsets[8] == (1, 1)

    def test_offsets_sum_to_zero(self):
        """The neighborhood is symmetric about its center."""
        table = np.array(neighbor_offsets(3))
        np.testing.assert_array_equal(table.sum(axis=0), np.zeros(3, dtype=int))

    def test_invalid_dimension(self):
        """D must be at least 1."""
        with pytest.raises(ValueError):
            neighbor_offsets(0)

    def test_one_dimensional_neighbors(self):
        """A 1D cell has a left and a right neighbor."""
        assert set(neighbors(Point.of(5))) == {Point.of(4), Point.of(6)}


def test_neighbors_translate_with_center():
    """Neighborhood of a shifted point is the shifted neighborhood."""
    base = set(neighbors(Point.of(0, 0, 0)))
    shift = Point.of(7, -3, 100)
    assert set(neighbors(shift)) == {p + shift for p in base}
