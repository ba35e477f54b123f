"""Tests for plate parsing, rendering and the pattern library."""

import numpy as np
import pytest
from hyperlife.core.point import Point
from hyperlife.patterns.library import PATTERNS, get_pattern, list_patterns
from hyperlife.patterns.plate import (
    cells_from_array, load_plate, parse_plate, plate_to_array, read_plate, to_plate
)


class TestPlateParsing:
    """Text rows to live cells."""

    def test_hash_marks_alive(self):
        """Only '#' is alive; every other character is dead."""
        assert parse_plate(["#.O*", " #x#"]) == {
            Point.of(0, 0), Point.of(1, 1), Point.of(1, 3)
        }

    def test_empty_plate(self):
        assert parse_plate([]) == frozenset()
        assert parse_plate(["....", ""]) == frozenset()

    def test_ragged_rows(self):
        """Short rows are padded with dead cells."""
        array = plate_to_array(["#", "..#"])
        assert array.shape == (2, 3)
        np.testing.assert_array_equal(array, np.array([[True, False, False],
                                                       [False, False, True]]))

    def test_higher_dimension(self):
        """Remaining axes are zero."""
        assert parse_plate([".#"], dimension=3) == {Point.of(0, 1, 0)}

    def test_origin_offset(self):
        assert parse_plate(["#"], origin=(-4, 9)) == {Point.of(-4, 9)}

    def test_cells_from_array_requires_2d(self):
        with pytest.raises(ValueError, match="must be 2D"):
            cells_from_array(np.zeros((2, 2, 2), dtype=bool))

    def test_comments_dropped(self):
        """'!' lines are comments in plate files."""
        assert read_plate("!Name: blinker\n###\n") == ["###"]


class TestPlateFiles:
    """Reading plates from disk."""

    def test_load_plate(self, tmp_path):
        path = tmp_path / "blinker.cells"
        path.write_text("!Name: Blinker\n.#.\n.#.\n.#.\n", encoding="utf-8")
        rows = load_plate(path)
        assert rows == [".#.", ".#.", ".#."]
        assert parse_plate(rows) == {Point.of(0, 1), Point.of(1, 1), Point.of(2, 1)}

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_plate(tmp_path / "missing.cells")


class TestToPlate:
    """Rendering live cells back to rows."""

    def test_bounding_box(self):
        rows = ["#..", "..#"]
        assert to_plate(parse_plate(rows)) == ["#..", "..#"]

    def test_explicit_window(self):
        alive = {Point.of(0, 0)}
        assert to_plate(alive, rows=(-1, 1), cols=(0, 1), dead_char=" ") == ["  ", "# ", "  "]

    def test_plane_selection(self):
        """Only cells on the requested slice are drawn."""
        alive = {Point.of(0, 0, 0), Point.of(0, 1, 2)}
        assert to_plate(alive) == ["#"]
        assert to_plate(alive, fixed=Point.of(0, 0, 2)) == ["#"]
        assert to_plate(alive, rows=(0, 0), cols=(0, 1), fixed=Point.of(0, 0, 2)) == [".#"]

    def test_empty(self):
        assert to_plate([]) == []

    def test_one_axis_points_rejected(self):
        """A plate needs two axes per point."""
        with pytest.raises(ValueError, match="two axes"):
            to_plate([Point.of(0), Point.of(2)])


class TestPatternLibrary:
    """Bundled canonical patterns."""

    @pytest.mark.parametrize("name,population", [
        ("block", 4),
        ("blinker", 3),
        ("glider", 5),
        ("lwss", 9),
        ("gosper_gun", 36),
    ])
    def test_populations(self, name, population):
        assert len(parse_plate(get_pattern(name))) == population

    def test_unknown_pattern(self):
        with pytest.raises(KeyError, match="Unknown pattern"):
            get_pattern("nope")

    def test_get_pattern_returns_copy(self):
        rows = get_pattern("block")
        rows.append("##")
        assert PATTERNS["block"] == ["##", "##"]

    def test_list_patterns_sorted(self):
        names = list_patterns()
        assert names == sorted(PATTERNS)
        assert "gosper_gun" in names
