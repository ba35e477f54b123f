"""Plain-text plates: the initial-pattern format.

A plate is a list of text rows. '#' marks a live cell, any other
character is dead. Row index maps to axis 0 and column index to axis 1;
remaining axes are zero. Plate files may carry comment lines starting
with '!', as in the plaintext .cells format.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.point import Point

logger = logging.getLogger(__name__)

ALIVE_CHAR = "#"
DEAD_CHAR = "."
COMMENT_PREFIX = "!"


def plate_to_array(plate: Sequence[str]) -> np.ndarray:
    """Convert plate rows to a 2D boolean array.

    Ragged rows are padded with dead cells to the longest row.
    """
    height = len(plate)
    width = max((len(row) for row in plate), default=0)
    array = np.zeros((height, width), dtype=bool)
    for r, row in enumerate(plate):
        for c, ch in enumerate(row):
            if ch == ALIVE_CHAR:
                array[r, c] = True
    return array


def cells_from_array(array: np.ndarray, dimension: int = 2,
                     origin: Tuple[int, int] = (0, 0)) -> FrozenSet[Point]:
    """Live cells of a 2D boolean array, embedded in a D-dimensional lattice.

    Args:
        array: 2D array, truthy entries are alive
        dimension: Number of axes of the produced points (>= 2)
        origin: Position of array[0, 0] on axes 0 and 1

    Raises:
        ValueError: If array is not 2D or dimension < 2
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError(f"Pattern array must be 2D, got shape {array.shape}")

    rows, cols = np.nonzero(array)
    return frozenset(
        Point.from_pair(int(r) + origin[0], int(c) + origin[1], dimension)
        for r, c in zip(rows, cols)
    )


def parse_plate(plate: Sequence[str], dimension: int = 2,
                origin: Tuple[int, int] = (0, 0)) -> FrozenSet[Point]:
    """Live cells described by plate rows."""
    return cells_from_array(plate_to_array(plate), dimension, origin)


def read_plate(text: str) -> List[str]:
    """Split plate text into rows, dropping '!' comment lines."""
    return [line for line in text.splitlines() if not line.startswith(COMMENT_PREFIX)]


def load_plate(path: Union[str, Path]) -> List[str]:
    """Read plate rows from a file.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    rows = read_plate(path.read_text(encoding="utf-8"))
    logger.debug(f"Loaded plate {path} with {len(rows)} rows")
    return rows


def to_plate(alive: Iterable[Point],
             rows: Optional[Tuple[int, int]] = None,
             cols: Optional[Tuple[int, int]] = None,
             fixed: Optional[Point] = None,
             alive_char: str = ALIVE_CHAR,
             dead_char: str = DEAD_CHAR) -> List[str]:
    """Render the axis 0/1 plane of a live-set as plate rows.

    Args:
        alive: Live cells
        rows: Inclusive (first, last) range on axis 0; bounding box if None
        cols: Inclusive (first, last) range on axis 1; bounding box if None
        fixed: Point whose axes 2.. select the plane; all-zero if None
        alive_char: Character for live cells
        dead_char: Character for dead cells

    Returns:
        One string per row; empty list if nothing is alive and no range given

    Raises:
        ValueError: If a point has fewer than two axes
    """
    alive = list(alive)
    flat = next((p for p in alive if p.dimension < 2), None)
    if flat is not None:
        raise ValueError(f"Plates need at least two axes, got {flat!r}")

    cells = [p for p in alive if fixed is None or tuple(p.coords[2:]) == tuple(fixed.coords[2:])]
    if fixed is None:
        cells = [p for p in cells if not any(p.coords[2:])]

    if rows is None or cols is None:
        if not cells:
            return []
        rows = rows or (min(p[0] for p in cells), max(p[0] for p in cells))
        cols = cols or (min(p[1] for p in cells), max(p[1] for p in cells))

    plane = {(p[0], p[1]) for p in cells}
    return [
        "".join(alive_char if (r, c) in plane else dead_char
                for c in range(cols[0], cols[1] + 1))
        for r in range(rows[0], rows[1] + 1)
    ]
