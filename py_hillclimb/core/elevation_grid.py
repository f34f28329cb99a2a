"""
Elevation grid for hill-climbing searches.

This module handles:
- Cell coordinates and the four axis-aligned step directions
- Storage of the (read-only) elevation matrix
- Bounds-checked neighbor queries

Elevations are small integers in the range 1..26 ('a'..'z'). The start cell
is forced to the lowest elevation and the end cell to the highest one when
the grid is built.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

MIN_ELEVATION = 1
MAX_ELEVATION = 26
START_MARKER = "S"
END_MARKER = "E"


class GridConfigurationError(ValueError):
    """Raised when a heightmap cannot be turned into a valid grid."""


@dataclass(frozen=True, order=True)
class Cell:
    """A grid position: column ``x`` and row ``y``."""

    x: int
    y: int

    def as_list(self) -> list:
        return [self.x, self.y]


class Direction(IntEnum):
    """Step directions, in the order the search explores them."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class ElevationGrid:
    """Rectangular elevation map with designated start and end cells."""

    def __init__(self, heights: np.ndarray, start: Cell, end: Cell):
        """
        Initialize the grid.

        Args:
            heights: 2-D integer array indexed ``[y, x]``
            start: Cell the hike starts from
            end: Cell the hike must reach

        Raises:
            GridConfigurationError: if the array or the markers are invalid
        """
        heights = np.array(heights, dtype=np.int16)
        if heights.ndim != 2 or heights.shape[0] == 0 or heights.shape[1] == 0:
            raise GridConfigurationError(
                f"Heightmap must be a non-empty 2-D matrix, got shape {heights.shape}"
            )

        self._heights = heights
        self._start = start
        self._end = end

        for name, cell in (("start", start), ("end", end)):
            if not self.contains(cell):
                raise GridConfigurationError(
                    f"{name} cell {cell} lies outside the {self.width}x{self.height} grid"
                )

        # Markers override whatever elevation the input gave them
        heights[start.y, start.x] = MIN_ELEVATION
        heights[end.y, end.x] = MAX_ELEVATION

        if heights.min() < MIN_ELEVATION or heights.max() > MAX_ELEVATION:
            raise GridConfigurationError(
                f"Elevations must lie in {MIN_ELEVATION}..{MAX_ELEVATION}, "
                f"got {heights.min()}..{heights.max()}"
            )

        heights.flags.writeable = False

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], start: Cell, end: Cell
    ) -> "ElevationGrid":
        """
        Build a grid from a sequence of elevation rows.

        Every row must have the same length as the first one.
        """
        if not rows:
            raise GridConfigurationError("Heightmap has no rows")

        width = len(rows[0])
        if width == 0:
            raise GridConfigurationError("Heightmap rows must not be empty")

        for row_index, row in enumerate(rows):
            if len(row) != width:
                raise GridConfigurationError(
                    f"Row {row_index} has length {len(row)}, expected {width}"
                )

        return cls(np.array(rows, dtype=np.int16), start, end)

    @property
    def width(self) -> int:
        return self._heights.shape[1]

    @property
    def height(self) -> int:
        return self._heights.shape[0]

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def end(self) -> Cell:
        return self._end

    def contains(self, cell: Cell) -> bool:
        """Check whether a cell lies inside ``[0, width) x [0, height)``."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def height_at(self, cell: Cell) -> int:
        """Elevation of an in-bounds cell."""
        if not self.contains(cell):
            raise IndexError(f"{cell} is outside the {self.width}x{self.height} grid")
        return int(self._heights[cell.y, cell.x])

    def step(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Neighbor of ``cell`` in ``direction``, or None at the grid edge."""
        dx, dy = direction.offset
        neighbor = Cell(cell.x + dx, cell.y + dy)
        if self.contains(neighbor):
            return neighbor
        return None

    def neighbors(self, cell: Cell) -> Iterator[Tuple[Direction, Cell]]:
        """Yield in-bounds neighbors in exploration order."""
        for direction in Direction:
            neighbor = self.step(cell, direction)
            if neighbor is not None:
                yield direction, neighbor

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)

    def as_array(self) -> np.ndarray:
        """Read-only view of the elevation matrix, indexed ``[y, x]``."""
        return self._heights

    def __repr__(self) -> str:
        return (
            f"ElevationGrid(width={self.width}, height={self.height}, "
            f"start={self.start}, end={self.end})"
        )
