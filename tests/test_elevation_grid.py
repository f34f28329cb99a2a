"""Tests for the elevation grid."""

import pytest
import numpy as np
from py_hillclimb.core.elevation_grid import (
    Cell, Direction, ElevationGrid, GridConfigurationError,
    MAX_ELEVATION, MIN_ELEVATION
)


@pytest.fixture
def small_grid():
    """3x2 grid with start in the top-left and end in the bottom-right."""
    rows = [
        [5, 2, 3],
        [4, 5, 9],
    ]
    return ElevationGrid.from_rows(rows, start=Cell(0, 0), end=Cell(2, 1))


class TestCell:
    """Test cell value semantics."""

    def test_equality_and_hash(self):
        """Cells with the same coordinates are interchangeable as keys."""
        cache = {Cell(1, 2): 7}
        assert Cell(1, 2) == Cell(1, 2)
        assert cache[Cell(1, 2)] == 7
        assert Cell(1, 2) != Cell(2, 1)

    def test_immutable(self):
        """Cells cannot be modified after creation."""
        cell = Cell(0, 0)
        with pytest.raises(AttributeError):
            cell.x = 3

    def test_as_list(self):
        assert Cell(4, 1).as_list() == [4, 1]


class TestGridConstruction:
    """Test grid building and its invariants."""

    def test_dimensions(self, small_grid):
        """Width comes from row length, height from row count."""
        assert small_grid.width == 3
        assert small_grid.height == 2

    def test_markers_override_elevation(self, small_grid):
        """Start is forced to the minimum and end to the maximum elevation."""
        assert small_grid.height_at(Cell(0, 0)) == MIN_ELEVATION
        assert small_grid.height_at(Cell(2, 1)) == MAX_ELEVATION
        assert small_grid.height_at(Cell(1, 0)) == 2

    def test_start_and_end_coincide(self):
        """When start and end are the same cell the end elevation wins."""
        grid = ElevationGrid.from_rows([[7]], start=Cell(0, 0), end=Cell(0, 0))
        assert grid.height_at(Cell(0, 0)) == MAX_ELEVATION

    def test_ragged_rows_rejected(self):
        """Every row must match the length of the first row."""
        with pytest.raises(GridConfigurationError, match="Row 1"):
            ElevationGrid.from_rows([[1, 2, 3], [1, 2]], Cell(0, 0), Cell(2, 0))

    def test_empty_input_rejected(self):
        with pytest.raises(GridConfigurationError):
            ElevationGrid.from_rows([], Cell(0, 0), Cell(0, 0))
        with pytest.raises(GridConfigurationError):
            ElevationGrid.from_rows([[]], Cell(0, 0), Cell(0, 0))

    def test_markers_out_of_bounds_rejected(self):
        with pytest.raises(GridConfigurationError, match="end"):
            ElevationGrid.from_rows([[1, 2]], Cell(0, 0), Cell(2, 0))

    def test_elevation_out_of_range_rejected(self):
        with pytest.raises(GridConfigurationError):
            ElevationGrid.from_rows([[1, 27, 3]], Cell(0, 0), Cell(2, 0))
        with pytest.raises(GridConfigurationError):
            ElevationGrid.from_rows([[1, 0, 3]], Cell(0, 0), Cell(2, 0))

    def test_array_is_read_only(self, small_grid):
        """The elevation matrix cannot be changed after construction."""
        heights = small_grid.as_array()
        with pytest.raises(ValueError):
            heights[0, 1] = 20

    def test_input_array_not_shared(self):
        """Mutating the source array does not reach into the grid."""
        source = np.array([[3, 4], [5, 6]])
        grid = ElevationGrid(source, Cell(0, 0), Cell(1, 1))
        source[0, 1] = 20
        assert grid.height_at(Cell(1, 0)) == 4
        np.testing.assert_array_equal(grid.as_array(), [[1, 4], [5, 26]])


class TestNeighborQueries:
    """Test bounds-checked stepping."""

    def test_step_inside(self, small_grid):
        assert small_grid.step(Cell(1, 0), Direction.LEFT) == Cell(0, 0)
        assert small_grid.step(Cell(1, 0), Direction.RIGHT) == Cell(2, 0)
        assert small_grid.step(Cell(1, 0), Direction.DOWN) == Cell(1, 1)
        assert small_grid.step(Cell(1, 1), Direction.UP) == Cell(1, 0)

    def test_step_off_edges(self, small_grid):
        """Steps leaving the grid report no neighbor."""
        assert small_grid.step(Cell(0, 0), Direction.LEFT) is None
        assert small_grid.step(Cell(0, 0), Direction.UP) is None
        assert small_grid.step(Cell(2, 1), Direction.RIGHT) is None
        assert small_grid.step(Cell(2, 1), Direction.DOWN) is None

    def test_neighbors_order(self, small_grid):
        """Neighbors come back in left, right, up, down order."""
        found = list(small_grid.neighbors(Cell(1, 1)))
        assert found == [
            (Direction.LEFT, Cell(0, 1)),
            (Direction.RIGHT, Cell(2, 1)),
            (Direction.UP, Cell(1, 0)),
        ]

    def test_height_at_out_of_bounds(self, small_grid):
        """Querying outside the grid is a contract violation."""
        with pytest.raises(IndexError):
            small_grid.height_at(Cell(3, 0))
        with pytest.raises(IndexError):
            small_grid.height_at(Cell(-1, 0))

    def test_cells_row_major(self, small_grid):
        cells = list(small_grid.cells())
        assert len(cells) == 6
        assert cells[0] == Cell(0, 0)
        assert cells[3] == Cell(0, 1)
        assert cells[-1] == Cell(2, 1)
