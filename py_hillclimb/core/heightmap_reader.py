"""
Heightmap text reader.

Turns a block of text like::

    Sabqponm
    abcryxxl
    accszExk

into an ElevationGrid. Lowercase letters are elevations ('a' = 1 ... 'z' = 26),
``S`` marks the start cell and ``E`` the end cell.
"""

from pathlib import Path
from typing import List, Optional, Union

import structlog

from .elevation_grid import (
    END_MARKER,
    START_MARKER,
    Cell,
    ElevationGrid,
    GridConfigurationError,
)

logger = structlog.get_logger()


def _elevation(char: str) -> int:
    return ord(char) - ord("a") + 1


def parse_heightmap(text: str) -> ElevationGrid:
    """
    Parse heightmap text into a grid.

    Args:
        text: One row per line; blank lines are ignored

    Returns:
        ElevationGrid with start and end taken from the markers

    Raises:
        GridConfigurationError: on unknown characters, missing or repeated
            markers, or rows of different length
    """
    lines = [line.rstrip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise GridConfigurationError("Heightmap text is empty")

    rows: List[List[int]] = []
    start: Optional[Cell] = None
    end: Optional[Cell] = None

    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            if char == START_MARKER:
                if start is not None:
                    raise GridConfigurationError(
                        f"Line {y + 1}: second start marker at column {x + 1}"
                    )
                start = Cell(x, y)
                row.append(0)
            elif char == END_MARKER:
                if end is not None:
                    raise GridConfigurationError(
                        f"Line {y + 1}: second end marker at column {x + 1}"
                    )
                end = Cell(x, y)
                row.append(0)
            elif "a" <= char <= "z":
                row.append(_elevation(char))
            else:
                raise GridConfigurationError(
                    f"Line {y + 1}: unexpected character {char!r} at column {x + 1}"
                )
        rows.append(row)

    if start is None:
        raise GridConfigurationError(f"No start marker {START_MARKER!r} found")
    if end is None:
        raise GridConfigurationError(f"No end marker {END_MARKER!r} found")

    # Marker cells get their real elevation from the grid itself
    grid = ElevationGrid.from_rows(rows, start, end)

    logger.info(
        "Parsed heightmap",
        width=grid.width,
        height=grid.height,
        start=start,
        end=end,
    )
    return grid


def load_heightmap(path: Union[str, Path]) -> ElevationGrid:
    """Read and parse a heightmap file."""
    path = Path(path)
    logger.info("Loading heightmap", path=str(path))
    return parse_heightmap(path.read_text(encoding="utf-8"))
