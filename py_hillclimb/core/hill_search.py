"""
Fewest-steps search over an elevation grid.

This module implements:
- The memoizing backtracking search, both recursive and with an explicit stack
- The forward hiking rule and its mirrored form used by the reverse search
- An opt-in breadth-first search over the same moves

The memoizing search runs from the end cell back toward the start cell, so
every cached value is "steps from this cell to the start". A cell on the
current call chain is treated as impassable, and a cached value is never
revisited. For some terrains that combination settles on a longer route
than the true shortest one; ``breadth_first_distance`` always returns the
optimum and is selected with the ``bfs`` engine.
"""

import sys
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import structlog

from .elevation_grid import Cell, Direction, ElevationGrid

logger = structlog.get_logger()

ENGINES = ("recursive", "iterative", "bfs")


class UnreachableError(RuntimeError):
    """Raised when a caller requires a distance and the start cannot be reached."""

    def __init__(self, start: Cell, end: Cell):
        super().__init__(f"No route from {start} to {end}")
        self.start = start
        self.end = end


def is_climbable(origin: int, target: int) -> bool:
    """Forward hiking rule: climb at most one unit per step, descend freely."""
    return target <= origin + 1


def is_reverse_step(current: int, neighbor: int) -> bool:
    """Mirror of ``is_climbable`` for a search walking from the end backwards."""
    return neighbor >= current - 1


def _eligible(grid: ElevationGrid, current: Cell, neighbor: Cell, visiting: Set[Cell]) -> bool:
    if neighbor in visiting:
        return False
    return is_reverse_step(grid.height_at(current), grid.height_at(neighbor))


def solve(
    grid: ElevationGrid,
    current: Cell,
    cache: Dict[Cell, int],
    visiting: Set[Cell],
) -> Optional[int]:
    """
    Fewest steps from ``current`` to a cell already resolved in ``cache``.

    Args:
        grid: Terrain to search
        current: Cell being explored
        cache: Resolved distances; written once per cell, never overwritten
        visiting: Cells on the active call chain

    Returns:
        Step count, or None if no neighbor leads anywhere from this call.
        A None result is not cached.
    """
    if current in cache:
        return cache[current]

    visiting.add(current)
    best = None
    try:
        for direction in Direction:
            neighbor = grid.step(current, direction)
            if neighbor is None or not _eligible(grid, current, neighbor, visiting):
                continue

            steps = solve(grid, neighbor, cache, visiting)
            if steps is not None and (best is None or steps + 1 < best):
                best = steps + 1
    finally:
        visiting.discard(current)

    if best is None:
        return None

    cache[current] = best
    return best


@dataclass
class _Frame:
    """One suspended exploration on the explicit stack."""

    cell: Cell
    next_direction: int = 0
    best: Optional[int] = None
    pending: Optional[Cell] = None


def solve_iterative(
    grid: ElevationGrid,
    current: Cell,
    cache: Dict[Cell, int],
    visiting: Set[Cell],
) -> Optional[int]:
    """
    Explicit-stack form of ``solve``.

    Explores neighbors in the same order and writes the same cache entries,
    so results match ``solve`` exactly without consuming the interpreter's
    call stack.
    """
    if current in cache:
        return cache[current]

    stack: List[_Frame] = [_Frame(current)]
    visiting.add(current)
    result: Optional[int] = None

    try:
        while stack:
            frame = stack[-1]

            # Fold in the answer from the child that just finished
            if frame.pending is not None:
                if result is not None and (frame.best is None or result + 1 < frame.best):
                    frame.best = result + 1
                frame.pending = None

            descended = False
            while frame.next_direction < len(Direction):
                direction = Direction(frame.next_direction)
                frame.next_direction += 1

                neighbor = grid.step(frame.cell, direction)
                if neighbor is None or not _eligible(grid, frame.cell, neighbor, visiting):
                    continue

                if neighbor in cache:
                    steps = cache[neighbor]
                    if frame.best is None or steps + 1 < frame.best:
                        frame.best = steps + 1
                    continue

                frame.pending = neighbor
                visiting.add(neighbor)
                stack.append(_Frame(neighbor))
                descended = True
                break

            if descended:
                continue

            stack.pop()
            visiting.discard(frame.cell)
            if frame.best is not None:
                cache[frame.cell] = frame.best
            result = frame.best
    finally:
        # Only reached with a non-empty stack if an exception escaped
        for frame in stack:
            visiting.discard(frame.cell)

    return result


def breadth_first_distance(grid: ElevationGrid) -> Optional[int]:
    """
    Shortest step count from start to end by breadth-first search.

    Walks backwards from the end cell under ``is_reverse_step`` so the moves
    considered are exactly those of the memoizing search.
    """
    distances = {grid.end: 0}
    queue = deque([grid.end])

    while queue:
        current = queue.popleft()
        if current == grid.start:
            return distances[current]

        current_height = grid.height_at(current)
        for _, neighbor in grid.neighbors(current):
            if neighbor in distances:
                continue
            if is_reverse_step(current_height, grid.height_at(neighbor)):
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return None


@contextmanager
def recursion_limit(limit: int):
    """Temporarily raise the interpreter recursion limit."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def shortest_distance(
    grid: ElevationGrid,
    engine: str = "iterative",
    max_recursion: int = 100_000,
) -> Optional[int]:
    """
    Fewest steps from the grid's start cell to its end cell.

    Each call gets a fresh cache and visited set, so repeated calls on the
    same grid are independent.

    Args:
        grid: Terrain with start and end cells
        engine: "recursive", "iterative" or "bfs"
        max_recursion: Recursion limit used by the recursive engine

    Returns:
        Step count, or None if the end cannot be reached
    """
    if engine not in ENGINES:
        raise ValueError(f"Unknown search engine {engine!r}, expected one of {ENGINES}")

    logger.info("Starting search", engine=engine, start=grid.start, end=grid.end)

    if engine == "bfs":
        steps = breadth_first_distance(grid)
        logger.info("Search finished", engine=engine, steps=steps)
        return steps

    cache: Dict[Cell, int] = {grid.start: 0}
    visiting: Set[Cell] = set()

    if engine == "recursive":
        with recursion_limit(max_recursion):
            steps = solve(grid, grid.end, cache, visiting)
    else:
        steps = solve_iterative(grid, grid.end, cache, visiting)

    logger.info("Search finished", engine=engine, steps=steps, cached_cells=len(cache))
    return steps


def require_distance(
    grid: ElevationGrid,
    engine: str = "iterative",
    max_recursion: int = 100_000,
) -> int:
    """Like ``shortest_distance`` but raise ``UnreachableError`` instead of returning None."""
    steps = shortest_distance(grid, engine=engine, max_recursion=max_recursion)
    if steps is None:
        raise UnreachableError(grid.start, grid.end)
    return steps
