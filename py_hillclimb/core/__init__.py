"""
Core hill-climbing functionality.
"""

from .elevation_grid import (
    Cell,
    Direction,
    ElevationGrid,
    GridConfigurationError,
    MAX_ELEVATION,
    MIN_ELEVATION,
)
from .heightmap_reader import load_heightmap, parse_heightmap
from .hill_search import (
    ENGINES,
    UnreachableError,
    breadth_first_distance,
    is_climbable,
    is_reverse_step,
    require_distance,
    shortest_distance,
    solve,
    solve_iterative,
)

__all__ = ['Cell', 'Direction', 'ElevationGrid', 'GridConfigurationError',
           'MAX_ELEVATION', 'MIN_ELEVATION', 'load_heightmap', 'parse_heightmap',
           'ENGINES', 'UnreachableError', 'breadth_first_distance', 'is_climbable',
           'is_reverse_step', 'require_distance', 'shortest_distance', 'solve',
           'solve_iterative']
