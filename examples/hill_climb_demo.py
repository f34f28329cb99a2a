#!/usr/bin/env python3
"""
Simple demo script showing the hill-climbing search engines.
"""

import time

from py_hillclimb.cli import configure_logging
from py_hillclimb.core import ENGINES, parse_heightmap, shortest_distance

EXAMPLE_MAP = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


def main():
    """Run every engine on the example heightmap."""
    configure_logging("WARNING")

    print("Py-HillClimb Search Demo")
    print("=" * 40)

    grid = parse_heightmap(EXAMPLE_MAP)
    print(f"\nGrid: {grid.width}x{grid.height}")
    print(f"Start: ({grid.start.x}, {grid.start.y})")
    print(f"End:   ({grid.end.x}, {grid.end.y})")

    for engine in ENGINES:
        print(f"\n{engine.upper()} engine:")
        print("-" * 30)

        started = time.perf_counter()
        steps = shortest_distance(grid, engine=engine)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if steps is None:
            print("  End is unreachable")
        else:
            print(f"  Fewest steps: {steps}")
        print(f"  Time: {elapsed_ms:.2f} ms")

    # Elevation profile
    print("\nElevation profile:")
    for row in grid.as_array():
        print("  " + " ".join(f"{h:2d}" for h in row))


if __name__ == "__main__":
    main()
