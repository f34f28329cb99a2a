"""Command line runner: load a heightmap, search it, print the answer."""

import argparse
import logging
import sys
import time
from typing import List, Optional

import structlog

from .config import settings
from .core.elevation_grid import GridConfigurationError
from .core.heightmap_reader import load_heightmap
from .core.hill_search import ENGINES, UnreachableError, require_distance
from .report import DistanceReport

logger = structlog.get_logger()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "INFO", fmt: str = "plain") -> None:
    """Route structlog through stdlib logging on stderr."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-hillclimb",
        description="Fewest steps from S to E on a letter heightmap",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=settings.default_input,
        help=f"Heightmap file (default: {settings.default_input})",
    )
    parser.add_argument(
        "--engine",
        choices=ENGINES,
        default=settings.search_engine,
        help=f"Search engine (default: {settings.search_engine})",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of the step count")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.log_format)

    try:
        grid = load_heightmap(args.input)
    except FileNotFoundError:
        logger.error("Heightmap file not found", path=args.input)
        return 2
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read heightmap", path=args.input, error=str(e))
        return 2
    except GridConfigurationError as e:
        logger.error("Invalid heightmap", path=args.input, error=str(e))
        return 1

    logger.info("Grid ready", start=grid.start, end=grid.end, engine=args.engine)

    started = time.perf_counter_ns()
    steps = None
    try:
        steps = require_distance(grid, engine=args.engine, max_recursion=settings.recursion_limit)
    except UnreachableError as e:
        logger.error("End is unreachable", start=e.start, end=e.end)
    elapsed_us = (time.perf_counter_ns() - started) // 1000
    logger.info("Finished", elapsed_us=elapsed_us)

    if args.json:
        report = DistanceReport.from_run(args.input, grid, args.engine, steps, elapsed_us)
        print(report.model_dump_json())
    elif steps is not None:
        print(steps)

    return 0 if steps is not None else 1
