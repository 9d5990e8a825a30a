#!/usr/bin/env python3
"""Solve a pipe maze map file.

Prints the distance from the start to the farthest point of the loop and
the number of tiles enclosed by the loop.

Usage:
    python scripts/solve_maze.py input.txt
    python scripts/solve_maze.py input.txt --verbose
    python scripts/solve_maze.py --self-check

Run from the repository root with PYTHONPATH=src:. (or after
`pip install -e .`).
"""

from __future__ import annotations

import argparse
import logging
import sys

from domain.maze.errors import MazeError
from domain.maze.parsing import parse_grid
from domain.maze.services import solve_maze
from infrastructure.maze.text_adapter import TextMazeAdapter
from shared.sample_grids import SAMPLE_GRIDS

logger = logging.getLogger("solve_maze")


def self_check() -> int:
    """Solve every shared sample map and compare against its expected answers.

    Returns:
        0 if all samples match, 1 otherwise
    """
    failures = 0
    for name, sample in SAMPLE_GRIDS.items():
        summary = solve_maze(parse_grid(sample.text))
        ok = (
            summary.farthest_distance == sample.farthest_distance
            and summary.enclosed_count == sample.enclosed_count
        )
        status = "OK" if ok else "FAIL"
        print(
            f"  [{status}] {name}: distance={summary.farthest_distance} "
            f"enclosed={summary.enclosed_count}"
        )
        if not ok:
            failures += 1

    if failures:
        print(f"{failures} of {len(SAMPLE_GRIDS)} samples failed")
        return 1
    print(f"All {len(SAMPLE_GRIDS)} samples passed")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line interface.

    Returns:
        0 on success, 1 on invalid input
    """
    parser = argparse.ArgumentParser(description="Solve a pipe maze map")
    parser.add_argument("input_file", nargs="?", help="Map file to solve")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log traversal details"
    )
    parser.add_argument(
        "--self-check",
        action="store_true",
        help="Solve the built-in sample maps and verify their answers",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.self_check:
        return self_check()
    if args.input_file is None:
        parser.error("input_file is required unless --self-check is given")

    try:
        grid = TextMazeAdapter().load_grid(args.input_file)
        summary = solve_maze(grid)
    except (MazeError, FileNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info("Solved %dx%d map", grid.cols, grid.rows)
    print(f"Distance to farthest cell: {summary.farthest_distance}")
    print(f"Enclosed tiles: {summary.enclosed_count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
