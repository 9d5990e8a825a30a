"""Single source of truth for the canonical sample maps.

This module defines the sample maps and their expected answers used by both:
- tests/ (domain and adapter tests)
- scripts/solve_maze.py --self-check

Location: shared/ (not tests/) to avoid scripts->tests dependency.
"""

from __future__ import annotations

from typing import NamedTuple


class SampleGrid(NamedTuple):
    text: str
    farthest_distance: int
    enclosed_count: int


# Loop with clutter: a single winding loop, start on the west edge
WINDING = SampleGrid(
    text="..F7.\n.FJ|.\nSJ.L7\n|F--J\nLJ...\n",
    farthest_distance=8,
    enclosed_count=1,
)

# Plain square loop surrounded by ground
SQUARE = SampleGrid(
    text=".....\n.S-7.\n.|.|.\n.L-J.\n.....\n",
    farthest_distance=4,
    enclosed_count=1,
)

# Same square loop, surrounded by pipes that are not part of it
SQUARE_CLUTTERED = SampleGrid(
    text="-L|F7\n7S-7|\nL|7||\n-L-J|\nL|-JF\n",
    farthest_distance=4,
    enclosed_count=1,
)

# 20x10 loop with nested pockets; (4, 7) is inside, (0, 0) outside
NESTED = SampleGrid(
    text=(
        ".F----7F7F7F7F-7....\n"
        ".|F--7||||||||FJ....\n"
        ".||.FJ||||||||L7....\n"
        "FJL7L7LJLJ||LJ.L-7..\n"
        "L--J.L7...LJS7F-7L7.\n"
        "....F-J..F7FJ|L7L7L7\n"
        "....L7.F7||L7|.L7L7|\n"
        ".....|FJLJ|FJ|F7|.LJ\n"
        "....FJL-7.||.||||...\n"
        "....L---J.LJ.LJLJ...\n"
    ),
    farthest_distance=70,
    enclosed_count=8,
)

# 20x10 loop with junk pipes enclosed inside it
JUNK_FILLED = SampleGrid(
    text=(
        "FF7FSF7F7F7F7F7F---7\n"
        "L|LJ||||||||||||F--J\n"
        "FL-7LJLJ||||||LJL-77\n"
        "F--JF--7||LJLJ7F7FJ-\n"
        "L---JF-JLJ.||-FJLJJ7\n"
        "|F|F-JF---7F7-L7L|7|\n"
        "|FFJF7L7F-JF7|JL---7\n"
        "7-L-JL7||F7|L7F-7F7|\n"
        "L.L7LFJ|||||FJL7||LJ\n"
        "L7JLJL-JLJLJL--JLJ.L\n"
    ),
    farthest_distance=80,
    enclosed_count=10,
)

SAMPLE_GRIDS: dict[str, SampleGrid] = {
    "winding": WINDING,
    "square": SQUARE,
    "square_cluttered": SQUARE_CLUTTERED,
    "nested": NESTED,
    "junk_filled": JUNK_FILLED,
}
