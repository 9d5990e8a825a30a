"""Maze Bounded Context - Domain Services.

Pure domain logic for pipe maze traversal and area enclosure.
NO I/O operations - map files are loaded by infrastructure adapters
under `src/infrastructure/maze/text_adapter.py` via domain ports.

Traversal is traced through the module logger at DEBUG level.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from domain.maze.errors import TopologyError
from domain.maze.value_objects import (
    Direction,
    MazeSummary,
    Pipe,
    PipeGrid,
    PipeLoop,
    Position,
    Start,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Order in which the start cell's neighbours are probed
START_PROBE_ORDER: tuple[Direction, ...] = (
    Direction.EAST,
    Direction.SOUTH,
    Direction.NORTH,
    Direction.WEST,
)


# ---------------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------------
def connection_at(
    grid: PipeGrid, position: Position, direction: Direction
) -> Position | None:
    """Return the neighbour reached by stepping from `position`, if it connects.

    The neighbour connects when it is the start cell (accepts any side) or a
    pipe with a connector pointing back at `position`.

    Args:
        grid: Map to look up
        position: Cell the step leaves from
        direction: Direction of the step

    Returns:
        The neighbour position, or None if off-grid, ground, or not accepting
    """
    to = position.step(direction)
    if to is None or not grid.contains(to):
        return None

    cell = grid.cell_at(to)
    if isinstance(cell, Start):
        return to
    if isinstance(cell, Pipe) and cell.shape.accepts(direction):
        return to
    return None


def _declared_connections(
    grid: PipeGrid, position: Position, pipe: Pipe
) -> tuple[Position, ...]:
    # A well-formed loop never drops a connector here
    found = (connection_at(grid, position, d) for d in pipe.shape.connectors)
    return tuple(to for to in found if to is not None)


def _probe_start_connections(
    grid: PipeGrid, position: Position
) -> tuple[Position, ...]:
    found = tuple(
        to
        for to in (connection_at(grid, position, d) for d in START_PROBE_ORDER)
        if to is not None
    )
    if len(found) != 2:
        raise TopologyError(
            f"Start {position.as_tuple()} connects to {len(found)} neighbours, "
            f"expected 2"
        )
    return found


def connections(grid: PipeGrid, position: Position) -> tuple[Position, ...]:
    """Return the positions the cell at `position` connects to.

    Pipe cells use their declared connectors, in shape order. The start cell
    probes EAST, SOUTH, NORTH, WEST and must find exactly two. Ground has no
    connections.

    Raises:
        TopologyError: If the start cell does not connect to exactly two cells
    """
    cell = grid.cell_at(position)
    if isinstance(cell, Start):
        return _probe_start_connections(grid, position)
    if isinstance(cell, Pipe):
        return _declared_connections(grid, position, cell)
    return ()


# ---------------------------------------------------------------------------
# Loop Tracing
# ---------------------------------------------------------------------------
def _advance(grid: PipeGrid, current: Position, previous: Position) -> Position:
    """Return the connection of `current` that is not `previous`."""
    for to in connections(grid, current):
        if to != previous:
            return to
    raise TopologyError(
        f"Dead end at {current.as_tuple()} coming from {previous.as_tuple()}"
    )


def trace_loop(grid: PipeGrid) -> PipeLoop:
    """Walk the loop from the start cell with two pointers.

    Both pointers leave the start in opposite directions and advance one cell
    per step until they land on the same cell, the farthest point of the loop.
    The cells seen by the first pointer, the meeting cell, and the cells seen
    by the second pointer in reverse form the loop polygon.

    Args:
        grid: Map with a single closed loop through the start

    Returns:
        PipeLoop starting at the start cell

    Raises:
        TopologyError: If the start does not have two connections, a pointer
            hits a dead end, or the pointers never meet
    """
    start = grid.start
    first, second = connections(grid, start)
    previous = [start, start]
    pointers = [first, second]
    distance = 1

    forward: list[Position] = [start, first]
    backward: list[Position] = [second]

    # Each step consumes two loop cells, so a loop never needs more than this
    max_steps = grid.rows * grid.cols

    while pointers[0] != pointers[1]:
        if distance > max_steps:
            raise TopologyError("Loop does not close")

        for i in range(2):
            following = _advance(grid, pointers[i], previous[i])
            previous[i] = pointers[i]
            pointers[i] = following
        distance += 1

        logger.debug(
            "Step %d: pointers at %s and %s",
            distance,
            pointers[0].as_tuple(),
            pointers[1].as_tuple(),
        )

        if pointers[0] == pointers[1]:
            break
        if pointers[0] == previous[1]:
            # Pointers swapped past each other without sharing a cell
            raise TopologyError("Loop has odd length; pointers never meet")

        forward.append(pointers[0])
        backward.append(pointers[1])

    meeting = pointers[0]
    forward.append(meeting)
    vertices = tuple(forward) + tuple(reversed(backward))

    logger.debug(
        "Loop closed at %s after %d steps (%d cells)",
        meeting.as_tuple(),
        distance,
        len(vertices),
    )

    return PipeLoop(vertices=vertices, farthest=meeting, farthest_distance=distance)


def farthest_distance(grid: PipeGrid) -> int:
    """Return the number of steps from the start to the farthest loop cell."""
    return trace_loop(grid).farthest_distance


# ---------------------------------------------------------------------------
# Area Enclosure
# ---------------------------------------------------------------------------
def is_enclosed(position: Position, polygon: Sequence[Position]) -> bool:
    """Even-odd ray cast from `position` towards increasing column.

    An edge counts as crossed when exactly one of its endpoints lies on a
    row above `position` and the crossing column is strictly to the right.
    The half-open row test keeps shared vertices from being counted twice.
    Result does not depend on winding or on which vertex comes first.

    Args:
        position: Cell to classify
        polygon: Vertices in cyclic order

    Returns:
        True if the crossing count is odd
    """
    row, col = position.row, position.col
    inside = False
    n = len(polygon)

    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        if (a.row < row) != (b.row < row):
            cross_col = a.col + (row - a.row) * (b.col - a.col) / (b.row - a.row)
            if cross_col > col:
                inside = not inside

    return inside


def enclosure_mask(grid: PipeGrid, loop: PipeLoop) -> NDArray[np.bool_]:
    """Classify every cell of the grid at once (scanline ray cast).

    Applies the same crossing rule as `is_enclosed`, but computes the
    crossing columns of all edges for one row and counts, for each column,
    how many lie strictly to its right.

    Returns:
        Read-only bool array (rows x cols); True for enclosed non-loop cells
    """
    coords = np.array([v.as_tuple() for v in loop.vertices], dtype=np.int64)
    a_rows, a_cols = coords[:, 0], coords[:, 1]
    b_rows, b_cols = np.roll(a_rows, -1), np.roll(a_cols, -1)

    # Horizontal edges never straddle a row, so only these can be crossed
    sloped = a_rows != b_rows
    a_rows, a_cols = a_rows[sloped], a_cols[sloped]
    b_rows, b_cols = b_rows[sloped], b_cols[sloped]

    columns = np.arange(grid.cols)
    mask = np.zeros((grid.rows, grid.cols), dtype=bool)

    for row in range(grid.rows):
        straddles = (a_rows < row) != (b_rows < row)
        if not straddles.any():
            continue
        ar, ac = a_rows[straddles], a_cols[straddles]
        br, bc = b_rows[straddles], b_cols[straddles]
        crossings = np.sort(ac + (row - ar) * (bc - ac) / (br - ar))
        # Number of crossings strictly greater than each column
        to_right = crossings.size - np.searchsorted(crossings, columns, side="right")
        mask[row] = to_right % 2 == 1

    mask[coords[:, 0], coords[:, 1]] = False
    mask.flags.writeable = False
    return mask


def count_enclosed(grid: PipeGrid, loop: PipeLoop) -> int:
    """Return the number of non-loop cells inside the loop polygon."""
    count = int(enclosure_mask(grid, loop).sum())
    logger.debug("%d cells enclosed by %d-cell loop", count, loop.length)
    return count


# ---------------------------------------------------------------------------
# Main Service: solve_maze
# ---------------------------------------------------------------------------
def solve_maze(grid: PipeGrid) -> MazeSummary:
    """Trace the loop once and return both answers.

    Example:
        >>> grid = parse_grid(".....\\n.S-7.\\n.|.|.\\n.L-J.\\n.....")
        >>> summary = solve_maze(grid)
        >>> summary.farthest_distance, summary.enclosed_count
        (4, 1)
    """
    loop = trace_loop(grid)
    return MazeSummary(
        farthest_distance=loop.farthest_distance,
        enclosed_count=count_enclosed(grid, loop),
    )
