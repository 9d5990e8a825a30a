"""Maze Bounded Context - Map Parsing.

Turns raw map text into a PipeGrid. Pure: no I/O, no logging.
Reading the text from disk is done by `infrastructure.maze.text_adapter`.
"""

from __future__ import annotations

from domain.maze.errors import DimensionError, InvalidSymbolError, TopologyError
from domain.maze.value_objects import (
    Cell,
    Ground,
    Pipe,
    PipeGrid,
    Position,
    Shape,
    Start,
)

GROUND_SYMBOL = "."
START_SYMBOL = "S"

# Cells are immutable, so one instance per symbol is shared by every tile.
_SYMBOL_CELLS: dict[str, Cell] = {
    GROUND_SYMBOL: Ground(),
    START_SYMBOL: Start(),
    **{shape.symbol: Pipe(shape=shape) for shape in Shape},
}


def parse_grid(text: str) -> PipeGrid:
    """Parse map text into a PipeGrid.

    One line per grid row. Trailing blank lines are ignored.

    Args:
        text: Map using the symbols `. S | - L J 7 F`

    Returns:
        PipeGrid with the start position recorded

    Raises:
        InvalidSymbolError: On the first unknown character (row-major order)
        DimensionError: If the map is empty or rows differ in length
        TopologyError: If the map has no start cell or more than one
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise DimensionError(0, 0, 0)

    width = len(lines[0])
    rows: list[tuple[Cell, ...]] = []
    starts: list[Position] = []

    for i, line in enumerate(lines):
        row: list[Cell] = []
        for j, symbol in enumerate(line):
            cell = _SYMBOL_CELLS.get(symbol)
            if cell is None:
                raise InvalidSymbolError(symbol, i, j)
            if isinstance(cell, Start):
                starts.append(Position(row=i, col=j))
            row.append(cell)
        # Checked per row so a short row is reported before later symbols
        if len(row) != width or width == 0:
            raise DimensionError(i, width, len(row))
        rows.append(tuple(row))

    if not starts:
        raise TopologyError("Map has no start cell")
    if len(starts) > 1:
        found = ", ".join(str(p.as_tuple()) for p in starts)
        raise TopologyError(f"Map has {len(starts)} start cells: {found}")

    return PipeGrid(cells=tuple(rows), start=starts[0])
