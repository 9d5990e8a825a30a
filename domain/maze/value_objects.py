"""Maze Bounded Context - Value Objects.

Immutable data structures representing the pipe maze.
All validation occurs at construction time via Pydantic.

Coordinates are (row, col) with row 0 at the top of the map, so NORTH
decreases the row and EAST increases the column.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------
class Direction(Enum):
    """Cardinal unit vector as (d_row, d_col)."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------
class Shape(Enum):
    """Pipe segment shape, valued by its map symbol.

    Every shape has exactly two connectors. Their order is fixed and decides
    the order of the positions returned for a pipe cell.
    """

    NORTH_SOUTH = "|"
    EAST_WEST = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def connectors(self) -> tuple[Direction, Direction]:
        return _SHAPE_CONNECTORS[self]

    def accepts(self, direction: Direction) -> bool:
        """Return True if a step moving in `direction` can enter this shape."""
        return direction.opposite in _SHAPE_CONNECTORS[self]


_SHAPE_CONNECTORS: dict[Shape, tuple[Direction, Direction]] = {
    Shape.NORTH_SOUTH: (Direction.SOUTH, Direction.NORTH),
    Shape.EAST_WEST: (Direction.WEST, Direction.EAST),
    Shape.NORTH_EAST: (Direction.NORTH, Direction.EAST),
    Shape.NORTH_WEST: (Direction.NORTH, Direction.WEST),
    Shape.SOUTH_WEST: (Direction.WEST, Direction.SOUTH),
    Shape.SOUTH_EAST: (Direction.EAST, Direction.SOUTH),
}


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------
class Position(BaseModel):
    """Grid coordinate, used both as cell index and polygon vertex.

    Pydantic frozen models compare and hash by value, so positions can be
    used directly in sets and as dict keys.
    """

    row: int = Field(ge=0)
    col: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def step(self, direction: Direction) -> Position | None:
        """Return the adjacent position, or None if it would be negative."""
        d_row, d_col = direction.delta
        row, col = self.row + d_row, self.col + d_col
        if row < 0 or col < 0:
            return None
        return Position(row=row, col=col)

    def is_adjacent(self, other: Position) -> bool:
        """True if `other` is one orthogonal step away."""
        return abs(self.row - other.row) + abs(self.col - other.col) == 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------
class Ground(BaseModel):
    """Empty tile, no connectors."""

    kind: Literal["ground"] = "ground"

    model_config = ConfigDict(frozen=True)

    @property
    def symbol(self) -> str:
        return "."


class Start(BaseModel):
    """Start tile of unknown shape; accepts a connection from any side."""

    kind: Literal["start"] = "start"

    model_config = ConfigDict(frozen=True)

    @property
    def symbol(self) -> str:
        return "S"


class Pipe(BaseModel):
    """Tile holding a pipe segment of a fixed shape."""

    kind: Literal["pipe"] = "pipe"
    shape: Shape

    model_config = ConfigDict(frozen=True)

    @property
    def symbol(self) -> str:
        return self.shape.symbol


Cell = Union[Ground, Start, Pipe]


# ---------------------------------------------------------------------------
# PipeGrid
# ---------------------------------------------------------------------------
class PipeGrid(BaseModel):
    """Rectangular map of cells with a single start (Value Object).

    Invariants:
        PG-1: at least one row and one column
        PG-2: all rows have equal length
        PG-3: start lies inside the grid and holds the Start cell
        PG-4: exactly one Start cell
    """

    cells: tuple[tuple[Cell, ...], ...]
    start: Position

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_grid(self) -> "PipeGrid":
        # PG-1
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid cannot be empty")
        # PG-2
        width = len(self.cells[0])
        for i, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Grid must be rectangular: row {i} has {len(row)} cells, "
                    f"expected {width}"
                )
        # PG-3
        if not self.contains(self.start):
            raise ValueError(f"Start {self.start.as_tuple()} outside grid")
        if not isinstance(self.cell_at(self.start), Start):
            raise ValueError(f"No start cell at {self.start.as_tuple()}")
        # PG-4
        starts = sum(1 for row in self.cells for cell in row if isinstance(cell, Start))
        if starts != 1:
            raise ValueError(f"Grid must have exactly one start cell, got {starts}")
        return self

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def contains(self, position: Position) -> bool:
        return position.row < self.rows and position.col < self.cols

    def cell_at(self, position: Position) -> Cell:
        return self.cells[position.row][position.col]

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row=row, col=col)

    def render(self) -> str:
        """Return the map text this grid was parsed from."""
        return "\n".join("".join(cell.symbol for cell in row) for row in self.cells)


# ---------------------------------------------------------------------------
# PipeLoop
# ---------------------------------------------------------------------------
class PipeLoop(BaseModel):
    """Closed loop traced from the start cell (Value Object).

    `vertices` is the polygon in cyclic order: the last vertex connects back
    to the first. The first vertex is always the start cell.

    Invariants:
        PL-1: len(vertices) >= 4
        PL-2: no vertex repeats
        PL-3: consecutive vertices (with wraparound) are orthogonally adjacent
        PL-4: farthest_distance == ceil(len(vertices) / 2)
        PL-5: farthest == vertices[farthest_distance]
    """

    vertices: tuple[Position, ...]
    farthest: Position
    farthest_distance: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_loop(self) -> "PipeLoop":
        n = len(self.vertices)
        # PL-1
        if n < 4:
            raise ValueError(f"Loop must have >= 4 vertices, got {n}")
        # PL-2
        if len(set(self.vertices)) != n:
            raise ValueError("Loop vertices must not repeat")
        # PL-3
        for i, vertex in enumerate(self.vertices):
            following = self.vertices[(i + 1) % n]
            if not vertex.is_adjacent(following):
                raise ValueError(
                    f"Vertices {vertex.as_tuple()} and {following.as_tuple()} "
                    f"are not adjacent"
                )
        # PL-4
        if self.farthest_distance != math.ceil(n / 2):
            raise ValueError(
                f"farthest_distance ({self.farthest_distance}) must equal "
                f"ceil({n} / 2)"
            )
        # PL-5
        if self.vertices[self.farthest_distance] != self.farthest:
            raise ValueError("farthest must be the vertex at farthest_distance")
        return self

    @property
    def length(self) -> int:
        return len(self.vertices)

    @property
    def start(self) -> Position:
        return self.vertices[0]

    def members(self) -> frozenset[Position]:
        return frozenset(self.vertices)

    def rotated(self, offset: int) -> tuple[Position, ...]:
        """Return the vertices starting at index `offset` (same cycle)."""
        offset %= len(self.vertices)
        return self.vertices[offset:] + self.vertices[:offset]


# ---------------------------------------------------------------------------
# MazeSummary
# ---------------------------------------------------------------------------
class MazeSummary(BaseModel):
    """The two answers for a maze."""

    farthest_distance: int = Field(ge=0)
    enclosed_count: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)
