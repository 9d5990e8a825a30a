"""Maze Bounded Context - Error Hierarchy.

Custom exceptions for pipe maze parsing and traversal.

Parsing errors (InvalidSymbolError, DimensionError) mean the text is not a
map at all. TopologyError means the map parsed but breaks the single-loop
guarantee. Callers can tell the two apart by type.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base error for pipe maze operations."""


# ---------------------------------------------------------------------------
# Parsing Errors
# ---------------------------------------------------------------------------
class InvalidSymbolError(MazeError):
    """Map contains a character that is not a known tile symbol.

    Attributes:
        symbol: The offending character
        row: Zero-based row of the character
        col: Zero-based column of the character
    """

    def __init__(self, symbol: str, row: int, col: int) -> None:
        self.symbol = symbol
        self.row = row
        self.col = col
        super().__init__(f"Invalid symbol {symbol!r} at row {row}, column {col}")


class DimensionError(MazeError):
    """Map is empty or its rows differ in length.

    Attributes:
        row: Row index of the first mismatched row (0 for empty input)
        expected: Expected row length
        actual: Actual row length
    """

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        if expected == 0:
            message = "Map is empty"
        else:
            message = f"Row {row} has {actual} columns, expected {expected}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Traversal Errors
# ---------------------------------------------------------------------------
class TopologyError(MazeError):
    """Map does not contain a single closed loop through the start cell."""


# ---------------------------------------------------------------------------
# I/O Errors
# ---------------------------------------------------------------------------
class InvalidMazeFileError(MazeError):
    """Input file is empty, too large, or not decodable text."""

    pass
