"""Tests for connection_at and connections."""

from __future__ import annotations

import pytest

from domain.maze.errors import TopologyError
from domain.maze.parsing import parse_grid
from domain.maze.services import connection_at, connections
from domain.maze.value_objects import Direction, Position


def P(row: int, col: int) -> Position:
    return Position(row=row, col=col)


# ===========================================================================
# connection_at
# ===========================================================================
def test_connection_at_off_grid(winding_grid):
    assert connection_at(winding_grid, P(2, 0), Direction.WEST) is None
    assert connection_at(winding_grid, P(0, 2), Direction.NORTH) is None
    assert connection_at(winding_grid, P(4, 1), Direction.SOUTH) is None
    assert connection_at(winding_grid, P(2, 4), Direction.EAST) is None


def test_connection_at_ground(winding_grid):
    # (1, 0) is ground
    assert connection_at(winding_grid, P(2, 0), Direction.NORTH) is None


def test_connection_at_accepting_pipe(winding_grid):
    # (2, 1) is J, which has a WEST connector
    assert connection_at(winding_grid, P(2, 0), Direction.EAST) == P(2, 1)
    # (3, 0) is |, which has a NORTH connector
    assert connection_at(winding_grid, P(2, 0), Direction.SOUTH) == P(3, 0)


def test_connection_at_non_accepting_pipe():
    # L has no WEST connector
    grid = parse_grid("SL\n..\n")
    assert connection_at(grid, P(0, 0), Direction.EAST) is None


@pytest.mark.parametrize(
    "symbol,accepted",
    [
        ("-", True),
        ("7", True),
        ("J", True),
        ("|", False),
        ("L", False),
        ("F", False),
    ],
)
def test_connection_at_moving_east(symbol, accepted):
    grid = parse_grid(f"S{symbol}")
    expected = P(0, 1) if accepted else None
    assert connection_at(grid, P(0, 0), Direction.EAST) == expected


@pytest.mark.parametrize(
    "symbol,accepted",
    [
        ("|", True),
        ("L", True),
        ("J", True),
        ("-", False),
        ("7", False),
        ("F", False),
    ],
)
def test_connection_at_moving_south(symbol, accepted):
    grid = parse_grid(f"S\n{symbol}")
    expected = P(1, 0) if accepted else None
    assert connection_at(grid, P(0, 0), Direction.SOUTH) == expected


def test_connection_at_start_is_wildcard(winding_grid):
    # Moving WEST from (2, 1) into the start needs no connector check
    assert connection_at(winding_grid, P(2, 1), Direction.WEST) == P(2, 0)
    # Even from a ground cell
    assert connection_at(winding_grid, P(1, 0), Direction.SOUTH) == P(2, 0)


# ===========================================================================
# connections
# ===========================================================================
def test_connections_start_probe_order(winding_grid):
    """Start probes EAST, SOUTH, NORTH, WEST."""
    assert connections(winding_grid, P(2, 0)) == (P(2, 1), P(3, 0))


def test_connections_pipe_in_declared_order(winding_grid):
    # J at (2, 1): NORTH then WEST
    assert connections(winding_grid, P(2, 1)) == (P(1, 1), P(2, 0))


def test_connections_ground_is_empty(winding_grid):
    assert connections(winding_grid, P(0, 0)) == ()


def test_connections_pipe_drops_unresolved_connector():
    # The | at (0, 1) points NORTH off the grid
    grid = parse_grid("S|\n..\n")
    assert connections(grid, P(0, 1)) == ()


def test_connections_start_with_one_neighbour():
    grid = parse_grid("S-\n..\n")
    with pytest.raises(TopologyError, match="1 neighbours"):
        connections(grid, P(0, 0))


def test_connections_start_with_three_neighbours():
    grid = parse_grid(".|.\n-S-\n...\n")
    with pytest.raises(TopologyError, match="3 neighbours"):
        connections(grid, P(1, 1))


def test_connections_start_isolated():
    grid = parse_grid("...\n.S.\n...\n")
    with pytest.raises(TopologyError, match="0 neighbours"):
        connections(grid, P(1, 1))
