"""Tests for is_enclosed, enclosure_mask and count_enclosed."""

from __future__ import annotations

import numpy as np
import pytest

from domain.maze.parsing import parse_grid
from domain.maze.services import (
    count_enclosed,
    enclosure_mask,
    is_enclosed,
    solve_maze,
    trace_loop,
)
from domain.maze.value_objects import Position


def P(row: int, col: int) -> Position:
    return Position(row=row, col=col)


# Cells inside the nested sample's loop
NESTED_INSIDE = {
    P(3, 14),
    P(4, 7),
    P(4, 8),
    P(4, 9),
    P(5, 7),
    P(5, 8),
    P(6, 6),
    P(6, 14),
}


# ===========================================================================
# Point Classification
# ===========================================================================
def test_nested_known_points(nested_grid):
    loop = trace_loop(nested_grid)

    assert is_enclosed(P(4, 7), loop.vertices) is True
    assert is_enclosed(P(0, 0), loop.vertices) is False


def test_nested_pocket_between_pipes_is_outside(nested_grid):
    """(2, 3) is walled in on three sides but opens to the outside."""
    loop = trace_loop(nested_grid)
    assert is_enclosed(P(2, 3), loop.vertices) is False


def test_winding_center(winding_grid):
    loop = trace_loop(winding_grid)

    assert is_enclosed(P(2, 2), loop.vertices) is True
    assert is_enclosed(P(4, 4), loop.vertices) is False


def test_classification_ignores_winding_direction(nested_grid):
    loop = trace_loop(nested_grid)
    reversed_polygon = tuple(reversed(loop.vertices))

    for position in nested_grid.positions():
        if position in loop.members():
            continue
        assert is_enclosed(position, loop.vertices) == is_enclosed(
            position, reversed_polygon
        )


@pytest.mark.parametrize("offset", [1, 7, 69, 70, 139])
def test_classification_invariant_under_rotation(nested_grid, offset):
    loop = trace_loop(nested_grid)
    rotated = loop.rotated(offset)

    inside = {
        p
        for p in nested_grid.positions()
        if p not in loop.members() and is_enclosed(p, rotated)
    }
    assert inside == NESTED_INSIDE


def test_ray_through_horizontal_run_counts_once():
    """A ray along a horizontal edge of the loop must not flip twice."""
    grid = parse_grid("......\n.S--7.\n.|..|.\n.L--J.\n......\n")
    loop = trace_loop(grid)

    # Same row as the top edge, left of the loop
    assert is_enclosed(P(1, 0), loop.vertices) is False
    assert is_enclosed(P(2, 2), loop.vertices) is True
    assert is_enclosed(P(2, 5), loop.vertices) is False


# ===========================================================================
# Scanline Mask
# ===========================================================================
def test_mask_matches_point_classification(nested_grid):
    loop = trace_loop(nested_grid)
    members = loop.members()
    mask = enclosure_mask(nested_grid, loop)

    assert mask.shape == (nested_grid.rows, nested_grid.cols)
    for p in nested_grid.positions():
        expected = p not in members and is_enclosed(p, loop.vertices)
        assert bool(mask[p.row, p.col]) == expected


def test_mask_never_marks_loop_cells(sample):
    grid = parse_grid(sample.text)
    loop = trace_loop(grid)
    mask = enclosure_mask(grid, loop)

    for v in loop.vertices:
        assert not mask[v.row, v.col]


def test_mask_is_read_only(nested_grid):
    mask = enclosure_mask(nested_grid, trace_loop(nested_grid))
    with pytest.raises(ValueError):
        mask[0, 0] = True


def test_mask_nested_cells(nested_grid):
    mask = enclosure_mask(nested_grid, trace_loop(nested_grid))
    rows, cols = np.nonzero(mask)
    assert {P(int(r), int(c)) for r, c in zip(rows, cols)} == NESTED_INSIDE


# ===========================================================================
# Counting
# ===========================================================================
def test_count_enclosed_samples(sample):
    grid = parse_grid(sample.text)
    assert count_enclosed(grid, trace_loop(grid)) == sample.enclosed_count


def test_count_enclosed_counts_junk_pipes():
    """Pipes that are not part of the loop still count when enclosed."""
    grid = parse_grid("......\n.S--7.\n.|F7|.\n.L--J.\n......\n")
    assert count_enclosed(grid, trace_loop(grid)) == 2


def test_count_enclosed_thin_loop_has_no_interior():
    grid = parse_grid("S7\nLJ\n")
    assert count_enclosed(grid, trace_loop(grid)) == 0


def test_solve_maze_samples(sample):
    summary = solve_maze(parse_grid(sample.text))

    assert summary.farthest_distance == sample.farthest_distance
    assert summary.enclosed_count == sample.enclosed_count
