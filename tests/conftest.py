"""Root pytest configuration for all tests.

Provides parsed sample maps shared by the domain and adapter tests. The
sample texts and their expected answers live in shared/sample_grids.py.
"""

from __future__ import annotations

import pytest

from domain.maze.parsing import parse_grid
from domain.maze.value_objects import PipeGrid
from shared.sample_grids import SAMPLE_GRIDS, SampleGrid


@pytest.fixture(params=sorted(SAMPLE_GRIDS))
def sample(request: pytest.FixtureRequest) -> SampleGrid:
    """Each canonical sample map with its expected answers."""
    return SAMPLE_GRIDS[request.param]


@pytest.fixture
def nested_grid() -> PipeGrid:
    """The 20x10 nested sample, parsed."""
    return parse_grid(SAMPLE_GRIDS["nested"].text)


@pytest.fixture
def winding_grid() -> PipeGrid:
    """The 5x5 winding sample, parsed."""
    return parse_grid(SAMPLE_GRIDS["winding"].text)
