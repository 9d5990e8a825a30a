"""Domain Port(s) for Maze I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import PipeGrid


class MazeRepository(Protocol):
    """Port for obtaining pipe maps from external sources.

    Implementations live in infrastructure (e.g., plain text adapter).
    """

    def load_grid(self, file_path: Path | str) -> PipeGrid:
        """Load a map and return a validated PipeGrid."""
        ...
