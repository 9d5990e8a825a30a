"""Infrastructure adapters for the maze bounded context.

This module provides the infrastructure layer implementations for maze
operations, including loading maps from plain text files.
"""

from .text_adapter import TextMazeAdapter

__all__ = ["TextMazeAdapter"]
