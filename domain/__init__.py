"""Pipe Maze Domain Layer.

This package contains the core puzzle logic organized by bounded contexts:
- maze: Map parsing, pipe connectivity, loop tracing, enclosed area
"""

# Imports alphabetized per project style (isort)
from domain import maze

__all__ = ["maze"]
