"""Plain text adapter for MazeRepository.

Reads a pipe map from a text file and returns a domain PipeGrid Value Object.

Lifecycle:
1) Check the file exists and is a regular, non-empty file within budget
2) Read bytes and decode with the configured encoding
3) Parse via domain.maze.parsing (domain errors propagate unchanged)
4) Log grid dimensions and return the PipeGrid
"""

from __future__ import annotations

import logging
from pathlib import Path

from domain.maze.errors import InvalidMazeFileError
from domain.maze.parsing import parse_grid
from domain.maze.value_objects import PipeGrid

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class TextMazeAdapter:
    """Infrastructure adapter for loading pipe maps from text files.

    Parameters
    ----------
    max_bytes: int | None
        Optional size limit for the input file. Larger files raise
        InvalidMazeFileError before being read.
    encoding: str
        Text encoding of the file.
    """

    def __init__(self, max_bytes: int | None = None, encoding: str = "utf-8") -> None:
        self.max_bytes = max_bytes
        self.encoding = encoding

    def load_grid(self, file_path: Path | str) -> PipeGrid:
        """Load a map file and return the parsed PipeGrid.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidMazeFileError: If the file is empty, too large or not text
            InvalidSymbolError, DimensionError, TopologyError: From parsing
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(str(path))

        try:
            if not path.is_file():
                raise InvalidMazeFileError(f"Not a regular file: {path.name}")
            st = path.stat()
            if st.st_size == 0:
                raise InvalidMazeFileError("Empty file")
            if self.max_bytes is not None and st.st_size > self.max_bytes:
                raise InvalidMazeFileError(
                    f"File size {st.st_size}B exceeds budget {self.max_bytes}B"
                )
            raw = path.read_bytes()
        except OSError as e:
            # Log only filename, errno and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise InvalidMazeFileError(
                f"File is not valid {self.encoding} text: {e.reason}"
            ) from e

        grid = parse_grid(text)
        logger.debug(
            "Maze %s: Loaded %dx%d grid, start at %s",
            path.name,
            grid.cols,
            grid.rows,
            grid.start.as_tuple(),
        )
        return grid
