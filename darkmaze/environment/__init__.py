"""The maze model and the ways of getting one.

- Maze/Tile: the sparse floor map with start and goal
- parse_maze/parse_maze_text: the text file format
- generate/MazeGenerator: adapter for external maze generators
"""

from .generators import (
    GeneratedMazeData,
    MazeGenerationError,
    MazeGenerator,
    generate,
    translate_grid,
)
from .maze import Maze, MazeError, Tile
from .parser import MazeFormatError, parse_maze, parse_maze_text

__all__ = [
    "GeneratedMazeData",
    "Maze",
    "MazeError",
    "MazeFormatError",
    "MazeGenerationError",
    "MazeGenerator",
    "Tile",
    "generate",
    "parse_maze",
    "parse_maze_text",
    "translate_grid",
]
