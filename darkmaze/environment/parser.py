"""Text maze files.

One character per tile, one line per row, with the first character of a line
in column 0:

- ``.`` or space: floor
- ``=``: wall
- ``s``: the starting point (floor)
- ``g``: the goal (floor)

There can only be one start and one goal. If several ``s`` or ``g`` characters
appear, the last occurrence of each is used.
"""

from __future__ import annotations

import logging
from pathlib import Path

from darkmaze.environment.maze import Maze, MazeError, Tile
from darkmaze.geometry.location import Loc

logger = logging.getLogger(__name__)

FLOOR_CHARS = frozenset(". ")
WALL_CHAR = "="
START_CHAR = "s"
GOAL_CHAR = "g"


class MazeFormatError(MazeError):
    """A maze file contains a character with no meaning."""

    def __init__(self, char: str, row: int, column: int) -> None:
        super().__init__(
            f"Unknown maze character {char!r} at row {row}, column {column}"
        )
        self.char = char
        self.row = row
        self.column = column


def parse_maze_text(text: str) -> Maze:
    """Parse a maze from its text representation.

    The start and goal default to (0, 0) when missing. The result is not
    validated; call :meth:`Maze.validate` to check it.
    """
    start = Loc(0, 0)
    goal = Loc(0, 0)
    floor: dict[Loc, Tile] = {}
    x = 0
    y = 0
    for i, char in enumerate(text):
        if char == "\n":
            x = 0
            y += 1
            continue
        loc = Loc(x, y)
        if char in FLOOR_CHARS:
            floor[loc] = Tile.FLOOR
        elif char == START_CHAR:
            floor[loc] = Tile.FLOOR
            start = loc
        elif char == GOAL_CHAR:
            floor[loc] = Tile.FLOOR
            goal = loc
        elif char == "\r" and text[i + 1 : i + 2] == "\n":
            # Windows line ending; the "\n" ends the row.
            continue
        elif char != WALL_CHAR:
            raise MazeFormatError(char, y, x)
        x += 1

    logger.debug(
        "Parsed maze: %d floor tiles, start %s, goal %s", len(floor), start, goal
    )
    return Maze(start, goal, floor)


def parse_maze(path: str | Path) -> Maze:
    """Read and parse a maze file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MazeError(f"Could not read maze file {path}: {exc}") from exc
    return parse_maze_text(text)
