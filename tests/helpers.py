from __future__ import annotations

from darkmaze.environment import Maze, parse_maze_text
from darkmaze.geometry import Loc


def maze_from_rows(*rows: str) -> Maze:
    """Build a maze from text rows, in the maze file format."""
    return parse_maze_text("\n".join(rows))


def open_floor_maze(radius: int) -> Maze:
    """A square of floor centered on (0, 0), big enough to act unbounded."""
    floor = [
        Loc(x, y)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
    ]
    return Maze.from_floor(Loc(0, 0), Loc(0, 0), floor)
