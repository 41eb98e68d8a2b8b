from __future__ import annotations

import pytest

from darkmaze.environment import Maze
from darkmaze.geometry import Loc
from tests.helpers import maze_from_rows


@pytest.fixture
def corridor_maze() -> Maze:
    """A small walled maze: start top-left, goal at the end of a corridor."""
    return maze_from_rows(
        "=======",
        "=s....=",
        "====.==",
        "====.g=",
        "=======",
    )


@pytest.fixture
def cross_maze() -> Maze:
    """Floor at the origin and the three tiles south of it."""
    floor = [Loc(0, 0), Loc(0, 1), Loc(-1, 1), Loc(1, 1)]
    return Maze.from_floor(Loc(0, 0), Loc(0, 1), floor)
