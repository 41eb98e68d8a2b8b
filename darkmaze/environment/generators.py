"""Adapter between maze generators and the ``Maze`` model.

Maze generation itself happens elsewhere (historically a native library).
A generator fills a square grid and picks start and goal positions; this
module checks that output and turns it into a sparse :class:`Maze`.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass

import numpy as np

from darkmaze import config
from darkmaze.environment.maze import Maze, MazeError, Tile
from darkmaze.geometry.location import Loc
from darkmaze.types import TilePos

logger = logging.getLogger(__name__)


class MazeGenerationError(MazeError):
    """A generator failed or produced an unusable maze."""


@dataclass
class GeneratedMazeData:
    """A container for the raw data produced by a maze generator.

    ``tiles`` is indexed ``[x, y]``; any non-zero cell is floor.
    """

    tiles: np.ndarray
    start: TilePos
    goal: TilePos


class MazeGenerator(abc.ABC):
    """Abstract base class for maze generation algorithms.

    The tuning values are percentages that implementations may use however
    suits their algorithm.
    """

    def __init__(
        self,
        twisty: int = config.GENERATOR_TWISTY,
        swirly: int = config.GENERATOR_SWIRLY,
        branchy: int = config.GENERATOR_BRANCHY,
    ) -> None:
        self.twisty = twisty
        self.swirly = swirly
        self.branchy = branchy

    @abc.abstractmethod
    def generate(self, size: int) -> GeneratedMazeData:
        """Generate a square maze with sides of ``size`` tiles."""
        raise NotImplementedError


def _check_position(tiles: np.ndarray, pos: TilePos, label: str) -> Loc:
    x, y = pos
    width, height = tiles.shape
    if not (0 <= x < width and 0 <= y < height):
        raise MazeGenerationError(
            f"{label} position {pos} outside the {width}x{height} grid"
        )
    if not tiles[x, y]:
        raise MazeGenerationError(f"{label} position {pos} is not floor")
    return Loc(int(x), int(y))


def translate_grid(data: GeneratedMazeData) -> Maze:
    """Collect the floor tiles of a generated grid into a ``Maze``."""
    tiles = np.asarray(data.tiles)
    if tiles.ndim != 2:
        raise MazeGenerationError(
            f"Expected a 2D tile grid, got shape {tiles.shape}"
        )

    start = _check_position(tiles, data.start, "Start")
    goal = _check_position(tiles, data.goal, "Goal")
    floor = {Loc(int(x), int(y)): Tile.FLOOR for x, y in np.argwhere(tiles)}
    return Maze(start, goal, floor)


def generate(size: int, generator: MazeGenerator) -> Maze:
    """Generate a random square-shaped maze with sides of ``size`` tiles."""
    if size < config.MIN_MAZE_SIZE:
        logger.warning(
            "Maze size %d is below %d; there may be no room for paths",
            size,
            config.MIN_MAZE_SIZE,
        )
    data = generator.generate(size)
    maze = translate_grid(data)
    logger.debug(
        "Generated %dx%d maze with %d floor tiles", size, size, len(maze.map)
    )
    return maze
