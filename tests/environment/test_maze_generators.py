from __future__ import annotations

import logging

import numpy as np
import pytest

from darkmaze import config
from darkmaze.environment import (
    GeneratedMazeData,
    MazeError,
    MazeGenerationError,
    MazeGenerator,
    generate,
    translate_grid,
)
from darkmaze.geometry import Loc


class CorridorGenerator(MazeGenerator):
    """Carves a single horizontal corridor through the middle row."""

    def __init__(self) -> None:
        super().__init__()
        self.requested_sizes: list[int] = []

    def generate(self, size: int) -> GeneratedMazeData:
        self.requested_sizes.append(size)
        tiles = np.zeros((size, size), dtype=np.int8)
        row = size // 2
        tiles[1 : size - 1, row] = 1
        return GeneratedMazeData(tiles=tiles, start=(1, row), goal=(size - 2, row))


def test_translate_grid_indexes_x_first() -> None:
    tiles = np.zeros((4, 3), dtype=np.bool_)
    tiles[3, 0] = True
    tiles[1, 2] = True
    maze = translate_grid(GeneratedMazeData(tiles, start=(3, 0), goal=(1, 2)))
    assert set(maze.map) == {Loc(3, 0), Loc(1, 2)}
    assert maze.start == Loc(3, 0)
    assert maze.goal == Loc(1, 2)


def test_translate_grid_rejects_start_on_wall() -> None:
    tiles = np.ones((5, 5), dtype=np.bool_)
    tiles[0, 0] = False
    with pytest.raises(MazeGenerationError, match="Start"):
        translate_grid(GeneratedMazeData(tiles, start=(0, 0), goal=(2, 2)))


def test_translate_grid_rejects_goal_outside_grid() -> None:
    tiles = np.ones((5, 5), dtype=np.bool_)
    with pytest.raises(MazeGenerationError, match="outside"):
        translate_grid(GeneratedMazeData(tiles, start=(1, 1), goal=(5, 1)))


def test_translate_grid_rejects_non_2d() -> None:
    with pytest.raises(MazeGenerationError):
        translate_grid(GeneratedMazeData(np.ones(5), start=(0, 0), goal=(0, 0)))


def test_generate_runs_generator() -> None:
    generator = CorridorGenerator()
    maze = generate(config.DEFAULT_MAZE_SIZE, generator)
    assert generator.requested_sizes == [config.DEFAULT_MAZE_SIZE]
    assert maze.validate() is maze
    assert len(maze.map) == config.DEFAULT_MAZE_SIZE - 2


def test_generator_keeps_tuning_defaults() -> None:
    generator = CorridorGenerator()
    assert (generator.twisty, generator.swirly, generator.branchy) == (70, 50, 30)


def test_generate_warns_for_small_sizes(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="darkmaze.environment.generators"):
        generate(5, CorridorGenerator())
    assert "below" in caplog.text


def test_generation_error_is_a_maze_error() -> None:
    assert issubclass(MazeGenerationError, MazeError)
