from pathlib import Path

import pytest

from darkmaze.environment import (
    Maze,
    MazeError,
    MazeFormatError,
    Tile,
    parse_maze,
    parse_maze_text,
)
from darkmaze.geometry import Loc


def test_parse_floor_walls_start_and_goal(corridor_maze: Maze) -> None:
    assert corridor_maze.start == Loc(1, 1)
    assert corridor_maze.goal == Loc(5, 3)
    assert set(corridor_maze.map) == {
        Loc(1, 1),
        Loc(2, 1),
        Loc(3, 1),
        Loc(4, 1),
        Loc(5, 1),
        Loc(4, 2),
        Loc(4, 3),
        Loc(5, 3),
    }
    assert all(tile == Tile.FLOOR for tile in corridor_maze.map.values())


def test_space_is_floor() -> None:
    maze = parse_maze_text("= s\n g=")
    assert maze.is_floor(Loc(1, 0))
    assert maze.is_floor(Loc(0, 1))
    assert not maze.is_floor(Loc(0, 0))


def test_last_start_and_goal_win() -> None:
    maze = parse_maze_text("sg\ngs")
    assert maze.start == Loc(1, 1)
    assert maze.goal == Loc(0, 1)
    # Earlier markers are still floor.
    assert maze.is_floor(Loc(0, 0))
    assert maze.is_floor(Loc(1, 0))


def test_missing_markers_default_to_origin() -> None:
    maze = parse_maze_text("==\n=.")
    assert maze.start == Loc(0, 0)
    assert maze.goal == Loc(0, 0)
    with pytest.raises(MazeError):
        maze.validate()


def test_rows_can_be_ragged() -> None:
    maze = parse_maze_text("s\n==.g\n")
    assert maze.goal == Loc(3, 1)
    assert maze.is_floor(Loc(2, 1))


def test_crlf_line_endings() -> None:
    maze = parse_maze_text("s.\r\n.g\r\n")
    assert maze.goal == Loc(1, 1)
    assert maze.is_floor(Loc(0, 1))


def test_unknown_character_reports_position() -> None:
    with pytest.raises(MazeFormatError) as excinfo:
        parse_maze_text("s..\n.x.")
    assert excinfo.value.char == "x"
    assert (excinfo.value.row, excinfo.value.column) == (1, 1)
    assert isinstance(excinfo.value, MazeError)


def test_parse_maze_file(tmp_path: Path) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("=====\n=s.g=\n=====\n")
    maze = parse_maze(path)
    assert maze.start == Loc(1, 1)
    assert maze.goal == Loc(3, 1)
    assert len(maze.map) == 3


def test_missing_file_is_a_maze_error(tmp_path: Path) -> None:
    with pytest.raises(MazeError, match="Could not read"):
        parse_maze(tmp_path / "nope.txt")


def test_undecodable_file_is_a_maze_error(tmp_path: Path) -> None:
    path = tmp_path / "maze.txt"
    path.write_bytes(b"=s\xff\xfeg=\n")
    with pytest.raises(MazeError, match="Could not read") as excinfo:
        parse_maze(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
