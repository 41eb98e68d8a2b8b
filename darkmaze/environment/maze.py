from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from darkmaze.geometry.location import Loc


class MazeError(Exception):
    """A maze could not be loaded, built or used."""


class Tile(Enum):
    """A descriptor of the features of a maze location.

    Only floor is modeled. A location missing from ``Maze.map`` is solid.
    """

    FLOOR = auto()


@dataclass(frozen=True)
class Maze:
    """A sparse map of floor tiles with start and goal positions.

    A correctly constructed maze has its start and goal on floor tiles. That is
    the responsibility of whoever builds it (see :meth:`validate`); the maze is
    read-only once built.
    """

    start: Loc
    goal: Loc
    map: Mapping[Loc, Tile]

    # Compared by value but never hashed: the map is a read-only view.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # Freeze the mapping as well as the fields.
        object.__setattr__(self, "map", MappingProxyType(dict(self.map)))

    def __reduce__(self) -> tuple[type[Maze], tuple[Loc, Loc, dict[Loc, Tile]]]:
        # Mapping proxies cannot be pickled or copied; rebuild from a plain dict.
        return (type(self), (self.start, self.goal, dict(self.map)))

    @classmethod
    def from_floor(cls, start: Loc, goal: Loc, floor: Iterable[Loc]) -> Maze:
        """Build a maze from a set of floor locations."""
        return cls(start, goal, dict.fromkeys(floor, Tile.FLOOR))

    def tile_at(self, loc: Loc) -> Tile | None:
        return self.map.get(loc)

    def is_floor(self, loc: Loc) -> bool:
        return self.map.get(loc) == Tile.FLOOR

    def validate(self) -> Maze:
        """Check that start and goal are on floor, returning the maze."""
        if not self.is_floor(self.start):
            raise MazeError(f"Start {self.start} is not on a floor tile")
        if not self.is_floor(self.goal):
            raise MazeError(f"Goal {self.goal} is not on a floor tile")
        return self

    def bounds(self) -> tuple[Loc, Loc]:
        """Inclusive (min, max) corners of the floor tiles, start and goal."""
        locs = [*self.map, self.start, self.goal]
        xs = [loc.x for loc in locs]
        ys = [loc.y for loc in locs]
        return Loc(min(xs), min(ys)), Loc(max(xs), max(ys))
