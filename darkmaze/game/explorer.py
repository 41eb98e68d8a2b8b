"""The player's avatar: motion through the maze and the flashlight it carries."""

from __future__ import annotations

import logging

from darkmaze import config
from darkmaze.environment.maze import Maze, Tile
from darkmaze.geometry.direction import Dir
from darkmaze.geometry.location import FineLoc, Loc
from darkmaze.geometry.route import (
    Complete,
    InProgress,
    RouteError,
    RouteResult,
    TileRoute,
)
from darkmaze.lighting import LightSource, illuminate
from darkmaze.types import DeltaTime, LightMap

logger = logging.getLogger(__name__)


class Explorer:
    """Tracks where the explorer is, where it wants to go and its battery.

    Movement is tile to tile: while at rest, a held direction starts a route
    to the neighboring tile if that tile is floor, and the route then runs to
    completion at ``speed`` tiles per second regardless of input.
    """

    def __init__(
        self,
        maze: Maze,
        speed: float = config.DEFAULT_SPEED,
        battery: float = config.START_BATTERY,
    ) -> None:
        self.maze = maze
        self.loc: RouteResult = Complete(maze.start)
        self.dir: Dir = Dir.south()
        self.intended_dir: Dir | None = None
        self.speed = speed
        self.battery = battery

    def intend(self, dir: Dir) -> None:
        self.intended_dir = dir

    def unintend(self, dir: Dir) -> None:
        """Drop the intent to move, unless a different direction took over."""
        if self.intended_dir == dir:
            self.intended_dir = None

    def tile_at(self, loc: Loc) -> Tile | None:
        return self.maze.tile_at(loc)

    def adj(self, dir: Dir) -> Tile | None:
        """Tile next to the current one (the route start while moving)."""
        match self.loc:
            case Complete(loc):
                return self.tile_at(loc.adj(dir))
            case InProgress(route):
                return self.tile_at(route.start.adj(dir))

    def update(self, dt: DeltaTime) -> None:
        """Drain the battery, then move or start moving.

        Time only runs forward: a negative ``dt`` raises ``RouteError`` before
        anything changes, whether or not the explorer is moving.
        """
        if dt < 0:
            raise RouteError(f"Time cannot go backwards (dt={dt})")
        self.battery = max(0.0, self.battery - dt * config.BATTERY_DRAIN_RATE)

        match self.loc:
            case InProgress(route):
                self.loc = route.advance(dt * self.speed)
                if isinstance(self.loc, Complete):
                    logger.debug("Arrived at %s", self.loc.loc)
            case Complete(loc):
                if self.intended_dir is None:
                    return
                self.dir = self.intended_dir
                if self.adj(self.intended_dir) == Tile.FLOOR:
                    self.loc = InProgress(TileRoute(loc, self.intended_dir))
                    logger.debug("Moving %r from %s", self.intended_dir, loc)

    def base_loc(self) -> Loc:
        """The tile the explorer counts as standing on."""
        match self.loc:
            case Complete(loc):
                return loc
            case InProgress(route):
                return route.as_fineloc().base

    def fine_loc(self) -> FineLoc:
        match self.loc:
            case Complete(loc):
                return FineLoc.from_loc(loc)
            case InProgress(route):
                return route.as_fineloc()

    def found_goal(self) -> bool:
        return self.base_loc() == self.maze.goal

    def is_exhausted(self) -> bool:
        return self.battery <= config.BATTERY_EMPTY

    def light_source(self, loc: Loc) -> LightSource:
        return LightSource.create(loc, self.dir, self.battery)

    def light_map(self) -> LightMap:
        """Light reaching each tile from the explorer's flashlight.

        While moving, the light from the tile being left fades out and the
        light from the destination fades in as the route progresses.
        """
        if not isinstance(self.loc, InProgress):
            return illuminate(self.maze, self.light_source(self.base_loc()))

        route = self.loc.route
        progress = route.get_progress()
        lums = illuminate(self.maze, self.light_source(route.start))
        dest_lums = illuminate(self.maze, self.light_source(route.dest()))
        blended: LightMap = {loc: lum * (1.0 - progress) for loc, lum in lums.items()}
        for loc, lum in dest_lums.items():
            blended[loc] = blended.get(loc, 0.0) + lum * progress
        return blended
