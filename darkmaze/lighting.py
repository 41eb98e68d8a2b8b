"""Flashlight illumination over the maze floor.

A light source shines a beam one tile at a time. The primary beam carries on
straight ahead and splits off two side arms at every floor tile it reaches;
side arms keep curving away from the beam 45 degrees per tile without
splitting again. Each step divides the power, and a beam stops once it is too
weak or it lands on a tile that is not floor. The tile it stopped on is still
lit, which is how walls get their light.

The result is a plain ``{Loc: Lum}`` mapping. Where two beams reach the same
tile the later one overwrites the earlier one. Tiles missing from the mapping
were never reached.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from darkmaze import config
from darkmaze.environment.maze import Maze
from darkmaze.geometry.direction import Angle, Dir
from darkmaze.geometry.location import Loc
from darkmaze.types import LightMap, Lum

logger = logging.getLogger(__name__)


class SourceKind(Enum):
    PRIMARY = auto()  # Straight beam, splits at every tile
    LEFT = auto()  # Side arm curving counterclockwise
    RIGHT = auto()  # Side arm curving clockwise


class LightLevel(Enum):
    """How a renderer should treat a tile's recorded light."""

    DARK = auto()
    DIM = auto()
    LIT = auto()


@dataclass(frozen=True, slots=True)
class LightSource:
    """Light arriving at ``loc`` while heading in ``dir``."""

    power: Lum
    dir: Dir
    loc: Loc
    kind: SourceKind = SourceKind.PRIMARY

    @classmethod
    def create(
        cls, loc: Loc, dir: Dir, battery: float = config.START_BATTERY
    ) -> LightSource:
        """A flashlight held at ``loc``, scaled by the remaining battery."""
        power = config.INIT_LIGHT * battery / config.START_BATTERY
        return cls(power, dir, loc, SourceKind.PRIMARY)

    def _toward(self, dir: Dir, divisor: float, kind: SourceKind) -> LightSource:
        return LightSource(self.power / divisor, dir, self.loc.adj(dir), kind)

    def spread(self) -> Iterator[LightSource]:
        """The sources this one hands its light on to, in propagation order."""
        left = self.dir.turn(Angle.a45().reverse())
        right = self.dir.turn(Angle.a45())
        match self.kind:
            case SourceKind.PRIMARY:
                yield self._toward(self.dir, config.DIVP, SourceKind.PRIMARY)
                yield self._toward(left, config.DIVS, SourceKind.LEFT)
                yield self._toward(right, config.DIVS, SourceKind.RIGHT)
            case SourceKind.LEFT:
                yield self._toward(left, config.DIVS, SourceKind.LEFT)
            case SourceKind.RIGHT:
                yield self._toward(right, config.DIVS, SourceKind.RIGHT)


def _propagate(maze: Maze, source: LightSource, light_map: LightMap) -> int:
    # Depth first, children in spread() order, so later beams overwrite the
    # same tiles they would if each child were followed to its end in turn.
    stack = [source]
    visits = 0
    while stack:
        current = stack.pop()
        light_map[current.loc] = current.power
        visits += 1
        if current.power < config.MIN_LIGHT_POWER or not maze.is_floor(current.loc):
            continue
        stack.extend(reversed(list(current.spread())))
    return visits


def illuminate(
    maze: Maze, source: LightSource, light_map: LightMap | None = None
) -> LightMap:
    """Record the light ``source`` casts on each tile it reaches.

    Every power division is at least a halving, so the work is bounded by
    the source power alone, however large or open the maze is. Beams are
    followed with an explicit stack, so long corridors and huge powers do not
    run into the interpreter's recursion limit.

    Args:
        maze: The maze to light. Only read.
        source: Where the light starts.
        light_map: Mapping to record into. A new one is made when omitted.

    Returns:
        The mapping the light was recorded into.
    """
    if light_map is None:
        light_map = {}
    visits = _propagate(maze, source, light_map)
    logger.debug(
        "Illuminated from %s: %d visits, %d tiles", source.loc, visits, len(light_map)
    )
    return light_map


def classify_light(lum: Lum | None) -> LightLevel:
    """Bucket a recorded light value (or None for unreached) for drawing."""
    if lum is None or lum < config.DARK2_LIGHT:
        return LightLevel.DARK
    if lum < config.DARK1_LIGHT:
        return LightLevel.DIM
    return LightLevel.LIT


def light_map_to_array(
    light_map: LightMap, origin: Loc, width: int, height: int
) -> np.ndarray:
    """Rasterize a light map into a ``(width, height)`` float array.

    ``origin`` is the location of cell ``[0, 0]``. Unreached tiles are 0.0.
    """
    grid = np.zeros((width, height), dtype=np.float64, order="F")
    for loc, lum in light_map.items():
        x = loc.x - origin.x
        y = loc.y - origin.y
        if 0 <= x < width and 0 <= y < height:
            grid[x, y] = lum
    return grid
