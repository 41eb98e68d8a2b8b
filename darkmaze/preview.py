"""Plain-text rendering of a light map, for inspecting mazes from a terminal."""

from __future__ import annotations

import numpy as np

from darkmaze.environment.maze import Maze
from darkmaze.geometry.location import Loc
from darkmaze.lighting import LightLevel, classify_light
from darkmaze.types import LightMap

ACTOR_GLYPH = "@"
GOAL_GLYPH = "g"
DARK_GLYPH = " "

# (floor, wall) glyphs for each visible light level
_LEVEL_GLYPHS = {
    LightLevel.LIT: (".", "#"),
    LightLevel.DIM: (":", "+"),
}


def render_preview(maze: Maze, light_map: LightMap, actor: Loc | None = None) -> str:
    """Draw the maze as the explorer would see it, one character per tile.

    Covers the maze's floor plus a one tile border so lit walls show up.
    """
    low, high = maze.bounds()
    origin = Loc(low.x - 1, low.y - 1)
    width = high.x - low.x + 3
    height = high.y - low.y + 3

    glyphs = np.full((width, height), DARK_GLYPH, dtype="<U1", order="F")
    for x in range(width):
        for y in range(height):
            loc = Loc(origin.x + x, origin.y + y)
            level = classify_light(light_map.get(loc))
            if level is LightLevel.DARK:
                continue
            floor_glyph, wall_glyph = _LEVEL_GLYPHS[level]
            if not maze.is_floor(loc):
                glyphs[x, y] = wall_glyph
            elif loc == maze.goal:
                glyphs[x, y] = GOAL_GLYPH
            else:
                glyphs[x, y] = floor_glyph

    if actor is not None:
        ax, ay = actor.x - origin.x, actor.y - origin.y
        if 0 <= ax < width and 0 <= ay < height:
            glyphs[ax, ay] = ACTOR_GLYPH

    return "\n".join("".join(glyphs[:, y]).rstrip() for y in range(height))
