"""Grid locations and continuous sub-tile positions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from darkmaze.geometry.direction import Dir
from darkmaze.types import Coords, Offsets, TileCoord


@dataclass(frozen=True, slots=True)
class Loc:
    """An address in the maze."""

    x: TileCoord
    y: TileCoord

    def adj(self, dir: Dir) -> Loc:
        """The neighboring tile one step along ``dir``."""
        dx, dy = dir.offset()
        return Loc(self.x + dx, self.y + dy)

    def add(self, other: Loc) -> Loc:
        return Loc(self.x + other.x, self.y + other.y)

    def sub(self, other: Loc) -> Loc:
        return Loc(self.x - other.x, self.y - other.y)

    def as_coords(self) -> Coords:
        return (float(self.x), float(self.y))


def split_offset(value: float) -> tuple[int, float]:
    """Split an offset into whole tiles and the remaining fraction.

    The whole part is truncated toward zero, so a negative input leaves a
    negative fraction: ``-1.25`` splits into ``(-1, -0.25)``. All FineLoc
    normalization goes through here.
    """
    whole = math.trunc(value)
    return whole, value - whole


@dataclass(frozen=True, slots=True)
class FineLoc:
    """A continuous position: a base tile plus a fractional offset.

    Used to interpolate movement between tiles when drawing. Build instances
    with :meth:`create` (or the other constructors) so the offsets are kept
    normalized.
    """

    base: Loc
    offsets: Offsets = (0.0, 0.0)

    @classmethod
    def create(cls, base: Loc, offsets: Offsets) -> FineLoc:
        """Fold the whole-tile part of ``offsets`` into ``base``."""
        wx, fx = split_offset(offsets[0])
        wy, fy = split_offset(offsets[1])
        return cls(Loc(base.x + wx, base.y + wy), (fx, fy))

    @classmethod
    def from_loc(cls, loc: Loc) -> FineLoc:
        return cls(loc, (0.0, 0.0))

    @classmethod
    def from_coords(cls, coords: Coords) -> FineLoc:
        return cls.create(Loc(0, 0), coords)

    def get_offsets(self) -> Offsets:
        return self.offsets

    def as_coords(self) -> Coords:
        return (self.base.x + self.offsets[0], self.base.y + self.offsets[1])

    def step(self, dir: Dir) -> FineLoc:
        """Move the base tile one step, keeping the current offsets."""
        return FineLoc(self.base.adj(dir), self.offsets)

    def add(self, other: FineLoc) -> FineLoc:
        return FineLoc.create(
            self.base.add(other.base),
            (self.offsets[0] + other.offsets[0], self.offsets[1] + other.offsets[1]),
        )

    def sub(self, other: FineLoc) -> FineLoc:
        return FineLoc.create(
            self.base.sub(other.base),
            (self.offsets[0] - other.offsets[0], self.offsets[1] - other.offsets[1]),
        )
