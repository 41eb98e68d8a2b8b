"""Compass directions and relative turns.

Directions are a modular integer in ``[0, DIR_RESOLUTION)``. Index 0 is north
and each following index is one step clockwise. With the default resolution of
8 that gives the familiar ordering north, ne, east, se, south, sw, west, nw,
with each successive direction a 45 degree turn from the previous one.

A ``Dir`` should only ever come out of :meth:`Dir.normalize` (or one of the
named constructors, which go through it). Building one directly with an index
outside the valid range is a programming error and raises ``DirectionError``.
"""

from __future__ import annotations

from dataclasses import dataclass

from darkmaze import config
from darkmaze.types import StepVector

# Unit steps for each 45 degree octant, starting at north and going clockwise.
# Diagonals are not distance-scaled: one diagonal step is still "one tile".
_OCTANT_STEPS: tuple[StepVector, ...] = (
    (0, -1),  # north
    (1, -1),  # ne
    (1, 0),  # east
    (1, 1),  # se
    (0, 1),  # south
    (-1, 1),  # sw
    (-1, 0),  # west
    (-1, -1),  # nw
)

_OCTANT_NAMES = ("north", "ne", "east", "se", "south", "sw", "west", "nw")


def _octant_units() -> int:
    """Number of direction units in a 45 degree turn."""
    return config.DIR_RESOLUTION // 8


class DirectionError(AssertionError):
    """A direction or angle was used outside its contract.

    This signals a bug in the caller, not a recoverable condition.
    """


@dataclass(frozen=True, slots=True)
class Angle:
    """A relative turn, measured in direction units (positive is clockwise)."""

    units: int

    @classmethod
    def a45(cls) -> Angle:
        return cls(_octant_units())

    @classmethod
    def a90(cls) -> Angle:
        return cls(_octant_units() * 2)

    @classmethod
    def a180(cls) -> Angle:
        return cls(_octant_units() * 4)

    @classmethod
    def a360(cls) -> Angle:
        return cls(_octant_units() * 8)

    def as_int(self) -> int:
        return self.units

    def reverse(self) -> Angle:
        """The same turn in the opposite rotational sense."""
        return Angle(-self.units)

    def combine(self, other: Angle) -> Angle:
        """Turning by ``self`` then ``other``, folded into one revolution."""
        return Angle((self.units + other.units) % config.DIR_RESOLUTION)


@dataclass(frozen=True, slots=True)
class Dir:
    """A normalized compass direction."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < config.DIR_RESOLUTION:
            raise DirectionError(
                f"Direction index {self.index} outside [0, {config.DIR_RESOLUTION})"
            )

    @classmethod
    def normalize(cls, index: int) -> Dir:
        """Build a direction from any integer, folding it into range."""
        return cls(index % config.DIR_RESOLUTION)

    @classmethod
    def north(cls) -> Dir:
        return cls.normalize(0)

    @classmethod
    def ne(cls) -> Dir:
        return cls.normalize(_octant_units())

    @classmethod
    def east(cls) -> Dir:
        return cls.normalize(_octant_units() * 2)

    @classmethod
    def se(cls) -> Dir:
        return cls.normalize(_octant_units() * 3)

    @classmethod
    def south(cls) -> Dir:
        return cls.normalize(_octant_units() * 4)

    @classmethod
    def sw(cls) -> Dir:
        return cls.normalize(_octant_units() * 5)

    @classmethod
    def west(cls) -> Dir:
        return cls.normalize(_octant_units() * 6)

    @classmethod
    def nw(cls) -> Dir:
        return cls.normalize(_octant_units() * 7)

    @classmethod
    def from_name(cls, name: str) -> Dir:
        """Look up one of the eight named directions (e.g. ``"south"``)."""
        try:
            octant = _OCTANT_NAMES.index(name.lower())
        except ValueError:
            raise ValueError(f"Unknown direction name: {name!r}") from None
        return cls.normalize(octant * _octant_units())

    def as_int(self) -> int:
        return self.index

    def turn(self, angle: Angle) -> Dir:
        return Dir.normalize(self.index + angle.units)

    def reverse(self) -> Dir:
        return self.turn(Angle.a180())

    def octant(self) -> int | None:
        """Index into the eight named directions, or None between octants."""
        octant, remainder = divmod(self.index, _octant_units())
        return None if remainder else octant

    def is_cardinal(self) -> bool:
        octant = self.octant()
        return octant is not None and octant % 2 == 0

    def offset(self) -> StepVector:
        """Unit step taken when moving one tile in this direction."""
        octant = self.octant()
        if octant is None:
            raise DirectionError(f"{self!r} has no grid step")
        return _OCTANT_STEPS[octant]

    def __repr__(self) -> str:
        octant = self.octant()
        if octant is None:
            return f"Dir({self.index})"
        return f"Dir.{_OCTANT_NAMES[octant]}()"
