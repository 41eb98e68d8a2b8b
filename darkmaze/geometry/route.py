"""Movement from one tile to an adjacent one.

An actor is either at rest on a tile (``Complete``) or partway through a move
to a neighboring tile (``InProgress``). Each tick the caller advances the
route and replaces its state with the result::

    match state:
        case InProgress(route):
            state = route.advance(dt * speed)
        case Complete(loc):
            ...  # maybe start a new TileRoute from loc

Routes only support the four cardinal directions.
"""

from __future__ import annotations

from dataclasses import dataclass

from darkmaze.geometry.direction import Dir, DirectionError
from darkmaze.geometry.location import FineLoc, Loc


class RouteError(ValueError):
    """A route was driven with an invalid progress step."""


@dataclass(frozen=True, slots=True)
class TileRoute:
    """A move in progress from ``start`` to the neighbor along ``dir``."""

    start: Loc
    dir: Dir
    progress: float = 0.0

    def dest(self) -> Loc:
        return self.start.adj(self.dir)

    def get_progress(self) -> float:
        return self.progress

    def advance(self, delta: float) -> RouteResult:
        """Add ``delta`` to the progress, completing the move at 1.0.

        Overshoot is dropped: a completed move lands exactly on ``dest()``.
        Negative steps raise ``RouteError``.
        """
        if delta < 0:
            raise RouteError(f"Route progress cannot go backwards (delta={delta})")
        progress = self.progress + delta
        if progress >= 1.0:
            return Complete(self.dest())
        return InProgress(TileRoute(self.start, self.dir, progress))

    def as_fineloc(self) -> FineLoc:
        """Where the actor should be drawn at the current progress.

        Expressed as the destination tile pulled back against the direction of
        travel by the distance still to go.
        """
        if not self.dir.is_cardinal():
            raise DirectionError(
                f"Routes only travel in cardinal directions, not {self.dir!r}"
            )
        dx, dy = self.dir.offset()
        remaining = 1.0 - self.progress
        return FineLoc.create(self.dest(), (-dx * remaining, -dy * remaining))


@dataclass(frozen=True, slots=True)
class Complete:
    """At rest on ``loc``."""

    loc: Loc


@dataclass(frozen=True, slots=True)
class InProgress:
    """Moving along ``route``."""

    route: TileRoute


type RouteResult = Complete | InProgress
