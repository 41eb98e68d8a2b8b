"""Directions, grid locations and tile-to-tile movement."""

from .direction import Angle, Dir, DirectionError
from .location import FineLoc, Loc, split_offset
from .route import Complete, InProgress, RouteError, RouteResult, TileRoute

__all__ = [
    "Angle",
    "Complete",
    "Dir",
    "DirectionError",
    "FineLoc",
    "InProgress",
    "Loc",
    "RouteError",
    "RouteResult",
    "TileRoute",
    "split_offset",
]
