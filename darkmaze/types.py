from __future__ import annotations

from typing import TYPE_CHECKING, Literal, NewType

if TYPE_CHECKING:
    from darkmaze.geometry.location import Loc

# =============================================================================
# SPATIAL TYPES
# =============================================================================

type TileCoord = int  # Always integer tile position

# Raw tile positions, as produced by generators and text fixtures
type TilePos = tuple[TileCoord, TileCoord]  # Example: (5, 3) = tile 5,3

# Directions - discrete grid steps
type UnitStep = Literal[-1, 0, 1]
type StepVector = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = westward step

# Sub-tile offsets for smooth movement (fractional tile offset)
type Offsets = tuple[float, float]  # Example: (-0.25, 0.0)

# Continuous coordinates, in tiles
type Coords = tuple[float, float]  # Example: (3.75, 2.0)

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Represents the real-world time elapsed between two simulation ticks.
DeltaTime = NewType("DeltaTime", float)

# =============================================================================
# LIGHTING TYPES
# =============================================================================

# Light intensity ("lumens") recorded for a single tile.
type Lum = float

# Tiles reached by a light source, keyed by location. A missing location
# means the tile was never reached and should be treated as fully dark.
type LightMap = dict[Loc, Lum]
