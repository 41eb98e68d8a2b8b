"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

import os

# =============================================================================
# GENERAL
# =============================================================================

# Default log level for the command line tools. Library code never configures
# logging itself.
LOG_LEVEL = os.environ.get("DARKMAZE_LOG_LEVEL", "WARNING").upper()

# =============================================================================
# GEOMETRY
# =============================================================================

# Number of equally spaced compass directions. Must be a multiple of 8 so that
# 45 degree turns are a whole number of direction units.
DIR_RESOLUTION = 8

# =============================================================================
# LIGHTING
# =============================================================================

# Falloff divisors (values come from c-maze)
DIVP = 2.0  # Forward beam
DIVS = 3.0  # Side arms

# Derived from c-maze full battery value (8000 * 4 / 1600)
INIT_LIGHT = 20.0

# Light values below this are dim
DARK1_LIGHT = 3.0

# Light values below this are total dark
DARK2_LIGHT = 1.0

# Sources weaker than this are recorded but do not propagate further
MIN_LIGHT_POWER = 1.0

# =============================================================================
# EXPLORER
# =============================================================================

DEFAULT_SPEED = 3.0  # Tiles per second

# Battery, in percent. The flashlight scales linearly with it.
START_BATTERY = 100.0
BATTERY_DRAIN_RATE = 4.0  # Percent per second
BATTERY_EMPTY = 5.0  # At or below this the explorer is done for

# Distance (in tiles) the camera falls behind before following
CAMERA_LAG = 1.0

# =============================================================================
# MAZE GENERATION
# =============================================================================

# Below this a generator has no room to carve paths
MIN_MAZE_SIZE = 10
DEFAULT_MAZE_SIZE = 20

# Tuning percentages handed to generator implementations. Defaults from c-maze,
# found with a bit of trial-and-error to make decent mazes.
GENERATOR_TWISTY = 70  # Chance of keeping the current heading
GENERATOR_SWIRLY = 50  # Chance of turning right when turning
GENERATOR_BRANCHY = 30  # Chance of branching
