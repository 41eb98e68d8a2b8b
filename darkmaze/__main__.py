"""Print a maze file as lit by a flashlight held at its start.

Usage:
    python -m darkmaze path/to/maze.txt --facing east --battery 60
"""

import argparse
import logging
import sys

from . import config
from .environment import MazeError, parse_maze
from .geometry import Dir
from .lighting import LightSource, illuminate
from .preview import render_preview

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview flashlight lighting")
    parser.add_argument("maze", help="Path to a text maze file")
    parser.add_argument(
        "--facing",
        choices=["north", "east", "south", "west"],
        default="south",
        help="Direction the flashlight points (default: south)",
    )
    parser.add_argument(
        "--battery",
        type=float,
        default=config.START_BATTERY,
        help="Battery percentage powering the flashlight",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
        help=f"Logging verbosity (default: {config.LOG_LEVEL})",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} from DARKMAZE_LOG_LEVEL")

    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        maze = parse_maze(args.maze).validate()
    except MazeError as exc:
        logger.error("%s", exc)
        return 1

    source = LightSource.create(maze.start, Dir.from_name(args.facing), args.battery)
    print(render_preview(maze, illuminate(maze, source), actor=maze.start))
    return 0


if __name__ == "__main__":
    sys.exit(main())
