#!/usr/bin/env python3
"""Benchmark flashlight illumination on open and walled mazes.

Prints average time per ``illuminate`` call and the number of tiles lit.

Usage:
    python scripts/benchmark_lighting.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from pathlib import Path

import numpy as np

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from darkmaze.environment import GeneratedMazeData, Maze, translate_grid
from darkmaze.geometry import Dir
from darkmaze.lighting import LightSource, illuminate


def _make_open_field(size: int) -> Maze:
    """All-floor maze (worst case - every beam runs until it fades)."""
    center = (size // 2, size // 2)
    tiles = np.ones((size, size), dtype=np.bool_)
    return translate_grid(GeneratedMazeData(tiles, center, center))


def _make_scattered(size: int, wall_fraction: float, seed: int) -> Maze:
    """Randomly scatter walls to simulate a cramped maze."""
    rng = np.random.default_rng(seed)
    tiles = rng.random((size, size)) > wall_fraction
    center = (size // 2, size // 2)
    tiles[center] = True
    return translate_grid(GeneratedMazeData(tiles, center, center))


def _benchmark(maze: Maze, power: float) -> tuple[float, int]:
    """Return average ms per call and the number of tiles lit."""
    source = LightSource(power, Dir.south(), maze.start)
    lit = len(illuminate(maze, source))

    timer = timeit.Timer(lambda: illuminate(maze, source))
    # Auto-range to get a reliable measurement.
    number, total = timer.autorange()
    return (total / number) * 1000, lit  # ms


def main() -> None:
    scenarios: list[tuple[str, Maze, float]] = [
        ("Open field", _make_open_field(120), 20.0),
        ("Open field, bright", _make_open_field(120), 2000.0),
        ("Scattered (~40% walls)", _make_scattered(120, 0.40, seed=42), 20.0),
    ]

    print("Illumination benchmark")
    print("=" * 52)
    print(f"{'Scenario':<26} {'time':>12} {'tiles lit':>10}")
    print("-" * 52)

    for name, maze, power in scenarios:
        ms, lit = _benchmark(maze, power)
        print(f"{name:<26} {ms:>10.4f}ms {lit:>10}")


if __name__ == "__main__":
    main()
