from __future__ import annotations

import math
from typing import List

from .config import IslandConfig
from .grid import AreaStatus, Coord, IslandGrid
from .randomness import RandomSource


def pick_center(size: int, rng: RandomSource) -> Coord:
    """Random (row, col) seed center, clamped onto the grid."""
    center_col = min(rng.randint(size), size - 1)
    center_row = min(rng.randint(size), size - 1)
    return center_row, center_col


def land_probability(row: int, col: int, center: Coord, island_width: float) -> float:
    """Gaussian falloff: 1.0 at the center, decaying with squared distance."""
    center_row, center_col = center
    distance = (col - center_col) ** 2 + (row - center_row) ** 2
    return math.exp(-distance / island_width ** 2)


def generate(
    grid: IslandGrid,
    config: IslandConfig,
    rng: RandomSource,
    *,
    log_fn=None,
) -> IslandGrid:
    """Scatter land around ``config.nb_islands`` random centers.

    Every seed makes one pass over the whole grid, column by column, with a
    fresh uniform draw per cell. Land placed by an earlier seed stays land, so
    overlapping footprints merge.
    """
    size = grid.size
    centers: List[Coord] = []
    for _ in range(config.nb_islands):
        center = pick_center(size, rng)
        centers.append(center)
        for col in range(size):
            for row in range(size):
                probability = land_probability(row, col, center, config.island_width)
                if rng.uniform() <= probability:
                    grid.area[row, col] = AreaStatus.LAND
                    grid.color[row, col] = config.land_color
    if log_fn is not None:
        log_fn(f"Generated {grid.count(AreaStatus.LAND)} land cells from centers {centers}")
    return grid
