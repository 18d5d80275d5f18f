from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

import numpy as np

from .colors import build_palette, is_hex_color
from .grid import AreaStatus, IslandGrid
from .randomness import RandomSource

COLOR_MODES = ("random", "palette")
MAX_COLOR_ATTEMPTS = 1000


@dataclass
class LabelResult:
    count: int
    labels: np.ndarray
    colors: List[str] = field(default_factory=list)
    sizes: List[int] = field(default_factory=list)


def _fresh_color(rng: RandomSource, used: Set[str]) -> str:
    for _ in range(MAX_COLOR_ATTEMPTS):
        color = rng.random_color()
        if color.upper() not in used:
            return color
    raise RuntimeError(f"No unused island color after {MAX_COLOR_ATTEMPTS} draws")


def discover_island(
    grid: IslandGrid,
    row: int,
    col: int,
    *,
    color: str | None = None,
    labels: np.ndarray | None = None,
    label: int = 0,
) -> int:
    """Flood-fill the island containing (row, col) with an explicit stack.

    Cells are marked DISCOVERED when pushed, so each land cell is pushed and
    painted exactly once. Returns the number of cells in the island, or 0 if
    (row, col) is not undiscovered land.
    """
    if not grid.in_bounds(row, col) or grid.area[row, col] != AreaStatus.LAND:
        return 0
    grid.area[row, col] = AreaStatus.DISCOVERED
    stack = [(row, col)]
    cells = 0
    while stack:
        r, c = stack.pop()
        cells += 1
        if color is not None:
            grid.color[r, c] = color
        if labels is not None:
            labels[r, c] = label
        for nr, nc in grid.neighbors(r, c):
            if grid.area[nr, nc] == AreaStatus.LAND:
                grid.area[nr, nc] = AreaStatus.DISCOVERED
                stack.append((nr, nc))
    return cells


def find_islands(
    grid: IslandGrid,
    rng: RandomSource,
    *,
    color_mode: str = "random",
    log_fn=None,
) -> LabelResult:
    """Discover every island, color it and count it.

    The scan is row-major; each undiscovered land cell starts a new island.
    In "random" mode every island gets a fresh random color that differs from
    the sea, the land and every earlier island. In "palette" mode colors come
    from an evenly spaced palette once the island count is known.
    """
    if color_mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode {color_mode!r}; expected one of {COLOR_MODES}")

    size = grid.size
    labels = np.zeros((size, size), dtype=np.int32)
    colors: List[str] = []
    sizes: List[int] = []
    used = {grid.sea_color.upper(), grid.land_color.upper()}

    color = _fresh_color(rng, used) if color_mode == "random" else None
    count = 0
    for row in range(size):
        for col in range(size):
            if grid.area[row, col] != AreaStatus.LAND:
                continue
            count += 1
            sizes.append(discover_island(grid, row, col, color=color, labels=labels, label=count))
            if log_fn is not None:
                log_fn(f"Island {count} found at ({row}, {col}): {sizes[-1]} cells")
            if color is not None:
                colors.append(color)
                used.add(color.upper())
                color = _fresh_color(rng, used)

    if color_mode == "palette":
        colors = build_palette(count, exclude=(grid.sea_color, grid.land_color))
        for idx, island_color in enumerate(colors, start=1):
            grid.color[labels == idx] = island_color

    return LabelResult(count=count, labels=labels, colors=colors, sizes=sizes)


def recolor_island(
    grid: IslandGrid,
    labels: np.ndarray,
    row: int,
    col: int,
    color: str,
) -> int:
    """Repaint the island under (row, col). Sea and off-grid clicks do nothing."""
    if not is_hex_color(color):
        raise ValueError(f"Island color must look like #RRGGBB, got {color!r}")
    if not grid.in_bounds(row, col):
        return 0
    label = int(labels[row, col])
    if label == 0:
        return 0
    mask = labels == label
    grid.color[mask] = color
    return int(np.count_nonzero(mask))
