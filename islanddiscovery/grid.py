from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

import numpy as np

from .config import ConfigError, LAND_COLOR, SEA_COLOR, SIZE

Coord = Tuple[int, int]

# Moore neighborhood, the cell itself excluded.
MOORE_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class AreaStatus(IntEnum):
    SEA = 0
    LAND = 1
    DISCOVERED = 2


class IslandGrid:
    """Square grid holding an area-state plane and a color plane."""

    def __init__(
        self,
        size: int = SIZE,
        *,
        sea_color: str = SEA_COLOR,
        land_color: str = LAND_COLOR,
    ) -> None:
        if size <= 0:
            raise ConfigError(f"Grid size must be positive, got {size}")
        self.size = size
        self.sea_color = sea_color
        self.land_color = land_color
        self.area = np.full((size, size), AreaStatus.SEA, dtype=np.uint8)
        self.color = np.full((size, size), sea_color, dtype="<U7")

    @classmethod
    def from_land_mask(
        cls,
        mask: np.ndarray,
        *,
        sea_color: str = SEA_COLOR,
        land_color: str = LAND_COLOR,
    ) -> "IslandGrid":
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2 or mask.shape[0] != mask.shape[1]:
            raise ConfigError(f"Land map must be square, got shape {mask.shape}")
        grid = cls(mask.shape[0], sea_color=sea_color, land_color=land_color)
        grid.area[mask] = AreaStatus.LAND
        grid.color[mask] = land_color
        return grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise ValueError(f"({row}, {col}) out of bounds for {self.size}x{self.size} grid")

    def get_value(self, row: int, col: int) -> AreaStatus:
        self._check_bounds(row, col)
        return AreaStatus(int(self.area[row, col]))

    def set_value(self, row: int, col: int, value: AreaStatus) -> None:
        self._check_bounds(row, col)
        self.area[row, col] = value

    def get_color(self, row: int, col: int) -> str:
        self._check_bounds(row, col)
        return str(self.color[row, col])

    def set_color(self, row: int, col: int, color: str) -> None:
        self._check_bounds(row, col)
        self.color[row, col] = color

    def neighbors(self, row: int, col: int) -> List[Coord]:
        result: List[Coord] = []
        for dr, dc in MOORE_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                result.append((nr, nc))
        return result

    def land_mask(self) -> np.ndarray:
        """Cells that are land, whether or not they have been discovered."""
        return self.area != AreaStatus.SEA

    def count(self, status: AreaStatus) -> int:
        return int(np.count_nonzero(self.area == status))


def parse_land_map(text: str, *, land_char: str = "#") -> np.ndarray:
    """Parse an ASCII land map: ``land_char`` is land, anything else sea."""
    rows = [line.rstrip("\r") for line in text.splitlines() if line.strip()]
    if not rows:
        raise ConfigError("Land map is empty")
    width = len(rows[0])
    for idx, row in enumerate(rows):
        if len(row) != width:
            raise ConfigError(f"Land map row {idx} has {len(row)} cells, expected {width}")
    if width != len(rows):
        raise ConfigError(f"Land map must be square, got {len(rows)}x{width}")
    return np.array([[ch == land_char for ch in row] for row in rows], dtype=bool)
