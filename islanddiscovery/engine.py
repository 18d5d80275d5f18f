from __future__ import annotations

import datetime as dt
import os
import time
from dataclasses import dataclass, field
from typing import List

import numpy as np

from .analysis import component_sizes
from .config import IslandConfig
from .grid import IslandGrid
from .labeler import find_islands
from .randomness import RandomSource
from .terrain import generate


def _elapsed_ms(start: float, end: float) -> float:
    return round((end - start) * 1000.0, 2)


@dataclass
class DiscoveryResult:
    grid: IslandGrid
    island_count: int
    labels: np.ndarray
    island_colors: List[str] = field(default_factory=list)
    island_sizes: List[int] = field(default_factory=list)
    generation_ms: float = 0.0
    labeling_ms: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return round(self.generation_ms + self.labeling_ms, 2)


class IslandEngine:
    """Generate-then-label engine that records a run log."""

    def __init__(self, *, run_label: str = "islands") -> None:
        self.run_label = run_label
        self._ensure_dirs()
        run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
        self.log_path = os.path.join("logs", f"{run_label}_{run_id}.log")
        self._log_fp = open(self.log_path, "a", encoding="utf-8")

    def close(self) -> None:
        self._log_fp.close()

    def __enter__(self) -> "IslandEngine":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def log(self, msg: str) -> None:
        self._log_fp.write(msg + "\n")
        self._log_fp.flush()

    def run(
        self,
        config: IslandConfig,
        *,
        rng: RandomSource | None = None,
        land_map: np.ndarray | None = None,
        color_mode: str = "random",
    ) -> DiscoveryResult:
        rng = rng or RandomSource()
        self.log(f"Run {self.run_label} start")
        self.log(f"Config: {config.to_dict()} color_mode={color_mode} seed={rng.seed}")

        start = time.perf_counter()
        if land_map is not None:
            grid = IslandGrid.from_land_mask(
                land_map,
                sea_color=config.sea_color,
                land_color=config.land_color,
            )
            self.log(f"Using injected {grid.size}x{grid.size} land map")
        else:
            grid = IslandGrid(
                config.size,
                sea_color=config.sea_color,
                land_color=config.land_color,
            )
            generate(grid, config, rng, log_fn=self.log)
        generation_ms = _elapsed_ms(start, time.perf_counter())

        land = grid.land_mask()
        start = time.perf_counter()
        labeled = find_islands(grid, rng, color_mode=color_mode, log_fn=self.log)
        labeling_ms = _elapsed_ms(start, time.perf_counter())

        expected_sizes = component_sizes(land)
        expected = len(expected_sizes)
        if expected != labeled.count:
            self.log(f"Island count mismatch: found {labeled.count}, scipy found {expected}")
            raise RuntimeError(
                f"Island count mismatch: found {labeled.count}, expected {expected}"
            )
        if sorted(labeled.sizes) != sorted(expected_sizes):
            self.log(f"Island size mismatch: found {sorted(labeled.sizes)}, scipy found {sorted(expected_sizes)}")
            raise RuntimeError("Island size mismatch between flood fill and scipy labeling")

        self.log(
            f"Found {labeled.count} islands; generation {generation_ms} ms, labeling {labeling_ms} ms"
        )
        self.log(f"Run {self.run_label} end")
        return DiscoveryResult(
            grid=grid,
            island_count=labeled.count,
            labels=labeled.labels,
            island_colors=labeled.colors,
            island_sizes=labeled.sizes,
            generation_ms=generation_ms,
            labeling_ms=labeling_ms,
        )

    def _ensure_dirs(self) -> None:
        os.makedirs("logs", exist_ok=True)
