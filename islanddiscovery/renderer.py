from __future__ import annotations

import io
import os
from pathlib import Path
from typing import List, Sequence

import numpy as np
from PIL import Image

from .colors import hex_to_rgb
from .grid import IslandGrid

# Ensure matplotlib uses a writable config dir
os.environ.setdefault("MPLCONFIGDIR", "/tmp/mpl")

BACKGROUND = (255, 255, 255)


def _cell_rgb(grid: IslandGrid) -> np.ndarray:
    """(size, size, 3) uint8 array of the color plane."""
    rgb = np.zeros((grid.size, grid.size, 3), dtype=np.uint8)
    for color in np.unique(grid.color):
        rgb[grid.color == color] = hex_to_rgb(str(color))
    return rgb


def render_color_array(grid: IslandGrid, width: int, height: int) -> np.ndarray:
    """Paint every cell as a filled rectangle on a width x height canvas.

    Cells are ``width // size`` by ``height // size`` pixels; the remainder
    on the right and bottom edges stays background.
    """
    square_w = width // grid.size
    square_h = height // grid.size
    if square_w <= 0 or square_h <= 0:
        raise ValueError(f"Canvas {width}x{height} is too small for a {grid.size}x{grid.size} grid")
    cells = _cell_rgb(grid)
    filled = np.repeat(np.repeat(cells, square_h, axis=0), square_w, axis=1)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = BACKGROUND
    canvas[: filled.shape[0], : filled.shape[1]] = filled
    return canvas


def render_map_png(grid: IslandGrid, width: int, height: int) -> bytes:
    image = Image.fromarray(render_color_array(grid, width, height)).convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def save_map_png(grid: IslandGrid, path: Path, width: int, height: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(render_map_png(grid, width, height))


def render_island_sizes(
    *,
    output_path: Path,
    sizes: Sequence[int],
    colors: Sequence[str] | None = None,
    title: str = "Island Sizes",
) -> None:
    """Bar chart of cells per island, bars painted with the island colors."""
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    labels: List[str] = [str(idx) for idx in range(1, len(sizes) + 1)]
    fig, ax = plt.subplots(figsize=(8, 4))
    bar_colors = list(colors) if colors and len(colors) == len(sizes) else None
    ax.bar(labels, list(sizes), color=bar_colors, edgecolor="#4a423c")
    ax.set_title(title)
    ax.set_xlabel("Island")
    ax.set_ylabel("Cells")
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
