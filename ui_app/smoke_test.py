from __future__ import annotations

import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
if str(BASE_DIR.parent) not in sys.path:
    sys.path.insert(0, str(BASE_DIR.parent))

from islanddiscovery.config import IslandConfig
from islanddiscovery.engine import IslandEngine
from islanddiscovery.randomness import RandomSource
from islanddiscovery.renderer import render_map_png


def main() -> int:
    config = IslandConfig()
    with IslandEngine(run_label="smoke_test") as engine:
        result = engine.run(config, rng=RandomSource(7))

    img = render_map_png(result.grid, config.canvas_width, config.canvas_height)
    if not img:
        print("Map render returned empty image.")
        return 1

    print(
        f"Smoke test OK: {result.island_count} islands, rendered {len(img)} bytes "
        f"in {result.elapsed_ms} ms"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
