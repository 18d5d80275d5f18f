from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from islanddiscovery.config import TITLE, ConfigError, IslandConfig, load_config
from islanddiscovery.engine import IslandEngine
from islanddiscovery.grid import parse_land_map
from islanddiscovery.labeler import COLOR_MODES
from islanddiscovery.randomness import RandomSource
from islanddiscovery.renderer import render_island_sizes, save_map_png


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{TITLE}: generate a map and count its islands.")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--size", type=int, default=None, help="Grid side length")
    parser.add_argument("--islands", type=int, default=None, help="Number of island seeds")
    parser.add_argument("--width", type=float, default=None, help="Island spread width")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--colors", type=str, default="random", choices=list(COLOR_MODES))
    parser.add_argument(
        "--land-map",
        type=str,
        default=None,
        help="ASCII land map ('#' is land) used instead of generating one",
    )
    parser.add_argument("--out", type=str, default="visualizations/islands.png", help="Map PNG path")
    parser.add_argument("--chart", type=str, default=None, help="Optional island-size chart PNG path")
    parser.add_argument("--run-label", type=str, default="islands", help="Prefix for the run log file")
    return parser


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else IslandConfig()
        config = config.with_overrides(
            size=args.size,
            nb_islands=args.islands,
            island_width=args.width,
        )
        land_map = None
        if args.land_map:
            land_map = parse_land_map(Path(args.land_map).read_text(encoding="utf-8"))
    except (ConfigError, OSError) as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    with IslandEngine(run_label=args.run_label) as engine:
        result = engine.run(
            config,
            rng=RandomSource(args.seed),
            land_map=land_map,
            color_mode=args.colors,
        )

    out_path = Path(args.out)
    save_map_png(result.grid, out_path, config.canvas_width, config.canvas_height)
    print(f"Number of islands: {result.island_count}")
    print(f"Generation: {result.generation_ms} ms, discovery: {result.labeling_ms} ms")
    print(f"Saved map PNG to {out_path}")
    if args.chart:
        chart_path = Path(args.chart)
        render_island_sizes(
            output_path=chart_path,
            sizes=result.island_sizes,
            colors=result.island_colors,
        )
        print(f"Saved island-size chart to {chart_path}")
    print(f"Log: {engine.log_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
