from __future__ import annotations

import argparse
import json
import sys
import threading
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"
if str(BASE_DIR.parent) not in sys.path:
    sys.path.insert(0, str(BASE_DIR.parent))

from islanddiscovery.colors import is_hex_color
from islanddiscovery.config import TITLE, IslandConfig
from islanddiscovery.engine import DiscoveryResult, IslandEngine
from islanddiscovery.labeler import recolor_island
from islanddiscovery.randomness import RandomSource
from islanddiscovery.renderer import render_map_png


class MapState:
    """The one map the viewer shows, guarded for the threading server."""

    def __init__(self, config: IslandConfig, result: DiscoveryResult) -> None:
        self.config = config
        self.result = result
        self.lock = threading.Lock()

    def payload(self) -> Dict[str, Any]:
        with self.lock:
            return build_map_payload(self.config, self.result)

    def png(self) -> bytes:
        with self.lock:
            return render_map_png(
                self.result.grid,
                self.config.canvas_width,
                self.config.canvas_height,
            )

    def recolor(self, row: int, col: int, color: str) -> int:
        with self.lock:
            return recolor_island(self.result.grid, self.result.labels, row, col, color)


def build_map_payload(config: IslandConfig, result: DiscoveryResult) -> Dict[str, Any]:
    return {
        "title": TITLE,
        "size": result.grid.size,
        "canvas": [config.canvas_width, config.canvas_height],
        "number_of_islands": result.island_count,
        "time_generation": result.generation_ms,
        "time_discovery": result.labeling_ms,
        "island_colors": list(result.island_colors),
        "island_sizes": list(result.island_sizes),
    }


def parse_recolor_query(query: str) -> Optional[tuple[int, int, str]]:
    params = parse_qs(query)
    try:
        row = int(params["row"][0])
        col = int(params["col"][0])
        color = params["color"][0]
    except (KeyError, IndexError, ValueError):
        return None
    if not color.startswith("#"):
        color = "#" + color
    if not is_hex_color(color):
        return None
    return row, col, color


class IslandMapHandler(SimpleHTTPRequestHandler):
    def __init__(self, *args, state: MapState, **kwargs) -> None:
        self.state = state
        super().__init__(*args, **kwargs)

    def _send_json(self, payload: object, status: int = 200) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_png(self, body: bytes) -> None:
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "image/png")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802
        parsed = urlparse(self.path)
        if parsed.path == "/api/map":
            self._send_json(self.state.payload())
            return

        if parsed.path == "/map.png":
            self._send_png(self.state.png())
            return

        if parsed.path == "/api/recolor":
            request = parse_recolor_query(parsed.query)
            if request is None:
                self.send_error(HTTPStatus.BAD_REQUEST, "Expected row, col and color=#RRGGBB")
                return
            row, col, color = request
            changed = self.state.recolor(row, col, color)
            self._send_json({"changed": changed})
            return

        if parsed.path in ("", "/"):
            self.path = "/index.html"
        super().do_GET()


def main() -> None:
    parser = argparse.ArgumentParser(description=f"{TITLE} viewer")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--colors", type=str, default="random", choices=["random", "palette"])
    args = parser.parse_args()

    config = IslandConfig()
    with IslandEngine(run_label="viewer") as engine:
        result = engine.run(config, rng=RandomSource(args.seed), color_mode=args.colors)
    state = MapState(config, result)

    handler = partial(IslandMapHandler, state=state, directory=str(STATIC_DIR))
    from http.server import ThreadingHTTPServer

    server = ThreadingHTTPServer(("127.0.0.1", args.port), handler)
    print(f"{TITLE} running at http://127.0.0.1:{args.port}")
    print(f"Number of islands: {result.island_count}")
    print("Press Ctrl+C to stop.")
    server.serve_forever()


if __name__ == "__main__":
    main()
