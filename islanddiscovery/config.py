from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from .colors import is_hex_color

SIZE = 50
NB_ISLANDS = 5
ISLAND_WIDTH = 3

SEA_COLOR = "#cbe1ff"
LAND_COLOR = "#bbbbbb"

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 800

TITLE = "The Island Discovery"


class ConfigError(ValueError):
    """Raised for configuration values the generator cannot work with."""


@dataclass(frozen=True)
class IslandConfig:
    size: int = SIZE
    nb_islands: int = NB_ISLANDS
    island_width: float = ISLAND_WIDTH
    sea_color: str = SEA_COLOR
    land_color: str = LAND_COLOR
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or self.size <= 0:
            raise ConfigError(f"size must be a positive integer, got {self.size!r}")
        if not isinstance(self.nb_islands, int) or self.nb_islands < 0:
            raise ConfigError(f"nb_islands must be a non-negative integer, got {self.nb_islands!r}")
        if not isinstance(self.island_width, (int, float)) or self.island_width <= 0:
            raise ConfigError(f"island_width must be positive, got {self.island_width!r}")
        for name in ("canvas_width", "canvas_height"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        for name in ("sea_color", "land_color"):
            value = getattr(self, name)
            if not is_hex_color(value):
                raise ConfigError(f"{name} must look like #RRGGBB, got {value!r}")

    def with_overrides(self, **overrides: Any) -> "IslandConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Path | str) -> IslandConfig:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to read config from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Expected top-level object in {path}.")
    return IslandConfig().with_overrides(**data)
