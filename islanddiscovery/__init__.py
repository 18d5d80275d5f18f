"""Island discovery: generate a land/sea grid, then find and color its islands."""

from .config import ConfigError, IslandConfig, load_config
from .engine import DiscoveryResult, IslandEngine
from .grid import AreaStatus, IslandGrid, parse_land_map
from .labeler import LabelResult, discover_island, find_islands, recolor_island
from .randomness import RandomSource, ScriptedRandom
from .terrain import generate

__all__ = [
    "AreaStatus",
    "ConfigError",
    "DiscoveryResult",
    "IslandConfig",
    "IslandEngine",
    "IslandGrid",
    "LabelResult",
    "RandomSource",
    "ScriptedRandom",
    "discover_island",
    "find_islands",
    "generate",
    "load_config",
    "parse_land_map",
    "recolor_island",
]
