"""Simple configuration loader for tactics_pathing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

_DEFAULT_COSTS: Dict[str, int] = {"plains": 1}
_DEFAULT_LEGEND: Dict[str, str] = {".": "plains"}


@dataclass
class PathingConfig:
    """Configuration values for the search engine."""

    allow_diagonal: bool = False
    expansion_order: str = "toward_target"
    include_origin_in_range: bool = False


@dataclass
class TerrainConfig:
    """Terrain cost table and the glyphs used to draw each terrain."""

    costs: Dict[str, int] = field(default_factory=lambda: dict(_DEFAULT_COSTS))
    legend: Dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_LEGEND))


@dataclass
class Config:
    """Top level configuration dataclass."""

    pathing: PathingConfig
    terrain: TerrainConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    pathing_data = data.get("pathing", {}) or {}
    pathing = PathingConfig(
        allow_diagonal=bool(pathing_data.get("allow_diagonal", False)),
        expansion_order=str(pathing_data.get("expansion_order", "toward_target")),
        include_origin_in_range=bool(
            pathing_data.get("include_origin_in_range", False)
        ),
    )

    terrain_data = data.get("terrain", {}) or {}
    costs = {
        str(name): int(cost)
        for name, cost in (terrain_data.get("costs") or _DEFAULT_COSTS).items()
    }
    for name, cost in costs.items():
        if cost < 0:
            raise ValueError(f"terrain cost for {name!r} must not be negative")
    legend = {
        str(glyph): str(name)
        for glyph, name in (terrain_data.get("legend") or _DEFAULT_LEGEND).items()
    }
    terrain = TerrainConfig(costs=costs, legend=legend)

    return Config(pathing=pathing, terrain=terrain)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "PathingConfig",
    "TerrainConfig",
    "load_config",
]
