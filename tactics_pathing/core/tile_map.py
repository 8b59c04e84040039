"""Tile map consumed by the path finder."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Protocol, Sequence, Set
import logging

from ..config import CONFIG
from .components.mover import Mover
from .components.position import Coord

logger = logging.getLogger(__name__)


class TerrainMap(Protocol):
    """What the search engine needs from a map.

    ``cost`` is read once per tile when the node grid is built; ``is_blocked``
    is asked on every neighbour expansion.
    """

    width: int
    height: int

    def cost(self, x: int, y: int) -> int: ...

    def is_blocked(self, mover: Mover, x: int, y: int) -> bool: ...


class GridMap:
    """Rectangular terrain grid with per-terrain movement costs and occupancy."""

    def __init__(
        self,
        rows: Sequence[Sequence[str]],
        costs: Mapping[str, int] | None = None,
    ) -> None:
        if not rows or not rows[0]:
            raise ValueError("map must have at least one tile")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all map rows must have the same width")

        self.costs: Dict[str, int] = dict(CONFIG.terrain.costs if costs is None else costs)
        for name, value in self.costs.items():
            if value < 0:
                raise ValueError(f"terrain cost for {name!r} must not be negative")
        for row in rows:
            for terrain in row:
                if terrain not in self.costs:
                    raise ValueError(f"unknown terrain {terrain!r}")

        self.width: int = width
        self.height: int = len(rows)
        # Indexed ``terrain[y][x]`` like ``World.tile_map``.
        self.terrain: List[List[str]] = [list(row) for row in rows]
        self._occupied: Dict[Coord, str] = {}

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_strings(
        cls,
        lines: Iterable[str],
        legend: Mapping[str, str] | None = None,
        costs: Mapping[str, int] | None = None,
    ) -> "GridMap":
        """Build a map from ASCII ``lines`` using ``legend`` (glyph -> terrain)."""

        legend = CONFIG.terrain.legend if legend is None else legend
        rows: List[List[str]] = []
        for line in lines:
            row: List[str] = []
            for glyph in line:
                if glyph not in legend:
                    raise ValueError(f"unknown map glyph {glyph!r}")
                row.append(legend[glyph])
            rows.append(row)
        return cls(rows, costs)

    @classmethod
    def uniform(
        cls, width: int, height: int, terrain: str = "plains", costs: Mapping[str, int] | None = None
    ) -> "GridMap":
        """Return a ``width`` x ``height`` map filled with ``terrain``."""

        if width <= 0 or height <= 0:
            raise ValueError("map dimensions must be positive")
        return cls([[terrain] * width for _ in range(height)], costs)

    # ------------------------------------------------------------------
    # Terrain queries
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def terrain_at(self, x: int, y: int) -> str:
        return self.terrain[y][x]

    def set_terrain(self, x: int, y: int, terrain: str) -> None:
        """Change the terrain of a tile.

        Path finders built before the change keep the cost they read at
        construction; build a new one to pick up new costs.
        """
        if terrain not in self.costs:
            raise ValueError(f"unknown terrain {terrain!r}")
        self.terrain[y][x] = terrain

    def cost(self, x: int, y: int) -> int:
        return self.costs[self.terrain[y][x]]

    # ------------------------------------------------------------------
    # Occupancy
    # ------------------------------------------------------------------
    def occupy(self, pos: Coord, unit: str) -> None:
        """Mark ``pos`` as held by ``unit``."""
        self._occupied[pos] = unit

    def vacate(self, pos: Coord) -> None:
        self._occupied.pop(pos, None)

    def occupant(self, pos: Coord) -> str | None:
        return self._occupied.get(pos)

    @property
    def occupied(self) -> Set[Coord]:
        return set(self._occupied)

    # ------------------------------------------------------------------
    # Passability
    # ------------------------------------------------------------------
    def is_blocked(self, mover: Mover, x: int, y: int) -> bool:
        """Return ``True`` if ``mover`` may not enter tile ``(x, y)``."""

        if not mover.can_enter(self.terrain[y][x]):
            return True
        holder = self._occupied.get((x, y))
        if holder is not None and holder != mover.name and not mover.ignores_occupants:
            logger.debug("Tile (%d,%d) occupied by %s; blocked for %s", x, y, holder, mover.name)
            return True
        return False


def glyph_for(terrain: str, legend: Mapping[str, str] | None = None) -> str:
    """Return the glyph ``legend`` uses for ``terrain`` (``?`` if none)."""

    legend = CONFIG.terrain.legend if legend is None else legend
    for glyph, name in legend.items():
        if name == terrain:
            return glyph
    return "?"


__all__ = ["TerrainMap", "GridMap", "glyph_for"]
