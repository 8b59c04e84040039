"""Cost-aware grid search for unit movement.

:class:`PathFinder` answers two questions about a tile map for a given mover:
the cheapest path to a target within a movement budget (:meth:`PathFinder.find_path`)
and every tile reachable within that budget (:meth:`PathFinder.find_range`).

Nodes are ordered by accumulated cost only. A heuristic is computed and stored
on each node for observers, but it never affects ordering, so the search
behaves as uniform-cost search.

A finder owns mutable search state and performs no locking: use one instance
per thread.
"""

from __future__ import annotations

from math import sqrt
from typing import Callable, Dict, Optional, Set
import logging

from ...config import CONFIG
from ...core.components.mover import Mover
from ...core.components.position import Coord
from ...core.tile_map import TerrainMap
from .expansion import ExpansionOrder, get_strategy
from .frontier import Frontier, VisitedSet
from .nodes import Node, NodeGrid
from .path import Path

logger = logging.getLogger(__name__)

RelaxObserver = Callable[[Node], None]


class PathFinder:
    """Search engine bound to a single tile map."""

    def __init__(
        self,
        tile_map: TerrainMap,
        allow_diagonal: bool | None = None,
        expansion_order: str | ExpansionOrder | None = None,
        observer: RelaxObserver | None = None,
        include_origin_in_range: bool | None = None,
    ) -> None:
        cfg = CONFIG.pathing
        self.map = tile_map
        self.allow_diagonal = cfg.allow_diagonal if allow_diagonal is None else allow_diagonal
        if expansion_order is None:
            expansion_order = cfg.expansion_order
        if isinstance(expansion_order, str):
            expansion_order = get_strategy(expansion_order)
        self.expansion_order: ExpansionOrder = expansion_order
        self.observer = observer
        self.include_origin_in_range = (
            cfg.include_origin_in_range
            if include_origin_in_range is None
            else include_origin_in_range
        )

        self.nodes = NodeGrid(tile_map.width, tile_map.height, tile_map.cost)
        self.open = Frontier()
        self.closed = VisitedSet()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def is_valid_location(self, mover: Mover, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is on the map and enterable by ``mover``."""
        if not self.nodes.in_bounds(x, y):
            return False
        return not self.map.is_blocked(mover, x, y)

    def _reset(self, sx: int, sy: int) -> Node:
        self.open.clear()
        self.closed.clear()
        self.nodes.begin_search()
        origin = self.nodes.visit(sx, sy)
        origin.depth = 0
        self.open.insert(origin)
        return origin

    def _relax(
        self,
        current: Node,
        neighbour: Node,
        step_cost: int,
        max_distance: int,
        heuristic: float,
    ) -> bool:
        """Try to reach ``neighbour`` through ``current``.

        Returns ``True`` if ``neighbour`` was (re)inserted into the frontier.
        """

        next_step_cost = step_cost + current.depth
        if next_step_cost < neighbour.depth:
            self.open.remove(neighbour)
            self.closed.remove(neighbour)

        if neighbour in self.open or neighbour in self.closed:
            return False

        neighbour.heuristic = heuristic
        if next_step_cost > max_distance:
            return False
        neighbour.set_parent(current, step_cost)
        self.open.insert(neighbour)
        if self.observer is not None:
            self.observer(neighbour)
        return True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def find_path(
        self, mover: Mover, max_distance: int, sx: int, sy: int, tx: int, ty: int
    ) -> Optional[Path]:
        """Return the cheapest path from ``(sx, sy)`` to ``(tx, ty)``.

        The path includes both endpoints and its accumulated terrain cost (the
        start tile excluded) never exceeds ``max_distance``. Returns ``None``
        when the target is blocked, out of budget or unreachable.
        """

        if not self.nodes.in_bounds(sx, sy):
            logger.debug("find_path: start (%d,%d) outside map", sx, sy)
            return None
        if not self.is_valid_location(mover, tx, ty):
            logger.debug("find_path: target (%d,%d) blocked for %s", tx, ty, mover.name)
            return None
        if (
            abs(tx - sx) > max_distance
            or abs(ty - sy) > max_distance
            or abs(tx - sx) + abs(ty - sy) > max_distance
        ):
            logger.debug(
                "find_path: target (%d,%d) beyond budget %d from (%d,%d)",
                tx, ty, max_distance, sx, sy,
            )
            return None

        origin = self._reset(sx, sy)
        if (sx, sy) == (tx, ty):
            return Path([(sx, sy)], cost=0)
        target = self.nodes.visit(tx, ty)
        target.parent = None

        while self.open:
            current = self.open.pop_min()
            if current is target:
                break
            self.closed.add(current)

            dist_x = tx - current.x
            dist_y = ty - current.y
            heuristic = sqrt(dist_x * dist_x + dist_y * dist_y)

            for ox, oy in self.expansion_order(dist_x, dist_y):
                if ox == 0 and oy == 0:
                    continue
                if not self.allow_diagonal and ox != 0 and oy != 0:
                    continue
                nx = current.x + ox
                ny = current.y + oy
                if not self.is_valid_location(mover, nx, ny):
                    continue
                if abs(tx - nx) + abs(ty - ny) > max_distance:
                    continue
                neighbour = self.nodes.visit(nx, ny)
                self._relax(current, neighbour, neighbour.cost, max_distance, heuristic)

        if target.parent is None:
            logger.debug(
                "find_path: no path from (%d,%d) to (%d,%d) within %d",
                sx, sy, tx, ty, max_distance,
            )
            return None

        path = Path(cost=target.depth)
        node = target
        while node is not origin:
            path.prepend_step(node.x, node.y)
            node = node.parent
        path.prepend_step(sx, sy)
        logger.debug(
            "find_path: %d steps from (%d,%d) to (%d,%d), cost %s, %d nodes closed",
            len(path), sx, sy, tx, ty, path.cost, len(self.closed),
        )
        return path

    def range_costs(
        self,
        mover: Mover,
        max_distance: int,
        sx: int,
        sy: int,
        is_movement_range: bool = True,
    ) -> Dict[Coord, int]:
        """Return every tile reachable from ``(sx, sy)`` mapped to its cost.

        In movement mode the mover must be able to enter each tile and terrain
        costs apply. Otherwise (attack/display range) passability is ignored
        and every step costs 1, so the result is the Manhattan diamond of
        radius ``max_distance`` clipped to the map. Tiles further than
        ``max_distance`` (Manhattan) from the origin are never considered.
        """

        if not self.nodes.in_bounds(sx, sy):
            logger.debug("find_range: start (%d,%d) outside map", sx, sy)
            return {}

        origin = self._reset(sx, sy)
        reached: Dict[Node, None] = {}

        while self.open:
            current = self.open.pop_min()
            self.closed.add(current)

            for ox, oy in self.expansion_order(0, 0):
                if ox == 0 and oy == 0:
                    continue
                if not self.allow_diagonal and ox != 0 and oy != 0:
                    continue
                nx = current.x + ox
                ny = current.y + oy
                if abs(sx - nx) + abs(sy - ny) > max_distance:
                    continue
                if is_movement_range:
                    if not self.is_valid_location(mover, nx, ny):
                        continue
                elif not self.nodes.in_bounds(nx, ny):
                    continue
                neighbour = self.nodes.visit(nx, ny)
                step_cost = neighbour.cost if is_movement_range else 1
                if self._relax(current, neighbour, step_cost, max_distance, 0.0):
                    reached[neighbour] = None

        result = {node.pos: int(node.depth) for node in reached if node is not origin}
        if self.include_origin_in_range:
            result[(sx, sy)] = 0
        logger.debug(
            "find_range: %d tiles within %d of (%d,%d) (movement=%s)",
            len(result), max_distance, sx, sy, is_movement_range,
        )
        return result

    def find_range(
        self,
        mover: Mover,
        max_distance: int,
        sx: int,
        sy: int,
        is_movement_range: bool = True,
    ) -> Set[Coord]:
        """Return the set of tiles reachable from ``(sx, sy)``.

        See :meth:`range_costs` for the two modes.
        """

        return set(self.range_costs(mover, max_distance, sx, sy, is_movement_range))


__all__ = ["PathFinder", "RelaxObserver"]
