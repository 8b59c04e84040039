"""Per-tile search nodes and the grid that owns them."""

from __future__ import annotations

from typing import Callable, List, Optional


INFINITE_DEPTH = float("inf")


class Node:
    """Search state for a single map tile.

    Nodes compare and hash by identity so the open and closed sets track the
    exact object held by the grid.
    """

    __slots__ = ("x", "y", "cost", "depth", "heuristic", "parent", "generation")

    def __init__(self, x: int, y: int, cost: int) -> None:
        self.x = x
        self.y = y
        self.cost = cost
        self.depth: float = INFINITE_DEPTH
        self.heuristic: float = 0.0
        self.parent: Optional[Node] = None
        self.generation = 0

    def set_parent(self, parent: "Node", step_cost: int | None = None) -> float:
        """Attach ``parent`` and return the new accumulated depth.

        ``step_cost`` replaces this tile's terrain cost for the step without
        touching ``self.cost``.
        """

        cost = self.cost if step_cost is None else step_cost
        self.depth = parent.depth + cost
        self.parent = parent
        return self.depth

    def reset(self, generation: int) -> None:
        self.depth = INFINITE_DEPTH
        self.heuristic = 0.0
        self.parent = None
        self.generation = generation

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Node(x={self.x}, y={self.y}, cost={self.cost}, depth={self.depth})"


class NodeGrid:
    """Dense ``width`` x ``height`` array of nodes allocated once.

    Every search calls :meth:`begin_search`; nodes fetched through
    :meth:`visit` are reset lazily the first time they are touched in that
    search, so no ``depth`` or ``parent`` leaks from an earlier call.
    """

    def __init__(self, width: int, height: int, cost_of: Callable[[int, int], int]) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.generation = 0
        self._nodes: List[List[Node]] = []
        for y in range(height):
            row: List[Node] = []
            for x in range(width):
                cost = int(cost_of(x, y))
                if cost < 0:
                    raise ValueError(f"tile ({x},{y}) has negative cost {cost}")
                row.append(Node(x, y, cost))
            self._nodes.append(row)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Node:
        """Return the node for ``(x, y)`` without resetting it."""
        return self._nodes[y][x]

    def begin_search(self) -> int:
        """Start a new search generation and return its number."""
        self.generation += 1
        return self.generation

    def visit(self, x: int, y: int) -> Node:
        """Return the node for ``(x, y)``, clearing state from older searches."""
        node = self._nodes[y][x]
        if node.generation != self.generation:
            node.reset(self.generation)
        return node

    def __iter__(self):
        for row in self._nodes:
            yield from row


__all__ = ["Node", "NodeGrid", "INFINITE_DEPTH"]
