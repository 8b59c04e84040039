"""Open and closed sets for the grid search."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterator, List, Optional, Set

from .nodes import Node


class Frontier:
    """Nodes waiting to be evaluated, popped in ascending ``depth`` order.

    Entries are ``[depth, sequence, node]``; nodes with equal depth come out in
    the order they were inserted. Removal marks the entry dead and leaves it in
    the heap until it surfaces.
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[int, list] = {}
        self._counter = count()

    def insert(self, node: Node) -> None:
        if id(node) in self._entries:
            self.remove(node)
        entry = [node.depth, next(self._counter), node]
        self._entries[id(node)] = entry
        heappush(self._heap, entry)

    def remove(self, node: Node) -> None:
        entry = self._entries.pop(id(node), None)
        if entry is not None:
            entry[2] = None

    def _prune(self) -> None:
        while self._heap and self._heap[0][2] is None:
            heappop(self._heap)

    def peek_min(self) -> Optional[Node]:
        self._prune()
        return self._heap[0][2] if self._heap else None

    def pop_min(self) -> Node:
        """Remove and return the node with the smallest depth."""
        self._prune()
        if not self._heap:
            raise IndexError("pop from empty frontier")
        _, _, node = heappop(self._heap)
        del self._entries[id(node)]
        return node

    def contains(self, node: Node) -> bool:
        return id(node) in self._entries

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()
        self._counter = count()

    def __contains__(self, node: Node) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


class VisitedSet:
    """Nodes fully evaluated in the current search."""

    def __init__(self) -> None:
        self._nodes: Set[Node] = set()

    def add(self, node: Node) -> None:
        self._nodes.add(node)

    def remove(self, node: Node) -> None:
        self._nodes.discard(node)

    def contains(self, node: Node) -> bool:
        return node in self._nodes

    def clear(self) -> None:
        self._nodes.clear()

    def __contains__(self, node: Node) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)


__all__ = ["Frontier", "VisitedSet"]
