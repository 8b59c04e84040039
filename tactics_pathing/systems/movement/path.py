"""Ordered list of tiles from a start to a target."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List

from ...core.components.position import Coord


class Path:
    """Steps from start (index 0) to target (last index)."""

    def __init__(self, steps: List[Coord] | None = None, cost: float = 0) -> None:
        self._steps: Deque[Coord] = deque(steps or [])
        self.cost = cost

    def prepend_step(self, x: int, y: int) -> None:
        self._steps.appendleft((x, y))

    def append_step(self, x: int, y: int) -> None:
        self._steps.append((x, y))

    def get_x(self, index: int) -> int:
        return self._steps[index][0]

    def get_y(self, index: int) -> int:
        return self._steps[index][1]

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self._steps

    @property
    def steps(self) -> List[Coord]:
        return list(self._steps)

    @property
    def start(self) -> Coord:
        return self._steps[0]

    @property
    def target(self) -> Coord:
        return self._steps[-1]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> Coord:
        return self._steps[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self.steps == other.steps
        if isinstance(other, list):
            return self.steps == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Path({self.steps!r}, cost={self.cost})"


__all__ = ["Path"]
