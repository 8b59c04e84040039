"""Position component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


Coord = Tuple[int, int]


@dataclass
class Position:
    """Simple 2D tile coordinate."""

    x: int
    y: int

    def as_tuple(self) -> Coord:
        return (self.x, self.y)


__all__ = ["Coord", "Position"]
