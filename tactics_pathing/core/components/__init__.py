"""components package."""

from .mover import Mover
from .position import Coord, Position

__all__ = ["Coord", "Mover", "Position"]
