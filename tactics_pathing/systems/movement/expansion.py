"""Neighbour expansion orders.

Only the four axis-aligned offsets are ever produced. The order decides which
of several equal-cost paths the search finds first; it never changes the cost
of the path found.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

Offset = Tuple[int, int]
ExpansionOrder = Callable[[int, int], Tuple[Offset, ...]]

EAST: Offset = (1, 0)
SOUTH: Offset = (0, 1)
WEST: Offset = (-1, 0)
NORTH: Offset = (0, -1)


def toward_target(dx: int, dy: int) -> Tuple[Offset, ...]:
    """Prefer the axis with the larger remaining distance, heading toward it.

    ``dx``/``dy`` are the signed deltas from the current tile to the target.
    Range searches pass ``(0, 0)``.
    """

    if abs(dx) > abs(dy):
        if dx < 0:
            return (WEST, SOUTH, NORTH, EAST)
        return (EAST, WEST, SOUTH, NORTH)
    if dy < 0:
        return (NORTH, EAST, WEST, SOUTH)
    return (SOUTH, EAST, WEST, NORTH)


def fixed(dx: int, dy: int) -> Tuple[Offset, ...]:
    """Always expand east, south, west, north."""

    return (EAST, SOUTH, WEST, NORTH)


STRATEGIES: Dict[str, ExpansionOrder] = {
    "toward_target": toward_target,
    "fixed": fixed,
}


def get_strategy(name: str) -> ExpansionOrder:
    """Return the expansion order registered as ``name``."""

    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"unknown expansion order {name!r}; expected one of {sorted(STRATEGIES)}"
        ) from None


__all__ = [
    "Offset",
    "ExpansionOrder",
    "EAST",
    "SOUTH",
    "WEST",
    "NORTH",
    "toward_target",
    "fixed",
    "STRATEGIES",
    "get_strategy",
]
