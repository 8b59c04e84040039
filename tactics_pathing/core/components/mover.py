"""Mover component describing how a unit traverses terrain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Mover:
    """Traversal capabilities of a unit.

    ``impassable`` lists terrain names the unit can never enter. Flying units
    usually set ``ignores_occupants`` so other units do not block them.
    """

    name: str
    impassable: FrozenSet[str] = field(default_factory=frozenset)
    ignores_occupants: bool = False

    def can_enter(self, terrain: str) -> bool:
        """Return ``True`` if ``terrain`` is not impassable for this mover."""
        return terrain not in self.impassable


INFANTRY = Mover("infantry", frozenset({"water", "wall"}))
CAVALRY = Mover("cavalry", frozenset({"water", "wall", "mountain", "forest"}))
FLYER = Mover("flyer", frozenset({"wall"}), ignores_occupants=True)


__all__ = ["Mover", "INFANTRY", "CAVALRY", "FLYER"]
