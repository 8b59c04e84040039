"""ASCII renderer for paths and ranges on a tile map."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Mapping, TextIO

from ...core.components.position import Coord
from ...core.tile_map import glyph_for


# Basic ANSI colour codes used when ``colour=True``
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
    "reset": "\x1b[0m",
}

ORIGIN_GLYPH = "@"
PATH_GLYPH = "*"
RANGE_GLYPH = "+"


def _tile_glyph(tile_map: Any, x: int, y: int, legend: Mapping[str, str] | None) -> str:
    terrain_at = getattr(tile_map, "terrain_at", None)
    if terrain_at is None:
        return str(tile_map.cost(x, y))[:1]
    return glyph_for(terrain_at(x, y), legend)


def render_overlay(
    tile_map: Any,
    path: Iterable[Coord] | None = None,
    reachable: Iterable[Coord] | None = None,
    origin: Coord | None = None,
    colour: bool = False,
    legend: Mapping[str, str] | None = None,
) -> str:
    """Return ``tile_map`` as text with ``path`` and ``reachable`` marked.

    Maps without ``terrain_at`` are drawn with the first digit of each tile's
    cost. Path steps win over reachable tiles; the origin wins over both.
    """

    path_tiles = set(path or ())
    range_tiles = set(reachable or ())

    def paint(glyph: str, name: str) -> str:
        if not colour:
            return glyph
        return f"{_COLOURS[name]}{glyph}{_COLOURS['reset']}"

    lines: list[str] = []
    for y in range(tile_map.height):
        row: list[str] = []
        for x in range(tile_map.width):
            pos = (x, y)
            if pos == origin:
                row.append(paint(ORIGIN_GLYPH, "yellow"))
            elif pos in path_tiles:
                row.append(paint(PATH_GLYPH, "red"))
            elif pos in range_tiles:
                row.append(paint(RANGE_GLYPH, "cyan"))
            else:
                row.append(_tile_glyph(tile_map, x, y, legend))
        lines.append("".join(row))
    return "\n".join(lines)


def print_overlay(tile_map: Any, out: TextIO | None = None, **kwargs: Any) -> None:
    """Write :func:`render_overlay` output to ``out`` (``stdout`` by default)."""

    stream = sys.stdout if out is None else out
    stream.write(render_overlay(tile_map, **kwargs) + "\n")
    stream.flush()


__all__ = ["render_overlay", "print_overlay", "ORIGIN_GLYPH", "PATH_GLYPH", "RANGE_GLYPH"]
