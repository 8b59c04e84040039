"""Shared fixtures for the path finder tests."""

from heapq import heappop, heappush
import random

import pytest

from tactics_pathing.core.components.mover import Mover
from tactics_pathing.core.tile_map import GridMap


COSTS = {"plains": 1, "forest": 2, "mountain": 4, "water": 1, "wall": 1}
LEGEND = {".": "plains", "T": "forest", "^": "mountain", "~": "water", "#": "wall"}


def _reference_costs(tile_map, mover, start):
    """Plain Dijkstra over passable tiles, used as ground truth."""

    dist = {start: 0}
    heap = [(0, start)]
    while heap:
        d, (x, y) = heappop(heap)
        if d > dist[(x, y)]:
            continue
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if not (0 <= nx < tile_map.width and 0 <= ny < tile_map.height):
                continue
            if tile_map.is_blocked(mover, nx, ny):
                continue
            nd = d + tile_map.cost(nx, ny)
            if nd < dist.get((nx, ny), float("inf")):
                dist[(nx, ny)] = nd
                heappush(heap, (nd, (nx, ny)))
    return dist


@pytest.fixture
def costs():
    return dict(COSTS)


@pytest.fixture
def legend():
    return dict(LEGEND)


@pytest.fixture
def knight():
    return Mover("knight", frozenset({"water", "wall"}))


@pytest.fixture
def make_map():
    def _make(*lines):
        return GridMap.from_strings(lines, LEGEND, COSTS)

    return _make


@pytest.fixture
def open_field():
    return GridMap.uniform(5, 5, "plains", COSTS)


@pytest.fixture
def reference_costs():
    return _reference_costs


@pytest.fixture
def random_maps():
    rng = random.Random(1234)
    terrains = ["plains"] * 5 + ["forest"] * 2 + ["mountain", "water", "wall"]
    maps = []
    for _ in range(6):
        rows = [[rng.choice(terrains) for _ in range(8)] for _ in range(7)]
        maps.append(GridMap(rows, COSTS))
    return maps
