from tactics_pathing.core.tile_map import GridMap
from tactics_pathing.systems.movement.pathfinding import PathFinder


def _diamond(width, height, sx, sy, radius):
    return {
        (x, y)
        for y in range(height)
        for x in range(width)
        if 0 < abs(x - sx) + abs(y - sy) <= radius
    }


def test_movement_range_on_open_field(open_field, knight):
    finder = PathFinder(open_field)
    reachable = finder.find_range(knight, 2, 2, 2, True)
    assert reachable == _diamond(5, 5, 2, 2, 2)
    assert len(reachable) == 12
    assert (2, 2) not in reachable


def test_movement_range_matches_reference(random_maps, knight, reference_costs):
    for tile_map in random_maps:
        finder = PathFinder(tile_map)
        for start in ((0, 0), (3, 3), (7, 6)):
            best = reference_costs(tile_map, knight, start)
            for budget in (0, 1, 3, 5, 9):
                expected = {pos for pos, cost in best.items() if cost <= budget and pos != start}
                assert finder.find_range(knight, budget, start[0], start[1], True) == expected


def test_movement_range_costs(make_map, knight):
    tile_map = make_map(
        ".T.",
        "#..",
    )
    finder = PathFinder(tile_map)
    costs = finder.range_costs(knight, 3, 0, 0, True)
    assert costs == {(1, 0): 2, (2, 0): 3, (1, 1): 3}


def test_movement_range_stops_at_water(make_map, knight):
    tile_map = make_map(
        "..~..",
        "..~..",
    )
    finder = PathFinder(tile_map)
    reachable = finder.find_range(knight, 10, 0, 0, True)
    assert reachable == {(1, 0), (0, 1), (1, 1)}


def test_display_range_ignores_terrain(make_map, knight):
    tile_map = make_map(
        "..~..",
        ".^#T.",
        "..~..",
    )
    finder = PathFinder(tile_map)
    reachable = finder.find_range(knight, 2, 2, 1, False)
    assert reachable == _diamond(5, 3, 2, 1, 2)
    assert (2, 0) in reachable and (1, 1) in reachable


def test_display_range_clipped_to_map(open_field, knight):
    finder = PathFinder(open_field)
    reachable = finder.find_range(knight, 3, 0, 0, False)
    assert reachable == _diamond(5, 5, 0, 0, 3)
    assert all(0 <= x < 5 and 0 <= y < 5 for x, y in reachable)


def test_display_range_costs_are_step_counts(make_map, knight):
    tile_map = make_map(".^^^.")
    finder = PathFinder(tile_map)
    assert finder.range_costs(knight, 4, 0, 0, False) == {
        (1, 0): 1,
        (2, 0): 2,
        (3, 0): 3,
        (4, 0): 4,
    }


def test_display_range_is_superset_of_movement_range(random_maps, knight):
    for tile_map in random_maps:
        finder = PathFinder(tile_map)
        for budget in (1, 3, 6):
            movement = finder.find_range(knight, budget, 3, 3, True)
            display = finder.find_range(knight, budget, 3, 3, False)
            assert movement <= display


def test_display_range_leaves_terrain_costs_alone(make_map, knight):
    tile_map = make_map(
        ".TT.",
        "....",
    )
    finder = PathFinder(tile_map)
    before = finder.find_path(knight, 6, 0, 0, 3, 0)
    finder.find_range(knight, 3, 0, 0, False)
    assert finder.nodes.get(1, 0).cost == 2
    after = finder.find_path(knight, 6, 0, 0, 3, 0)
    assert before == after
    assert after.cost == 5
    assert finder.range_costs(knight, 3, 0, 0, True)[(1, 0)] == 2


def test_range_grows_with_budget(make_map, knight):
    tile_map = make_map(
        "..T..",
        ".#T#.",
        "..^..",
        "~....",
    )
    finder = PathFinder(tile_map)
    for mode in (True, False):
        previous: set = set()
        for budget in range(0, 10):
            reachable = finder.find_range(knight, budget, 0, 0, mode)
            assert previous <= reachable
            previous = reachable


def test_zero_budget_and_off_map_start(open_field, knight):
    finder = PathFinder(open_field)
    assert finder.find_range(knight, 0, 2, 2, True) == set()
    assert finder.find_range(knight, 0, 2, 2, False) == set()
    assert finder.find_range(knight, 3, -1, 2, True) == set()
    assert finder.find_range(knight, 3, 2, 9, False) == set()


def test_include_origin_in_range(knight):
    tile_map = GridMap.uniform(3, 3, "plains", {"plains": 1})
    finder = PathFinder(tile_map, include_origin_in_range=True)
    assert finder.range_costs(knight, 1, 1, 1, True) == {
        (1, 1): 0,
        (2, 1): 1,
        (1, 2): 1,
        (0, 1): 1,
        (1, 0): 1,
    }
