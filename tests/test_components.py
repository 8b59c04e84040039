import pytest

from tactics_pathing.core.components import Mover, Position


def test_position_dataclass():
    p = Position(1, 2)
    assert (p.x, p.y) == (1, 2)
    assert p.as_tuple() == (1, 2)


def test_mover_defaults():
    m = Mover("scout")
    assert m.impassable == frozenset()
    assert m.ignores_occupants is False
    assert m.can_enter("water")


def test_mover_is_frozen():
    m = Mover("scout", frozenset({"wall"}))
    assert not m.can_enter("wall")
    with pytest.raises(AttributeError):
        m.name = "other"  # type: ignore[misc]
