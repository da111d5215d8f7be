import pytest

from snek.entities import Arena
from snek.errors import MissingEntityError
from snek.events import EntityCreated, EntityDestroyed, PositionChanged, Role
from snek.grid import Position


def test_spawn_emits_created_with_fresh_ids():
    arena = Arena()
    a = arena.spawn(Role.HEAD, Position(1, 1))
    b = arena.spawn(Role.FOOD, Position(2, 2))
    assert a != b
    assert arena.drain_events() == [
        EntityCreated(a, Role.HEAD, Position(1, 1)),
        EntityCreated(b, Role.FOOD, Position(2, 2)),
    ]
    assert arena.drain_events() == []


def test_ids_are_not_reused_after_despawn():
    arena = Arena()
    a = arena.spawn(Role.FOOD, Position())
    arena.despawn(a)
    b = arena.spawn(Role.FOOD, Position())
    assert b != a
    assert a not in arena
    assert b in arena


def test_set_position_emits_only_on_change():
    arena = Arena()
    e = arena.spawn(Role.SEGMENT, Position(3, 3))
    arena.drain_events()
    arena.set_position(e, Position(3, 3))
    assert arena.drain_events() == []
    arena.set_position(e, Position(3, 4))
    assert arena.drain_events() == [PositionChanged(e, Position(3, 4))]
    assert arena.position(e) == Position(3, 4)


def test_missing_entity_fails_fast():
    arena = Arena()
    e = arena.spawn(Role.FOOD, Position())
    arena.despawn(e)
    assert arena.drain_events()[-1] == EntityDestroyed(e)
    with pytest.raises(MissingEntityError):
        arena.position(e)
    with pytest.raises(MissingEntityError):
        arena.set_position(e, Position(1, 1))
    with pytest.raises(KeyError):
        arena.despawn(e)


def test_with_role_filters():
    arena = Arena()
    head = arena.spawn(Role.HEAD, Position())
    food = arena.spawn(Role.FOOD, Position(1, 0))
    assert list(arena.with_role(Role.FOOD)) == [food]
    assert list(arena.with_role(Role.HEAD)) == [head]
    assert arena.role(food) is Role.FOOD
    assert len(arena) == 2
