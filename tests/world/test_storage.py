"""Tests for AgentStorage."""

import pytest

from steerecs import AgentStorage, Position, Velocity


@pytest.fixture
def storage():
    return AgentStorage()


def test_create_and_destroy(storage):
    entity = storage.create_entity()
    assert storage.entity_exists(entity)
    assert len(storage) == 1

    assert storage.destroy_entity(entity) is True
    assert not storage.entity_exists(entity)
    assert storage.destroy_entity(entity) is False
    assert len(storage) == 0


def test_get_component_returns_copy_by_default(storage):
    """Mutating a copy must not change stored state."""
    entity = storage.create_entity()
    storage.set_component(entity, Position(1.0, 2.0))

    copy = storage.get_component(entity, Position)
    copy.x = 99.0

    assert storage.get_component(entity, Position) == Position(1.0, 2.0)


def test_get_component_without_copy_is_stored_instance(storage):
    entity = storage.create_entity()
    position = Position(1.0, 2.0)
    storage.set_component(entity, position)

    assert storage.get_component(entity, Position, copy=False) is position


def test_missing_component_is_none(storage):
    entity = storage.create_entity()
    assert storage.get_component(entity, Velocity) is None


def test_set_component_on_missing_entity_raises(storage):
    entity = storage.create_entity()
    storage.destroy_entity(entity)
    with pytest.raises(KeyError):
        storage.set_component(entity, Position(0.0, 0.0))


def test_set_component_replaces_same_type(storage):
    entity = storage.create_entity()
    storage.set_component(entity, Position(1.0, 1.0))
    storage.set_component(entity, Position(2.0, 2.0))

    assert storage.get_component(entity, Position) == Position(2.0, 2.0)


def test_remove_and_has_component(storage):
    entity = storage.create_entity()
    storage.set_component(entity, Position(0.0, 0.0))
    storage.set_component(entity, Velocity(1.0, 0.0))

    assert storage.get_component_types(entity) == frozenset({Position, Velocity})
    assert storage.remove_component(entity, Velocity) is True
    assert storage.remove_component(entity, Velocity) is False
    assert not storage.has_component(entity, Velocity)
    assert storage.has_component(entity, Position)


def test_query_filters_and_keeps_spawn_order(storage):
    moving = [storage.create_entity() for _ in range(3)]
    still = storage.create_entity()
    for i, entity in enumerate(moving):
        storage.set_component(entity, Position(float(i), 0.0))
        storage.set_component(entity, Velocity(1.0, 0.0))
    storage.set_component(still, Position(0.0, 0.0))

    results = list(storage.query(Position, Velocity))

    assert [entity for entity, _ in results] == moving
    assert results[1][1] == (Position(1.0, 0.0), Velocity(1.0, 0.0))


def test_recycled_slot_does_not_inherit_components(storage):
    old = storage.create_entity()
    storage.set_component(old, Position(5.0, 5.0))
    storage.destroy_entity(old)

    new = storage.create_entity()

    assert new.index == old.index
    assert storage.get_component(new, Position) is None
    assert storage.get_component(old, Position) is None
