"""In-memory component storage for agents.

Simple dict-based storage; one process, one world.

Usage:
    storage = AgentStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator
from typing import Any, TypeVar

from steerecs.core.identity import EntityId
from steerecs.world.allocator import EntityAllocator

T = TypeVar("T")


class AgentStorage:
    """Nested-dict component storage.

    Structure:
        _components[entity][component_type] = component_instance

    Iteration order is spawn order.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}

    def create_entity(self) -> EntityId:
        entity = self._allocator.allocate()
        self._components[entity] = {}
        return entity

    def destroy_entity(self, entity: EntityId) -> bool:
        """Destroy an entity and drop its components.

        Returns:
            True if the entity existed, False otherwise.
        """
        if entity not in self._components:
            return False
        del self._components[entity]
        self._allocator.deallocate(entity)
        return True

    def entity_exists(self, entity: EntityId) -> bool:
        return entity in self._components and self._allocator.is_alive(entity)

    def all_entities(self) -> Iterator[EntityId]:
        """Iterate alive entities in spawn order."""
        for entity in list(self._components):
            if self._allocator.is_alive(entity):
                yield entity

    def get_component(
        self, entity: EntityId, component_type: type[T], copy: bool = True
    ) -> T | None:
        """Get a component from an entity.

        Args:
            entity: Entity to query.
            component_type: Type of component to retrieve.
            copy: Return a deep copy rather than the stored instance.

        Returns:
            Component instance or None if the entity or component is missing.
        """
        component = self._components.get(entity, {}).get(component_type)
        if component is None:
            return None
        return cp.deepcopy(component) if copy else component

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Set or replace a component, keyed by its type.

        Raises:
            KeyError: If the entity does not exist.
        """
        if not self.entity_exists(entity):
            raise KeyError(f"Entity {entity} does not exist")
        self._components[entity][type(component)] = component

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        """Remove a component; True if it was present."""
        return self._components.get(entity, {}).pop(component_type, None) is not None

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        return component_type in self._components.get(entity, {})

    def get_component_types(self, entity: EntityId) -> frozenset[type]:
        return frozenset(self._components.get(entity, {}))

    def query(
        self, *component_types: type, copy: bool = True
    ) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Iterate entities having every one of ``component_types``.

        Yields:
            (entity, (component1, component2, ...)) in spawn order.
        """
        for entity in self.all_entities():
            components = self._components[entity]
            if all(t in components for t in component_types):
                found = tuple(components[t] for t in component_types)
                yield entity, (cp.deepcopy(found) if copy else found)

    def __len__(self) -> int:
        return sum(1 for _ in self.all_entities())
