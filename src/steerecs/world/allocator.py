"""Entity allocation service.

EntityAllocator is a stateful service that manages the agent id lifecycle.
"""

from __future__ import annotations

from steerecs.core.identity import EntityId

FIRST_INDEX = 1000


class EntityAllocator:
    """Hands out agent ids, recycling freed slots under a new generation.

    Freed slots are reused last-in first-out. A handle whose generation no
    longer matches its slot is stale.
    """

    def __init__(self) -> None:
        self._next_index = FIRST_INDEX
        self._free_slots: list[int] = []
        self._free_indices: set[int] = set()
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate an id, reusing a freed slot when one is available.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_slots:
            index = self._free_slots.pop()
            self._free_indices.discard(index)
        else:
            index = self._next_index
            self._next_index += 1
            self._generations[index] = 0
        return EntityId(index=index, generation=self._generations[index])

    def deallocate(self, entity: EntityId) -> None:
        """Free the slot of a live id and bump its generation.

        Raises:
            ValueError: If ``entity`` is already stale.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate stale entity {entity}")
        self._generations[entity.index] = entity.generation + 1
        self._free_slots.append(entity.index)
        self._free_indices.add(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """Check the id's generation still matches its slot."""
        if entity.index in self._free_indices:
            return False
        return self._generations.get(entity.index, -1) == entity.generation
