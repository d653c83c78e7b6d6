"""Agent identity models.

Usage:
    agent = EntityId(index=3, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Non-owning agent handle: a slot index plus the generation it was issued for.

    A recycled slot gets a higher generation, so an id kept by a behaviour
    after its agent was destroyed never resolves to the slot's next occupant.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"
