"""Agent handles: the non-owning view behaviours bind to.

Usage:
    handle = world.agent(entity)
    seek.bind(handle)

    x, y = handle.position()
    handle.is_alive
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from steerecs.core.identity import EntityId
from steerecs.core.vector import Vector2D
from steerecs.steering.protocol import NotBoundError
from steerecs.world.components import Position, Velocity

if TYPE_CHECKING:
    from steerecs.world.world import World


class AgentHandle:
    """Reads an agent's Position and Velocity from its world on every call.

    Holds only the world and the EntityId, so binding a behaviour never keeps
    an agent alive. Once the agent is destroyed the handle is stale and its
    accessors raise NotBoundError.

    Args:
        world: World that owns the agent.
        entity: Id of the agent.
    """

    __slots__ = ("_world", "_entity")

    def __init__(self, world: World, entity: EntityId):
        self._world = world
        self._entity = entity

    @property
    def id(self) -> EntityId:
        return self._entity

    @property
    def is_alive(self) -> bool:
        return self._world.is_alive(self._entity)

    def _check_alive(self) -> None:
        if not self.is_alive:
            raise NotBoundError(f"Agent {self._entity} no longer exists")

    def position(self) -> Vector2D:
        """Current position.

        Raises:
            NotBoundError: If the agent is gone or has no Position.
        """
        self._check_alive()
        position = self._world._get_component(self._entity, Position)
        if position is None:
            raise NotBoundError(f"Agent {self._entity} has no Position")
        return position.as_vector()

    def velocity(self) -> Vector2D:
        """Current velocity; an agent without Velocity is at rest.

        Raises:
            NotBoundError: If the agent is gone.
        """
        self._check_alive()
        velocity = self._world._get_component(self._entity, Velocity)
        if velocity is None:
            return Vector2D()
        return velocity.as_vector()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AgentHandle):
            return NotImplemented
        return self._world is other._world and self._entity == other._entity

    def __hash__(self) -> int:
        return hash((id(self._world), self._entity))

    def __repr__(self) -> str:
        return f"AgentHandle({self._entity})"
