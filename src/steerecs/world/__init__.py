"""Agent world: storage, handles and the tick loop.

Architecture Note:
    world/ is a stateful service layer that owns agents and drives the
    behaviours attached to them. Unlike core/ (stateless value types), it
    keeps runtime state between ticks.
"""

from steerecs.world.access import AgentHandle
from steerecs.world.allocator import EntityAllocator
from steerecs.world.components import Position, SteeringForce, Velocity
from steerecs.world.storage import AgentStorage
from steerecs.world.world import RECOVERABLE_ERRORS, Attachment, World

__all__ = [
    "World",
    "Attachment",
    "RECOVERABLE_ERRORS",
    "AgentHandle",
    "AgentStorage",
    "EntityAllocator",
    "Position",
    "Velocity",
    "SteeringForce",
]
