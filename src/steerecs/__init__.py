"""steerecs: steering behaviours for agents in a continuous 2D world.

Usage:
    from steerecs import Position, Velocity, Vector2D, World, SeekBehaviour

    world = World()
    agent = world.spawn(Position(0, 0), Velocity(0, 0))
    world.attach(agent, SeekBehaviour(target=Vector2D(10, 0)))

    forces = world.tick()   # {agent: Vector2D(x=1.0, y=0.0)}
"""

__version__ = "0.1.0"

# Configuration
from steerecs.config import WanderSettings, WorldSettings

# Core primitives
from steerecs.core import (
    BaseVector,
    CartesianBounds,
    EntityId,
    InvalidArgumentError,
    MutabilityViolationError,
    MutableVector2D,
    PolarRange,
    Vector2D,
    VectorSampler,
    copy,
    operations,
    random_cartesian,
    random_polar,
    to_cartesian,
    to_polar,
    vector,
)

# Steering
from steerecs.steering import (
    Agent,
    ArriveBehaviour,
    BaseBehaviour,
    DebugSurface,
    FleeBehaviour,
    NotBoundError,
    PursueBehaviour,
    SeekBehaviour,
    SteeringBehaviour,
    WanderingBehaviour,
)

# Tracing
from steerecs.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

# World
from steerecs.world import AgentHandle, AgentStorage, Position, SteeringForce, Velocity, World

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "BaseVector",
    "Vector2D",
    "MutableVector2D",
    "MutabilityViolationError",
    "InvalidArgumentError",
    "operations",
    "vector",
    "copy",
    "to_cartesian",
    "to_polar",
    "VectorSampler",
    "CartesianBounds",
    "PolarRange",
    "random_cartesian",
    "random_polar",
    # Steering
    "SteeringBehaviour",
    "Agent",
    "DebugSurface",
    "NotBoundError",
    "BaseBehaviour",
    "SeekBehaviour",
    "FleeBehaviour",
    "WanderingBehaviour",
    "ArriveBehaviour",
    "PursueBehaviour",
    # World
    "World",
    "AgentHandle",
    "AgentStorage",
    "Position",
    "Velocity",
    "SteeringForce",
    # Config
    "WorldSettings",
    "WanderSettings",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
