"""Core functionalities: stateless value types and pure operations.

Architecture Note:
    core/ holds the vector kernel and identity types. Nothing here keeps
    runtime state between calls except the process-wide vector sampler.
    Stateful steering lives in steering/, the agent container in world/.
"""

from steerecs.core.identity import EntityId
from steerecs.core.vector import (
    BaseVector,
    CartesianBounds,
    InvalidArgumentError,
    MutabilityViolationError,
    MutableVector2D,
    PolarRange,
    Vector2D,
    VectorSampler,
    copy,
    get_sampler,
    operations,
    random_cartesian,
    random_polar,
    seed_sampler,
    to_cartesian,
    to_polar,
    vector,
)

__all__ = [
    # Identity
    "EntityId",
    # Vector
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
    # Sampling
    "VectorSampler",
    "CartesianBounds",
    "PolarRange",
    "get_sampler",
    "seed_sampler",
    "random_cartesian",
    "random_polar",
]
