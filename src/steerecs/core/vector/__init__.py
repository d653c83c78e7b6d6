"""Vector functionality: value types, pure operations, and random sampling."""

from steerecs.core.vector import operations
from steerecs.core.vector.models import (
    BaseVector,
    InvalidArgumentError,
    MutabilityViolationError,
    MutableVector2D,
    Vector2D,
)
from steerecs.core.vector.operations import copy, to_cartesian, to_polar, vector
from steerecs.core.vector.sampling import (
    CartesianBounds,
    PolarRange,
    VectorSampler,
    get_sampler,
    random_cartesian,
    random_polar,
    seed_sampler,
)

__all__ = [
    # Models
    "BaseVector",
    "Vector2D",
    "MutableVector2D",
    "MutabilityViolationError",
    "InvalidArgumentError",
    # Operations
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
