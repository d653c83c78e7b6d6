"""Pure vector operations.

Every function returns a freshly constructed vector and never touches its
inputs. The type of the result follows a fixed rule per operation:

- add, add_scaled, subtract, multiply: always MutableVector2D (scratch result)
- divide, normalise, rotate, wrap, to_cartesian, to_polar: same type as input

Usage:
    from steerecs.core.vector import operations as vec

    heading = vec.normalise(velocity)
    force = vec.subtract(vec.normalise(vec.subtract(target, position)), velocity)
"""

from __future__ import annotations

import math
from typing import Literal, overload

from steerecs.core.vector.models import BaseVector, MutableVector2D, Vector2D


def _same_kind(source: BaseVector, x: float, y: float) -> Vector2D | MutableVector2D:
    if isinstance(source, MutableVector2D):
        return MutableVector2D(x, y)
    return Vector2D(x, y)


@overload
def vector(x: float = 0.0, y: float = 0.0, *, mutable: Literal[False] = False) -> Vector2D: ...


@overload
def vector(x: float, y: float, *, mutable: Literal[True]) -> MutableVector2D: ...


@overload
def vector(x: float, y: float, *, mutable: bool) -> Vector2D | MutableVector2D: ...


def vector(
    x: float = 0.0, y: float = 0.0, *, mutable: bool = False
) -> Vector2D | MutableVector2D:
    """Create a vector; ``vector()`` is the immutable zero vector."""
    if mutable:
        return MutableVector2D(x, y)
    return Vector2D(x, y)


def copy(source: BaseVector, mutable: bool | None = None) -> Vector2D | MutableVector2D:
    """Copy a vector.

    Args:
        source: Vector to copy.
        mutable: Type of the copy. None keeps the source's type.

    Returns:
        New vector with the same fields.
    """
    if mutable is None:
        mutable = source.is_mutable
    return vector(source.x, source.y, mutable=mutable)


def add(first: BaseVector, second: BaseVector) -> MutableVector2D:
    result = first.to_mutable()
    result.add(second)
    return result


def add_scaled(first: BaseVector, second: BaseVector, factor: float) -> MutableVector2D:
    """Weighted add: ``first + second * factor``."""
    result = first.to_mutable()
    result.add(second, factor)
    return result


def subtract(first: BaseVector, second: BaseVector) -> MutableVector2D:
    result = first.to_mutable()
    result.subtract(second)
    return result


def multiply(source: BaseVector, factor: float = 1.0) -> MutableVector2D:
    result = source.to_mutable()
    result.multiply(factor)
    return result


def divide(source: BaseVector, factor: float) -> Vector2D | MutableVector2D:
    """Divide by a scalar; the result keeps the input's type.

    Raises:
        InvalidArgumentError: If ``factor`` is zero.
    """
    result = source.to_mutable()
    result.divide(factor)
    return _same_kind(source, result.x, result.y)


def normalise(source: BaseVector) -> Vector2D | MutableVector2D:
    """Unit-length copy keeping the input's type; zero stays zero."""
    return source.normalised()


def rotate(source: BaseVector, theta: float) -> Vector2D | MutableVector2D:
    return source.rotated(theta)


def wrap(source: BaseVector, width: float, height: float) -> Vector2D | MutableVector2D:
    return source.wrapped(width, height)


def scalar_product(first: BaseVector, second: BaseVector) -> float:
    """Dot product of two vectors."""
    return first.scalar_product(second)


def distance(first: BaseVector, second: BaseVector) -> float:
    return first.distance(second)


def direction_between(origin: BaseVector, target: BaseVector) -> MutableVector2D:
    """Unit vector from ``origin`` toward ``target``."""
    return origin.direction_to(target)


def to_cartesian(polar: BaseVector) -> Vector2D | MutableVector2D:
    """Convert a polar vector ``(r, theta)`` to Cartesian ``(x, y)``."""
    return _same_kind(polar, polar.r * math.cos(polar.theta), polar.r * math.sin(polar.theta))


def to_polar(cartesian: BaseVector) -> Vector2D | MutableVector2D:
    """Convert a Cartesian vector to polar ``(r, theta)``, theta from atan2."""
    return _same_kind(cartesian, cartesian.magnitude(), cartesian.angle())
