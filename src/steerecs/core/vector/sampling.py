"""Random vector sampling with an injectable random source.

A module-level sampler backs the convenience functions; anything that needs
repeatable output (tests, seeded worlds, wandering agents) should own a
VectorSampler built from its own seed or ``random.Random``.

Usage:
    sampler = VectorSampler(seed=42)
    spawn_point = sampler.cartesian(CartesianBounds(x_limit=800, y_limit=600))
    heading = to_cartesian(sampler.polar(PolarRange(2 * math.pi, 1.0, 1.0)))
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from steerecs.core.vector.models import InvalidArgumentError, MutableVector2D, Vector2D
from steerecs.core.vector.operations import vector


@dataclass(frozen=True, slots=True)
class CartesianBounds:
    """Sample area ``[0, x_limit) x [0, y_limit)``."""

    x_limit: float
    y_limit: float

    def __post_init__(self) -> None:
        if self.x_limit < 0 or self.y_limit < 0:
            raise InvalidArgumentError(
                f"Cartesian limits must be non-negative, got ({self.x_limit}, {self.y_limit})"
            )


@dataclass(frozen=True, slots=True)
class PolarRange:
    """Angles centred on zero spanning ``angle_range`` radians, radius in [min, max)."""

    angle_range: float
    speed_min: float
    speed_max: float

    def __post_init__(self) -> None:
        if self.angle_range < 0:
            raise InvalidArgumentError(f"angle_range must be non-negative, got {self.angle_range}")
        if self.speed_min < 0:
            raise InvalidArgumentError(f"speed_min must be non-negative, got {self.speed_min}")
        if self.speed_min > self.speed_max:
            raise InvalidArgumentError(
                f"speed_min ({self.speed_min}) exceeds speed_max ({self.speed_max})"
            )


class VectorSampler:
    """Draws random vectors from a single ``random.Random`` stream.

    Args:
        rng: Random source to draw from. Takes precedence over ``seed``.
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def cartesian(
        self, bounds: CartesianBounds, mutable: bool = False
    ) -> Vector2D | MutableVector2D:
        """Uniform point in the bounds."""
        return vector(
            self.rng.random() * bounds.x_limit,
            self.rng.random() * bounds.y_limit,
            mutable=mutable,
        )

    def polar(self, polar_range: PolarRange, mutable: bool = False) -> Vector2D | MutableVector2D:
        """Polar vector ``(r, theta)`` with uniform angle and radius."""
        theta = self.rng.random() * polar_range.angle_range - polar_range.angle_range / 2
        if polar_range.speed_min == polar_range.speed_max:
            r = polar_range.speed_max
        else:
            r = self.rng.uniform(polar_range.speed_min, polar_range.speed_max)
        return vector(r, theta, mutable=mutable)

    def uniform(self, low: float, high: float) -> float:
        return self.rng.uniform(low, high)


# Module-level sampler instance
_sampler = VectorSampler()


def get_sampler() -> VectorSampler:
    """Access the process-wide sampler used by the convenience functions."""
    return _sampler


def seed_sampler(seed: int | None) -> None:
    """Reseed the process-wide sampler."""
    _sampler.rng.seed(seed)


def random_cartesian(
    x_limit: float, y_limit: float, mutable: bool = False
) -> Vector2D | MutableVector2D:
    """Random point in ``[0, x_limit) x [0, y_limit)`` from the process-wide sampler."""
    return _sampler.cartesian(CartesianBounds(x_limit, y_limit), mutable=mutable)


def random_polar(
    angle_range: float, speed_min: float, speed_max: float, mutable: bool = False
) -> Vector2D | MutableVector2D:
    """Random polar vector ``(r, theta)`` from the process-wide sampler."""
    return _sampler.polar(PolarRange(angle_range, speed_min, speed_max), mutable=mutable)
