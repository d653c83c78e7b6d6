"""Agent components stored by the world.

Usage:
    entity = world.spawn(Position(10.0, 20.0), Velocity(1.0, 0.0))
"""

from __future__ import annotations

from dataclasses import dataclass

from steerecs.core.vector import BaseVector, Vector2D


@dataclass(slots=True)
class Position:
    x: float
    y: float

    @classmethod
    def from_vector(cls, v: BaseVector) -> Position:
        return cls(v.x, v.y)

    def as_vector(self) -> Vector2D:
        return Vector2D(self.x, self.y)


@dataclass(slots=True)
class Velocity:
    dx: float
    dy: float

    @classmethod
    def from_vector(cls, v: BaseVector) -> Velocity:
        return cls(v.x, v.y)

    def as_vector(self) -> Vector2D:
        return Vector2D(self.dx, self.dy)


@dataclass(slots=True)
class SteeringForce:
    """Summed steering force from the agent's behaviours on the last tick."""

    x: float
    y: float

    def as_vector(self) -> Vector2D:
        return Vector2D(self.x, self.y)
