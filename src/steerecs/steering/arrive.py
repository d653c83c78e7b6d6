"""Arrive: seek that slows down inside a radius around the target."""

from __future__ import annotations

from steerecs.core.vector import BaseVector, InvalidArgumentError, Vector2D
from steerecs.core.vector import operations as vec
from steerecs.steering.base import BaseBehaviour
from steerecs.steering.protocol import DebugSurface


class ArriveBehaviour(BaseBehaviour):
    """Desired velocity toward the target, scaled down near it, minus velocity.

    Outside ``slowing_radius`` the desired speed is ``max_speed``; inside it
    falls linearly to zero at the target.

    Args:
        target: Point to arrive at.
        slowing_radius: Distance at which deceleration starts. Must be positive.
        max_speed: Desired speed outside the slowing radius.

    Raises:
        InvalidArgumentError: If ``slowing_radius`` is not positive.
    """

    def __init__(
        self, target: BaseVector, slowing_radius: float = 50.0, max_speed: float = 1.0
    ) -> None:
        super().__init__()
        if slowing_radius <= 0:
            raise InvalidArgumentError(f"slowing_radius must be positive, got {slowing_radius}")
        self._target = target.to_immutable()
        self.slowing_radius = slowing_radius
        self.max_speed = max_speed

    @property
    def target(self) -> Vector2D:
        return self._target

    def set_target(self, target: BaseVector) -> None:
        self._target = target.to_immutable()

    def process(self) -> Vector2D:
        position, velocity = self._read_state()
        remaining = position.distance(self._target)

        desired = position.direction_to(self._target)
        desired.multiply(self.max_speed * min(1.0, remaining / self.slowing_radius))
        return vec.subtract(desired, velocity).to_immutable()

    def debug_draw(self, surface: DebugSurface) -> None:
        surface.draw_circle(self._target, self.slowing_radius, "yellow")
