"""Seek: steer straight toward a target point."""

from __future__ import annotations

from steerecs.core.vector import BaseVector, Vector2D
from steerecs.core.vector import operations as vec
from steerecs.steering.base import BaseBehaviour
from steerecs.steering.protocol import DebugSurface, NotBoundError

TARGET_MARKER_RADIUS = 2.0


class SeekBehaviour(BaseBehaviour):
    """Unit vector toward the target minus the agent's current velocity.

    Subtracting the velocity both turns the agent toward the target and damps
    overshoot. The target can be replaced every tick (WanderingBehaviour and
    PursueBehaviour drive an inner seek this way).

    Args:
        target: Initial target. process() raises NotBoundError until one is set.
    """

    def __init__(self, target: BaseVector | None = None) -> None:
        super().__init__()
        self._target: Vector2D | None = None
        if target is not None:
            self.set_target(target)

    @property
    def target(self) -> Vector2D | None:
        return self._target

    def set_target(self, target: BaseVector) -> None:
        """Replace the target; stored as an immutable copy."""
        self._target = target.to_immutable()

    def process(self) -> Vector2D:
        position, velocity = self._read_state()
        if self._target is None:
            raise NotBoundError("SeekBehaviour has no target")

        desired = vec.normalise(vec.subtract(self._target, position))
        return vec.subtract(desired, velocity).to_immutable()

    def debug_draw(self, surface: DebugSurface) -> None:
        if self._target is not None:
            surface.draw_circle(self._target, TARGET_MARKER_RADIUS, "red")
