"""Flee: steer straight away from a fixed point."""

from __future__ import annotations

from steerecs.core.vector import BaseVector, Vector2D
from steerecs.core.vector import operations as vec
from steerecs.steering.base import BaseBehaviour


class FleeBehaviour(BaseBehaviour):
    """Mirror of seek: unit vector away from the target minus a velocity term.

    By default the velocity term is the behaviour's own ``current_velocity``,
    which starts at zero and is never synchronised with the agent, so the
    force is the bare unit vector away from the target.

    Args:
        target: Point to flee from, fixed for the behaviour's lifetime.
        use_agent_velocity: Damp with the agent's real velocity instead.
    """

    def __init__(self, target: BaseVector, use_agent_velocity: bool = False) -> None:
        super().__init__()
        self._target = target.to_immutable()
        self._use_agent_velocity = use_agent_velocity
        self.current_velocity = Vector2D()

    @property
    def target(self) -> Vector2D:
        return self._target

    def process(self) -> Vector2D:
        position, velocity = self._read_state()
        away = vec.normalise(vec.subtract(position, self._target))
        damping = velocity if self._use_agent_velocity else self.current_velocity
        return vec.subtract(away, damping).to_immutable()
