"""Pursue: seek the point a moving agent is heading for."""

from __future__ import annotations

from steerecs.core.vector import Vector2D
from steerecs.core.vector import operations as vec
from steerecs.steering.base import BaseBehaviour, as_vector
from steerecs.steering.protocol import Agent, DebugSurface, NotBoundError
from steerecs.steering.seek import SeekBehaviour


class PursueBehaviour(BaseBehaviour):
    """Seeks ``quarry.position + quarry.velocity * look_ahead``.

    The quarry is read through the same Agent protocol as the pursuer, so it
    can be another world handle.

    Args:
        quarry: Agent being pursued.
        look_ahead: Ticks of quarry motion to anticipate.
    """

    def __init__(self, quarry: Agent, look_ahead: float = 1.0) -> None:
        super().__init__()
        self.quarry = quarry
        self.look_ahead = look_ahead
        self.predicted: Vector2D | None = None
        self._seek = SeekBehaviour()

    @property
    def seek(self) -> SeekBehaviour:
        return self._seek

    def bind(self, agent: Agent) -> None:
        super().bind(agent)
        self._seek.bind(agent)

    def unbind(self) -> None:
        super().unbind()
        self._seek.unbind()

    def process(self) -> Vector2D:
        if not self.is_bound:
            raise NotBoundError("PursueBehaviour is not bound to an agent")
        self.predicted = vec.add_scaled(
            as_vector(self.quarry.position()), as_vector(self.quarry.velocity()), self.look_ahead
        ).to_immutable()
        self._seek.set_target(self.predicted)
        return self._seek.process()

    def debug_draw(self, surface: DebugSurface) -> None:
        if self.predicted is None:
            return
        surface.draw_line(as_vector(self.quarry.position()), self.predicted, "orange")
        self._seek.debug_draw(surface)
