"""Wander: smooth pseudo-random motion by seeking a drifting point.

Each tick a circle is projected ahead of the agent along its heading. A unit
jitter vector, rotated by a small random angle every tick, picks a point on
that circle; the agent seeks it. Because the jitter vector accumulates small
rotations instead of being redrawn, the path bends smoothly.

Usage:
    wander = WanderingBehaviour(WanderSettings(angle_jitter=10), rng=random.Random(3))
    wander.bind(world.agent(entity))
    force = wander.process()
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from steerecs.config import WanderSettings
from steerecs.core.vector import (
    BaseVector,
    MutableVector2D,
    PolarRange,
    Vector2D,
    VectorSampler,
    to_cartesian,
)
from steerecs.core.vector import operations as vec
from steerecs.steering.base import BaseBehaviour
from steerecs.steering.protocol import Agent, DebugSurface
from steerecs.steering.seek import SeekBehaviour

SEEK_POINT_RADIUS = 2.0


@dataclass(slots=True)
class WanderState:
    """Per-instance working vectors carried from one tick to the next.

    Attributes:
        jitter: Unit direction of the seek point on the wander circle.
        circle_center: Center of the wander circle from the last tick.
        seek_target: Point handed to the inner seek on the last tick.
    """

    jitter: MutableVector2D
    circle_center: Vector2D | None = None
    seek_target: Vector2D | None = None


class WanderingBehaviour(BaseBehaviour):
    """Stateful wander built on an inner SeekBehaviour.

    Ticks of one instance must run in order: the jitter vector is a random
    walk over the instance's history.

    Args:
        settings: Wander circle radius, distance and angle jitter.
        rng: Random source for the jitter. Takes precedence over ``seed``.
        seed: Seed for a private random source when ``rng`` is not given.
        jitter: Initial jitter direction. Defaults to a random unit vector.
    """

    def __init__(
        self,
        settings: WanderSettings | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        jitter: BaseVector | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or WanderSettings()
        self._sampler = VectorSampler(rng=rng, seed=seed)
        if jitter is None:
            polar = self._sampler.polar(PolarRange(2 * math.pi, 1.0, 1.0), mutable=True)
            jitter = to_cartesian(polar)
        self.state = WanderState(jitter=jitter.to_mutable())
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
        position, velocity = self._read_state()
        state = self.state

        # Offset from the agent to the circle center, along the heading
        to_center = velocity.to_mutable()
        to_center.normalise()
        to_center.multiply(self.settings.distance * 2)
        state.circle_center = vec.add(position, to_center).to_immutable()

        jitter_degrees = self._sampler.uniform(-1.0, 1.0) * self.settings.angle_jitter
        state.jitter.normalise()
        state.jitter.rotate(math.radians(jitter_degrees))

        # jitter is a unit vector relative to the circle center
        state.seek_target = vec.add_scaled(
            state.circle_center, state.jitter, self.settings.radius
        ).to_immutable()

        self._seek.set_target(state.seek_target)
        return self._seek.process()

    def debug_draw(self, surface: DebugSurface) -> None:
        if self.state.circle_center is None or self.state.seek_target is None:
            return
        surface.draw_circle(self.state.circle_center, self.settings.radius)
        surface.draw_circle(self.state.seek_target, SEEK_POINT_RADIUS, "green")
        self._seek.debug_draw(surface)
