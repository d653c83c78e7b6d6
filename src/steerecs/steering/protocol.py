"""Protocols for steering behaviours and the collaborators they read from.

A behaviour is bound to exactly one agent and produces one steering force per
tick. The force is a velocity correction: the caller integrates it, the
behaviour never writes to the agent.

Usage:
    behaviour = SeekBehaviour(target=Vector2D(10, 0))
    behaviour.bind(world.agent(entity))
    force = behaviour.process()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from steerecs.core.vector import BaseVector, Vector2D


class NotBoundError(RuntimeError):
    """Raised when a behaviour runs without the agent or target it needs."""

    pass


@runtime_checkable
class Agent(Protocol):
    """Read-only view of an agent's kinematic state.

    Both accessors return a vector or a plain ``(x, y)`` pair; behaviours
    read either as a Vector2D.
    """

    def position(self) -> Vector2D | tuple[float, float]:
        """Current position."""
        ...

    def velocity(self) -> Vector2D | tuple[float, float]:
        """Current velocity."""
        ...


@runtime_checkable
class DebugSurface(Protocol):
    """Drawing target for behaviour debug overlays.

    Coordinates are world coordinates; colour names are advisory.
    """

    def draw_circle(self, center: BaseVector, radius: float, colour: str | None = None) -> None:
        """Outline a circle."""
        ...

    def draw_line(self, start: BaseVector, end: BaseVector, colour: str | None = None) -> None:
        """Draw a line segment."""
        ...


@runtime_checkable
class SteeringBehaviour(Protocol):
    """Capability set every steering behaviour provides.

    Implementations: SeekBehaviour, FleeBehaviour, WanderingBehaviour,
    ArriveBehaviour, PursueBehaviour.
    """

    def bind(self, agent: Agent) -> None:
        """Associate the behaviour with the agent it steers.

        Args:
            agent: Agent to read each tick. Rebinding replaces the previous one.
        """
        ...

    def process(self) -> Vector2D:
        """Compute this tick's steering force.

        Returns:
            Steering force for the bound agent.

        Raises:
            NotBoundError: If no agent (or required target) is set.
        """
        ...

    def debug_draw(self, surface: DebugSurface) -> None:
        """Render internal geometry onto ``surface``."""
        ...
