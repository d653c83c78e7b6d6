"""Binding bookkeeping shared by the concrete behaviours."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from steerecs.core.vector import Vector2D
from steerecs.steering.protocol import Agent, DebugSurface, NotBoundError


def as_vector(value: Iterable[float]) -> Vector2D:
    """Read an agent accessor result (a vector or an ``(x, y)`` pair) as a Vector2D."""
    x, y = value
    return Vector2D(x, y)


class BaseBehaviour(ABC):
    """Holds the bound agent and provides a no-op debug draw.

    The agent reference is a handle owned elsewhere (usually an AgentHandle
    from a World); the behaviour never keeps agent state of its own.
    Subclasses implement process().
    """

    def __init__(self) -> None:
        self._agent: Agent | None = None

    def bind(self, agent: Agent) -> None:
        self._agent = agent

    def unbind(self) -> None:
        self._agent = None

    @property
    def is_bound(self) -> bool:
        return self._agent is not None

    @property
    def agent(self) -> Agent:
        """The bound agent.

        Raises:
            NotBoundError: If bind() has not been called.
        """
        if self._agent is None:
            raise NotBoundError(f"{type(self).__name__} is not bound to an agent")
        return self._agent

    def _read_state(self) -> tuple[Vector2D, Vector2D]:
        """Position and velocity of the bound agent, as Vector2D.

        Raises:
            NotBoundError: If bind() has not been called.
        """
        agent = self.agent
        return as_vector(agent.position()), as_vector(agent.velocity())

    @abstractmethod
    def process(self) -> Vector2D:
        """Compute this tick's steering force."""

    def debug_draw(self, surface: DebugSurface) -> None:
        pass
