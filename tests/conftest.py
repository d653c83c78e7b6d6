"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from steerecs import Vector2D, World, WorldSettings

EPS = 1e-9


@pytest.fixture
def world():
    """Fresh seeded World instance that fails loudly on behaviour errors."""
    return World(WorldSettings(width=100.0, height=100.0, seed=1234, on_error="fail"))


@dataclass
class PointAgent:
    """Minimal Agent: a position and velocity the test controls directly."""

    pos: Vector2D = field(default_factory=Vector2D)
    vel: Vector2D = field(default_factory=Vector2D)

    def position(self) -> Vector2D:
        return self.pos

    def velocity(self) -> Vector2D:
        return self.vel


@dataclass
class RecordingSurface:
    """DebugSurface that records draw calls as tuples."""

    calls: list[tuple] = field(default_factory=list)

    def draw_circle(self, center, radius, colour=None) -> None:
        self.calls.append(("circle", Vector2D(center.x, center.y), radius, colour))

    def draw_line(self, start, end, colour=None) -> None:
        self.calls.append(("line", Vector2D(start.x, start.y), Vector2D(end.x, end.y), colour))


@pytest.fixture
def make_agent():
    def _make(x: float = 0.0, y: float = 0.0, vx: float = 0.0, vy: float = 0.0) -> PointAgent:
        return PointAgent(Vector2D(x, y), Vector2D(vx, vy))

    return _make


@pytest.fixture
def surface():
    return RecordingSurface()


@dataclass
class TupleAgent:
    """Agent whose accessors return plain ``(x, y)`` tuples."""

    pos: tuple[float, float] = (0.0, 0.0)
    vel: tuple[float, float] = (0.0, 0.0)

    def position(self) -> tuple[float, float]:
        return self.pos

    def velocity(self) -> tuple[float, float]:
        return self.vel


@pytest.fixture
def make_tuple_agent():
    def _make(x: float = 0.0, y: float = 0.0, vx: float = 0.0, vy: float = 0.0) -> TupleAgent:
        return TupleAgent((x, y), (vx, vy))

    return _make
