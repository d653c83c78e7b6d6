"""Protocol conformance for behaviours and collaborators.

Critical Invariants:
- Every behaviour satisfies SteeringBehaviour
- Agents may return vectors or plain (x, y) tuples
"""

import math

import pytest

from steerecs import (
    Agent,
    ArriveBehaviour,
    BaseBehaviour,
    DebugSurface,
    FleeBehaviour,
    PursueBehaviour,
    SeekBehaviour,
    SteeringBehaviour,
    Vector2D,
    WanderingBehaviour,
    WanderSettings,
)

EPS = 1e-9


@pytest.mark.parametrize(
    "build",
    [
        lambda quarry: SeekBehaviour(),
        lambda quarry: FleeBehaviour(Vector2D(1, 1)),
        lambda quarry: WanderingBehaviour(seed=0),
        lambda quarry: ArriveBehaviour(Vector2D(1, 1)),
        lambda quarry: PursueBehaviour(quarry),
    ],
    ids=["seek", "flee", "wander", "arrive", "pursue"],
)
def test_behaviours_satisfy_protocol(build, make_agent):
    behaviour = build(make_agent())
    assert isinstance(behaviour, SteeringBehaviour)
    assert not behaviour.is_bound


def test_collaborators_satisfy_protocols(make_agent, make_tuple_agent, surface):
    assert isinstance(make_agent(), Agent)
    assert isinstance(make_tuple_agent(), Agent)
    assert isinstance(surface, DebugSurface)


def test_base_behaviour_is_abstract():
    """A behaviour without process() fails at construction, not on its first tick."""

    class Incomplete(BaseBehaviour):
        pass

    with pytest.raises(TypeError):
        BaseBehaviour()
    with pytest.raises(TypeError):
        Incomplete()


@pytest.mark.parametrize(
    ("build", "expected"),
    [
        (lambda: SeekBehaviour(target=Vector2D(10.0, 0.0)), Vector2D(0.0, 0.0)),
        (lambda: FleeBehaviour(Vector2D(10.0, 0.0)), Vector2D(-1.0, 0.0)),
        (lambda: ArriveBehaviour(Vector2D(100.0, 0.0)), Vector2D(0.0, 0.0)),
    ],
    ids=["seek", "flee", "arrive"],
)
def test_tuple_agents_are_read_as_vectors(build, expected, make_tuple_agent):
    """Agent at (0, 0) moving (1, 0), reporting plain tuples."""
    behaviour = build()
    behaviour.bind(make_tuple_agent(0.0, 0.0, vx=1.0, vy=0.0))

    force = behaviour.process()

    assert isinstance(force, Vector2D)
    assert force.roughly_equals(expected, EPS)


def test_wander_reads_tuple_agent(make_agent, make_tuple_agent):
    """Tuples and vectors with the same values give the same wander force."""
    settings = WanderSettings(angle_jitter=0.0)
    from_tuples = WanderingBehaviour(settings, jitter=Vector2D(0.0, 1.0))
    from_vectors = WanderingBehaviour(settings, jitter=Vector2D(0.0, 1.0))
    from_tuples.bind(make_tuple_agent(0.0, 0.0, vx=1.0, vy=0.0))
    from_vectors.bind(make_agent(0.0, 0.0, vx=1.0, vy=0.0))

    assert from_tuples.process().roughly_equals(from_vectors.process(), EPS)
    assert from_tuples.state.circle_center.roughly_equals(Vector2D(50.0, 0.0), EPS)


def test_pursue_reads_tuple_quarry(make_agent, make_tuple_agent, surface):
    pursue = PursueBehaviour(make_tuple_agent(10.0, 0.0, vx=0.0, vy=5.0), look_ahead=2.0)
    pursue.bind(make_agent())

    force = pursue.process()
    pursue.debug_draw(surface)

    half = math.sqrt(0.5)
    assert pursue.predicted == Vector2D(10.0, 10.0)
    assert force.roughly_equals(Vector2D(half, half), EPS)
    assert surface.calls[0] == ("line", Vector2D(10.0, 0.0), Vector2D(10.0, 10.0), "orange")
