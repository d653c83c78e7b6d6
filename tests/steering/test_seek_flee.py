"""Tests for seek and flee.

Why these tests exist:
- Seek and flee are mirror images; both return unit direction minus damping
- Flee's damping term is the behaviour's own zero velocity unless opted in
"""

import pytest

from steerecs import FleeBehaviour, MutableVector2D, NotBoundError, SeekBehaviour, Vector2D

EPS = 1e-9


def test_seek_toward_target_from_rest(make_agent):
    """Agent at origin at rest, target (10, 0): force is the unit vector (1, 0)."""
    seek = SeekBehaviour(target=Vector2D(10.0, 0.0))
    seek.bind(make_agent(0.0, 0.0))

    assert seek.process().roughly_equals(Vector2D(1.0, 0.0), EPS)


def test_seek_subtracts_current_velocity(make_agent):
    seek = SeekBehaviour(target=Vector2D(0.0, 10.0))
    seek.bind(make_agent(0.0, 0.0, vx=0.5, vy=0.5))

    assert seek.process().roughly_equals(Vector2D(-0.5, 0.5), EPS)


def test_seek_returns_immutable_and_leaves_agent_alone(make_agent):
    agent = make_agent(1.0, 2.0, vx=0.1, vy=0.0)
    seek = SeekBehaviour(target=Vector2D(5.0, 5.0))
    seek.bind(agent)

    force = seek.process()

    assert isinstance(force, Vector2D)
    assert agent.position() == Vector2D(1.0, 2.0)
    assert agent.velocity() == Vector2D(0.1, 0.0)


def test_seek_target_is_copied(make_agent):
    """Mutating the vector passed to set_target must not move the target."""
    target = MutableVector2D(10.0, 0.0)
    seek = SeekBehaviour()
    seek.set_target(target)
    target.set(-10.0, 0.0)

    assert seek.target == Vector2D(10.0, 0.0)


def test_seek_retargeting(make_agent):
    seek = SeekBehaviour(target=Vector2D(10.0, 0.0))
    seek.bind(make_agent())
    seek.set_target(Vector2D(-3.0, 0.0))

    assert seek.process().roughly_equals(Vector2D(-1.0, 0.0), EPS)


def test_seek_without_agent_raises():
    with pytest.raises(NotBoundError, match="not bound"):
        SeekBehaviour(target=Vector2D(1.0, 1.0)).process()


def test_seek_without_target_raises(make_agent):
    seek = SeekBehaviour()
    seek.bind(make_agent())
    with pytest.raises(NotBoundError, match="no target"):
        seek.process()


def test_seek_rebind_replaces_agent(make_agent):
    seek = SeekBehaviour(target=Vector2D(0.0, 0.0))
    seek.bind(make_agent(-5.0, 0.0))
    seek.bind(make_agent(5.0, 0.0))

    assert seek.process().roughly_equals(Vector2D(-1.0, 0.0), EPS)


def test_seek_debug_draw_marks_target(surface):
    seek = SeekBehaviour()
    seek.debug_draw(surface)
    assert surface.calls == []

    seek.set_target(Vector2D(3.0, 4.0))
    seek.debug_draw(surface)
    assert surface.calls == [("circle", Vector2D(3.0, 4.0), 2.0, "red")]


def test_flee_away_from_target(make_agent):
    """Agent at origin, target (10, 0): force is (-1, 0)."""
    flee = FleeBehaviour(Vector2D(10.0, 0.0))
    flee.bind(make_agent(0.0, 0.0))

    assert flee.process().roughly_equals(Vector2D(-1.0, 0.0), EPS)


def test_flee_ignores_agent_velocity_by_default(make_agent):
    """The damping term is the behaviour's own velocity, which stays zero."""
    flee = FleeBehaviour(Vector2D(10.0, 0.0))
    flee.bind(make_agent(0.0, 0.0, vx=0.5, vy=0.0))

    assert flee.current_velocity == Vector2D(0.0, 0.0)
    assert flee.process().roughly_equals(Vector2D(-1.0, 0.0), EPS)


def test_flee_can_damp_with_agent_velocity(make_agent):
    flee = FleeBehaviour(Vector2D(10.0, 0.0), use_agent_velocity=True)
    flee.bind(make_agent(0.0, 0.0, vx=0.5, vy=0.0))

    assert flee.process().roughly_equals(Vector2D(-1.5, 0.0), EPS)


def test_flee_at_target_gives_zero_direction(make_agent):
    """Standing on the target: normalising the zero vector is a no-op, not an error."""
    flee = FleeBehaviour(Vector2D(3.0, 3.0))
    flee.bind(make_agent(3.0, 3.0))

    assert flee.process() == Vector2D(0.0, 0.0)


def test_flee_without_agent_raises():
    with pytest.raises(NotBoundError):
        FleeBehaviour(Vector2D(1.0, 1.0)).process()


def test_flee_debug_draw_is_noop(surface, make_agent):
    flee = FleeBehaviour(Vector2D(1.0, 1.0))
    flee.bind(make_agent())
    flee.debug_draw(surface)
    assert surface.calls == []
