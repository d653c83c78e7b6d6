"""Steering behaviours: per-tick force producers bound to one agent.

Usage:
    from steerecs.steering import SeekBehaviour, WanderingBehaviour

    seek = SeekBehaviour(target=Vector2D(10, 0))
    seek.bind(agent)
    force = seek.process()
"""

from steerecs.steering.arrive import ArriveBehaviour
from steerecs.steering.base import BaseBehaviour
from steerecs.steering.flee import FleeBehaviour
from steerecs.steering.protocol import Agent, DebugSurface, NotBoundError, SteeringBehaviour
from steerecs.steering.pursue import PursueBehaviour
from steerecs.steering.seek import SeekBehaviour
from steerecs.steering.wander import WanderingBehaviour, WanderState

__all__ = [
    # Protocols
    "SteeringBehaviour",
    "Agent",
    "DebugSurface",
    "NotBoundError",
    # Behaviours
    "BaseBehaviour",
    "SeekBehaviour",
    "FleeBehaviour",
    "WanderingBehaviour",
    "WanderState",
    "ArriveBehaviour",
    "PursueBehaviour",
]
