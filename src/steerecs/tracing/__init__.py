"""Tracing infrastructure for recording world execution.

Captures per-tick agent state, steering forces and world events for debugging
and analysis.

Usage:
    from steerecs.tracing import InMemoryHistoryStore

    history = InMemoryHistoryStore(max_ticks=200)
    world = World(history=history)
    world.tick()
    history.get_tick(1).forces
"""

from steerecs.tracing.memory import InMemoryHistoryStore
from steerecs.tracing.models import TickRecord
from steerecs.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
