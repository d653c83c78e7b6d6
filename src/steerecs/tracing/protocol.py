"""Protocols for tracing infrastructure.

These protocols define the interface for history storage backends, so a World
can record into memory, a file, or a database without knowing which.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from steerecs.tracing.models import TickRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving tick history.

    Usage:
        store = InMemoryHistoryStore(max_ticks=500)
        world = World(history=store)
        world.tick()

        record = store.get_tick(1)
        events = store.get_events(start_tick=1, end_tick=10)
    """

    def record_tick(self, record: TickRecord) -> None:
        """Record a tick's state, forces and events.

        Note:
            Implementations may be bounded; the oldest records are evicted first.
        """
        ...

    def get_tick(self, tick: int) -> TickRecord | None:
        """Get the record for ``tick``, or None if not stored."""
        ...

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        """Get just the world snapshot for ``tick``, or None if not stored."""
        ...

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        """Get events in tick range (inclusive), flattened in tick order."""
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """Get (min_tick, max_tick) of stored history, or None if empty."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def tick_count(self) -> int:
        """Number of ticks currently stored."""
        ...
