"""Bounded in-memory history store."""

from __future__ import annotations

from collections import deque
from typing import Any

from steerecs.tracing.models import TickRecord


class InMemoryHistoryStore:
    """Keeps the most recent ``max_ticks`` records in memory.

    Args:
        max_ticks: Capacity; recording beyond it evicts the oldest record.

    Raises:
        ValueError: If ``max_ticks`` is less than 1.
    """

    def __init__(self, max_ticks: int = 1000) -> None:
        if max_ticks < 1:
            raise ValueError(f"max_ticks must be at least 1, got {max_ticks}")
        self._records: deque[TickRecord] = deque(maxlen=max_ticks)
        self._by_tick: dict[int, TickRecord] = {}

    def record_tick(self, record: TickRecord) -> None:
        if len(self._records) == self._records.maxlen:
            evicted = self._records[0]
            if self._by_tick.get(evicted.tick) is evicted:
                del self._by_tick[evicted.tick]
        self._records.append(record)
        self._by_tick[record.tick] = record

    def get_tick(self, tick: int) -> TickRecord | None:
        return self._by_tick.get(tick)

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        record = self._by_tick.get(tick)
        return record.snapshot if record is not None else None

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        events: list[dict[str, Any]] = []
        for record in self._records:
            if start_tick <= record.tick <= end_tick:
                events.extend(record.events)
        return events

    def get_tick_range(self) -> tuple[int, int] | None:
        if not self._records:
            return None
        ticks = [record.tick for record in self._records]
        return min(ticks), max(ticks)

    def clear(self) -> None:
        self._records.clear()
        self._by_tick.clear()

    @property
    def tick_count(self) -> int:
        return len(self._records)
