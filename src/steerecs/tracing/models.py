"""Data models for tracing infrastructure.

Records hold plain JSON-compatible data so any history backend can store them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class TickRecord:
    """Record of a single world tick.

    Attributes:
        tick: The tick number (first tick is 1).
        timestamp: Unix timestamp when the tick finished.
        snapshot: Agent state before forces were applied, as from World.snapshot().
        forces: Steering force per agent, keyed by ``str(EntityId)``, as [x, y].
        events: Events that occurred since the previous tick (spawn, destroy, skip).
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = TickRecord(
            tick=3,
            timestamp=1704067200.0,
            snapshot={"agents": {"1000v0": {"position": [0.0, 0.0]}}},
            forces={"1000v0": [1.0, 0.0]},
        )
    """

    tick: int
    timestamp: float
    snapshot: dict[str, Any]
    forces: dict[str, list[float]] = field(default_factory=dict)
    events: list[dict[str, Any]] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot,
            "forces": self.forces,
            "events": self.events,
        }
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            snapshot=data["snapshot"],
            forces=data.get("forces", {}),
            events=data.get("events", []),
            metadata=data.get("metadata"),
        )
