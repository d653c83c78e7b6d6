"""World: agent container that drives steering behaviours each tick.

Usage:
    world = World(WorldSettings(width=400, height=300, seed=1))

    # Spawn agents and attach behaviours
    hunter = world.spawn(Position(0, 0), Velocity(1, 0))
    world.attach(hunter, SeekBehaviour(target=Vector2D(100, 50)))
    world.attach(hunter, WanderingBehaviour(rng=world.rng), weight=0.5)

    # One steering step; integrating the forces is up to the caller
    forces = world.tick()
    world.place(hunter, new_position, new_velocity)
"""

from __future__ import annotations

import random
import time
import warnings
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from steerecs.config import WorldSettings
from steerecs.core.identity import EntityId
from steerecs.core.vector import (
    BaseVector,
    InvalidArgumentError,
    MutabilityViolationError,
    MutableVector2D,
    Vector2D,
    VectorSampler,
)
from steerecs.steering.protocol import DebugSurface, NotBoundError, SteeringBehaviour
from steerecs.tracing import HistoryStore, InMemoryHistoryStore, TickRecord
from steerecs.world.access import AgentHandle
from steerecs.world.components import Position, SteeringForce, Velocity
from steerecs.world.storage import AgentStorage

ComponentT = TypeVar("ComponentT")

# Failures confined to one agent's tick; on_error decides skip or fail.
RECOVERABLE_ERRORS = (NotBoundError, MutabilityViolationError, InvalidArgumentError)


@dataclass(slots=True)
class Attachment:
    """A behaviour attached to an agent with its blending weight."""

    behaviour: SteeringBehaviour
    weight: float = 1.0


class World:
    """Owns agents, their components and their attached behaviours.

    A tick asks every attached behaviour for its force, sums them per agent
    (weighted), and stores the result as the agent's SteeringForce. The world
    never moves agents itself.

    Args:
        settings: World bounds, seed and error policy. Defaults read the environment.
        storage: Component storage backend.
        history: Optional store that receives a TickRecord per tick.
    """

    def __init__(
        self,
        settings: WorldSettings | None = None,
        storage: AgentStorage | None = None,
        history: HistoryStore | None = None,
    ):
        self.settings = settings or WorldSettings()
        self._storage = storage or AgentStorage()
        self._history = history
        self._attachments: dict[EntityId, list[Attachment]] = {}
        self._events: list[dict[str, Any]] = []
        self.sampler = VectorSampler(seed=self.settings.seed)
        self.tick_count = 0

    @property
    def rng(self) -> random.Random:
        """The world's random source, for behaviours that should share its seed."""
        return self.sampler.rng

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    def record_history(self) -> HistoryStore:
        """Start recording ticks, into a new in-memory store if none is attached."""
        if self._history is None:
            self._history = InMemoryHistoryStore(max_ticks=self.settings.history_size)
        return self._history

    def spawn(self, *components: Any) -> EntityId:
        """Create an agent with components.

        A Position is folded into the world bounds when ``settings.wrap`` is set,
        the same as in place().
        """
        entity = self._storage.create_entity()
        seen_types: set[type] = set()
        for comp in components:
            comp_type = type(comp)
            if comp_type in seen_types:
                warnings.warn(
                    f"spawn() received multiple components of type {comp_type.__name__}. "
                    f"Only the last one will be kept.",
                    stacklevel=2,
                )
            seen_types.add(comp_type)
            if isinstance(comp, Position) and self.settings.wrap:
                comp = Position.from_vector(
                    comp.as_vector().wrapped(self.settings.width, self.settings.height)
                )
            self._storage.set_component(entity, comp)
        self._events.append({"type": "spawn", "entity": str(entity)})
        return entity

    def destroy(self, entity: EntityId) -> None:
        """Destroy an agent and drop its attachments.

        Behaviours that were bound to it keep a stale handle and raise
        NotBoundError if processed.
        """
        if self._storage.destroy_entity(entity):
            self._attachments.pop(entity, None)
            self._events.append({"type": "destroy", "entity": str(entity)})

    def is_alive(self, entity: EntityId) -> bool:
        return self._storage.entity_exists(entity)

    def entities(self) -> Iterator[EntityId]:
        """Iterate alive agents in spawn order."""
        return self._storage.all_entities()

    def agent(self, entity: EntityId) -> AgentHandle:
        """Get a handle to bind behaviours to.

        Raises:
            KeyError: If the agent does not exist.
        """
        if not self.is_alive(entity):
            raise KeyError(f"Entity {entity} does not exist")
        return AgentHandle(self, entity)

    def get_copy(
        self, entity: EntityId, component_type: type[ComponentT]
    ) -> ComponentT | None:
        """Get a component copy; changes must be written back with set()."""
        return self._storage.get_component(entity, component_type, copy=True)

    def set(self, entity: EntityId, component: Any) -> None:
        """Set a component on an agent."""
        self._storage.set_component(entity, component)

    def query_copies(self, *component_types: type) -> Iterator[tuple[Any, ...]]:
        """Query agents with all ``component_types``.

        Example:
            >>> for entity, pos, vel in world.query_copies(Position, Velocity):
            ...     pass
        """
        for entity, components in self._storage.query(*component_types, copy=True):
            yield (entity, *components)

    def _get_component(
        self, entity: EntityId, component_type: type[ComponentT]
    ) -> ComponentT | None:
        return self._storage.get_component(entity, component_type, copy=False)

    def place(
        self, entity: EntityId, position: BaseVector, velocity: BaseVector | None = None
    ) -> None:
        """Write an integrated position (and optionally velocity) back.

        The position is folded into the world bounds when ``settings.wrap`` is set.
        """
        if self.settings.wrap:
            position = position.wrapped(self.settings.width, self.settings.height)
        self._storage.set_component(entity, Position.from_vector(position))
        if velocity is not None:
            self._storage.set_component(entity, Velocity.from_vector(velocity))

    def attach(
        self, entity: EntityId, behaviour: SteeringBehaviour, weight: float = 1.0
    ) -> SteeringBehaviour:
        """Bind ``behaviour`` to the agent and run it on every tick.

        Returns:
            The behaviour, for chaining.

        Raises:
            KeyError: If the agent does not exist.
            ValueError: If ``behaviour`` is already attached to an agent.
        """
        owner = self._owner(behaviour)
        if owner is not None:
            raise ValueError(
                f"{type(behaviour).__name__} is already attached to agent {owner}; "
                f"detach it first or attach a separate instance"
            )
        behaviour.bind(self.agent(entity))
        self._attachments.setdefault(entity, []).append(Attachment(behaviour, weight))
        return behaviour

    def _owner(self, behaviour: SteeringBehaviour) -> EntityId | None:
        for entity, attachments in self._attachments.items():
            if any(a.behaviour is behaviour for a in attachments):
                return entity
        return None

    def detach(self, entity: EntityId, behaviour: SteeringBehaviour) -> bool:
        """Stop running ``behaviour`` for the agent; True if it was attached."""
        attachments = self._attachments.get(entity, [])
        for attachment in attachments:
            if attachment.behaviour is behaviour:
                attachments.remove(attachment)
                return True
        return False

    def behaviours(self, entity: EntityId) -> list[SteeringBehaviour]:
        return [a.behaviour for a in self._attachments.get(entity, [])]

    def _steer(self, entity: EntityId) -> Vector2D:
        total = MutableVector2D()
        for attachment in self._attachments.get(entity, []):
            total.add(attachment.behaviour.process(), attachment.weight)
        return total.to_immutable()

    def tick(self) -> dict[EntityId, Vector2D]:
        """Run every attached behaviour once.

        Behaviours of one agent run in attachment order. When one of them
        raises under ``on_error="skip"``, the ones before it have already
        advanced their own state (a wander jitter step, a pursue prediction)
        even though no force is stored for that agent on this tick.

        Returns:
            Summed steering force per agent that has behaviours.

        Raises:
            NotBoundError, MutabilityViolationError, InvalidArgumentError:
                From a behaviour, when ``settings.on_error`` is "fail".
        """
        self.tick_count += 1
        snapshot = self.snapshot() if self._history is not None else None
        forces: dict[EntityId, Vector2D] = {}

        for entity in list(self.entities()):
            if not self._attachments.get(entity):
                continue
            try:
                force = self._steer(entity)
            except RECOVERABLE_ERRORS as e:
                if self.settings.on_error == "fail":
                    raise
                warnings.warn(
                    f"Skipping agent {entity} on tick {self.tick_count}: {e}",
                    RuntimeWarning,
                    stacklevel=2,
                )
                self._events.append({"type": "skip", "entity": str(entity), "error": str(e)})
                continue
            forces[entity] = force
            self._storage.set_component(entity, SteeringForce(force.x, force.y))

        if self._history is not None and snapshot is not None:
            self._history.record_tick(
                TickRecord(
                    tick=self.tick_count,
                    timestamp=time.time(),
                    snapshot=snapshot,
                    forces={str(e): [f.x, f.y] for e, f in forces.items()},
                    events=self._events,
                )
            )
        self._events = []
        return forces

    def debug_draw(self, surface: DebugSurface) -> None:
        """Let every attached behaviour draw its overlay."""
        for attachments in self._attachments.values():
            for attachment in attachments:
                attachment.behaviour.debug_draw(surface)

    def snapshot(self) -> dict[str, Any]:
        """JSON-serializable agent state."""
        agents: dict[str, dict[str, list[float]]] = {}
        for entity in self.entities():
            state: dict[str, list[float]] = {}
            if (pos := self._get_component(entity, Position)) is not None:
                state["position"] = [pos.x, pos.y]
            if (vel := self._get_component(entity, Velocity)) is not None:
                state["velocity"] = [vel.dx, vel.dy]
            agents[str(entity)] = state
        return {"tick": self.tick_count, "agents": agents}
