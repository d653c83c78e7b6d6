"""Entity identity functionality: generation-checked agent ids."""

from steerecs.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
