"""The set of live entities and the queue of identifiers to reuse."""

from __future__ import annotations

from collections import deque

from .ecs_types import EntityID
from .identity import get_uuid
from .logger import core_logger


class EntityManager:
    """Tracks live entity identifiers."""

    def __init__(self) -> None:
        self._entities: set[EntityID] = set()
        self._reusable: deque[EntityID] = deque()

    def next_id(self) -> EntityID:
        """The oldest released identifier, or a fresh one."""
        if self._reusable:
            return self._reusable.popleft()
        return get_uuid()

    def add_entity(self, entity_id: EntityID) -> None:
        if entity_id in self._entities:
            core_logger().warning("Insert duplicated entity id %s", entity_id)
            return
        self._entities.add(entity_id)

    def remove_entity(self, entity_id: EntityID) -> None:
        self._entities.discard(entity_id)

    def release_for_reuse(self, entity_id: EntityID) -> None:
        """Remove the entity and queue its identifier for reuse."""
        self._entities.discard(entity_id)
        self._reusable.append(entity_id)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)