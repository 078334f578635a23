"""Attributed create, update and delete operations.

Every mutation of a persisted entity goes through :class:`DataChangeService`.
Each call performs the entity write, then appends one audit record naming the
actor, and only then returns. The two writes are not transactional: when the
audit write fails the call raises even though the entity write already landed.

Callers are expected to have authenticated the actor and checked that it may
perform the mutation; this module does no authorization of its own.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Protocol, TypeVar
from uuid import UUID

from fastapi.concurrency import run_in_threadpool

from error_reports.domain.errors import InvalidArgumentError
from error_reports.domain.models import Actor
from error_reports.services.audit import AuditService

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"
DELETE = "delete"

_IMMUTABLE_FIELDS = frozenset({"id"})


class Auditable(Protocol):
    """An entity that can be described in an audit record."""

    entity_type: ClassVar[str]
    id: UUID

    def audit_snapshot(self) -> dict[str, object]:
        """Return the persisted fields of the entity."""


EntityT = TypeVar("EntityT", bound=Auditable)


class Creator(Protocol[EntityT]):
    """Creates one entity type under its parent."""

    def create(self, parent: object, payload: dict[str, object]) -> EntityT:
        """Persist a new entity under ``parent`` and return it."""


class EntityStore(Protocol[EntityT]):
    """Field updates and deletion for one entity type."""

    def update_fields(self, entity: EntityT, changes: dict[str, object]) -> EntityT:
        """Persist ``changes`` on ``entity`` and return the updated entity."""

    def delete(self, entity: EntityT) -> None:
        """Delete ``entity``."""


@dataclass
class DataChangeService:
    """The sanctioned path for mutating persisted entities."""

    audit_service: AuditService
    stores: dict[str, EntityStore] = field(default_factory=dict)

    def register_store(self, entity_type: str, store: EntityStore) -> None:
        """Register the store used to update and delete ``entity_type``."""
        self.stores[entity_type] = store

    async def create_instance(
        self,
        actor: Actor | None,
        creator: Creator[EntityT],
        parent: object,
        payload: Mapping[str, object],
    ) -> EntityT:
        """Create an entity through ``creator`` and record who created it."""
        resolved_actor = _require_actor(actor)
        if not callable(getattr(creator, "create", None)):
            raise InvalidArgumentError("Creator must provide a create method")
        if not isinstance(payload, Mapping):
            raise InvalidArgumentError("Creation payload must be a mapping")
        entity = await run_in_threadpool(creator.create, parent, dict(payload))
        await self._record(
            resolved_actor,
            entity,
            CREATE,
            before=None,
            after=entity.audit_snapshot(),
        )
        return entity

    async def update_instance(
        self,
        actor: Actor | None,
        entity: EntityT,
        changes: Mapping[str, object],
    ) -> EntityT:
        """Apply ``changes`` to ``entity`` and record the previous values."""
        resolved_actor = _require_actor(actor)
        store = self._store_for(entity)
        if not changes:
            raise InvalidArgumentError("No changes given for update")
        snapshot = entity.audit_snapshot()
        unknown = sorted(
            name
            for name in changes
            if name not in snapshot or name in _IMMUTABLE_FIELDS
        )
        if unknown:
            raise InvalidArgumentError(
                f"Cannot update fields {unknown} on {entity.entity_type}"
            )
        updated = await run_in_threadpool(store.update_fields, entity, dict(changes))
        updated_snapshot = updated.audit_snapshot()
        await self._record(
            resolved_actor,
            updated,
            UPDATE,
            before={name: snapshot[name] for name in changes},
            after={name: updated_snapshot[name] for name in changes},
        )
        return updated

    async def destroy_instance(self, actor: Actor | None, entity: Auditable) -> None:
        """Delete ``entity`` and record the state it had before deletion."""
        resolved_actor = _require_actor(actor)
        store = self._store_for(entity)
        snapshot = entity.audit_snapshot()
        await run_in_threadpool(store.delete, entity)
        await self._record(resolved_actor, entity, DELETE, before=snapshot, after=None)

    def _store_for(self, entity: Auditable) -> EntityStore:
        store = self.stores.get(entity.entity_type)
        if store is None:
            raise InvalidArgumentError(
                f"No store registered for entity type {entity.entity_type!r}"
            )
        return store

    async def _record(
        self,
        actor: Actor,
        entity: Auditable,
        operation: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        try:
            await run_in_threadpool(
                self.audit_service.record_event,
                actor,
                entity.entity_type,
                entity.id,
                operation,
                before,
                after,
            )
        except Exception:
            logger.error(
                "Audit write failed after %s of %s",
                operation,
                entity.entity_type,
                extra={"entity_id": str(entity.id), "actor_id": str(actor.id)},
            )
            raise
        logger.info(
            "Recorded %s of %s",
            operation,
            entity.entity_type,
            extra={"entity_id": str(entity.id), "actor_id": str(actor.id)},
        )


def _require_actor(actor: Actor | None) -> Actor:
    if actor is None:
        raise InvalidArgumentError("An actor is required to change data")
    return actor
