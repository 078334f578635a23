"""Audit logging service."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from error_reports.domain.models import Actor, AuditRecord


class AuditRepository(Protocol):
    """Append-only persistence interface for audit records."""

    def create_event(self, record: AuditRecord) -> None:
        """Persist an audit record, raising PersistenceError on rejection."""


@dataclass
class AuditService:
    """Service for recording audit events."""

    repository: AuditRepository

    def record(self, record: AuditRecord) -> None:
        """Append an audit record."""
        self.repository.create_event(record)

    def record_event(  # noqa: PLR0913
        self,
        actor: Actor,
        entity_type: str,
        entity_id: UUID,
        operation: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> AuditRecord:
        """Build, persist and return an audit record for a mutation."""
        record = AuditRecord(
            actor_id=actor.id,
            entity_type=entity_type,
            entity_id=entity_id,
            operation=operation,
            before=before,
            after=after,
            created_at=datetime.now(tz=UTC),
        )
        self.record(record)
        return record
