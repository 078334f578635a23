"""Supabase repository for audit events."""

from dataclasses import dataclass

from supabase import Client

from error_reports.adapters.supabase_query import execute
from error_reports.domain.errors import PersistenceError
from error_reports.domain.models import AuditRecord
from error_reports.services.audit import AuditRepository


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Supabase-backed audit repository."""

    client: Client

    def create_event(self, record: AuditRecord) -> None:
        """Insert an audit event row."""
        rows = execute(
            self.client.table("audit_events").insert(
                {
                    "user_id": str(record.actor_id),
                    "entity_type": record.entity_type,
                    "entity_id": str(record.entity_id),
                    "event_type": record.operation,
                    "before_json": record.before,
                    "after_json": record.after,
                    "created_at": record.created_at.isoformat(),
                }
            ),
            "record audit event",
        )
        if not rows:
            raise PersistenceError("Audit event was not stored")
