"""Supabase-backed error report repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from error_reports.adapters.supabase_location_repository import (
    LOCATION_COLUMNS,
    parse_location,
)
from error_reports.adapters.supabase_query import execute
from error_reports.domain.errors import NotFoundError, PersistenceError
from error_reports.domain.models import ErrorReport
from error_reports.services.error_reports import ErrorReportRepository

REPORT_COLUMNS = (
    "id, location_id, content, services, created_at, posted_by, contact_info, hidden"
)


@dataclass
class SupabaseErrorReportRepository(ErrorReportRepository):
    """Supabase implementation for error report persistence."""

    client: Client

    def list_for_location(self, location_id: UUID) -> list[ErrorReport]:
        """Return visible reports for a location, newest first."""
        rows = execute(
            self.client.table("error_reports")
            .select(REPORT_COLUMNS)
            .eq("location_id", str(location_id))
            .eq("hidden", False)
            .order("created_at", desc=True),
            "list error reports",
        )
        return [_parse_report(row) for row in rows]

    def get_report(self, report_id: UUID) -> ErrorReport | None:
        """Return a report with its location embedded, if present."""
        rows = execute(
            self.client.table("error_reports")
            .select(f"{REPORT_COLUMNS}, locations({LOCATION_COLUMNS})")
            .eq("id", str(report_id))
            .limit(1),
            "load error report",
        )
        if not rows:
            return None
        return _parse_report(rows[0])

    def create_report(
        self, location_id: UUID, payload: dict[str, object]
    ) -> ErrorReport:
        """Insert a report row under a location."""
        rows = execute(
            self.client.table("error_reports").insert(
                {**payload, "location_id": str(location_id)}
            ),
            "create error report",
        )
        if not rows:
            raise PersistenceError("Failed to create error report in Supabase")
        return _parse_report(rows[0])

    def update_report(
        self, report_id: UUID, changes: dict[str, object]
    ) -> ErrorReport:
        """Update the given columns and return the stored row."""
        rows = execute(
            self.client.table("error_reports")
            .update(changes)
            .eq("id", str(report_id)),
            "update error report",
        )
        if not rows:
            raise NotFoundError(f"Error report {report_id} no longer exists")
        return _parse_report(rows[0])

    def delete_report(self, report_id: UUID) -> None:
        """Delete a report row, raising NotFoundError when it is already gone."""
        rows = execute(
            self.client.table("error_reports").delete().eq("id", str(report_id)),
            "delete error report",
        )
        if not rows:
            raise NotFoundError(f"Error report {report_id} no longer exists")


def _parse_report(row: dict[str, object]) -> ErrorReport:
    location_row = row.get("locations")
    return ErrorReport(
        id=UUID(str(row["id"])),
        location_id=UUID(str(row["location_id"])),
        content=str(row.get("content") or ""),
        services=list(row.get("services") or []),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        posted_by=str(row.get("posted_by") or ""),
        contact_info=row.get("contact_info"),
        hidden=bool(row.get("hidden", False)),
        location=parse_location(location_row)
        if isinstance(location_row, dict)
        else None,
    )
