"""Domain models for error reports."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar
from uuid import UUID


@dataclass(frozen=True)
class Actor:
    """Authenticated user a mutation is attributed to."""

    id: UUID
    organization_ids: frozenset[UUID] = field(default_factory=frozenset)
    is_admin: bool = False

    def belongs_to(self, organization_id: UUID) -> bool:
        """Return true when the actor is a member of the organization."""
        return organization_id in self.organization_ids


@dataclass(frozen=True)
class Location:
    """A location owned by an organization."""

    id: UUID
    organization_id: UUID
    name: str
    organization_name: str | None = None


@dataclass(frozen=True)
class ErrorReport:
    """An operational incident reported against a location."""

    entity_type: ClassVar[str] = "error_report"

    id: UUID
    location_id: UUID
    content: str
    services: list[str]
    created_at: datetime
    posted_by: str
    contact_info: str | None = None
    hidden: bool = False
    location: Location | None = None

    def audit_snapshot(self) -> dict[str, object]:
        """Return the persisted fields in a JSON-friendly form."""
        return {
            "id": str(self.id),
            "location_id": str(self.location_id),
            "content": self.content,
            "services": list(self.services),
            "created_at": self.created_at.isoformat(),
            "posted_by": self.posted_by,
            "contact_info": self.contact_info,
            "hidden": self.hidden,
        }

    def public_view(self) -> dict[str, object]:
        """Return the attributes exposed to unauthenticated readers."""
        return {
            "id": str(self.id),
            "content": self.content,
            "services": list(self.services),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class AuditRecord:
    """Immutable record of one attributed mutation."""

    actor_id: UUID
    entity_type: str
    entity_id: UUID
    operation: str
    before: dict[str, object] | None
    after: dict[str, object] | None
    created_at: datetime


@dataclass(frozen=True)
class NewErrorReportNotice:
    """Details sent to the chat channel when a report is posted."""

    location: Location
    services: list[str]
    content: str
    posted_by: str
    contact_info: str | None = None
