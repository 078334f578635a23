"""Supabase-backed location repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from error_reports.adapters.supabase_query import execute
from error_reports.domain.models import Location
from error_reports.services.error_reports import LocationRepository

LOCATION_COLUMNS = "id, organization_id, name, organizations(name)"


@dataclass
class SupabaseLocationRepository(LocationRepository):
    """Supabase implementation for location lookups."""

    client: Client

    def get_location(self, location_id: UUID) -> Location | None:
        """Return the location with its organization name, if present."""
        rows = execute(
            self.client.table("locations")
            .select(LOCATION_COLUMNS)
            .eq("id", str(location_id))
            .limit(1),
            "load location",
        )
        if not rows:
            return None
        return parse_location(rows[0])


def parse_location(row: dict[str, object]) -> Location:
    """Build a Location from a row with an optional embedded organization."""
    organization = row.get("organizations")
    organization_name = (
        organization.get("name") if isinstance(organization, dict) else None
    )
    return Location(
        id=UUID(str(row["id"])),
        organization_id=UUID(str(row["organization_id"])),
        name=str(row.get("name") or ""),
        organization_name=organization_name,
    )
