"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from error_reports.adapters.supabase_query import execute
from error_reports.domain.models import Actor
from error_reports.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_by_token_hash(self, token_hash: str) -> Actor | None:
        """Return the user and their organization memberships."""
        rows = execute(
            self.client.table("users")
            .select("id, is_admin")
            .eq("api_token_hash", token_hash)
            .limit(1),
            "load user",
        )
        if not rows:
            return None
        row = rows[0]
        user_id = UUID(str(row["id"]))
        memberships = execute(
            self.client.table("organization_memberships")
            .select("organization_id")
            .eq("user_id", str(user_id)),
            "load organization memberships",
        )
        return Actor(
            id=user_id,
            organization_ids=frozenset(
                UUID(str(membership["organization_id"])) for membership in memberships
            ),
            is_admin=bool(row.get("is_admin", False)),
        )
