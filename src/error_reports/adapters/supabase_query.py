"""Helpers shared by the Supabase repositories."""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from error_reports.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


def execute(query: Any, description: str) -> list[dict[str, Any]]:
    """Execute a PostgREST query and return its rows.

    API errors and transport failures are raised as PersistenceError so callers
    see one error type for every rejected or unreachable read or write.
    """
    try:
        response = query.execute()
    except APIError as exc:
        raise PersistenceError(f"Failed to {description}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        logger.warning(
            "Supabase request failed",
            extra={"action": description, "error": str(exc)},
        )
        raise PersistenceError(f"Failed to {description}: {exc}") from exc
    return response.data or []
