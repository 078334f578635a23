"""User authentication logic."""

import hashlib
from dataclasses import dataclass
from typing import Protocol

from error_reports.domain.models import Actor


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_token_hash(self, token_hash: str) -> Actor | None:
        """Return the user holding the API token hash, if present."""


@dataclass
class UserService:
    """Application service resolving API tokens to actors."""

    repository: UserRepository

    def authenticate(self, token: str) -> Actor | None:
        """Return the actor for a bearer token, if the token is known."""
        cleaned = token.strip()
        if not cleaned:
            return None
        return self.repository.get_by_token_hash(hash_token(cleaned))


def hash_token(token: str) -> str:
    """Return the stored form of an API token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
