"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from photo_cloud.domain.models import UserRecord
from photo_cloud.errors import UsernameTakenError
from photo_cloud.services.auth import UserRepository

_USER_COLUMNS = "id, username, password_hash, created_at"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it.

        A concurrent registration of the same username trips the unique
        constraint and is reported as ``UsernameTakenError``.
        """
        try:
            response = (
                self.client.table("users")
                .insert({"username": username, "password_hash": password_hash})
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise UsernameTakenError() from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    created_raw = row.get("created_at")
    if not isinstance(created_raw, str) or not created_raw:
        raise ValueError(f"User row {row.get('id')} has no created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        password_hash=str(row.get("password_hash", "")),
        created_at=datetime.fromisoformat(created_raw),
    )
