"""Supabase-backed user repository."""

from collections.abc import Collection
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import store_errors
from photo_share.domain.models import UserRecord
from photo_share.services.users import UserRepository

_PROFILE_COLUMNS = "id, first_name, last_name, location, description, occupation"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def list_users(self) -> list[UserRecord]:
        """Return all users in store order."""
        with store_errors("list users"):
            response = (
                self.client.table("users")
                .select("id, first_name, last_name")
                .execute()
            )
            return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        with store_errors("fetch user"):
            response = (
                self.client.table("users")
                .select(_PROFILE_COLUMNS)
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
            if response.data:
                return _parse_user(response.data[0])
        return None

    def list_users_by_ids(self, user_ids: Collection[UUID]) -> list[UserRecord]:
        """Return the users whose id is in user_ids."""
        with store_errors("fetch commenters"):
            response = (
                self.client.table("users")
                .select("id, first_name, last_name")
                .in_("id", [str(user_id) for user_id in user_ids])
                .execute()
            )
            return [_parse_user(row) for row in response.data or []]

    def count_users(self) -> int:
        """Return the number of stored users."""
        with store_errors("count users"):
            response = (
                self.client.table("users").select("id", count="exact").execute()
            )
        return response.count or 0


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        location=row.get("location"),
        description=row.get("description"),
        occupation=row.get("occupation"),
    )
