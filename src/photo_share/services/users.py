"""User directory business logic."""

import asyncio
from collections.abc import Collection
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_share.domain.errors import NotFoundError
from photo_share.domain.models import UserRecord, parse_record_id


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in store order."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def list_users_by_ids(self, user_ids: Collection[UUID]) -> list[UserRecord]:
        """Return the users whose id is in user_ids, in one lookup."""

    def count_users(self) -> int:
        """Return the number of stored users."""


@dataclass
class UserService:
    """Application service for the user directory."""

    repository: UserRepository

    async def list_users(self) -> list[UserRecord]:
        """Return every user, failing when the directory is empty."""
        users = await asyncio.to_thread(self.repository.list_users)
        if not users:
            raise NotFoundError("Users not found")
        return users

    async def get_user(self, raw_user_id: str) -> UserRecord:
        """Return one user's profile by id."""
        user_id = parse_record_id(raw_user_id)
        user = await asyncio.to_thread(self.repository.get_user, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
