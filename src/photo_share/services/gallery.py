"""Photo gallery assembly: photos of a user joined with comment authors."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from photo_share.domain.errors import MissingRecordError, NotFoundError
from photo_share.domain.models import PhotoRecord, UserRecord, parse_record_id
from photo_share.services.users import UserRepository

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos and their embedded comments."""

    def list_photos_by_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return the photos owned by a user, in store order."""

    def count_photos(self) -> int:
        """Return the number of stored photos."""


@dataclass(frozen=True)
class Gallery:
    """Photos of one user plus the users who commented on them."""

    photos: list[PhotoRecord]
    commenters: dict[UUID, UserRecord] = field(default_factory=dict)

    def author_of(self, user_id: UUID) -> UserRecord | None:
        """Return the commenter with the given id, if it was resolved."""
        return self.commenters.get(user_id)


@dataclass
class GalleryService:
    """Service that builds a user's gallery in two store round trips."""

    photo_repository: PhotoRepository
    user_repository: UserRepository

    async def get_gallery(self, raw_user_id: str) -> Gallery:
        """Return the photos of a user with their comment authors resolved."""
        user_id = parse_record_id(raw_user_id)
        photos = await asyncio.to_thread(
            self.photo_repository.list_photos_by_user, user_id
        )
        if not photos:
            raise NotFoundError("Photos not found")

        commenter_ids = collect_commenter_ids(photos)
        if not commenter_ids:
            return Gallery(photos=photos)

        users = await asyncio.to_thread(
            self.user_repository.list_users_by_ids, commenter_ids
        )
        if not users:
            raise MissingRecordError("Missing commenter records")
        commenters = {user.id: user for user in users}
        unresolved = [uid for uid in commenter_ids if uid not in commenters]
        if unresolved:
            logger.warning(
                "Comment authors not found",
                extra={"user_ids": [str(uid) for uid in unresolved]},
            )
        return Gallery(photos=photos, commenters=commenters)


def collect_commenter_ids(photos: list[PhotoRecord]) -> list[UUID]:
    """Return distinct comment author ids in first-seen order."""
    seen: dict[UUID, None] = {}
    for photo in photos:
        for comment in photo.comments:
            seen.setdefault(comment.user_id, None)
    return list(seen)
