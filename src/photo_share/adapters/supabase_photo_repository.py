"""Supabase-backed photo repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import require_timestamp, store_errors
from photo_share.domain.models import CommentRecord, PhotoRecord
from photo_share.services.gallery import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photos with embedded comments."""

    client: Client

    def list_photos_by_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return the photos owned by a user."""
        with store_errors("list photos"):
            response = (
                self.client.table("photos")
                .select("id, file_name, date_time, user_id, comments")
                .eq("user_id", str(user_id))
                .execute()
            )
            return [_parse_photo(row) for row in response.data or []]

    def count_photos(self) -> int:
        """Return the number of stored photos."""
        with store_errors("count photos"):
            response = (
                self.client.table("photos").select("id", count="exact").execute()
            )
        return response.count or 0


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    comments = row.get("comments") or []
    return PhotoRecord(
        id=UUID(str(row["id"])),
        file_name=str(row.get("file_name", "")),
        date_time=require_timestamp(row.get("date_time"), "photo date_time"),
        user_id=UUID(str(row["user_id"])),
        comments=[_parse_comment(item) for item in comments],
    )


def _parse_comment(item: dict[str, object]) -> CommentRecord:
    return CommentRecord(
        id=UUID(str(item["id"])),
        comment=str(item.get("comment", "")),
        date_time=require_timestamp(item.get("date_time"), "comment date_time"),
        user_id=UUID(str(item["user_id"])),
    )
