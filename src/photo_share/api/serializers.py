"""Pure mapping functions from domain records to response payloads."""

from datetime import datetime

from photo_share.domain.models import (
    CollectionCounts,
    CommentRecord,
    PhotoRecord,
    SchemaInfoRecord,
    UserRecord,
)
from photo_share.services.gallery import Gallery


def format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_user_summary(user: UserRecord) -> dict[str, object]:
    """Project a user to the fields shown in lists and comment bylines."""
    return {
        "id": str(user.id),
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def serialize_user_profile(user: UserRecord) -> dict[str, object]:
    """Return the full profile of a user."""
    return {
        "id": str(user.id),
        "first_name": user.first_name,
        "last_name": user.last_name,
        "location": user.location,
        "description": user.description,
        "occupation": user.occupation,
    }


def serialize_comment(
    comment: CommentRecord, author: UserRecord | None
) -> dict[str, object]:
    """Return a comment with its author; the author is omitted when unresolved."""
    payload: dict[str, object] = {
        "id": str(comment.id),
        "comment": comment.comment,
        "date_time": format_timestamp(comment.date_time),
    }
    if author is not None:
        payload["user"] = serialize_user_summary(author)
    return payload


def serialize_photo(photo: PhotoRecord, gallery: Gallery) -> dict[str, object]:
    return {
        "id": str(photo.id),
        "file_name": photo.file_name,
        "date_time": format_timestamp(photo.date_time),
        "user_id": str(photo.user_id),
        "comments": [
            serialize_comment(comment, gallery.author_of(comment.user_id))
            for comment in photo.comments
        ],
    }


def serialize_gallery(gallery: Gallery) -> list[dict[str, object]]:
    """Return every photo of a gallery in store order."""
    return [serialize_photo(photo, gallery) for photo in gallery.photos]


def serialize_schema_info(info: SchemaInfoRecord) -> dict[str, object]:
    return {
        "id": str(info.id),
        "version": info.version,
        "load_date_time": format_timestamp(info.load_date_time),
    }


def serialize_counts(counts: CollectionCounts) -> dict[str, int]:
    return {
        "user": counts.user,
        "photo": counts.photo,
        "schemaInfo": counts.schema_info,
    }
