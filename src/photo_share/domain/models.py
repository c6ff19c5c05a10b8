"""Domain models for the photo sharing API."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from photo_share.domain.errors import InvalidIdError


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    first_name: str
    last_name: str
    location: str | None = None
    description: str | None = None
    occupation: str | None = None


@dataclass(frozen=True)
class CommentRecord:
    """A comment embedded in its parent photo."""

    id: UUID
    comment: str
    date_time: datetime
    user_id: UUID


@dataclass(frozen=True)
class PhotoRecord:
    """A photo with its embedded comments, in store order."""

    id: UUID
    file_name: str
    date_time: datetime
    user_id: UUID
    comments: list[CommentRecord] = field(default_factory=list)


@dataclass(frozen=True)
class SchemaInfoRecord:
    """Singleton record describing the loaded dataset."""

    id: UUID
    version: str
    load_date_time: datetime | None


@dataclass(frozen=True)
class CollectionCounts:
    """Record counts per collection."""

    user: int
    photo: int
    schema_info: int


def parse_record_id(raw: str) -> UUID:
    """Parse a record identifier, raising InvalidIdError when malformed."""
    try:
        return UUID(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidIdError(raw) from exc
