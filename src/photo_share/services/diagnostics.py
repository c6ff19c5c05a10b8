"""Schema and collection diagnostics."""

import asyncio
from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.errors import MissingRecordError
from photo_share.domain.models import CollectionCounts, SchemaInfoRecord
from photo_share.services.gallery import PhotoRepository
from photo_share.services.users import UserRepository


class SchemaInfoRepository(Protocol):
    """Persistence interface for the schema info singleton."""

    def list_schema_info(self) -> list[SchemaInfoRecord]:
        """Return all schema info records."""

    def count_schema_info(self) -> int:
        """Return the number of schema info records."""


@dataclass
class DiagnosticsService:
    """Service reporting schema metadata and collection sizes."""

    schema_info_repository: SchemaInfoRepository
    user_repository: UserRepository
    photo_repository: PhotoRepository

    async def get_schema_info(self) -> SchemaInfoRecord:
        """Return the schema info singleton."""
        records = await asyncio.to_thread(
            self.schema_info_repository.list_schema_info
        )
        if not records:
            raise MissingRecordError("Missing SchemaInfo")
        return records[0]

    async def get_counts(self) -> CollectionCounts:
        """Count every collection concurrently; any failure aborts the report."""
        user_count, photo_count, schema_info_count = await asyncio.gather(
            asyncio.to_thread(self.user_repository.count_users),
            asyncio.to_thread(self.photo_repository.count_photos),
            asyncio.to_thread(self.schema_info_repository.count_schema_info),
        )
        return CollectionCounts(
            user=user_count,
            photo=photo_count,
            schema_info=schema_info_count,
        )
