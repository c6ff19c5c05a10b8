"""Supabase-backed schema info repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import parse_timestamp, store_errors
from photo_share.domain.models import SchemaInfoRecord
from photo_share.services.diagnostics import SchemaInfoRepository


@dataclass
class SupabaseSchemaInfoRepository(SchemaInfoRepository):
    """Supabase implementation for the schema info singleton."""

    client: Client

    def list_schema_info(self) -> list[SchemaInfoRecord]:
        """Return all schema info rows."""
        with store_errors("fetch schema info"):
            response = (
                self.client.table("schema_info")
                .select("id, version, load_date_time")
                .execute()
            )
            return [
                SchemaInfoRecord(
                    id=UUID(str(row["id"])),
                    version=str(row.get("version", "")),
                    load_date_time=parse_timestamp(row.get("load_date_time")),
                )
                for row in response.data or []
            ]

    def count_schema_info(self) -> int:
        """Return the number of schema info rows."""
        with store_errors("count schema info"):
            response = (
                self.client.table("schema_info")
                .select("id", count="exact")
                .execute()
            )
        return response.count or 0
