"""Translation of Supabase client failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

import httpx
from supabase import PostgrestAPIError

from photo_share.domain.errors import StoreError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise Supabase, transport and row parsing failures as StoreError."""
    try:
        yield
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise StoreError(f"Failed to {operation}", cause=exc) from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise StoreError(f"Failed to parse rows to {operation}", cause=exc) from exc


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO-8601 timestamp column."""
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def require_timestamp(raw: object, column: str) -> datetime:
    """Parse a timestamp column that must be present."""
    value = parse_timestamp(raw)
    if value is None:
        raise ValueError(f"Missing {column}")
    return value
