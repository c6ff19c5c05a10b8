"""Diagnostics endpoints for checking store connectivity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from photo_share.api.serializers import serialize_counts, serialize_schema_info
from photo_share.domain.errors import UnknownParameterError

if TYPE_CHECKING:
    from photo_share.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/test", tags=["diagnostics"])

DEFAULT_MODE = "info"


@router.get("")
async def default_report(request: Request) -> dict[str, object]:
    """Return the schema info record."""
    return await _report(request, DEFAULT_MODE)


@router.get("/{mode}")
async def report(mode: str, request: Request) -> dict[str, object]:
    """Return schema info (`info`) or per-collection record counts (`counts`)."""
    return await _report(request, mode)


async def _report(request: Request, mode: str) -> dict[str, object]:
    logger.info("/test called with mode = %s", mode)
    container: AppContainer = request.app.state.container
    service = container.diagnostics_service
    if mode == "info":
        return serialize_schema_info(await service.get_schema_info())
    if mode == "counts":
        return serialize_counts(await service.get_counts())
    raise UnknownParameterError(mode)
