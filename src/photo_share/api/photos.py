"""Photo gallery endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from photo_share.api.serializers import serialize_gallery

if TYPE_CHECKING:
    from photo_share.containers import AppContainer

router = APIRouter(tags=["photos"])


@router.get("/photosOfUser/{user_id}")
async def photos_of_user(user_id: str, request: Request) -> list[dict[str, object]]:
    """Return a user's photos, each with its comments and their authors."""
    container: AppContainer = request.app.state.container
    gallery = await container.gallery_service.get_gallery(user_id)
    return serialize_gallery(gallery)
