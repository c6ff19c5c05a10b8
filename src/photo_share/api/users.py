"""User directory endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from photo_share.api.serializers import serialize_user_profile, serialize_user_summary

if TYPE_CHECKING:
    from photo_share.containers import AppContainer

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/list")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return every user as id and name."""
    container: AppContainer = request.app.state.container
    users = await container.user_service.list_users()
    return [serialize_user_summary(user) for user in users]


@router.get("/{user_id}")
async def user_detail(user_id: str, request: Request) -> dict[str, object]:
    """Return the full profile of one user."""
    container: AppContainer = request.app.state.container
    user = await container.user_service.get_user(user_id)
    return serialize_user_profile(user)
