"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.adapters.supabase_schema_info_repository import (
    SupabaseSchemaInfoRepository,
)
from photo_share.adapters.supabase_user_repository import SupabaseUserRepository
from photo_share.config import Settings
from photo_share.services.diagnostics import DiagnosticsService
from photo_share.services.gallery import GalleryService
from photo_share.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    gallery_service: GalleryService
    diagnostics_service: DiagnosticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    schema_info_repository = SupabaseSchemaInfoRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        gallery_service=GalleryService(
            photo_repository=photo_repository,
            user_repository=user_repository,
        ),
        diagnostics_service=DiagnosticsService(
            schema_info_repository=schema_info_repository,
            user_repository=user_repository,
            photo_repository=photo_repository,
        ),
    )
