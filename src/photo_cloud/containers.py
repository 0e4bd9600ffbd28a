"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_cloud.adapters.cloudinary_client import HttpxCloudinaryClient
from photo_cloud.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_cloud.adapters.supabase_user_repository import SupabaseUserRepository
from photo_cloud.config import Settings
from photo_cloud.services.auth import AuthService, TokenIssuer
from photo_cloud.services.photos import PhotoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    photo_service: PhotoService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    tokens = TokenIssuer(
        secret=resolved_settings.jwt_secret,
        expires_seconds=resolved_settings.jwt_expires_seconds,
    )
    auth_service = AuthService(repository=user_repository, tokens=tokens)
    cloudinary_client = HttpxCloudinaryClient.create(
        cloud_name=resolved_settings.cloudinary_cloud_name,
        api_key=resolved_settings.cloudinary_api_key,
        api_secret=resolved_settings.cloudinary_api_secret,
        timeout=resolved_settings.cloudinary_timeout_seconds,
    )
    photo_service = PhotoService(
        repository=photo_repository,
        storage=cloudinary_client,
        folder=resolved_settings.cloudinary_folder,
    )

    async def close_resources() -> None:
        await cloudinary_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        photo_service=photo_service,
        close_resources=close_resources,
    )
