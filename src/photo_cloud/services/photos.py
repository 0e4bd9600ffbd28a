"""Photo gallery operations: listing, upload relay and deletion."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_cloud.domain.media import UploadedAsset
from photo_cloud.domain.models import PhotoRecord
from photo_cloud.errors import (
    InvalidUploadError,
    PhotoNotFoundError,
    PhotoPermissionError,
)

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def create_photo(
        self, user_id: UUID, title: str, image_url: str, public_id: str
    ) -> PhotoRecord:
        """Create a photo record and return it."""

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_photos(self) -> list[PhotoRecord]:
        """Return every photo, newest first."""

    def list_photos_for_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos, newest first."""

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo record."""


class MediaStorage(Protocol):
    """Interface for the external image hosting service."""

    async def upload_image(
        self, data: bytes, filename: str | None, folder: str
    ) -> UploadedAsset:
        """Upload image bytes into a folder and return the hosted asset."""

    async def destroy(self, public_id: str) -> None:
        """Remove a hosted asset."""


@dataclass
class PhotoService:
    """Application service for the photo gallery."""

    repository: PhotoRepository
    storage: MediaStorage
    folder: str = "photo_app"

    def list_public(self) -> list[PhotoRecord]:
        """Return all photos for the public gallery."""
        return self.repository.list_photos()

    def list_for_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return the photos owned by a user."""
        return self.repository.list_photos_for_user(user_id)

    async def upload(
        self, owner_id: UUID, title: str | None, data: bytes, filename: str | None
    ) -> PhotoRecord:
        """Relay an upload to the media service and record the result.

        Nothing is persisted when the media service fails; its error
        propagates to the caller unchanged.
        """
        if not data:
            raise InvalidUploadError()
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            raise InvalidUploadError("Please provide a title")
        asset = await self.storage.upload_image(data, filename, self.folder)
        photo = self.repository.create_photo(
            user_id=owner_id,
            title=cleaned_title,
            image_url=asset.secure_url,
            public_id=asset.public_id,
        )
        logger.info(
            "Uploaded photo",
            extra={"photo_id": str(photo.id), "user_id": str(owner_id)},
        )
        return photo

    async def delete(self, requester_id: UUID, photo_id: UUID) -> None:
        """Delete a photo owned by the requester.

        The hosted asset is destroyed before the record. The two steps are
        not transactional.
        """
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise PhotoNotFoundError()
        if photo.user_id != requester_id:
            raise PhotoPermissionError()
        await self.storage.destroy(photo.public_id)
        self.repository.delete_photo(photo.id)
        logger.info(
            "Deleted photo",
            extra={"photo_id": str(photo.id), "user_id": str(requester_id)},
        )
