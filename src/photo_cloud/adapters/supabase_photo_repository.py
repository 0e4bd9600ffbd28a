"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_cloud.domain.models import PhotoRecord
from photo_cloud.services.photos import PhotoRepository

_PHOTO_COLUMNS = "id, user_id, title, image_url, public_id, created_at"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client

    def create_photo(
        self, user_id: UUID, title: str, image_url: str, public_id: str
    ) -> PhotoRecord:
        """Create a photo metadata row and return it."""
        response = (
            self.client.table("photos")
            .insert(
                {
                    "user_id": str(user_id),
                    "title": title,
                    "image_url": image_url,
                    "public_id": public_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create photo metadata")
        return _parse_photo(response.data[0])

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo row by id, if present."""
        response = (
            self.client.table("photos")
            .select(_PHOTO_COLUMNS)
            .eq("id", str(photo_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_photo(response.data[0])
        return None

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos, newest first."""
        response = (
            self.client.table("photos")
            .select(_PHOTO_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def list_photos_for_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos, newest first."""
        response = (
            self.client.table("photos")
            .select(_PHOTO_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def delete_photo(self, photo_id: UUID) -> None:
        """Delete a photo metadata row."""
        self.client.table("photos").delete().eq("id", str(photo_id)).execute()


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    created_raw = row.get("created_at")
    if not isinstance(created_raw, str) or not created_raw:
        raise ValueError(f"Photo row {row.get('id')} has no created_at")
    created_at = datetime.fromisoformat(created_raw)
    return PhotoRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title", "")),
        image_url=str(row["image_url"]),
        public_id=str(row["public_id"]),
        created_at=created_at,
    )
