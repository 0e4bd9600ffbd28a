"""Domain models for PhotoCloud."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class PhotoRecord:
    """Photo metadata; the image bytes live at the media service."""

    id: UUID
    user_id: UUID
    title: str
    image_url: str
    public_id: str
    created_at: datetime
