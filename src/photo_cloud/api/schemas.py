"""Pydantic models for the JSON API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from photo_cloud.domain.models import PhotoRecord, UserRecord


class CredentialsRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    msg: str


class UserResponse(BaseModel):
    id: UUID
    username: str
    created_at: datetime

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(id=user.id, username=user.username, created_at=user.created_at)


class PhotoResponse(BaseModel):
    """Photo metadata as returned to gallery clients."""

    id: UUID
    user_id: UUID
    title: str
    image_url: str
    public_id: str
    created_at: datetime

    @classmethod
    def from_record(cls, photo: PhotoRecord) -> "PhotoResponse":
        return cls(
            id=photo.id,
            user_id=photo.user_id,
            title=photo.title,
            image_url=photo.image_url,
            public_id=photo.public_id,
            created_at=photo.created_at,
        )
