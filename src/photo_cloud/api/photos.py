"""Photo gallery endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from photo_cloud.api.auth import require_user
from photo_cloud.api.schemas import MessageResponse, PhotoResponse
from photo_cloud.errors import MediaServiceError, PhotoCloudError, PhotoNotFoundError

if TYPE_CHECKING:
    from photo_cloud.containers import AppContainer

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("/public", response_model=list[PhotoResponse])
async def list_public_photos(request: Request) -> list[PhotoResponse]:
    """Return every photo, newest first."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_public()
    return [PhotoResponse.from_record(photo) for photo in photos]


@router.get("", response_model=list[PhotoResponse])
async def list_my_photos(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[PhotoResponse]:
    """Return the caller's photos, newest first."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_for_user(user_id)
    return [PhotoResponse.from_record(photo) for photo in photos]


@router.post("/upload", response_model=PhotoResponse)
async def upload_photo(
    request: Request,
    user_id: UUID = Depends(require_user),
    title: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> PhotoResponse:
    """Relay an image to the media service and record it."""
    container: AppContainer = request.app.state.container
    data = await image.read() if image is not None else b""
    filename = image.filename if image is not None else None
    photo = await container.photo_service.upload(
        owner_id=user_id, title=title, data=data, filename=filename
    )
    return PhotoResponse.from_record(photo)


@router.delete("/{photo_id}", response_model=MessageResponse)
async def delete_photo(
    photo_id: str, request: Request, user_id: UUID = Depends(require_user)
) -> MessageResponse:
    """Delete one of the caller's photos."""
    container: AppContainer = request.app.state.container
    try:
        parsed_id = UUID(photo_id)
    except ValueError as exc:
        raise PhotoNotFoundError() from exc
    try:
        await container.photo_service.delete(requester_id=user_id, photo_id=parsed_id)
    except MediaServiceError as exc:
        raise PhotoCloudError() from exc
    return MessageResponse(msg="Photo removed")
