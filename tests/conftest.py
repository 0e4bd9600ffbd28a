"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from passlib.context import CryptContext

from photo_cloud.config import Settings
from photo_cloud.containers import AppContainer
from photo_cloud.domain.media import UploadedAsset
from photo_cloud.domain.models import PhotoRecord, UserRecord
from photo_cloud.errors import MediaServiceError
from photo_cloud.services.auth import AuthService, TokenIssuer, UserRepository
from photo_cloud.services.photos import MediaStorage, PhotoRepository, PhotoService

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        user = UserRecord(
            id=uuid4(),
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository with strictly increasing timestamps."""

    photos: dict[UUID, PhotoRecord] = field(default_factory=dict)
    fail_deletes: bool = False

    def create_photo(
        self, user_id: UUID, title: str, image_url: str, public_id: str
    ) -> PhotoRecord:
        photo = PhotoRecord(
            id=uuid4(),
            user_id=user_id,
            title=title,
            image_url=image_url,
            public_id=public_id,
            created_at=_EPOCH + timedelta(seconds=len(self.photos) + 1),
        )
        self.photos[photo.id] = photo
        return photo

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        return self.photos.get(photo_id)

    def list_photos(self) -> list[PhotoRecord]:
        return sorted(
            self.photos.values(), key=lambda photo: photo.created_at, reverse=True
        )

    def list_photos_for_user(self, user_id: UUID) -> list[PhotoRecord]:
        return [photo for photo in self.list_photos() if photo.user_id == user_id]

    def delete_photo(self, photo_id: UUID) -> None:
        if self.fail_deletes:
            raise RuntimeError("database unavailable")
        self.photos.pop(photo_id, None)


@dataclass
class FakeMediaStorage(MediaStorage):
    """Fake media service that records uploads and destroys."""

    uploads: list[tuple[bytes, str | None, str]] = field(default_factory=list)
    destroyed: list[str] = field(default_factory=list)
    fail_uploads: bool = False
    fail_destroys: bool = False

    async def upload_image(
        self, data: bytes, filename: str | None, folder: str
    ) -> UploadedAsset:
        if self.fail_uploads:
            raise MediaServiceError()
        self.uploads.append((data, filename, folder))
        public_id = f"{folder}/asset-{len(self.uploads)}"
        return UploadedAsset(
            secure_url=f"https://res.cloudinary.com/demo/image/upload/{public_id}.jpg",
            public_id=public_id,
        )

    async def destroy(self, public_id: str) -> None:
        if self.fail_destroys:
            raise MediaServiceError()
        self.destroyed.append(public_id)


def fast_password_context() -> CryptContext:
    return CryptContext(schemes=["bcrypt"], bcrypt__rounds=4)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        jwt_secret="test-secret",
        cloudinary_cloud_name="demo",
        cloudinary_api_key="cloud-key",
        cloudinary_api_secret="cloud-secret",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def media_storage() -> FakeMediaStorage:
    return FakeMediaStorage()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    photo_repository: InMemoryPhotoRepository,
    media_storage: FakeMediaStorage,
) -> AppContainer:
    auth_service = AuthService(
        repository=user_repository,
        tokens=TokenIssuer(
            secret=settings.jwt_secret, expires_seconds=settings.jwt_expires_seconds
        ),
        password_context=fast_password_context(),
    )
    photo_service = PhotoService(
        repository=photo_repository,
        storage=media_storage,
        folder=settings.cloudinary_folder,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        photo_service=photo_service,
        close_resources=close_resources,
    )
