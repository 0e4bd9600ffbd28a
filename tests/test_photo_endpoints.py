"""Tests for photo gallery endpoints."""

from fastapi.testclient import TestClient

from photo_cloud.api.app import create_app
from tests.conftest import FakeMediaStorage, InMemoryPhotoRepository


def _register(client: TestClient, username: str) -> dict[str, str]:
    response = client.post(
        "/api/auth/register", json={"username": username, "password": "pw123"}
    )
    assert response.status_code == 201
    return {"x-auth-token": response.json()["token"]}


def _upload(client: TestClient, headers: dict[str, str], title: str):  # type: ignore[no-untyped-def]
    return client.post(
        "/api/photos/upload",
        headers=headers,
        data={"title": title},
        files={"image": ("photo.jpg", b"jpeg-bytes", "image/jpeg")},
    )


def test_gallery_scenario(container) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")
    alice_id = client.get("/api/auth/me", headers=alice).json()["id"]

    uploaded = _upload(client, alice, "Sunset")
    assert uploaded.status_code == 200
    photo = uploaded.json()
    assert photo["title"] == "Sunset"
    assert photo["user_id"] == alice_id

    public = client.get("/api/photos/public").json()
    assert [item["id"] for item in public] == [photo["id"]]

    deleted = client.delete(f"/api/photos/{photo['id']}", headers=alice)
    assert deleted.status_code == 200
    assert deleted.json() == {"msg": "Photo removed"}

    assert client.get("/api/photos/public").json() == []
    assert client.get("/api/photos", headers=alice).json() == []


def test_unauthenticated_list_and_upload_are_rejected(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/api/photos").status_code == 401
    response = client.post(
        "/api/photos/upload",
        data={"title": "Sunset"},
        files={"image": ("photo.jpg", b"jpeg-bytes", "image/jpeg")},
    )
    assert response.status_code == 401


def test_delete_by_other_user_is_rejected(
    container, photo_repository: InMemoryPhotoRepository
) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    photo = _upload(client, alice, "Sunset").json()

    response = client.delete(f"/api/photos/{photo['id']}", headers=bob)

    assert response.status_code == 401
    assert response.json() == {"msg": "User not authorized"}
    assert len(photo_repository.photos) == 1


def test_delete_missing_photo_is_not_found(container) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")

    missing = client.delete(
        "/api/photos/00000000-0000-0000-0000-000000000000", headers=alice
    )
    malformed = client.delete("/api/photos/not-an-id", headers=alice)

    assert missing.status_code == 404
    assert missing.json() == {"msg": "Photo not found"}
    assert malformed.status_code == 404


def test_list_mine_only_returns_callers_photos_newest_first(container) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    first = _upload(client, alice, "First").json()
    other = _upload(client, bob, "Other").json()
    second = _upload(client, alice, "Second").json()

    mine = client.get("/api/photos", headers=alice).json()
    public_anonymous = client.get("/api/photos/public").json()
    public_as_bob = client.get("/api/photos/public", headers=bob).json()

    assert [item["id"] for item in mine] == [second["id"], first["id"]]
    expected = [second["id"], other["id"], first["id"]]
    assert [item["id"] for item in public_anonymous] == expected
    assert public_as_bob == public_anonymous


def test_upload_without_file_is_bad_request(
    container, media_storage: FakeMediaStorage
) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")

    response = client.post(
        "/api/photos/upload", headers=alice, data={"title": "Sunset"}
    )

    assert response.status_code == 400
    assert response.json() == {"msg": "Please upload a file"}
    assert media_storage.uploads == []


def test_upload_without_title_is_bad_request(container) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")

    response = client.post(
        "/api/photos/upload",
        headers=alice,
        files={"image": ("photo.jpg", b"jpeg-bytes", "image/jpeg")},
    )

    assert response.status_code == 400


def test_upload_media_failure_is_server_error_without_record(
    container,
    media_storage: FakeMediaStorage,
    photo_repository: InMemoryPhotoRepository,
) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")
    media_storage.fail_uploads = True

    response = _upload(client, alice, "Sunset")

    assert response.status_code == 500
    assert response.json() == {"msg": "Image upload failed"}
    assert photo_repository.photos == {}


def test_delete_media_failure_is_server_error(
    container,
    media_storage: FakeMediaStorage,
    photo_repository: InMemoryPhotoRepository,
) -> None:
    client = TestClient(create_app(container))
    alice = _register(client, "alice")
    photo = _upload(client, alice, "Sunset").json()
    media_storage.fail_destroys = True

    response = client.delete(f"/api/photos/{photo['id']}", headers=alice)

    assert response.status_code == 500
    assert response.json() == {"msg": "Server error"}
    assert len(photo_repository.photos) == 1
