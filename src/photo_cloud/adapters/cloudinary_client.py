"""Cloudinary media client."""

import hashlib
import logging
import time
from dataclasses import dataclass

import httpx

from photo_cloud.domain.media import UploadedAsset
from photo_cloud.errors import MediaServiceError
from photo_cloud.services.photos import MediaStorage

logger = logging.getLogger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"


def sign_params(params: dict[str, object], api_secret: str) -> str:
    """Return the Cloudinary request signature for the given params."""
    to_sign = "&".join(
        f"{key}={value}"
        for key, value in sorted(params.items())
        if value is not None and value != ""
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()  # noqa: S324


@dataclass
class HttpxCloudinaryClient(MediaStorage):
    """Cloudinary upload API client implemented with httpx."""

    cloud_name: str
    api_key: str
    api_secret: str
    http_client: httpx.AsyncClient
    timeout: float | None = 60.0

    @classmethod
    def create(
        cls,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float | None = 60.0,
    ) -> "HttpxCloudinaryClient":
        """Create a Cloudinary client with a managed httpx session."""
        return cls(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def upload_image(
        self, data: bytes, filename: str | None, folder: str
    ) -> UploadedAsset:
        """Upload image bytes into a folder."""
        payload = await self._post(
            "upload",
            {"folder": folder},
            files={"file": (filename or "upload", data)},
        )
        secure_url = payload.get("secure_url")
        public_id = payload.get("public_id")
        if not isinstance(secure_url, str) or not isinstance(public_id, str):
            raise MediaServiceError()
        return UploadedAsset(secure_url=secure_url, public_id=public_id)

    async def destroy(self, public_id: str) -> None:
        """Destroy an uploaded image by its public id."""
        payload = await self._post("destroy", {"public_id": public_id})
        if payload.get("result") != "ok":
            logger.warning(
                "Cloudinary destroy did not report ok",
                extra={"public_id": public_id, "result": payload.get("result")},
            )

    async def _post(
        self,
        action: str,
        params: dict[str, object],
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> dict[str, object]:
        signed: dict[str, object] = {**params, "timestamp": int(time.time())}
        signed["signature"] = sign_params(signed, self.api_secret)
        signed["api_key"] = self.api_key
        url = f"{CLOUDINARY_API_BASE}/{self.cloud_name}/image/{action}"
        try:
            response = await self.http_client.post(
                url,
                data={key: str(value) for key, value in signed.items()},
                files=files,
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Cloudinary request failed", extra={"action": action})
            raise MediaServiceError() from exc
        if not isinstance(payload, dict) or "error" in payload:
            raise MediaServiceError()
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
