"""Media service domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedAsset:
    """Result of a successful upload to the media service."""

    secure_url: str
    public_id: str
