"""Application error types mapped to HTTP responses."""

from fastapi import status


class PhotoCloudError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class InvalidUploadError(PhotoCloudError):
    """Upload request is missing the image or its title."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Please upload a file"


class InvalidCredentialsInputError(PhotoCloudError):
    """Registration payload is incomplete."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username and password are required"


class UsernameTakenError(PhotoCloudError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentialsError(PhotoCloudError):
    """Login failed; deliberately vague about which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class InvalidTokenError(PhotoCloudError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token is not valid"


class PhotoNotFoundError(PhotoCloudError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Photo not found"


class PhotoPermissionError(PhotoCloudError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "User not authorized"


class MediaServiceError(PhotoCloudError):
    """The external media service rejected or failed a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Image upload failed"
