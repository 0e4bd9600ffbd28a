"""Registration, login and token verification."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from photo_cloud.domain.models import UserRecord
from photo_cloud.errors import (
    InvalidCredentialsError,
    InvalidCredentialsInputError,
    InvalidTokenError,
    UsernameTakenError,
)

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


def default_password_context() -> CryptContext:
    """Return the bcrypt hashing context used for stored passwords."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserRepository(Protocol):
    """Persistence interface for user credentials."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class TokenIssuer:
    """Signs and verifies HS256 access tokens carrying a user id."""

    secret: str
    expires_seconds: int = 3600

    def issue(self, user_id: UUID) -> str:
        """Create a signed token for the user."""
        now = datetime.now(tz=UTC)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_seconds),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> UUID:
        """Return the user id embedded in a valid, unexpired token."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[JWT_ALGORITHM])
        except JWTError as exc:
            raise InvalidTokenError() from exc
        subject = payload.get("sub")
        if not isinstance(subject, str):
            raise InvalidTokenError()
        try:
            return UUID(subject)
        except ValueError as exc:
            raise InvalidTokenError() from exc


@dataclass
class AuthService:
    """Application service for account lifecycle and sign-in."""

    repository: UserRepository
    tokens: TokenIssuer
    password_context: CryptContext = field(default_factory=default_password_context)

    def register(self, username: str, password: str) -> str:
        """Create an account and return a token for it."""
        cleaned = username.strip()
        if not cleaned or not password:
            raise InvalidCredentialsInputError()
        if self.repository.get_by_username(cleaned) is not None:
            raise UsernameTakenError()
        user = self.repository.create_user(
            cleaned, self.password_context.hash(password)
        )
        logger.info("Registered user", extra={"user_id": str(user.id)})
        return self.tokens.issue(user.id)

    def login(self, username: str, password: str) -> str:
        """Check credentials and return a fresh token."""
        user = self.repository.get_by_username(username.strip())
        if user is None or not self.password_context.verify(
            password, user.password_hash
        ):
            raise InvalidCredentialsError()
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self.tokens.issue(user.id)

    def authenticate(self, token: str) -> UUID:
        """Resolve a token to the user id it was issued for."""
        return self.tokens.verify(token)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.repository.get_by_id(user_id)
