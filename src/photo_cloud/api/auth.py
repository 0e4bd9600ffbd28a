"""Account endpoints and the token guard for protected routes."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from photo_cloud.api.schemas import CredentialsRequest, TokenResponse, UserResponse
from photo_cloud.errors import InvalidTokenError

if TYPE_CHECKING:
    from photo_cloud.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def require_user(
    request: Request, x_auth_token: str | None = Header(default=None)
) -> UUID:
    """Ensure requests carry a valid token and return the caller's user id."""
    if not x_auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )
    container: AppContainer = request.app.state.container
    try:
        return container.auth_service.authenticate(x_auth_token)
    except InvalidTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message
        ) from exc


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=TokenResponse
)
def register(payload: CredentialsRequest, request: Request) -> TokenResponse:
    """Create an account and sign the new user in."""
    container: AppContainer = request.app.state.container
    token = container.auth_service.register(payload.username, payload.password)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
def login(payload: CredentialsRequest, request: Request) -> TokenResponse:
    """Exchange credentials for a token."""
    container: AppContainer = request.app.state.container
    token = container.auth_service.login(payload.username, payload.password)
    return TokenResponse(token=token)


@router.get("/me", response_model=UserResponse)
async def me(request: Request, user_id: UUID = Depends(require_user)) -> UserResponse:
    """Return the authenticated user."""
    container: AppContainer = request.app.state.container
    user = container.auth_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid"
        )
    return UserResponse.from_record(user)
