"""Authentication endpoints."""

from fastapi import APIRouter, status

from app.dependencies import AuthServiceDep
from app.schemas.auth import AuthResponse, IdentityAuthRequest

router = APIRouter()


@router.post(
    "/identity",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Authentication"],
    summary="Exchange identity token for session token",
)
async def authenticate_with_identity_token(
    request: IdentityAuthRequest,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Verify an identity provider ID token and return a session token.

    The mobile app sends the ID token obtained from Google Sign-In; this endpoint
    verifies it, creates or refreshes the local user, and returns a session
    token for API access together with the user's profile.

    Args:
        request: Identity token from the client
        auth_service: Auth service

    Returns:
        Session token and user profile

    Raises:
        UnauthorizedException: If the identity token cannot be verified
    """
    return await auth_service.authenticate_with_identity_token(request.identity_token)
