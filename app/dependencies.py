"""FastAPI dependencies."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import UnauthorizedException
from app.core.firebase import FirebaseIdentityVerifier, IdentityVerifier
from app.core.security import SessionTokenIssuer, decode_access_token
from app.database import get_db
from app.repositories.comment_repository import SqlCommentRepository
from app.repositories.review_repository import SqlReviewRepository
from app.repositories.user_repository import SqlUserRepository
from app.repositories.wine_repository import SqlWineRepository
from app.schemas.pagination import Pageable
from app.services.auth_service import AuthService
from app.services.comment_service import CommentService
from app.services.review_service import ReviewService

# Security
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UUID:
    """
    Extract and validate user ID from the session token.

    Args:
        credentials: Bearer token credentials

    Returns:
        User ID from token

    Raises:
        UnauthorizedException: If token is absent, invalid or expired
    """
    if credentials is None:
        raise UnauthorizedException("Missing session token")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Invalid or expired session token")

    user_id_str = payload.get("sub")
    if user_id_str is None or not isinstance(user_id_str, str):
        raise UnauthorizedException("Invalid or expired session token")

    try:
        return UUID(user_id_str)
    except ValueError:
        raise UnauthorizedException("Invalid user ID format")


def get_pageable(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size, description="Page size"
    ),
) -> Pageable:
    """Build a page request from query parameters; sorting is parsed per resource."""
    return Pageable(page=page, size=size)


def get_identity_verifier() -> IdentityVerifier:
    """Get the identity token verifier."""
    return FirebaseIdentityVerifier(clock_skew_seconds=settings.firebase_clock_skew_seconds)


def get_token_issuer() -> SessionTokenIssuer:
    """Get the session token issuer."""
    return SessionTokenIssuer(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


def get_auth_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    token_issuer: Annotated[SessionTokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Wire the auth service."""
    return AuthService(verifier, SqlUserRepository(db), token_issuer)


def get_review_service(db: Annotated[AsyncSession, Depends(get_db)]) -> ReviewService:
    """Wire the review service."""
    return ReviewService(
        reviews=SqlReviewRepository(db),
        comments=SqlCommentRepository(db),
        users=SqlUserRepository(db),
        wines=SqlWineRepository(db),
    )


def get_comment_service(db: Annotated[AsyncSession, Depends(get_db)]) -> CommentService:
    """Wire the comment service."""
    return CommentService(
        comments=SqlCommentRepository(db),
        reviews=SqlReviewRepository(db),
        users=SqlUserRepository(db),
    )


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
PageRequest = Annotated[Pageable, Depends(get_pageable)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
