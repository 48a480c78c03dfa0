"""Authentication service: identity token to session token exchange."""

from uuid import uuid4

import structlog

from app.core.clock import Clock, utc_now
from app.core.firebase import IdentityVerifier
from app.core.security import SessionTokenIssuer
from app.repositories.protocols import UserRepository
from app.schemas.auth import AuthResponse, VerifiedIdentity
from app.schemas.users import UserInDB

logger = structlog.get_logger(__name__)

PROFILE_FIELDS = ("email", "display_name", "avatar_url")


class AuthService:
    """Authentication service for identity provider login and session tokens."""

    def __init__(
        self,
        verifier: IdentityVerifier,
        users: UserRepository,
        token_issuer: SessionTokenIssuer,
        clock: Clock = utc_now,
    ):
        """Initialize auth service with its collaborators."""
        self.verifier = verifier
        self.users = users
        self.token_issuer = token_issuer
        self.clock = clock

    async def authenticate_with_identity_token(self, identity_token: str) -> AuthResponse:
        """
        Exchange a third-party identity token for a session token.

        Args:
            identity_token: ID token issued by the identity provider

        Returns:
            Session token and flattened user profile

        Raises:
            UnauthorizedException: If the identity token cannot be verified
        """
        identity = await self.verifier.verify(identity_token)

        user = await self.users.get_by_external_subject_id(identity.external_subject_id)
        if user is None:
            user = await self._create_user(identity)
        else:
            user = await self._sync_profile(user, identity)

        session_token = self.token_issuer.issue(user.id)

        logger.info("user_authenticated", user_id=str(user.id))

        return AuthResponse(
            session_token=session_token,
            user_id=str(user.id),
            email=user.email,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
        )

    async def _create_user(self, identity: VerifiedIdentity) -> UserInDB:
        now = self.clock()
        user = UserInDB(
            id=uuid4(),
            external_subject_id=identity.external_subject_id,
            display_name=identity.display_name,
            email=identity.email,
            avatar_url=identity.avatar_url,
            created_at=now,
            updated_at=now,
        )

        created = await self.users.add(user)
        logger.info("user_created", user_id=str(created.id))
        return created

    async def _sync_profile(self, user: UserInDB, identity: VerifiedIdentity) -> UserInDB:
        """Copy changed profile fields onto the stored user; skip the write when nothing changed."""
        changes = {
            field: getattr(identity, field)
            for field in PROFILE_FIELDS
            if getattr(identity, field) is not None
            and getattr(user, field) != getattr(identity, field)
        }

        if not changes:
            logger.debug("user_profile_unchanged", user_id=str(user.id))
            return user

        updated = await self.users.update(
            user.model_copy(update={**changes, "updated_at": self.clock()})
        )
        logger.info("user_profile_updated", user_id=str(user.id), fields=sorted(changes))
        return updated
