"""Session token issuing and decoding."""

from datetime import timedelta
from typing import Any
from uuid import UUID, uuid4

from jose import JWTError, jwt

from app.config import settings
from app.core.clock import Clock, utc_now

ACCESS_TOKEN_TYPE = "access"


class SessionTokenIssuer:
    """Mints short-lived signed session tokens bound to a local user id."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Clock = utc_now,
    ):
        """Initialize issuer with signing key, algorithm and lifetime."""
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)
        self.clock = clock

    def issue(self, user_id: UUID | str) -> str:
        """
        Create a signed session token for a user.

        Args:
            user_id: Internal user ID, stored in the ``sub`` claim

        Returns:
            Encoded JWT; every call yields a distinct token
        """
        issued_at = self.clock()
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
            "jti": uuid4().hex,
            "type": ACCESS_TOKEN_TYPE,
        }

        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)


def decode_access_token(
    token: str,
    secret_key: str | None = None,
    algorithm: str | None = None,
) -> dict[str, Any] | None:
    """
    Decode and validate a session token.

    Args:
        token: JWT token to decode
        secret_key: Signing key, defaults to the configured one
        algorithm: Signing algorithm, defaults to the configured one

    Returns:
        Decoded payload or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            secret_key or settings.jwt_secret_key,
            algorithms=[algorithm or settings.jwt_algorithm],
        )
    except JWTError:
        return None

    # Verify token type
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        return None

    return payload
