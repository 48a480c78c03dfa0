"""Firebase Admin SDK initialization and identity token verification."""

import json
import os
from typing import Protocol

import firebase_admin
from firebase_admin import auth, credentials
from starlette.concurrency import run_in_threadpool
from structlog import get_logger

from app.core.exceptions import UnauthorizedException
from app.models.users import DISPLAY_NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from app.schemas.auth import VerifiedIdentity

logger = get_logger(__name__)

_firebase_app: firebase_admin.App | None = None


def initialize_firebase(
    firebase_credentials_path: str | None = None, firebase_config_json: str | None = None
) -> None:
    """
    Initialize Firebase Admin SDK.

    Args:
        firebase_credentials_path: Optional path to service account JSON file.
        firebase_config_json: Optional raw JSON string of service account.

    Looks for Firebase credentials in order:
    1. firebase_config_json parameter
    2. firebase_credentials_path parameter
    3. Default application credentials
    """
    global _firebase_app

    if _firebase_app is not None:
        logger.info("Firebase already initialized")
        return

    try:
        cred = None

        # 1. Try raw JSON string (container / production)
        if firebase_config_json:
            logger.info("Initializing Firebase with JSON string from environment")
            cred_dict = json.loads(firebase_config_json)
            cred = credentials.Certificate(cred_dict)

        # 2. Fallback to file path (local dev)
        elif firebase_credentials_path and os.path.exists(firebase_credentials_path):
            logger.info("Initializing Firebase with JSON file", path=firebase_credentials_path)
            cred = credentials.Certificate(firebase_credentials_path)

        if cred:
            _firebase_app = firebase_admin.initialize_app(cred)
        else:
            # Last resort: Try default credentials
            _firebase_app = firebase_admin.initialize_app()
            logger.info("Firebase initialized with default credentials")

    except Exception as e:
        logger.error("Failed to initialize Firebase", error=str(e))
        raise


class IdentityVerifier(Protocol):
    """Verifies third-party identity tokens."""

    async def verify(self, identity_token: str) -> VerifiedIdentity:
        """Return the verified identity or raise UnauthorizedException."""
        ...


class FirebaseIdentityVerifier:
    """Identity verifier backed by ``firebase_admin.auth.verify_id_token``."""

    def __init__(self, app: firebase_admin.App | None = None, clock_skew_seconds: int = 10):
        """Initialize verifier with an optional Firebase app and clock skew tolerance."""
        self.app = app
        self.clock_skew_seconds = clock_skew_seconds

    async def verify(self, identity_token: str) -> VerifiedIdentity:
        """
        Verify a Firebase ID token and extract the profile claims.

        Identity tokens are single-use and short-lived, so failures are never retried.

        Args:
            identity_token: Firebase ID token from the client

        Returns:
            Verified identity

        Raises:
            UnauthorizedException: If the token is malformed, expired, revoked or
                untrusted, lacks subject/email claims, or the issuer is unreachable
        """
        try:
            decoded_token = await run_in_threadpool(
                auth.verify_id_token,
                identity_token,
                app=self.app,
                clock_skew_seconds=self.clock_skew_seconds,
            )
        except auth.InvalidIdTokenError as e:
            logger.warning("Invalid or expired identity token", error=str(e))
            raise UnauthorizedException("Invalid or expired identity token") from e
        except Exception as e:
            logger.error("Identity token verification failed", error=str(e))
            raise UnauthorizedException("Identity token verification failed") from e

        return identity_from_claims(decoded_token)


def identity_from_claims(claims: dict) -> VerifiedIdentity:
    """
    Build a verified identity from decoded token claims.

    Raises:
        UnauthorizedException: If the subject or email claim is missing, or the
            email is longer than a stored email may be
    """
    subject = claims.get("uid") or claims.get("sub")
    email = claims.get("email")

    if not subject:
        raise UnauthorizedException("Identity token has no subject")
    if not email:
        raise UnauthorizedException("Email is required in identity token")
    if len(email) > EMAIL_MAX_LENGTH:
        raise UnauthorizedException("Email in identity token is too long")

    logger.info("Identity token verified", subject=subject)

    return VerifiedIdentity(
        external_subject_id=subject,
        email=email,
        display_name=(claims.get("name") or email)[:DISPLAY_NAME_MAX_LENGTH],
        avatar_url=claims.get("picture"),
    )
