"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class IdentityAuthRequest(BaseModel):
    """Identity token authentication request."""

    identity_token: str = Field(..., min_length=1, description="ID token from the identity provider")


class VerifiedIdentity(BaseModel):
    """Profile claims extracted from a verified identity token."""

    model_config = ConfigDict(frozen=True)

    external_subject_id: str
    email: str
    display_name: str
    avatar_url: str | None = None


class AuthResponse(BaseModel):
    """Session token plus flattened user profile."""

    session_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    display_name: str
    avatar_url: str | None = None
