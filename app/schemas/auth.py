"""Request/response schemas for registration, login and token claims."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

# Closed set of account roles.
Role = Literal["User", "Admin"]

ROLE_VALUES: frozenset[str] = frozenset({"User", "Admin"})
DEFAULT_ROLE: Role = "User"


class RegisterRequest(BaseModel):
    """New account. Length rules are enforced by the credential service, not here."""

    username: str = Field(..., max_length=255, description="Unique, case-sensitive username")
    password: str = Field(..., max_length=128, description="Password (at least 6 characters)")
    role: Role | None = Field(default=None, description="Account role; defaults to User")


class RegisterResponse(BaseModel):
    """Confirmation returned after successful registration."""

    message: str = "User created successfully"
    username: str
    role: Role


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., max_length=255, description="Username")
    password: str = Field(..., max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    username: str
    role: Role
    expires_at: datetime = Field(..., description="UTC instant after which the token is rejected")


class UserAccount(BaseModel):
    """Stored account as seen by the credential service (hash only, never the password)."""

    model_config = {"from_attributes": True, "frozen": True}

    id: int
    username: str
    password_hash: str
    role: Role


class TokenClaims(BaseModel):
    """Verified claims of an access token."""

    sub: str
    name: str
    role: Role
    iss: str
    aud: str
    iat: datetime
    exp: datetime


class CurrentUser(BaseModel):
    """Authenticated caller (username, role) resolved from a verified token."""

    username: str
    role: Role
