"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    Role,
    TokenClaims,
    TokenResponse,
    UserAccount,
)
from app.schemas.health import HealthResponse
from app.schemas.prompt import (
    BatchItemResult,
    BatchResponse,
    PromptCreate,
    PromptRead,
)

__all__ = [
    "BatchItemResult",
    "BatchResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "PromptCreate",
    "PromptRead",
    "RegisterRequest",
    "RegisterResponse",
    "Role",
    "TokenClaims",
    "TokenResponse",
    "UserAccount",
]
