"""Registration, JWT login and auth dependencies (get_current_user, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import AuthError, AuthErrorKind, SigningKeyMissingError
from app.core.security import SigningConfig
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.services.credentials import CredentialService
from app.services.user_store import SqlAlchemyUserStore

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)

_STATUS_BY_KIND: dict[AuthErrorKind, int] = {
    AuthErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorKind.WEAK_PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorKind.DUPLICATE_USER: status.HTTP_409_CONFLICT,
    AuthErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    AuthErrorKind.SIGNING_KEY_MISSING: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def auth_error_to_http(error: AuthError) -> HTTPException:
    """Map a credential/token error to the HTTP response the client sees."""
    status_code = _STATUS_BY_KIND[error.kind]
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    if error.kind is AuthErrorKind.SIGNING_KEY_MISSING:
        # Configuration detail stays in the logs.
        logger.error("Authentication unavailable: %s", error.message)
        return HTTPException(
            status_code=status_code, detail="Authentication is not configured."
        )
    return HTTPException(status_code=status_code, detail=error.message, headers=headers)


def get_signing_config() -> SigningConfig | None:
    """Dependency: signing configuration from settings, or None when JWT_SECRET is missing."""
    try:
        return SigningConfig.from_settings(get_settings())
    except SigningKeyMissingError:
        # The service fails closed (503) on first token use.
        return None


def get_credential_service(
    db: Annotated[Session, Depends(get_db)],
    signing: Annotated[SigningConfig | None, Depends(get_signing_config)],
) -> CredentialService:
    """Dependency: credential service bound to this request's session."""
    return CredentialService(
        SqlAlchemyUserStore(db),
        signing,
        bcrypt_rounds=get_settings().BCRYPT_ROUNDS,
    )


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    body: RegisterRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> RegisterResponse:
    """Create an account. Role defaults to User. 409 if the username is taken."""
    try:
        account = service.register(body.username, body.password, body.role)
    except AuthError as e:
        raise auth_error_to_http(e) from e
    return RegisterResponse(username=account.username, role=account.role)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token valid for two hours.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        issued = service.authenticate(body.username, body.password)
    except AuthError as e:
        raise auth_error_to_http(e) from e
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        username=issued.username,
        role=issued.role,
        expires_at=issued.expires_at,
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    service: Annotated[CredentialService, Depends(get_credential_service)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return its subject. Raises 401 if missing or invalid."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = service.verify_token(credentials.credentials)
    except AuthError as e:
        raise auth_error_to_http(e) from e
    return CurrentUser(username=claims.name, role=claims.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'Admin'. Raises 403 for non-admin."""
    if current_user.role != "Admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
