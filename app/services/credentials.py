"""Credential service: registration, login and token verification.

The service is stateless. Persistence comes from an injected UserStore and key
material from an injected SigningConfig, so tests can run with distinct keys and
stores side by side.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from pydantic import ValidationError

from app.core.errors import (
    CredentialValidationError,
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    SigningKeyMissingError,
    WeakPasswordError,
)
from app.core.security import (
    BCRYPT_ROUNDS,
    SigningConfig,
    create_access_token,
    decode_access_token,
    dummy_password_hash,
    hash_password,
    verify_password,
)
from app.schemas.auth import DEFAULT_ROLE, ROLE_VALUES, TokenClaims, UserAccount
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)

PASSWORD_MIN_LEN = 6
USERNAME_MAX_LEN = 255

# Same message for unknown user and wrong password.
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


@dataclass(frozen=True)
class IssuedToken:
    """Result of a successful login."""

    access_token: str
    username: str
    role: str
    expires_at: datetime
    token_type: str = "bearer"


class CredentialService:
    """Registers accounts, authenticates logins and verifies access tokens."""

    def __init__(
        self,
        store: UserStore,
        signing: SigningConfig | None,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self._store = store
        self._signing = signing
        self._bcrypt_rounds = bcrypt_rounds

    def register(
        self,
        username: str | None,
        password: str | None,
        role: str | None = None,
    ) -> UserAccount:
        """
        Create an account with a bcrypt hash of password.

        Raises CredentialValidationError, WeakPasswordError or DuplicateUserError.
        """
        name = username or ""
        if not name.strip():
            raise CredentialValidationError("Username is required.")
        if len(name) > USERNAME_MAX_LEN:
            raise CredentialValidationError(
                f"Username must be at most {USERNAME_MAX_LEN} characters."
            )
        if password is None or not password.strip():
            raise CredentialValidationError("Password is required.")
        if len(password) < PASSWORD_MIN_LEN:
            raise WeakPasswordError(
                f"Password must be at least {PASSWORD_MIN_LEN} characters long."
            )
        resolved_role = role or DEFAULT_ROLE
        if resolved_role not in ROLE_VALUES:
            raise CredentialValidationError(
                f"Role must be one of {sorted(ROLE_VALUES)}."
            )

        # Early exit skips the bcrypt cost; the store's unique index is still the real guard.
        if self._store.find_by_username(name) is not None:
            raise DuplicateUserError("Username already exists.")

        password_hash = hash_password(password, rounds=self._bcrypt_rounds)
        account = self._store.insert(name, password_hash, resolved_role)
        logger.info("New user %r registered with role %s", account.username, account.role)
        return account

    def authenticate(self, username: str | None, password: str | None) -> IssuedToken:
        """
        Check username/password and mint an access token.

        Raises InvalidCredentialsError whether the user is unknown or the password is wrong,
        and SigningKeyMissingError before looking at credentials when no key is configured.
        """
        signing = self._require_signing()
        if not username or password is None:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        account = self._store.find_by_username(username)
        if account is None:
            # Spend the same bcrypt time as a real check.
            verify_password(password, dummy_password_hash(self._bcrypt_rounds))
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        if not verify_password(password, account.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        token, expires_at = create_access_token(
            signing, username=account.username, role=account.role
        )
        logger.info("User %r logged in", account.username)
        return IssuedToken(
            access_token=token,
            username=account.username,
            role=account.role,
            expires_at=expires_at,
        )

    def verify_token(self, token: str | None) -> TokenClaims:
        """Validate signature, issuer, audience and expiry; return the claims. Raises InvalidTokenError."""
        payload = decode_access_token(self._require_signing(), token or "")
        payload.setdefault("name", payload.get("sub"))
        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise InvalidTokenError("Invalid token payload.", cause=e) from e

    def _require_signing(self) -> SigningConfig:
        if self._signing is None:
            raise SigningKeyMissingError("JWT signing key is not configured.")
        return self._signing
