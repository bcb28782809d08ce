"""Credential and token errors. Each carries an AuthErrorKind so callers can branch on it."""

from enum import Enum


class AuthErrorKind(str, Enum):
    """Closed set of credential/token failure kinds."""

    VALIDATION = "validation"
    WEAK_PASSWORD = "weak_password"
    DUPLICATE_USER = "duplicate_user"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    SIGNING_KEY_MISSING = "signing_key_missing"


class AuthError(Exception):
    """Base class for all credential/token failures."""

    kind: AuthErrorKind

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class CredentialValidationError(AuthError):
    """Missing or malformed registration/login fields."""

    kind = AuthErrorKind.VALIDATION


class WeakPasswordError(AuthError):
    """Password shorter than the minimum length."""

    kind = AuthErrorKind.WEAK_PASSWORD


class DuplicateUserError(AuthError):
    """Username already taken (raised by the user store on a uniqueness conflict)."""

    kind = AuthErrorKind.DUPLICATE_USER


class InvalidCredentialsError(AuthError):
    """Unknown username or wrong password; deliberately indistinguishable."""

    kind = AuthErrorKind.INVALID_CREDENTIALS


class InvalidTokenError(AuthError):
    """Bad signature, issuer, audience, expiry, or missing claims."""

    kind = AuthErrorKind.INVALID_TOKEN


class SigningKeyMissingError(AuthError):
    """JWT_SECRET is not configured; authenticated traffic must not be served."""

    kind = AuthErrorKind.SIGNING_KEY_MISSING
