"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.errors import InvalidTokenError, SigningKeyMissingError

if TYPE_CHECKING:
    from app.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

# Claims every accepted token must carry.
REQUIRED_CLAIMS = ("sub", "role", "iss", "aud", "iat", "exp")


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash(rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash used to burn the same bcrypt cost when a username does not exist."""
    return hash_password("not-a-real-password", rounds=rounds)


@dataclass(frozen=True)
class SigningConfig:
    """Key material and token parameters, injected into whatever mints or verifies tokens."""

    secret: str
    issuer: str
    audience: str
    algorithm: str = "HS256"
    expire_minutes: int = 120

    def __post_init__(self) -> None:
        if not self.secret or not self.secret.strip():
            raise SigningKeyMissingError("JWT signing key is not configured.")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SigningConfig":
        """Build from application settings; raises SigningKeyMissingError when JWT_SECRET is unset."""
        if settings.JWT_SECRET is None:
            raise SigningKeyMissingError(
                "JWT_SECRET is not set; refusing to issue or accept tokens."
            )
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )


def create_access_token(
    signing: SigningConfig,
    username: str,
    role: str,
    now: datetime | None = None,
) -> tuple[str, datetime]:
    """
    Create a signed JWT for username/role. Returns (token, expires_at).

    now is the issuance instant; defaults to the current UTC time.
    """
    # JWT times are whole seconds; truncate so expires_at matches the exp claim exactly.
    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    expire = issued_at + timedelta(minutes=signing.expire_minutes)
    payload: dict[str, Any] = {
        "sub": username,
        "name": username,
        "role": role,
        "iss": signing.issuer,
        "aud": signing.audience,
        "iat": issued_at,
        "exp": expire,
    }
    token = jwt.encode(payload, signing.secret, algorithm=signing.algorithm)
    return token, expire


def decode_access_token(signing: SigningConfig, token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT; return its payload.

    Signature, issuer, audience and expiry are all checked with zero leeway.
    Raises InvalidTokenError on any failure.
    """
    raw = (token or "").strip()
    if not raw:
        raise InvalidTokenError("Access token is empty.")
    try:
        return jwt.decode(
            raw,
            signing.secret,
            algorithms=[signing.algorithm],
            issuer=signing.issuer,
            audience=signing.audience,
            leeway=0,
            options={"require": list(REQUIRED_CLAIMS)},
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid or expired token.", cause=e) from e
