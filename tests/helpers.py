"""Shared builders for tests."""

from app.core.security import SigningConfig
from app.services.credentials import CredentialService
from app.services.user_store import InMemoryUserStore

TEST_ROUNDS = 4


def signing_config(
    secret: str = "unit-test-signing-key-0123456789abcdef",
    issuer: str = "prompt-tracker-test",
    audience: str = "prompt-tracker-test-clients",
    expire_minutes: int = 120,
) -> SigningConfig:
    """Build a SigningConfig with a per-test key."""
    return SigningConfig(
        secret=secret,
        issuer=issuer,
        audience=audience,
        expire_minutes=expire_minutes,
    )


def credential_service(
    store: InMemoryUserStore | None = None,
    signing: SigningConfig | None = None,
) -> CredentialService:
    """CredentialService over an in-memory store with cheap bcrypt rounds."""
    return CredentialService(
        store if store is not None else InMemoryUserStore(),
        signing if signing is not None else signing_config(),
        bcrypt_rounds=TEST_ROUNDS,
    )
