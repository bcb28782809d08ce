"""
Register a user from the command line (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [User|Admin]
Example:
  python -m app.scripts.create_user admin your-secure-password Admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import AuthError
from app.core.security import BCRYPT_ROUNDS
from app.schemas.auth import ROLE_VALUES
from app.services.credentials import PASSWORD_MIN_LEN, CredentialService
from app.services.user_store import SqlAlchemyUserStore, UserStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def create_user(
    store: UserStore,
    username: str,
    password: str,
    role: str,
    bcrypt_rounds: int = BCRYPT_ROUNDS,
) -> int:
    """Register username via the credential service. Returns a process exit code."""
    service = CredentialService(store, signing=None, bcrypt_rounds=bcrypt_rounds)
    try:
        account = service.register(username, password, role)
    except AuthError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(f"Created user '{account.username}' with role '{account.role}'.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Prompt Tracker user.")
    parser.add_argument("username", help="Username (1-255 chars, case-sensitive)")
    parser.add_argument("password", help=f"Password (at least {PASSWORD_MIN_LEN} chars)")
    parser.add_argument("role", nargs="?", default="User", choices=sorted(ROLE_VALUES))
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        return create_user(
            SqlAlchemyUserStore(db),
            args.username,
            args.password,
            args.role,
            bcrypt_rounds=get_settings().BCRYPT_ROUNDS,
        )
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
