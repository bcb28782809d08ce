"""User persistence behind a small protocol: SQLAlchemy for the app, in-memory for tests and tooling."""

import logging
from threading import Lock
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateUserError
from app.models.user import User
from app.schemas.auth import UserAccount

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Account storage used by the credential service."""

    def find_by_username(self, username: str) -> UserAccount | None:
        """Return the account with exactly this username, or None."""
        ...

    def insert(self, username: str, password_hash: str, role: str) -> UserAccount:
        """Persist a new account. Raises DuplicateUserError if the username is taken."""
        ...


class SqlAlchemyUserStore:
    """UserStore over the users table; uniqueness is enforced by the username index."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_username(self, username: str) -> UserAccount | None:
        row = self._session.query(User).filter(User.username == username).first()
        return UserAccount.model_validate(row) if row is not None else None

    def insert(self, username: str, password_hash: str, role: str) -> UserAccount:
        row = User(username=username, password_hash=password_hash, role=role)
        self._session.add(row)
        try:
            self._session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same name.
            self._session.rollback()
            logger.info("Insert for username %r hit the unique index", username)
            raise DuplicateUserError("Username already exists.", cause=e) from e
        self._session.refresh(row)
        return UserAccount.model_validate(row)


class InMemoryUserStore:
    """Thread-safe dict-backed UserStore."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: dict[str, UserAccount] = {}
        self._next_id = 1

    def find_by_username(self, username: str) -> UserAccount | None:
        with self._lock:
            return self._users.get(username)

    def insert(self, username: str, password_hash: str, role: str) -> UserAccount:
        with self._lock:
            if username in self._users:
                raise DuplicateUserError("Username already exists.")
            account = UserAccount(
                id=self._next_id,
                username=username,
                password_hash=password_hash,
                role=role,
            )
            self._users[username] = account
            self._next_id += 1
            return account

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
