"""Prompt persistence: SQLAlchemy for the app, in-memory for tests."""

from datetime import UTC, datetime
from threading import Lock
from typing import Protocol

from sqlalchemy.orm import Session

from app.models.prompt import Prompt


class PromptStore(Protocol):
    """Prompt storage used by the prompt service."""

    def add(self, prompt: Prompt) -> Prompt:
        """Persist a new prompt and return it with id assigned."""
        ...

    def list_for_user(self, user_id: str) -> list[Prompt]:
        """Prompts owned by user_id, newest first."""
        ...

    def get(self, prompt_id: int) -> Prompt | None:
        ...

    def delete(self, prompt_id: int) -> bool:
        """Delete by id; False when no such prompt exists."""
        ...


class SqlAlchemyPromptStore:
    """PromptStore over the prompts table. Each add commits on its own."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, prompt: Prompt) -> Prompt:
        self._session.add(prompt)
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        self._session.refresh(prompt)
        return prompt

    def list_for_user(self, user_id: str) -> list[Prompt]:
        return (
            self._session.query(Prompt)
            .filter(Prompt.user_id == user_id)
            .order_by(Prompt.created_at.desc(), Prompt.id.desc())
            .all()
        )

    def get(self, prompt_id: int) -> Prompt | None:
        return self._session.get(Prompt, prompt_id)

    def delete(self, prompt_id: int) -> bool:
        row = self._session.get(Prompt, prompt_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True


class InMemoryPromptStore:
    """Thread-safe dict-backed PromptStore holding detached Prompt objects."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._prompts: dict[int, Prompt] = {}
        self._next_id = 1

    def add(self, prompt: Prompt) -> Prompt:
        with self._lock:
            prompt.id = self._next_id
            if prompt.created_at is None:
                prompt.created_at = datetime.now(UTC)
            self._prompts[prompt.id] = prompt
            self._next_id += 1
            return prompt

    def list_for_user(self, user_id: str) -> list[Prompt]:
        with self._lock:
            owned = [p for p in self._prompts.values() if p.user_id == user_id]
        return sorted(owned, key=lambda p: (p.created_at, p.id), reverse=True)

    def get(self, prompt_id: int) -> Prompt | None:
        with self._lock:
            return self._prompts.get(prompt_id)

    def delete(self, prompt_id: int) -> bool:
        with self._lock:
            return self._prompts.pop(prompt_id, None) is not None
