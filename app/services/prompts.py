"""Prompt service: validate, enrich and store prompts for an authenticated user."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError

from app.models.prompt import Prompt
from app.schemas.prompt import BatchItemResult, PromptCreate
from app.services.enrichment import enrich
from app.services.prompt_store import PromptStore

logger = logging.getLogger(__name__)

INPUT_TEXT_MIN_LEN = 3
INPUT_TEXT_MAX_LEN = 1000
# Matches prompts.source String(64).
SOURCE_MAX_LEN = 64


class PromptValidationError(Exception):
    """Raised when submitted prompt text is missing or out of bounds."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PromptNotFoundError(Exception):
    """Raised when a prompt id does not exist."""

    def __init__(self, prompt_id: int) -> None:
        self.prompt_id = prompt_id
        self.message = "Prompt not found."
        super().__init__(self.message)


def validate_input_text(input_text: str | None) -> str:
    """Return input_text if it is present and 3-1000 characters long."""
    if input_text is None or not input_text.strip():
        raise PromptValidationError("InputText is required.")
    if not INPUT_TEXT_MIN_LEN <= len(input_text) <= INPUT_TEXT_MAX_LEN:
        raise PromptValidationError(
            f"InputText must be between {INPUT_TEXT_MIN_LEN} and {INPUT_TEXT_MAX_LEN} characters."
        )
    return input_text


def validate_source(source: str | None) -> str | None:
    """Return source unchanged if it fits the source column."""
    if source is not None and len(source) > SOURCE_MAX_LEN:
        raise PromptValidationError(
            f"Source must be at most {SOURCE_MAX_LEN} characters."
        )
    return source


def build_prompt(body: PromptCreate, username: str) -> Prompt:
    """Validate body and return an enriched, unsaved Prompt owned by username."""
    text = validate_input_text(body.input_text)
    prompt = Prompt(
        user_id=username,
        input_text=text,
        response_text=body.response_text,
        source=validate_source(body.source),
        created_at=datetime.now(UTC),
    )
    return enrich(prompt)


class PromptService:
    """Create, list and delete prompts through an injected PromptStore."""

    def __init__(self, store: PromptStore) -> None:
        self._store = store

    def list_prompts(self, username: str) -> list[Prompt]:
        return self._store.list_for_user(username)

    def create_prompt(self, body: PromptCreate, username: str) -> Prompt:
        """Validate, enrich and persist one prompt. Raises PromptValidationError."""
        prompt = self._store.add(build_prompt(body, username))
        logger.info(
            "Prompt %s created by %r (category=%s, source=%s)",
            prompt.id,
            username,
            prompt.category,
            prompt.source,
        )
        return prompt

    def create_prompts_batch(
        self, bodies: list[PromptCreate], username: str
    ) -> list[BatchItemResult]:
        """
        Create each prompt independently; one bad item does not stop the rest.

        Returns one result per input, in order.
        """
        results: list[BatchItemResult] = []
        for body in bodies:
            try:
                prompt = self.create_prompt(body, username)
            except PromptValidationError as e:
                results.append(
                    BatchItemResult(prompt=body.input_text, success=False, error=e.message)
                )
                continue
            except SQLAlchemyError:
                logger.exception("Error creating prompt for %r", username)
                results.append(
                    BatchItemResult(
                        prompt=body.input_text,
                        success=False,
                        error="An error occurred while saving the prompt.",
                    )
                )
                continue
            results.append(
                BatchItemResult(
                    prompt=body.input_text,
                    success=True,
                    id=prompt.id,
                    category=prompt.category,
                    source=prompt.source,
                )
            )
        return results

    def delete_prompt(self, prompt_id: int) -> None:
        """Delete a prompt by id. Raises PromptNotFoundError."""
        if not self._store.delete(prompt_id):
            raise PromptNotFoundError(prompt_id)
        logger.info("Prompt %s deleted", prompt_id)
