"""Prompt endpoints: list, create (single and batch) and admin delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.prompt import BatchResponse, PromptCreate, PromptRead
from app.services.prompt_store import SqlAlchemyPromptStore
from app.services.prompts import (
    PromptNotFoundError,
    PromptService,
    PromptValidationError,
)

router = APIRouter()

MAX_PROMPTS_PER_BATCH = 100


def get_prompt_service(db: Annotated[Session, Depends(get_db)]) -> PromptService:
    """Dependency: prompt service bound to this request's session."""
    return PromptService(SqlAlchemyPromptStore(db))


@router.get("", response_model=list[PromptRead])
def list_prompts(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PromptService, Depends(get_prompt_service)],
) -> list[PromptRead]:
    """Return the caller's prompts, newest first."""
    return [PromptRead.model_validate(p) for p in service.list_prompts(user.username)]


@router.post("", response_model=PromptRead, status_code=201)
def create_prompt(
    body: PromptCreate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PromptService, Depends(get_prompt_service)],
) -> PromptRead:
    """
    Store a prompt for the caller.

    input_text must be 3-1000 characters. category is derived from the text;
    source is derived only when the request does not supply one.
    """
    try:
        prompt = service.create_prompt(body, user.username)
    except PromptValidationError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    return PromptRead.model_validate(prompt)


@router.post("/batch", response_model=BatchResponse)
def create_prompts_batch(
    body: list[PromptCreate],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PromptService, Depends(get_prompt_service)],
) -> BatchResponse:
    """Store several prompts; each item reports its own success or error."""
    if not body:
        raise HTTPException(status_code=422, detail="No prompts provided.")
    if len(body) > MAX_PROMPTS_PER_BATCH:
        raise HTTPException(
            status_code=422,
            detail=f"At most {MAX_PROMPTS_PER_BATCH} prompts are allowed per request.",
        )
    return BatchResponse(results=service.create_prompts_batch(body, user.username))


@router.delete("/{prompt_id}", status_code=204)
def delete_prompt(
    prompt_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[PromptService, Depends(get_prompt_service)],
) -> Response:
    """Delete any prompt by id (Admin only)."""
    try:
        service.delete_prompt(prompt_id)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
