"""Request/response schemas for prompt endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class PromptCreate(BaseModel):
    """
    Prompt submission. input_text is validated by the prompt service so batch
    requests can report per-item failures instead of rejecting the whole body.
    """

    model_config = {"extra": "ignore"}

    input_text: str | None = Field(default=None, description="Prompt text, 3-1000 characters")
    response_text: str | None = Field(default=None, description="Optional model response")
    source: str | None = Field(
        default=None,
        description="Origin label; derived from the text when omitted",
    )


class PromptRead(BaseModel):
    """Stored prompt."""

    model_config = {"from_attributes": True}

    id: int
    user_id: str
    input_text: str
    response_text: str | None = None
    category: str | None = None
    source: str | None = None
    created_at: datetime


class BatchItemResult(BaseModel):
    """Outcome for one item of a batch submission."""

    prompt: str | None = Field(default=None, description="Submitted input_text")
    success: bool
    id: int | None = None
    category: str | None = None
    source: str | None = None
    error: str | None = None


class BatchResponse(BaseModel):
    """Per-item outcomes of POST /prompts/batch, in request order."""

    results: list[BatchItemResult]
