"""Pydantic models for flashcard generation requests and results.

The request model deliberately carries no range constraints: out-of-range
values are reported back to the caller as a failed ``GenerationResult``
instead of raising a validation error.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


MIN_CARD_COUNT = 1
MAX_CARD_COUNT = 15


class GenerationRequest(BaseModel):
    """What to generate: a subject, a topic inside it, and how many cards."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    subject: str = ""
    topic: str = ""
    # Left loose so a malformed count is reported as a failed result.
    card_count: int | float | str | None = Field(default=5, alias="cardCount")


class GeneratedFlashcard(BaseModel):
    """Simple question/answer flashcard."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class GenerationResult(BaseModel):
    """Uniform outcome of a generation call."""

    success: bool
    cards: list[GeneratedFlashcard] | None = None
    warning: str | None = None
    error: str | None = None

    @classmethod
    def failure(cls, error: str, warning: str | None = None) -> "GenerationResult":
        return cls(success=False, error=error, warning=warning)


class TopicValidation(BaseModel):
    ok: bool
    reason: str | None = None
    suggestion: str | None = None


class ParseResult(BaseModel):
    success: bool
    cards: list[GeneratedFlashcard] = Field(default_factory=list)
    error: str | None = None
