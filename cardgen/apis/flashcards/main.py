from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from cardgen.core.config import settings
from cardgen.core.logging import get_logger, request_logger
from cardgen.modules.flashcards.backend import backend_from_settings
from cardgen.modules.flashcards.main import FlashcardsGenerator
from cardgen.modules.flashcards.models import GenerationRequest
from cardgen.modules.flashcards.validation import TopicValidator
from .schemas import (
    ApiStatusResponse,
    GenerateRequest,
    SuggestionsResponse,
    TopicValidationRead,
    ValidateTopicsRequest,
    ValidateTopicsResponse,
)


router = APIRouter()
logger = get_logger(__name__)


@lru_cache
def get_flashcards_generator() -> FlashcardsGenerator:
    """Process-wide generator, built once from settings on first use."""
    cfg = settings.generation
    return FlashcardsGenerator(
        backend_from_settings(cfg),
        timeout=cfg.timeout_seconds,
    )


@lru_cache
def get_topic_validator() -> TopicValidator:
    return TopicValidator()


Generator = Annotated[FlashcardsGenerator, Depends(get_flashcards_generator)]
Validator = Annotated[TopicValidator, Depends(get_topic_validator)]


@router.post(
    f"/{settings.app.version}/flashcard/generate",
    tags=["flashcards"],
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Invalid or rejected request"}},
)
async def generate_flashcards(req: GenerateRequest, generator: Generator) -> JSONResponse:
    log = request_logger(__name__)
    log.info(
        "Generate request: subject=%r topic=%r count=%r",
        req.subject,
        req.topic,
        req.card_count,
    )

    result = await generator.generate(
        GenerationRequest(
            subject=req.subject.strip(),
            topic=req.topic.strip(),
            card_count=req.card_count,
        )
    )

    log.info(
        "Generation result: success=%s cards=%d warning=%s error=%s",
        result.success,
        len(result.cards or []),
        bool(result.warning),
        bool(result.error),
    )
    return JSONResponse(
        content=result.model_dump(exclude_none=True),
        status_code=status.HTTP_200_OK if result.success else status.HTTP_400_BAD_REQUEST,
    )


@router.get(
    f"/{settings.app.version}/flashcard/validate",
    response_model=SuggestionsResponse,
    tags=["flashcards"],
)
async def suggest_topics(
    validator: Validator,
    subject: str | None = Query(default=None),
) -> SuggestionsResponse:
    if not subject or not subject.strip():
        raise HTTPException(status_code=400, detail="Subject parameter is required")
    return SuggestionsResponse(
        suggestions=validator.suggest_topics(subject),
        subject=subject.strip(),
    )


@router.post(
    f"/{settings.app.version}/flashcard/validate",
    response_model=ValidateTopicsResponse,
    tags=["flashcards"],
)
async def validate_topics(req: ValidateTopicsRequest, validator: Validator) -> ValidateTopicsResponse:
    results = [
        TopicValidationRead(
            topic=topic,
            is_valid=verdict.ok,
            reason=verdict.reason,
            suggestion=verdict.suggestion,
        )
        for topic, verdict in zip(req.topics, validator.validate_many(req.topics))
    ]
    return ValidateTopicsResponse(
        validation_results=results,
        overall_valid=all(r.is_valid for r in results),
    )


@router.get(
    f"/{settings.app.version}/flashcard/status",
    response_model=ApiStatusResponse,
    tags=["flashcards"],
)
async def backend_status(generator: Generator) -> ApiStatusResponse:
    return ApiStatusResponse(**generator.api_status())
