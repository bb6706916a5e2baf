"""Flashcards service class used by API handlers and the CLI.

``FlashcardsGenerator`` validates the request, tries the live backend when one
was injected, and otherwise (or on any backend trouble) assembles cards from
the knowledge bank and subject templates. Callers always get a
``GenerationResult`` back; only malformed or policy-rejected input fails.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from cardgen.core.logging import get_logger
from cardgen.modules.flashcards import knowledge_bank, templates
from cardgen.modules.flashcards.backend import GenerativeBackend
from cardgen.modules.flashcards.models import (
    MAX_CARD_COUNT,
    MIN_CARD_COUNT,
    GeneratedFlashcard,
    GenerationRequest,
    GenerationResult,
)
from cardgen.modules.flashcards.parser import parse_response
from cardgen.modules.flashcards.prompts import build_prompt
from cardgen.modules.flashcards.validation import TopicValidator

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

NO_BACKEND_WARNING = (
    "Generated using smart templates. Configure a live generation backend "
    "(MODEL_PROVIDER and its API key) for model-generated flashcards."
)
BACKEND_FAILED_WARNING = (
    "Live generation was unavailable, so these flashcards were generated "
    "using smart templates instead."
)
UNEXPECTED_ERROR = "Unexpected error during flashcard generation"


class FlashcardsGenerator:
    """Generates exactly ``card_count`` flashcards for a subject and topic."""

    def __init__(
        self,
        backend: Optional[GenerativeBackend] = None,
        *,
        validator: Optional[TopicValidator] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.backend = backend
        self.validator = validator or TopicValidator()
        self.timeout = timeout

    @property
    def backend_configured(self) -> bool:
        return self.backend is not None

    def api_status(self) -> dict:
        if self.backend is not None:
            return {
                "configured": True,
                "message": f"Live generation backend '{self.backend.name}' is configured and ready to use",
            }
        return {
            "configured": False,
            "message": "No live generation backend is configured. Using smart templates instead.",
        }

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        try:
            return await self._generate(request)
        except Exception:
            logger.exception("Unexpected error during generation")
            return GenerationResult.failure(UNEXPECTED_ERROR)

    def generate_sync(self, request: GenerationRequest) -> GenerationResult:
        """Synchronous wrapper if an event loop is unavailable."""
        return asyncio.run(self.generate(request))

    async def _generate(self, request: GenerationRequest) -> GenerationResult:
        logger.info(
            "Starting flashcard generation: subject=%r topic=%r count=%r",
            request.subject,
            request.topic,
            request.card_count,
        )

        rejected = self._check_request(request)
        if rejected is not None:
            return rejected

        subject = request.subject.strip()
        topic = request.topic.strip()
        count = request.card_count

        if self.backend is None:
            logger.info("No live backend configured, using fallback generation")
            return self._fallback_result(topic, subject, count, NO_BACKEND_WARNING)

        cards = await self._try_backend(self.backend, request)
        if cards is None:
            return self._fallback_result(topic, subject, count, BACKEND_FAILED_WARNING)

        if len(cards) >= count:
            return GenerationResult(success=True, cards=cards[:count])

        missing = count - len(cards)
        logger.info("Backend returned %d of %d cards, padding from fallback", len(cards), count)
        return GenerationResult(
            success=True,
            cards=cards + self.fallback_cards(topic, subject, missing),
            warning=(
                f"Live generation produced {len(cards)} of {count} flashcards; "
                f"the remaining {missing} were generated using smart templates."
            ),
        )

    def _check_request(self, request: GenerationRequest) -> Optional[GenerationResult]:
        if not (request.subject or "").strip():
            return GenerationResult.failure(
                "Subject is required",
                'Please enter a subject like "Math", "History", "Science", etc.',
            )
        if not (request.topic or "").strip():
            return GenerationResult.failure(
                "Topic is required",
                'Please enter a specific topic like "Basic Algebra", "World War II", "Human Brain", etc.',
            )
        count = request.card_count
        if isinstance(count, bool) or not isinstance(count, int) or not (
            MIN_CARD_COUNT <= count <= MAX_CARD_COUNT
        ):
            return GenerationResult.failure(
                f"Card count must be between {MIN_CARD_COUNT} and {MAX_CARD_COUNT}",
                "For best results, try generating 5-10 cards at a time",
            )

        verdict = self.validator.validate(request.subject, request.topic)
        if not verdict.ok:
            logger.info("Topic rejected: %s", verdict.reason)
            return GenerationResult.failure(
                verdict.reason or "Topic validation failed", verdict.suggestion
            )
        return None

    async def _try_backend(
        self, backend: GenerativeBackend, request: GenerationRequest
    ) -> Optional[list[GeneratedFlashcard]]:
        prompt = build_prompt(request)
        try:
            raw = await asyncio.wait_for(backend.complete(prompt), timeout=self.timeout)
            parsed = parse_response(raw)
        except asyncio.TimeoutError:
            logger.warning("Backend %s timed out after %ss", backend.name, self.timeout)
            return None
        except Exception as exc:
            logger.warning("Backend %s failed: %s", backend.name, exc)
            return None

        if not parsed.success:
            logger.warning("Backend reply unusable: %s", parsed.error)
            return None
        return parsed.cards

    def fallback_cards(self, topic: str, subject: str, count: int) -> list[GeneratedFlashcard]:
        """Knowledge bank cards first, topped up from the subject templates."""
        curated = knowledge_bank.lookup(topic.lower())[:count]
        if len(curated) < count:
            curated += templates.generate(topic, subject, count - len(curated))
        return curated

    def _fallback_result(
        self, topic: str, subject: str, count: int, warning: str
    ) -> GenerationResult:
        cards = self.fallback_cards(topic, subject, count)
        logger.info("Fallback generated %d cards", len(cards))
        return GenerationResult(success=True, cards=cards, warning=warning)
