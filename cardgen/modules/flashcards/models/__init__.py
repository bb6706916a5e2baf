from .flashcards import (
    MAX_CARD_COUNT,
    MIN_CARD_COUNT,
    GeneratedFlashcard,
    GenerationRequest,
    GenerationResult,
    ParseResult,
    TopicValidation,
)

__all__ = [
    "MAX_CARD_COUNT",
    "MIN_CARD_COUNT",
    "GeneratedFlashcard",
    "GenerationRequest",
    "GenerationResult",
    "ParseResult",
    "TopicValidation",
]
