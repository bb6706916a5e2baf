"""Flashcards module exports."""

from .models import GeneratedFlashcard, GenerationRequest, GenerationResult
from .backend import GenerativeBackend, backend_from_settings, build_backend
from .main import FlashcardsGenerator

__all__ = [
    "GeneratedFlashcard",
    "GenerationRequest",
    "GenerationResult",
    "GenerativeBackend",
    "backend_from_settings",
    "build_backend",
    "FlashcardsGenerator",
]
