"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from cardgen.apis.flashcards.main import get_flashcards_generator
from cardgen.modules.flashcards.main import FlashcardsGenerator
from cardgen.modules.flashcards.parser import count_sentences, count_words
from main import app


class FakeBackend:
    """Stands in for a live backend: canned reply, raised error, or a slow reply."""

    def __init__(
        self,
        reply: str = "[]",
        error: Exception | None = None,
        delay: float = 0.0,
        name: str = "fake",
    ) -> None:
        self.reply = reply
        self.error = error
        self.delay = delay
        self.name = name
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


def assert_card_shape(question: str, answer: str) -> None:
    assert 6 <= count_words(question) <= 18, question
    assert 1 <= count_sentences(answer) <= 2, answer


@pytest.fixture
def offline_generator() -> FlashcardsGenerator:
    return FlashcardsGenerator()


@pytest.fixture
def client(offline_generator: FlashcardsGenerator) -> Generator[TestClient, Any, None]:
    """Test client whose generator never reaches a live backend."""
    app.dependency_overrides[get_flashcards_generator] = lambda: offline_generator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
