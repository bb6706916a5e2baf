"""Parsing and structural validation of raw backend output.

The backend is asked for a bare JSON array but free text comes back in all
shapes: fenced, prefixed with chatter, or with a few cards that ignore the
length rules. Bad cards are dropped one by one; the batch only fails when
nothing usable is left.
"""

from __future__ import annotations

import json
import re
from typing import Any

from cardgen.core.logging import get_logger
from cardgen.modules.flashcards.models import GeneratedFlashcard, ParseResult

logger = get_logger(__name__)

MIN_QUESTION_WORDS = 6
MAX_QUESTION_WORDS = 18
MIN_ANSWER_SENTENCES = 1
MAX_ANSWER_SENTENCES = 2

_FENCE_RE = re.compile(r"```[A-Za-z]*")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_TRAILING_PUNCT_RE = re.compile(r"[.!?]+$")


def count_words(text: str) -> int:
    return len(text.split())


def count_sentences(text: str) -> int:
    return len([s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()])


def is_valid_card(question: str, answer: str) -> bool:
    """Check the question word bounds and answer sentence bounds."""
    words = count_words(question)
    sentences = count_sentences(answer)
    return (
        MIN_QUESTION_WORDS <= words <= MAX_QUESTION_WORDS
        and MIN_ANSWER_SENTENCES <= sentences <= MAX_ANSWER_SENTENCES
    )


def _normalize(item: Any) -> tuple[str, str] | None:
    if not isinstance(item, dict):
        return None
    question = item.get("question")
    answer = item.get("answer")
    if not isinstance(question, str) or not isinstance(answer, str):
        return None
    question = question.strip()
    answer = _TRAILING_PUNCT_RE.sub("", answer.strip()).strip()
    if not question or not answer:
        return None
    return question, answer


def parse_response(raw: str) -> ParseResult:
    cleaned = _FENCE_RE.sub("", (raw or "").strip())

    start = cleaned.find("[")
    end = cleaned.rfind("]")
    if start == -1 or end == -1 or end < start:
        logger.warning("No JSON array found in response: %r", cleaned[:200])
        return ParseResult(success=False, error="No JSON array found in response")

    try:
        data = json.loads(cleaned[start : end + 1])
    except (ValueError, RecursionError) as exc:
        logger.warning("JSON parse error: %s", exc)
        return ParseResult(success=False, error="Invalid JSON format in response")

    if not isinstance(data, list):
        return ParseResult(success=False, error="Response is not a valid array")

    cards: list[GeneratedFlashcard] = []
    for i, item in enumerate(data):
        pair = _normalize(item)
        if pair is None:
            logger.warning("Invalid card structure at index %d: %r", i, item)
            continue
        question, answer = pair
        if not is_valid_card(question, answer):
            logger.warning(
                "Card %d exceeds constraints: %d words, %d sentences",
                i + 1,
                count_words(question),
                count_sentences(answer),
            )
            continue
        cards.append(GeneratedFlashcard(question=question, answer=answer))

    if not cards:
        return ParseResult(success=False, error="No valid flashcards found in response")

    logger.info("Parsed %d valid cards from %d total", len(cards), len(data))
    return ParseResult(success=True, cards=cards)
