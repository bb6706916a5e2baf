"""Tests for prompt rendering."""

import json
import re

from cardgen.modules.flashcards.models import GenerationRequest
from cardgen.modules.flashcards.parser import parse_response
from cardgen.modules.flashcards.prompts import WORKED_EXAMPLES, build_prompt


def test_prompt_is_deterministic() -> None:
    req = GenerationRequest(subject="Biology", topic="Pollination", card_count=4)
    assert build_prompt(req) == build_prompt(GenerationRequest(subject="Biology", topic="Pollination", card_count=4))


def test_prompt_names_subject_topic_and_count() -> None:
    prompt = build_prompt(GenerationRequest(subject=" Physics ", topic=" Magnetism ", card_count=7))
    assert prompt.startswith("Generate 7 flashcards")
    assert "Topic: Physics - Magnetism" in prompt
    assert 'Generate 7 flashcards for "Magnetism" in Physics.' in prompt
    assert prompt.endswith("Return ONLY the JSON array:")


def test_prompt_states_constraints() -> None:
    prompt = build_prompt(GenerationRequest(subject="Math", topic="Fractions", card_count=1))
    assert "6-18 words per question" in prompt
    assert "1-2 sentences max" in prompt


def test_worked_examples_are_valid_json_and_fit_rules() -> None:
    prompt = build_prompt(GenerationRequest(subject="Math", topic="Fractions", card_count=1))
    arrays = re.findall(r"^\[.*\]$", prompt, flags=re.MULTILINE)
    assert len(arrays) == len(WORKED_EXAMPLES)
    for raw in arrays:
        json.loads(raw)
        result = parse_response(raw)
        assert result.success is True
        assert len(result.cards) == 2
