"""Tests for parsing raw backend replies."""

import json

from cardgen.modules.flashcards.parser import (
    count_sentences,
    count_words,
    is_valid_card,
    parse_response,
)

GOOD = {
    "question": "What is the male reproductive part of a flower?",
    "answer": "The stamen is the male reproductive part that produces pollen.",
}
SHORT_QUESTION = {"question": "Define the stamen?", "answer": "The male part of a flower."}


class TestCounting:
    def test_count_words_splits_on_any_whitespace(self) -> None:
        assert count_words("  How do\tflowers\ntransfer pollen?  ") == 5

    def test_count_sentences_ignores_empty_fragments(self) -> None:
        assert count_sentences("One. Two!! ") == 2
        assert count_sentences("No terminal punctuation") == 1
        assert count_sentences("...") == 0

    def test_is_valid_card_bounds(self) -> None:
        assert is_valid_card("one two three four five six", "Fine")
        assert not is_valid_card("one two three four five", "Fine")
        assert not is_valid_card(" ".join(["w"] * 19), "Fine")
        assert not is_valid_card("one two three four five six", "A. B. C.")


class TestParseResponse:
    def test_bare_array(self) -> None:
        result = parse_response(json.dumps([GOOD]))
        assert result.success is True
        assert len(result.cards) == 1
        assert result.cards[0].question == GOOD["question"]

    def test_strips_trailing_answer_punctuation(self) -> None:
        result = parse_response(json.dumps([GOOD]))
        assert result.cards[0].answer == "The stamen is the male reproductive part that produces pollen"

    def test_fenced_array_parses_like_bare_array(self) -> None:
        bare = parse_response(json.dumps([GOOD]))
        fenced = parse_response("```json\n" + json.dumps([GOOD]) + "\n```")
        assert fenced.success is True
        assert fenced.cards == bare.cards

    def test_surrounding_chatter_is_ignored(self) -> None:
        raw = "Sure! Here are your cards:\n" + json.dumps([GOOD]) + "\nHope this helps."
        assert parse_response(raw).success is True

    def test_missing_array(self) -> None:
        result = parse_response('{"question": "x", "answer": "y"}')
        assert result.success is False
        assert result.error == "No JSON array found in response"

    def test_invalid_json(self) -> None:
        result = parse_response('[{"question": "unterminated]')
        assert result.success is False
        assert result.error == "Invalid JSON format in response"

    def test_integer_past_digit_limit(self) -> None:
        result = parse_response("[" + "1" * 5000 + "]")
        assert result.success is False
        assert result.cards == []

    def test_nesting_past_recursion_limit(self) -> None:
        result = parse_response("[" * 100000 + "]" * 100000)
        assert result.success is False
        assert result.error == "Invalid JSON format in response"

    def test_drops_short_question_keeps_rest(self) -> None:
        result = parse_response(json.dumps([GOOD, SHORT_QUESTION]))
        assert result.success is True
        assert len(result.cards) == 1
        assert result.cards[0].question == GOOD["question"]

    def test_drops_malformed_entries(self) -> None:
        raw = json.dumps(
            [
                "just a string",
                {"question": GOOD["question"]},
                {"question": GOOD["question"], "answer": 42},
                {"question": "   ", "answer": "Something"},
                GOOD,
            ]
        )
        result = parse_response(raw)
        assert len(result.cards) == 1

    def test_drops_answers_with_too_many_sentences(self) -> None:
        long_answer = dict(GOOD, answer="First point. Second point. Third point.")
        result = parse_response(json.dumps([long_answer]))
        assert result.success is False
        assert result.error == "No valid flashcards found in response"

    def test_all_invalid_cards(self) -> None:
        result = parse_response(json.dumps([SHORT_QUESTION]))
        assert result.success is False
        assert result.error == "No valid flashcards found in response"

    def test_empty_reply(self) -> None:
        assert parse_response("").error == "No JSON array found in response"
