"""Prompt text for the live generation backend.

Everything here is plain string assembly so the same request always renders
the same prompt.
"""

from __future__ import annotations

import json

from cardgen.modules.flashcards.models import GenerationRequest

SYSTEM_PROMPT = (
    "You are an expert educator who writes short, accurate study flashcards. "
    "Reply with a JSON array of objects that each have exactly two string keys, "
    '"question" and "answer". No markdown, no code fences, no commentary.'
)

WORKED_EXAMPLES: tuple[tuple[str, tuple[dict[str, str], ...]], ...] = (
    (
        "Biology - Pollination",
        (
            {
                "question": "How do flowers transfer pollen between plants?",
                "answer": "Flowers transfer pollen through wind, insects, birds, and other animals.",
            },
            {
                "question": "What is the male reproductive part of a flower?",
                "answer": "The stamen is the male reproductive part that produces pollen.",
            },
        ),
    ),
    (
        "History - World War II",
        (
            {
                "question": "In which year did World War II begin in Europe?",
                "answer": "World War II began in 1939 when Germany invaded Poland.",
            },
            {
                "question": "Which countries were the main Allied powers in World War II?",
                "answer": "The main Allied powers were the United States, the United Kingdom, and the Soviet Union.",
            },
        ),
    ),
    (
        "Math - Basic Algebra",
        (
            {
                "question": "What does a variable represent in an algebraic expression?",
                "answer": "A variable is a symbol that stands for an unknown or changing number.",
            },
            {
                "question": "How do you solve for x in 2x + 3 = 7?",
                "answer": "Subtract 3 from both sides and then divide by 2 to get x = 2.",
            },
        ),
    ),
)


def _render_examples() -> str:
    blocks = []
    for title, cards in WORKED_EXAMPLES:
        blocks.append(f'For "{title}":\n{json.dumps(list(cards), ensure_ascii=False)}')
    return "\n\n".join(blocks)


def build_prompt(request: GenerationRequest) -> str:
    subject = request.subject.strip()
    topic = request.topic.strip()
    n = int(request.card_count)
    return (
        f"Generate {n} flashcards with the following constraints:\n"
        "\n"
        "QUESTION CONSTRAINTS:\n"
        "- 6-18 words per question\n"
        "- 1-2 sentences only\n"
        "- Must stay on-topic with the set's subject\n"
        "- Should not lean toward any bias or opinion\n"
        "- Should be generic and widely applicable, not hyper-specific\n"
        "\n"
        "ANSWER CONSTRAINTS:\n"
        "- 1-2 sentences max\n"
        "- Simple and easy to understand\n"
        "- Must be relevant to the generated question\n"
        "- Avoid fluff, keep it direct\n"
        "\n"
        f"Topic: {subject} - {topic}\n"
        "\n"
        "EXAMPLES:\n"
        "\n"
        f"{_render_examples()}\n"
        "\n"
        f'Generate {n} flashcards for "{topic}" in {subject}.\n'
        "Ensure questions are 6-18 words and answers are 1-2 sentences.\n"
        "Return ONLY the JSON array:"
    )
