"""Topic screening ahead of generation, plus per-subject topic suggestions."""

from __future__ import annotations

from typing import Iterable

from cardgen.modules.flashcards.models import TopicValidation

MIN_TOPIC_LENGTH = 3
MAX_TOPIC_LENGTH = 100

COMPLEX_INDICATORS: tuple[str, ...] = (
    "advanced doctoral",
    "phd",
    "graduate-level",
    "graduate",
    "post-doctoral",
    "highly specialized",
    "research methodology",
    "meta-analysis",
    "advanced quantum mechanics",
    "theoretical",
    "epistemology",
    "ontology",
    "phenomenology",
    "hermeneutics",
    "postmodern",
    "neurosurgery",
    "pharmacology",
    "pathophysiology",
    "biochemistry",
)

INAPPROPRIATE_INDICATORS: tuple[str, ...] = (
    "adult content",
    "explicit",
    "inappropriate",
    "nsfw",
)

SUGGESTED_TOPICS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("science", ("Photosynthesis", "Cell Division", "Ecosystems", "Chemical Reactions", "States of Matter")),
    ("biology", ("DNA Structure", "Cellular Respiration", "Evolution", "Genetics", "Human Body Systems")),
    ("chemistry", ("Periodic Table", "Chemical Bonds", "Acids and Bases", "Organic Compounds", "Reactions")),
    ("physics", ("Newton's Laws", "Energy", "Waves", "Electricity", "Magnetism")),
    ("math", ("Algebra Basics", "Geometry", "Fractions", "Equations", "Graphing")),
    ("history", ("World War I", "Ancient Civilizations", "Industrial Revolution", "Cold War", "Renaissance")),
    ("geography", ("Continents", "Climate Zones", "Mountain Ranges", "Ocean Currents", "Countries")),
    ("programming", ("Variables", "Functions", "Loops", "Data Types", "Algorithms")),
)

GENERIC_SUGGESTIONS: tuple[str, ...] = (
    "Basic Concepts",
    "Key Terms",
    "Main Ideas",
    "Important Facts",
    "Core Principles",
)


class TopicValidator:
    """Rejects topics that are too short, too long, too specialized or off-policy.

    The word lists are module-level tuples shared by every instance and never
    mutated, so one validator can serve concurrent requests.
    """

    def __init__(
        self,
        complex_indicators: Iterable[str] = COMPLEX_INDICATORS,
        inappropriate_indicators: Iterable[str] = INAPPROPRIATE_INDICATORS,
    ) -> None:
        self.complex_indicators = tuple(complex_indicators)
        self.inappropriate_indicators = tuple(inappropriate_indicators)

    def validate(self, subject: str, topic: str) -> TopicValidation:
        clean = (topic or "").strip()

        if len(clean) < MIN_TOPIC_LENGTH:
            return TopicValidation(
                ok=False,
                reason="Topic is too short or empty",
                suggestion=(
                    "Please provide a more detailed topic (at least 3 characters). "
                    'For example: "Basic Math" instead of "Math"'
                ),
            )

        if len(clean) > MAX_TOPIC_LENGTH:
            return TopicValidation(
                ok=False,
                reason="Topic is too long and complex",
                suggestion=(
                    "Please use a shorter, more specific topic. "
                    'For example: "World War II" instead of a long description'
                ),
            )

        lowered = clean.lower()
        complex_terms = [t for t in self.complex_indicators if t in lowered]
        if complex_terms:
            return TopicValidation(
                ok=False,
                reason=(
                    "Topic appears too specialized for general flashcard generation "
                    f"(contains: {', '.join(complex_terms)})"
                ),
                suggestion=(
                    "Try breaking down the topic into more fundamental concepts. "
                    'For example: "Basic Physics" instead of "Advanced Quantum Mechanics"'
                ),
            )

        if any(t in lowered for t in self.inappropriate_indicators):
            return TopicValidation(
                ok=False,
                reason="Topic contains inappropriate content",
                suggestion="Please choose an educational topic suitable for learning",
            )

        return TopicValidation(ok=True)

    def validate_many(self, topics: Iterable[str]) -> list[TopicValidation]:
        return [self.validate("", t) for t in topics]

    @staticmethod
    def suggest_topics(subject: str) -> list[str]:
        lowered = (subject or "").lower()
        for key, topics in SUGGESTED_TOPICS:
            if key in lowered:
                return list(topics)
        return list(GENERIC_SUGGESTIONS)
