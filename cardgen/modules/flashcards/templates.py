"""Subject-aware template cards for topics the knowledge bank does not cover.

Templates may name the topic. When the topic is too long to keep a question
inside the word bounds it is replaced with "this topic".
"""

from __future__ import annotations

from typing import NamedTuple, Sequence, TypeVar

from cardgen.modules.flashcards.models import GeneratedFlashcard
from cardgen.modules.flashcards.parser import (
    MAX_QUESTION_WORDS,
    MIN_QUESTION_WORDS,
    count_words,
)

T = TypeVar("T")

TOPIC_STAND_IN = "this topic"


class TemplateBucket(NamedTuple):
    name: str
    keywords: tuple[str, ...]
    pairs: tuple[tuple[str, str], ...]


SUBJECT_BUCKETS: tuple[TemplateBucket, ...] = (
    TemplateBucket(
        "math",
        ("math",),
        (
            ("What is the first step when solving a problem about {topic}?",
             "Identify what is given and what you need to find before choosing a method."),
            ("How can you check that an answer about {topic} is correct?",
             "Substitute the answer back into the original problem and confirm both sides agree."),
            ("Which basic operations are used in almost every math problem?",
             "Addition, subtraction, multiplication, and division are used in almost every problem."),
            ("What does the order of operations tell you to do?",
             "Work inside parentheses first, then exponents, then multiply or divide, then add or subtract."),
            ("Why is it helpful to estimate an answer before calculating it exactly?",
             "An estimate shows roughly what to expect, so it helps you spot calculation mistakes."),
        ),
    ),
    TemplateBucket(
        "history",
        ("history",),
        (
            ("What were the main causes behind {topic}?",
             "Most historical events have several causes, including political, economic, and social pressures."),
            ("Who were the key people or groups involved in {topic}?",
             "Identify the leaders, groups, and ordinary people whose decisions shaped the events."),
            ("Why is it useful to build a timeline when studying history?",
             "A timeline shows the order of events, which makes causes and effects easier to follow."),
            ("What is the difference between a primary and a secondary source?",
             "A primary source comes from the time being studied. A secondary source interprets events later."),
            ("What long-term effects did {topic} have on society?",
             "Look for lasting changes in government, the economy, borders, and everyday life."),
        ),
    ),
    TemplateBucket(
        "literature",
        ("literature", "english"),
        (
            ("What is the main theme explored in {topic}?",
             "The theme is the central message or insight about life that the work expresses."),
            ("How does the setting shape the story in {topic}?",
             "The time and place influence the characters' choices, the mood, and the conflict."),
            ("What is the difference between a protagonist and an antagonist?",
             "The protagonist is the main character. The antagonist is the character or force that opposes them."),
            ("What is the purpose of figurative language in a text?",
             "Figurative language like metaphor and simile creates vivid images and deeper meaning."),
            ("How can you identify the point of view of a narrator?",
             "Check the pronouns the narrator uses and how much they know about other characters."),
        ),
    ),
    TemplateBucket(
        "language",
        ("language", "french", "spanish"),
        (
            ("What is the best daily habit for learning vocabulary about {topic}?",
             "Review a small set of words every day using spaced repetition."),
            ("Why is it important to practice speaking a new language aloud?",
             "Speaking aloud builds pronunciation and makes recalling words faster in real conversations."),
            ("How does learning verb conjugations help you build sentences?",
             "Conjugations show who is acting and when, which is the core of most sentences."),
            ("What is a cognate when learning a foreign language?",
             "A cognate is a word that looks and means similar in two languages."),
            ("How can listening to native speakers improve your language skills?",
             "Listening trains your ear for natural rhythm, pronunciation, and common phrases."),
        ),
    ),
    TemplateBucket(
        "business",
        ("business", "accounting"),
        (
            ("What is the basic accounting equation used on a balance sheet?",
             "Assets equal liabilities plus owner's equity."),
            ("How is profit calculated from revenue and expenses?",
             "Profit is what remains after subtracting total expenses from total revenue."),
            ("What information does a balance sheet show about a business?",
             "A balance sheet shows what a business owns and owes at a specific date."),
            ("What is the difference between fixed costs and variable costs?",
             "Fixed costs stay the same regardless of output. Variable costs rise and fall with production."),
            ("Why is positive cash flow important for a small business?",
             "Positive cash flow means the business can pay its bills and invest without borrowing."),
        ),
    ),
)

STUDY_SKILLS_BUCKET = TemplateBucket(
    "study skills",
    (),
    (
        ("What is the most important idea to remember about {topic}?",
         "Focus on the core definition first, then connect the supporting details to it."),
        ("How can you explain {topic} in your own words?",
         "Summarize the idea as if teaching a friend, using simple language and one example."),
        ("Why does spaced repetition help you remember new information longer?",
         "Reviewing material at growing intervals strengthens memory just as it starts to fade."),
        ("How can breaking a big subject into smaller parts help you learn?",
         "Smaller parts are easier to understand and review, and they build on each other step by step."),
        ("What is active recall and why is it effective for studying?",
         "Active recall means testing yourself instead of rereading. Retrieving information makes it stick much better."),
    ),
)


def select_bucket(subject: str) -> TemplateBucket:
    lowered = (subject or "").lower()
    for bucket in SUBJECT_BUCKETS:
        if any(k in lowered for k in bucket.keywords):
            return bucket
    return STUDY_SKILLS_BUCKET


def cycle(items: Sequence[T], count: int) -> list[T]:
    """Take ``count`` items in order, wrapping around when ``items`` runs out."""
    if not items or count <= 0:
        return []
    return [items[i % len(items)] for i in range(count)]


def _render_question(template: str, topic: str) -> str:
    question = template.format(topic=topic or TOPIC_STAND_IN)
    if MIN_QUESTION_WORDS <= count_words(question) <= MAX_QUESTION_WORDS:
        return question
    return template.format(topic=TOPIC_STAND_IN)


def render_bucket(bucket: TemplateBucket, topic: str) -> list[GeneratedFlashcard]:
    topic = (topic or "").strip()
    return [
        GeneratedFlashcard(question=_render_question(q, topic), answer=a)
        for q, a in bucket.pairs
    ]


def generate(topic: str, subject: str, count: int) -> list[GeneratedFlashcard]:
    """Exactly ``count`` template cards for the subject's bucket."""
    return cycle(render_bucket(select_bucket(subject), topic), count)
