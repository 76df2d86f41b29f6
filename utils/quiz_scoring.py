"""
Quiz Scoring and Weak-Topic Analysis

Scores a quiz attempt and groups accuracy by topic.

Alignment contract:
- answers[i] belongs to mcqs[i]; there are no question ids.
- A question with no answer at its position (answers shorter than mcqs)
  counts as incorrect. Answers beyond the last question are ignored.
- The recorded `correct` value is not range-checked against the options;
  it is only compared with the submitted answer.
- A question without a `correct` key is never answered correctly, not even
  by a null answer; an explicit null `correct` does match a null answer.

Topic identity is the trimmed, case-sensitive label, so "SQL Joins" and
"SQL joins" are tracked as two topics.
A whitespace-only label trims to the empty topic "".
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from numbers import Number
from typing import Any, Dict, List, Mapping, Sequence

DEFAULT_TOPIC = "General"
WEAK_TOPIC_THRESHOLD = 0.5

_MISSING = object()


@dataclass
class TopicStats:
    correct: int = 0
    total: int = 0
    accuracy: float = 0.0


@dataclass
class QuizResult:
    score: int
    total: int
    percentage: float
    topic_stats: Dict[str, TopicStats] = field(default_factory=dict)
    weak_topics: List[str] = field(default_factory=list)


def topic_label(question: Mapping[str, Any]) -> str:
    """Topic of a question, trimmed; "General" only when the label is absent or empty."""
    return str(question.get("topic") or DEFAULT_TOPIC).strip()


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round halves away from zero on the exact binary value of `value`.

    3.125 becomes 3.13, where built-in round() would give 3.12.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def answers_match(submitted: Any, correct: Any) -> bool:
    """
    Strict equality without type coercion.

    Numbers compare by value (1 matches 1.0); booleans are not numbers;
    every other value must have the same type and compare equal. "1" never
    matches 1 and True never matches 1.
    """
    if submitted is _MISSING or correct is _MISSING:
        return False
    submitted_is_number = isinstance(submitted, Number) and not isinstance(submitted, bool)
    correct_is_number = isinstance(correct, Number) and not isinstance(correct, bool)
    if submitted_is_number or correct_is_number:
        return submitted_is_number and correct_is_number and submitted == correct
    return type(submitted) is type(correct) and submitted == correct


def score_quiz(mcqs: Sequence[Mapping[str, Any]], answers: Sequence[Any]) -> QuizResult:
    """
    Score a quiz attempt.

    Args:
        mcqs: Questions with at least `correct` and optionally `topic`
        answers: Submitted answers aligned by position

    Returns:
        QuizResult with topic stats in first-seen order and the weak topics
        (accuracy strictly below WEAK_TOPIC_THRESHOLD)
    """
    score = 0
    topic_stats: Dict[str, TopicStats] = {}

    for i, question in enumerate(mcqs):
        topic = topic_label(question)
        stats = topic_stats.setdefault(topic, TopicStats())
        stats.total += 1

        submitted = answers[i] if i < len(answers) else _MISSING
        if answers_match(submitted, question.get("correct", _MISSING)):
            stats.correct += 1
            score += 1

    weak_topics = []
    for topic, stats in topic_stats.items():
        stats.accuracy = stats.correct / stats.total if stats.total else 0
        if stats.accuracy < WEAK_TOPIC_THRESHOLD:
            weak_topics.append(topic)

    total = len(mcqs)
    percentage = round_half_up(score / total * 100) if total else 0.0

    return QuizResult(
        score=score,
        total=total,
        percentage=percentage,
        topic_stats=topic_stats,
        weak_topics=weak_topics,
    )
