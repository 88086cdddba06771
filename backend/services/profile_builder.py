"""Profile builder: Likert answers -> 0-100 RIASEC profile.

Steps:
1. Validate answers against the question bank
2. Group scores by the category of their question
3. Average per category (a category with no answers averages to 0)
4. Rescale the 1-5 mean to 0-100
"""

import logging
from collections import defaultdict
from collections.abc import Sequence

from models.schemas.riasec import (
    RIASEC_ORDER,
    RiasecAnswer,
    RiasecCategory,
    RiasecProfile,
    RiasecQuestion,
)
from services.errors import ValidationError

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


def _rescale(mean: float) -> float:
    """Map a 1-5 mean onto 0-100, clamped."""
    percent = (mean - MIN_SCORE) / (MAX_SCORE - MIN_SCORE) * 100
    return min(100.0, max(0.0, percent))


def _index_questions(questions: Sequence[RiasecQuestion]) -> dict[int, RiasecQuestion]:
    return {q.id: q for q in questions}


def _validate(answers: Sequence[RiasecAnswer], by_id: dict[int, RiasecQuestion]) -> None:
    if not answers:
        raise ValidationError("At least one RIASEC answer is required")

    seen: set[int] = set()
    for answer in answers:
        if answer.question_id not in by_id:
            raise ValidationError(f"Unknown question id: {answer.question_id}")
        if not MIN_SCORE <= answer.score <= MAX_SCORE:
            raise ValidationError(
                f"Score for question {answer.question_id} must be between "
                f"{MIN_SCORE} and {MAX_SCORE}, got {answer.score}"
            )
        if answer.question_id in seen:
            raise ValidationError(f"Question {answer.question_id} answered more than once")
        seen.add(answer.question_id)


def missing_categories(
    answers: Sequence[RiasecAnswer],
    questions: Sequence[RiasecQuestion],
) -> list[RiasecCategory]:
    """Categories that received no answers, in RIASEC order."""
    by_id = _index_questions(questions)
    answered = {by_id[a.question_id].category for a in answers if a.question_id in by_id}
    return [c for c in RIASEC_ORDER if c not in answered]


def require_complete(
    answers: Sequence[RiasecAnswer],
    questions: Sequence[RiasecQuestion],
) -> None:
    """Raise ValidationError unless every question is answered exactly once."""
    expected = {q.id for q in questions}
    answered = [a.question_id for a in answers]
    if len(answered) != len(set(answered)):
        raise ValidationError("Some questions were answered more than once")
    unanswered = sorted(expected - set(answered))
    if unanswered:
        raise ValidationError(f"Unanswered questions: {unanswered}")


def build_profile(
    answers: Sequence[RiasecAnswer],
    questions: Sequence[RiasecQuestion],
) -> RiasecProfile:
    """Aggregate answers into a RiasecProfile.

    Raises ValidationError for an empty answer list, unknown question ids,
    scores outside 1-5 or a question answered twice. Categories without
    answers score 0 and are logged as an incomplete answer set.
    """
    by_id = _index_questions(questions)
    _validate(answers, by_id)

    grouped: dict[RiasecCategory, list[int]] = defaultdict(list)
    for answer in answers:
        grouped[by_id[answer.question_id].category].append(answer.score)

    scores: dict[RiasecCategory, float] = {}
    for category in RIASEC_ORDER:
        values = grouped.get(category)
        if not values:
            scores[category] = 0.0
            continue
        scores[category] = _rescale(sum(values) / len(values))

    empty = missing_categories(answers, questions)
    if empty:
        logger.warning(
            "Incomplete answer set: no answers for %s, scored as 0",
            ", ".join(c.value for c in empty),
        )

    return RiasecProfile.from_scores(scores)
