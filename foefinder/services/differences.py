"""Questions on which two matched users disagree the most."""

from __future__ import annotations

from collections.abc import Sequence

from foefinder.schemas.questionnaire import AnswerSet, Question
from foefinder.schemas.results import QuestionDifference

DEFAULT_DIFFERENCE_COUNT: int = 5


def top_differences(
    answers_a: AnswerSet,
    answers_b: AnswerSet,
    catalog: Sequence[Question],
    count: int = DEFAULT_DIFFERENCE_COUNT,
) -> list[QuestionDifference]:
    """Largest per-question gaps between two users, biggest first.

    Only questions both users answered (and that exist in ``catalog``) are
    compared; identical answers are left out.  Ties keep catalog order.
    """
    if count <= 0:
        return []

    values_b = answers_b.as_dict()
    by_id = {q.id: q for q in catalog}
    differences: list[tuple[tuple[int, int, int], QuestionDifference]] = []

    for answer in answers_a.answers:
        question = by_id.get(answer.question_id)
        other = values_b.get(answer.question_id)
        if question is None or other is None:
            continue
        gap = abs(answer.value - other)
        if gap == 0:
            continue
        differences.append(
            (
                (-gap, question.order, question.id),
                QuestionDifference(
                    question_id=question.id,
                    question_text=question.text,
                    user1_value=answer.value,
                    user2_value=other,
                    difference=gap,
                ),
            )
        )

    differences.sort(key=lambda d: d[0])
    return [diff for _, diff in differences[:count]]


def likert_label(value: int) -> str:
    if value <= 2:
        return "Strongly Disagree"
    if value == 3:
        return "Disagree"
    if value == 4:
        return "Neutral"
    if value == 5:
        return "Agree"
    return "Strongly Agree"
