"""
Foe Finder — Hot-Take Extractor

Surfaces a user's strongest opinions.  An answer's *intensity* is its
distance from the neutral midpoint (``|value - 4|``); only answers with
intensity >= 2 (values 1, 2, 6, 7) are hot takes.  Results are ranked by
intensity, ties kept in catalog order.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from foefinder.schemas.questionnaire import AnswerSet, Question
from foefinder.schemas.results import HotTake, Stance

logger = structlog.get_logger("foefinder.hot_takes")

NEUTRAL_VALUE: int = 4
MIN_HOT_TAKE_INTENSITY: int = 2
DEFAULT_HOT_TAKE_COUNT: int = 3

_STANCE_BY_VALUE: dict[int, Stance] = {
    7: Stance.STRONGLY_AGREE,
    6: Stance.AGREE,
    2: Stance.DISAGREE,
    1: Stance.STRONGLY_DISAGREE,
}

STANCE_LABELS: dict[Stance, str] = {
    Stance.STRONGLY_AGREE: "You strongly agree",
    Stance.AGREE: "You agree",
    Stance.NEUTRAL: "You're on the fence",
    Stance.DISAGREE: "You disagree",
    Stance.STRONGLY_DISAGREE: "You strongly disagree",
}

DEADPAN_COMMENTS: tuple[str, ...] = (
    "Noted.",
    "You feel strongly about this.",
    "The Algorithm remembers.",
    "Interesting.",
    "This has been recorded.",
)


def intensity(value: int) -> int:
    """Distance of ``value`` from the neutral midpoint, in [0, 3]."""
    return abs(value - NEUTRAL_VALUE)


def stance(value: int) -> Stance:
    """Map a raw 1-7 value to its stance; anything but 1, 2, 6, 7 is neutral."""
    return _STANCE_BY_VALUE.get(value, Stance.NEUTRAL)


def stance_label(value: Stance) -> str:
    return STANCE_LABELS[value]


def deadpan_comment(index: int) -> str:
    """Commentary shown beside the ``index``-th hot take (cycles)."""
    return DEADPAN_COMMENTS[index % len(DEADPAN_COMMENTS)]


def extract_hot_takes(
    answer_set: AnswerSet,
    catalog: Sequence[Question],
    count: int = DEFAULT_HOT_TAKE_COUNT,
) -> list[HotTake]:
    """Return up to ``count`` hot takes, most intense first.

    Answers whose question is missing from ``catalog`` are skipped rather
    than surfaced with empty text.
    """
    if count <= 0:
        return []

    by_id = {q.id: q for q in catalog}
    candidates: list[tuple[tuple[int, int, int], HotTake]] = []

    for answer in answer_set.answers:
        question = by_id.get(answer.question_id)
        if question is None:
            continue
        strength = intensity(answer.value)
        if strength < MIN_HOT_TAKE_INTENSITY:
            continue
        take = HotTake(
            question_id=question.id,
            question_text=question.text,
            value=answer.value,
            intensity=strength,
            stance=stance(answer.value),
        )
        candidates.append(((-strength, question.order, question.id), take))

    candidates.sort(key=lambda c: c[0])
    hot_takes = [take for _, take in candidates[:count]]

    logger.debug(
        "hot_takes.extracted",
        user_id=answer_set.user_id,
        eligible=len(candidates),
        returned=len(hot_takes),
    )
    return hot_takes
