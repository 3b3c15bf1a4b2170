"""
Foe Finder — Disagreement Scorer

Measures how often a user departs substantially from the crowd: an answer
"disagrees" when it sits at least ``threshold`` points (default 3) away
from the population mean for the same question.  The score is the
percentage of comparable answers that disagree.
"""

from __future__ import annotations

import math

import structlog

from foefinder.schemas.analytics import QuestionStatistics
from foefinder.schemas.questionnaire import AnswerSet
from foefinder.schemas.results import DisagreementLevel, DisagreementScore

logger = structlog.get_logger("foefinder.disagreement")

DEFAULT_DISAGREEMENT_THRESHOLD: float = 3.0

# (upper bound inclusive, level, comment), checked in order
_RATING_BANDS: tuple[tuple[int, DisagreementLevel, str], ...] = (
    (30, DisagreementLevel.BLENDS_IN, "You blend in. Suspiciously normal."),
    (50, DisagreementLevel.CONTRARIAN, "Moderate contrarian tendencies detected."),
    (70, DisagreementLevel.SOLID, "Solid foe potential."),
    (85, DisagreementLevel.EXCELLENT, "Excellent foe potential."),
)
_TOP_BAND: tuple[DisagreementLevel, str] = (
    DisagreementLevel.EXTREME,
    "You disagree with almost everyone. Impressive.",
)


def disagreement_percentage(
    answer_set: AnswerSet,
    question_statistics: dict[int, QuestionStatistics],
    threshold: float = DEFAULT_DISAGREEMENT_THRESHOLD,
) -> int:
    """Percentage (0-100) of the user's comparable answers that disagree."""
    disagreeing, compared = _count(answer_set, question_statistics, threshold)
    return _percentage(disagreeing, compared)


def score_disagreement(
    answer_set: AnswerSet,
    question_statistics: dict[int, QuestionStatistics],
    threshold: float = DEFAULT_DISAGREEMENT_THRESHOLD,
) -> DisagreementScore:
    """Full :class:`DisagreementScore` including the qualitative rating.

    Only answers whose question has population statistics are compared.
    With nothing to compare (e.g. an empty statistics map) the score is 0.
    """
    disagreeing, compared = _count(answer_set, question_statistics, threshold)
    percentage = _percentage(disagreeing, compared)
    level, comment = rate_disagreement(percentage)

    logger.debug(
        "disagreement.scored",
        user_id=answer_set.user_id,
        disagreeing=disagreeing,
        compared=compared,
        percentage=percentage,
        level=level.value,
    )

    return DisagreementScore(
        user_id=answer_set.user_id,
        percentage=percentage,
        disagreeing_count=disagreeing,
        compared_count=compared,
        level=level,
        comment=comment,
    )


def rate_disagreement(percentage: float) -> tuple[DisagreementLevel, str]:
    """Map a percentage onto its rating band.

    Total over every number and monotone: a higher percentage never yields a
    tamer band.
    """
    for upper, level, comment in _RATING_BANDS:
        if percentage <= upper:
            return level, comment
    return _TOP_BAND


# ── Internal helpers ────────────────────────────────────────────────────────

def _count(
    answer_set: AnswerSet,
    question_statistics: dict[int, QuestionStatistics],
    threshold: float,
) -> tuple[int, int]:
    disagreeing = 0
    compared = 0
    for answer in answer_set.answers:
        stats = question_statistics.get(answer.question_id)
        if stats is None:
            continue
        compared += 1
        if abs(answer.value - stats.mean) >= threshold:
            disagreeing += 1
    return disagreeing, compared


def _percentage(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    # Round half up (12.5 -> 13)
    return int(math.floor(100.0 * part / whole + 0.5))
