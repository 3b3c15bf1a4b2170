"""
Foe Finder — Outlier Reporter

Flags the answers where a user sits in a population tail.  The percentile
rank of a value is the share of all population responses at or below it,
taken exactly from the per-value distribution stored in
:class:`QuestionStatistics`:

    rank = 100 * (responses <= value) / count

Ranks >= 90 are top outliers, ranks <= 10 bottom outliers.  Questions with
fewer than ``min_responses`` answers are skipped: percentile claims over a
handful of people mean nothing.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from foefinder.schemas.analytics import QuestionStatistics
from foefinder.schemas.questionnaire import AnswerSet, Question
from foefinder.schemas.results import OutlierAnswer

logger = structlog.get_logger("foefinder.outliers")

TOP_OUTLIER_RANK: int = 90
BOTTOM_OUTLIER_RANK: int = 10
DEFAULT_MIN_RESPONSES: int = 5


def percentile_rank(value: int, stats: QuestionStatistics) -> float:
    """Share (0-100, one decimal) of responses at or below ``value``.

    The rounding is for display only; outlier thresholds are checked on the
    exact counts in :func:`find_outliers`.
    """
    return round(100.0 * _at_or_below(value, stats) / stats.count, 1)


def find_outliers(
    answer_set: AnswerSet,
    question_statistics: dict[int, QuestionStatistics],
    catalog: Sequence[Question] | None = None,
    min_responses: int = DEFAULT_MIN_RESPONSES,
) -> list[OutlierAnswer]:
    """Return the user's answers that fall in the top or bottom decile.

    Parameters
    ----------
    answer_set:
        The user's validated answers.
    question_statistics:
        Output of :func:`foefinder.services.population_stats.aggregate`.
    catalog:
        Optional question catalog used to attach question text.
    min_responses:
        Minimum population responses for a question to be considered.
    """
    texts = {q.id: q.text for q in catalog} if catalog is not None else {}
    outliers: list[OutlierAnswer] = []
    skipped_small_sample = 0

    for answer in answer_set.answers:
        stats = question_statistics.get(answer.question_id)
        if stats is None:
            continue
        if stats.count < min_responses:
            skipped_small_sample += 1
            continue

        # Compare 100 * k / n against the thresholds without rounding
        at_or_below = _at_or_below(answer.value, stats)
        is_top = 100 * at_or_below >= TOP_OUTLIER_RANK * stats.count
        is_bottom = 100 * at_or_below <= BOTTOM_OUTLIER_RANK * stats.count
        if not (is_top or is_bottom):
            continue

        outliers.append(
            OutlierAnswer(
                question_id=answer.question_id,
                question_text=texts.get(answer.question_id, ""),
                user_value=answer.value,
                population_mean=stats.mean,
                std_dev=stats.std_dev,
                percentile_rank=percentile_rank(answer.value, stats),
                is_top_outlier=is_top,
                is_bottom_outlier=is_bottom,
                response_count=stats.count,
            )
        )

    logger.debug(
        "outliers.found",
        user_id=answer_set.user_id,
        outliers=len(outliers),
        skipped_small_sample=skipped_small_sample,
    )
    return outliers


def percentile_label(outlier: OutlierAnswer) -> str:
    """Display text such as ``"Top 8%"`` or ``"Bottom 5%"``."""
    if outlier.is_top_outlier:
        return f"Top {100 - outlier.percentile_rank:.0f}%"
    return f"Bottom {outlier.percentile_rank:.0f}%"


def _at_or_below(value: int, stats: QuestionStatistics) -> int:
    return sum(n for v, n in stats.distribution.items() if v <= value)
