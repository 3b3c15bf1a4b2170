"""
Foe Finder — Population Statistics Aggregator

Reduces every user's answer set into per-question descriptive statistics
for the admin analytics view and the outlier / disagreement scorers:

  count, mean, population standard deviation, nearest-rank percentiles
  (p10, p25, p50, p75, p90), min, max, and the per-value response
  distribution.

This is a full O(users x questions) recomputation on every call; there is
no incremental variant.  Callers hand over a complete, already-fetched
snapshot of the population.  Questions nobody has answered are omitted
from the result mapping: a missing entry means "no data", not zero.
"""

from __future__ import annotations

import statistics
from collections import Counter
from collections.abc import Sequence

import structlog

from foefinder.schemas.analytics import (
    PopulationSummary,
    QuestionStatistics,
    ResponseDistribution,
)
from foefinder.schemas.questionnaire import AnswerSet, Question
from foefinder.services.validation import SCALE_MAX, SCALE_MIN

logger = structlog.get_logger("foefinder.population_stats")

PERCENTILES: tuple[int, ...] = (10, 25, 50, 75, 90)
DEFAULT_HIGH_VARIANCE_STD_DEV: float = 1.8


def aggregate(
    answer_sets: Sequence[AnswerSet],
    catalog: Sequence[Question],
) -> dict[int, QuestionStatistics]:
    """Compute :class:`QuestionStatistics` for every answered question.

    Parameters
    ----------
    answer_sets:
        One validated answer set per user.
    catalog:
        The question catalog; answers to ids outside it are ignored and the
        output mapping follows its order.

    Returns
    -------
    dict
        ``question_id -> QuestionStatistics``, omitting unanswered questions.
    """
    values_by_question: dict[int, list[int]] = {q.id: [] for q in catalog}

    for answer_set in answer_sets:
        for answer in answer_set.answers:
            bucket = values_by_question.get(answer.question_id)
            if bucket is not None:
                bucket.append(answer.value)

    result: dict[int, QuestionStatistics] = {}
    for question_id, values in values_by_question.items():
        if not values:
            continue
        result[question_id] = _describe(question_id, values)

    logger.info(
        "population_stats.aggregated",
        respondents=len(answer_sets),
        questions_with_data=len(result),
        questions_without_data=len(values_by_question) - len(result),
    )
    return result


def nearest_rank_percentile(sorted_values: Sequence[int], pct: int) -> int:
    """Return the nearest-rank ``pct``-th percentile of ascending values.

    The rank is ``ceil(pct / 100 * n)`` clamped to ``[1, n]``; integer
    arithmetic keeps e.g. p10 of 30 values at rank 3 exactly.
    """
    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot take a percentile of an empty list")
    rank = -(-pct * n // 100)
    rank = min(max(rank, 1), n)
    return sorted_values[rank - 1]


def response_distribution(stats: QuestionStatistics) -> list[ResponseDistribution]:
    """Per-value counts and percentages (1 decimal) for one question."""
    return [
        ResponseDistribution(
            value=value,
            count=stats.distribution.get(value, 0),
            percentage=round(100.0 * stats.distribution.get(value, 0) / stats.count, 1),
        )
        for value in range(SCALE_MIN, SCALE_MAX + 1)
    ]


def is_high_variance(
    stats: QuestionStatistics,
    threshold: float = DEFAULT_HIGH_VARIANCE_STD_DEV,
) -> bool:
    """A question is divisive when its standard deviation exceeds ``threshold``."""
    return stats.std_dev > threshold


def summarize_population(
    answer_sets: Sequence[AnswerSet],
    question_statistics: dict[int, QuestionStatistics],
    high_variance_threshold: float = DEFAULT_HIGH_VARIANCE_STD_DEV,
) -> PopulationSummary:
    """Headline numbers for the analytics dashboard."""
    return PopulationSummary(
        respondent_count=sum(1 for s in answer_sets if s.answers),
        question_count=len(question_statistics),
        total_responses=sum(s.count for s in question_statistics.values()),
        high_variance_question_ids=[
            qid
            for qid, s in question_statistics.items()
            if is_high_variance(s, high_variance_threshold)
        ],
    )


# ── Internal helpers ────────────────────────────────────────────────────────

def _describe(question_id: int, values: list[int]) -> QuestionStatistics:
    ordered = sorted(values)
    counts = Counter(ordered)
    p10, p25, p50, p75, p90 = (nearest_rank_percentile(ordered, p) for p in PERCENTILES)

    return QuestionStatistics(
        question_id=question_id,
        count=len(ordered),
        mean=statistics.fmean(ordered),
        std_dev=statistics.pstdev(ordered),
        p10=p10,
        p25=p25,
        p50=p50,
        p75=p75,
        p90=p90,
        min=ordered[0],
        max=ordered[-1],
        distribution={v: counts.get(v, 0) for v in range(SCALE_MIN, SCALE_MAX + 1)},
    )
