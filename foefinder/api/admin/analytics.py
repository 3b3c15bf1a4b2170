"""
Foe Finder — Admin Analytics API

Endpoints behind the admin dashboard's analytics tab:
  - Per-question statistics (mean, std dev, percentiles, min/max)
  - Population summary, including the divisive ("high variance") questions
  - The 1-7 response distribution of a single question
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from foefinder.catalog import QUESTIONS, get_question
from foefinder.config import Settings, get_settings
from foefinder.schemas.analytics import AnalyticsResponse, ResponseDistribution
from foefinder.schemas.questionnaire import PopulationSnapshot
from foefinder.services.population_stats import (
    aggregate,
    response_distribution,
    summarize_population,
)
from foefinder.services.validation import validate_population

logger = structlog.get_logger("foefinder.api.admin.analytics")

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# POST /statistics: Question statistics and population summary
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/statistics",
    response_model=AnalyticsResponse,
    summary="Aggregate a population snapshot",
)
def get_statistics(
    payload: PopulationSnapshot,
    settings: Settings = Depends(get_settings),
) -> AnalyticsResponse:
    """Recompute statistics for every question from the full snapshot.

    Questions nobody answered are absent from ``statistics``.
    """
    structlog.contextvars.bind_contextvars(population=len(payload.population))
    population = validate_population(payload.population, QUESTIONS)
    question_statistics = aggregate(population, QUESTIONS)
    summary = summarize_population(
        population,
        question_statistics,
        high_variance_threshold=settings.HIGH_VARIANCE_STD_DEV,
    )

    logger.info(
        "get_statistics",
        respondents=summary.respondent_count,
        questions_with_data=summary.question_count,
        high_variance=len(summary.high_variance_question_ids),
    )
    return AnalyticsResponse(
        statistics=list(question_statistics.values()),
        summary=summary,
    )


# ──────────────────────────────────────────────────────────────────────────────
# POST /distribution/{question_id}: Response distribution for one question
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/distribution/{question_id}",
    response_model=list[ResponseDistribution],
    summary="Response distribution (values 1-7) for one question",
)
def get_distribution(
    question_id: int,
    payload: PopulationSnapshot,
) -> list[ResponseDistribution]:
    """Return seven rows (one per scale value), or ``[]`` with no responses."""
    if get_question(question_id, QUESTIONS) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Question {question_id} not found.",
        )

    structlog.contextvars.bind_contextvars(
        question_id=question_id,
        population=len(payload.population),
    )
    population = validate_population(payload.population, QUESTIONS)
    stats = aggregate(population, QUESTIONS).get(question_id)

    if stats is None:
        logger.info("get_distribution_no_data")
        return []

    logger.info("get_distribution", responses=stats.count)
    return response_distribution(stats)
