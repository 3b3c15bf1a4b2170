"""
Foe Finder — Results API

Computes everything the results page shows for one user: hot takes,
disagreement rating, neighborhood, and statistical outliers.  The caller
supplies the user's raw answers and a snapshot of the whole population;
nothing is fetched or stored here.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from foefinder.catalog import NEIGHBORHOODS, QUESTIONS
from foefinder.config import Settings, get_settings
from foefinder.schemas.results import (
    DifferencesRequest,
    QuestionDifference,
    ResultsRequest,
    ResultsResponse,
)
from foefinder.services.differences import top_differences
from foefinder.services.disagreement import score_disagreement
from foefinder.services.hot_takes import extract_hot_takes
from foefinder.services.neighborhood import compute_dimensions, nearest_neighborhood
from foefinder.services.outliers import find_outliers
from foefinder.services.population_stats import aggregate
from foefinder.services.validation import validate_answers, validate_population

logger = structlog.get_logger("foefinder.api.results")

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# POST /: Full results for one user
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "",
    response_model=ResultsResponse,
    summary="Score one user against a population snapshot",
)
def get_results(
    payload: ResultsRequest,
    settings: Settings = Depends(get_settings),
) -> ResultsResponse:
    """Run the single-user pipeline.

    The user's answers are validated once and then fed to the hot-take
    extractor, disagreement scorer, neighborhood classifier, and outlier
    reporter.  Population statistics come from ``payload.population``; an
    empty population yields a 0% disagreement score and no outliers.
    """
    structlog.contextvars.bind_contextvars(
        user_id=payload.user_id,
        population=len(payload.population),
    )
    logger.info("get_results_start")

    answer_set = validate_answers(payload.answers, QUESTIONS, user_id=payload.user_id)
    population = validate_population(payload.population, QUESTIONS)
    question_statistics = aggregate(population, QUESTIONS)

    count = payload.hot_take_count
    if count is None:
        count = settings.HOT_TAKE_COUNT

    dimensions = compute_dimensions(answer_set)
    response = ResultsResponse(
        answer_set=answer_set,
        hot_takes=extract_hot_takes(answer_set, QUESTIONS, count=count),
        disagreement=score_disagreement(
            answer_set,
            question_statistics,
            threshold=settings.DISAGREEMENT_THRESHOLD,
        ),
        dimensions=dimensions,
        neighborhood=nearest_neighborhood(dimensions, NEIGHBORHOODS, user_id=payload.user_id),
        outliers=find_outliers(
            answer_set,
            question_statistics,
            catalog=QUESTIONS,
            min_responses=settings.OUTLIER_MIN_RESPONSES,
        ),
    )

    logger.info(
        "get_results_complete",
        answers=len(answer_set.answers),
        hot_takes=len(response.hot_takes),
        disagreement=response.disagreement.percentage,
        neighborhood=response.neighborhood.id,
        outliers=len(response.outliers),
    )
    return response


# ──────────────────────────────────────────────────────────────────────────────
# POST /differences: Biggest gaps between two users
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/differences",
    response_model=list[QuestionDifference],
    summary="Top differing questions between two users",
)
def get_differences(
    payload: DifferencesRequest,
    settings: Settings = Depends(get_settings),
) -> list[QuestionDifference]:
    count = payload.count if payload.count is not None else settings.TOP_DIFFERENCES_COUNT
    answers_a = validate_answers(payload.answers_a, QUESTIONS)
    answers_b = validate_answers(payload.answers_b, QUESTIONS)
    differences = top_differences(answers_a, answers_b, QUESTIONS, count=count)
    logger.info("get_differences", returned=len(differences))
    return differences
