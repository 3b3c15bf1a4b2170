"""
Foe Finder — Questionnaire API

Read-only access to the static question and neighborhood catalogs, plus a
validation endpoint that shows callers exactly which raw answers survive
normalisation.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException, status

from foefinder.catalog import NEIGHBORHOODS, QUESTIONS
from foefinder.schemas.questionnaire import AnswerSet, AnswerSubmission, Question
from foefinder.schemas.results import NeighborhoodProfile
from foefinder.services.neighborhood import get_neighborhood
from foefinder.services.validation import validate_answers

logger = structlog.get_logger("foefinder.api.questionnaire")

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# GET /questions: Return the Likert statements
# ──────────────────────────────────────────────────────────────────────────────

@router.get(
    "/questions",
    response_model=list[Question],
    summary="Get all questionnaire questions",
)
async def get_questions() -> list[Question]:
    """Return every question in catalog order."""
    logger.info("get_questions", count=len(QUESTIONS))
    return list(QUESTIONS)


# ──────────────────────────────────────────────────────────────────────────────
# GET /neighborhoods: Return the personality profiles
# ──────────────────────────────────────────────────────────────────────────────

@router.get(
    "/neighborhoods",
    response_model=list[NeighborhoodProfile],
    summary="Get all neighborhood profiles",
)
async def get_neighborhoods() -> list[NeighborhoodProfile]:
    return list(NEIGHBORHOODS)


@router.get(
    "/neighborhoods/{neighborhood_id}",
    response_model=NeighborhoodProfile,
    summary="Get a single neighborhood profile",
)
async def get_neighborhood_by_id(neighborhood_id: str) -> NeighborhoodProfile:
    profile = get_neighborhood(neighborhood_id, NEIGHBORHOODS)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Neighborhood {neighborhood_id} not found.",
        )
    return profile


# ──────────────────────────────────────────────────────────────────────────────
# POST /validate: Normalise a raw answer collection
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/validate",
    response_model=AnswerSet,
    summary="Validate a raw answer collection",
)
async def validate(payload: AnswerSubmission) -> AnswerSet:
    """Drop unknown questions and out-of-range values, collapse duplicates.

    Invalid entries never cause an error response; they are simply absent
    from the returned answer set.
    """
    answer_set = validate_answers(payload.answers, QUESTIONS, user_id=payload.user_id)
    logger.info(
        "validate_answers",
        user_id=payload.user_id,
        submitted=len(payload.answers),
        kept=len(answer_set.answers),
    )
    return answer_set
