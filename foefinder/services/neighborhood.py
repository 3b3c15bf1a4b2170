"""
Foe Finder — Neighborhood Classifier

Nearest-centroid classification of a user onto the fixed NYC neighborhood
profiles.

3-step pipeline:
  1. Derive three dimension scores from a hand-picked subset of questions,
     each the mean of its component answers (some inverted via
     ``8 - value``) rescaled from the 1-7 scale to 0-100:

       progressive = q1, 8 - q2, q4, 8 - q6
       artistic    = q3, q7, 8 - q9
       social      = q5, q8, 8 - q10

     A missing answer counts as the neutral value 4.
  2. Euclidean distance from the user's vector to every reference vector.
  3. The closest profile wins; ties go to the profile declared first.

No training and no persisted state: the centroids are hardcoded.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import structlog

from foefinder.schemas.questionnaire import AnswerSet
from foefinder.schemas.results import DimensionScores, NeighborhoodProfile

logger = structlog.get_logger("foefinder.neighborhood")

NEUTRAL_VALUE: int = 4

# (question_id, inverted) per dimension
DIMENSION_COMPONENTS: dict[str, tuple[tuple[int, bool], ...]] = {
    "progressive": ((1, False), (2, True), (4, False), (6, True)),
    "artistic": ((3, False), (7, False), (9, True)),
    "social": ((5, False), (8, False), (10, True)),
}


def compute_dimensions(answer_set: AnswerSet) -> DimensionScores:
    """Place the user in (progressive, artistic, social) space, 0-100 each."""
    values = answer_set.as_dict()
    scores: dict[str, float] = {}
    for dimension, components in DIMENSION_COMPONENTS.items():
        component_values = []
        for question_id, inverted in components:
            value = values.get(question_id, NEUTRAL_VALUE)
            component_values.append(8 - value if inverted else value)
        scores[dimension] = _normalize(component_values)
    return DimensionScores(**scores)


def rank_neighborhoods(
    answer_set: AnswerSet,
    profiles: Sequence[NeighborhoodProfile],
) -> list[tuple[NeighborhoodProfile, float]]:
    """Every profile with its distance to the user, closest first.

    The sort is stable, so equidistant profiles keep declaration order.
    """
    vector = compute_dimensions(answer_set).as_vector()
    ranked = [(profile, _distance(vector, profile.reference_vector)) for profile in profiles]
    ranked.sort(key=lambda item: item[1])
    return ranked


def classify(
    answer_set: AnswerSet,
    profiles: Sequence[NeighborhoodProfile],
) -> NeighborhoodProfile:
    """Return the profile nearest to the user's dimension vector.

    Raises
    ------
    ValueError
        If ``profiles`` is empty; there is nothing to classify against.
    """
    dimensions = compute_dimensions(answer_set)
    return nearest_neighborhood(dimensions, profiles, user_id=answer_set.user_id)


def nearest_neighborhood(
    dimensions: DimensionScores,
    profiles: Sequence[NeighborhoodProfile],
    user_id: str | None = None,
) -> NeighborhoodProfile:
    """Scan ``profiles`` in order and keep the strictly closest one."""
    if not profiles:
        raise ValueError("At least one neighborhood profile is required")

    vector = dimensions.as_vector()
    best = profiles[0]
    best_distance = math.inf
    for profile in profiles:
        distance = _distance(vector, profile.reference_vector)
        if distance < best_distance:
            best, best_distance = profile, distance

    logger.debug(
        "neighborhood.classified",
        user_id=user_id,
        progressive=round(dimensions.progressive, 2),
        artistic=round(dimensions.artistic, 2),
        social=round(dimensions.social, 2),
        neighborhood=best.id,
        distance=round(best_distance, 4),
    )
    return best


def get_neighborhood(
    profile_id: str,
    profiles: Sequence[NeighborhoodProfile],
) -> NeighborhoodProfile | None:
    for profile in profiles:
        if profile.id == profile_id:
            return profile
    return None


# ── Internal helpers ────────────────────────────────────────────────────────

def _normalize(values: list[int]) -> float:
    """Mean of 1-7 values mapped onto 0-100."""
    avg = sum(values) / len(values)
    return ((avg - 1) / 6) * 100


def _distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))
