from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from foefinder.schemas.questionnaire import AnswerSet, AnswerSubmission


class Stance(str, Enum):
    STRONGLY_AGREE = "strongly_agree"
    AGREE = "agree"
    NEUTRAL = "neutral"
    DISAGREE = "disagree"
    STRONGLY_DISAGREE = "strongly_disagree"


class HotTake(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: int
    question_text: str
    value: int
    intensity: int = Field(ge=0, le=3)
    stance: Stance


class DisagreementLevel(str, Enum):
    BLENDS_IN = "blends_in"
    CONTRARIAN = "contrarian"
    SOLID = "solid"
    EXCELLENT = "excellent"
    EXTREME = "extreme"


class DisagreementScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    percentage: int = Field(ge=0, le=100)
    disagreeing_count: int = 0
    compared_count: int = 0
    level: DisagreementLevel
    comment: str


class NeighborhoodProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    traits: tuple[str, ...]
    vibe: str
    reference_vector: tuple[float, float, float]  # (progressive, artistic, social)


class DimensionScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    progressive: float = Field(ge=0.0, le=100.0)
    artistic: float = Field(ge=0.0, le=100.0)
    social: float = Field(ge=0.0, le=100.0)

    def as_vector(self) -> tuple[float, float, float]:
        return (self.progressive, self.artistic, self.social)


class OutlierAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: int
    question_text: str = ""
    user_value: int
    population_mean: float
    std_dev: float
    percentile_rank: float = Field(ge=0.0, le=100.0)
    is_top_outlier: bool
    is_bottom_outlier: bool
    response_count: int


class QuestionDifference(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: int
    question_text: str
    user1_value: int
    user2_value: int
    difference: int


# ── API request / response bodies ────────────────────────────────────────────

class ResultsRequest(AnswerSubmission):
    population: list[AnswerSubmission] = Field(default_factory=list)
    hot_take_count: Optional[int] = Field(default=None, ge=0, le=30)


class ResultsResponse(BaseModel):
    answer_set: AnswerSet
    hot_takes: list[HotTake]
    disagreement: DisagreementScore
    dimensions: DimensionScores
    neighborhood: NeighborhoodProfile
    outliers: list[OutlierAnswer]


class DifferencesRequest(BaseModel):
    answers_a: list = Field(default_factory=list)
    answers_b: list = Field(default_factory=list)
    count: Optional[int] = Field(default=None, ge=0, le=30)
