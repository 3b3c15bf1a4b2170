from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QuestionStatistics(BaseModel):
    """Descriptive statistics for one question over the whole population."""

    model_config = ConfigDict(frozen=True)

    question_id: int
    count: int = Field(ge=1)
    mean: float
    std_dev: float
    p10: int
    p25: int
    p50: int
    p75: int
    p90: int
    min: int
    max: int
    distribution: dict[int, int]  # scale value (1-7) -> response count


class ResponseDistribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int
    count: int
    percentage: float


class PopulationSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    respondent_count: int
    question_count: int
    total_responses: int
    high_variance_question_ids: list[int]


class AnalyticsResponse(BaseModel):
    statistics: list[QuestionStatistics]
    summary: PopulationSummary
