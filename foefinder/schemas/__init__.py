"""
Foe Finder — value-type registry.

Every immutable model used by the scoring engine and the API is re-exported
here so callers can import from ``foefinder.schemas`` directly.
"""

from foefinder.schemas.analytics import (
    AnalyticsResponse,
    PopulationSummary,
    QuestionStatistics,
    ResponseDistribution,
)
from foefinder.schemas.questionnaire import (
    Answer,
    AnswerSet,
    AnswerSubmission,
    PopulationSnapshot,
    Question,
    QuestionCategory,
)
from foefinder.schemas.results import (
    DifferencesRequest,
    DimensionScores,
    DisagreementLevel,
    DisagreementScore,
    HotTake,
    NeighborhoodProfile,
    OutlierAnswer,
    QuestionDifference,
    ResultsRequest,
    ResultsResponse,
    Stance,
)

__all__ = [
    "AnalyticsResponse",
    "Answer",
    "AnswerSet",
    "AnswerSubmission",
    "DifferencesRequest",
    "DimensionScores",
    "DisagreementLevel",
    "DisagreementScore",
    "HotTake",
    "NeighborhoodProfile",
    "OutlierAnswer",
    "PopulationSnapshot",
    "PopulationSummary",
    "Question",
    "QuestionCategory",
    "QuestionDifference",
    "QuestionStatistics",
    "ResponseDistribution",
    "ResultsRequest",
    "ResultsResponse",
    "Stance",
]
