from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuestionCategory(str, Enum):
    SOCIAL = "social"
    LIFESTYLE = "lifestyle"
    OPINIONS = "opinions"


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    text: str
    category: QuestionCategory
    scale_min_label: str = "Strongly Disagree"
    scale_max_label: str = "Strongly Agree"
    order: int


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: int
    value: int = Field(ge=1, le=7)


class AnswerSet(BaseModel):
    """One user's validated answers, at most one per question."""

    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    answers: tuple[Answer, ...] = ()

    def as_dict(self) -> dict[int, int]:
        """Return ``{question_id: value}`` for quick lookups."""
        return {a.question_id: a.value for a in self.answers}


# ── API request bodies ───────────────────────────────────────────────────────

class AnswerSubmission(BaseModel):
    """Raw answers as handed over by the persistence layer.

    Entries are kept as loose dicts (``{questionId|question_id, value}``) so
    the validator, not request parsing, decides what gets dropped.
    """

    user_id: Optional[str] = None
    answers: list[Any] = Field(default_factory=list)

    @field_validator("user_id", mode="before")
    @classmethod
    def _numeric_user_id_as_str(cls, v: Any) -> Any:
        # Exports may carry integer primary keys
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class PopulationSnapshot(BaseModel):
    population: list[AnswerSubmission] = Field(default_factory=list)
