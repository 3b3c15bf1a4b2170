"""
Foe Finder — Answer Set Validator

Normalises a raw answer collection (as stored by the persistence layer)
against the question catalog:

  1. Entries must reference a question that exists in the catalog.
  2. Values must be integers on the 1-7 Likert scale.  Out-of-range values
     are dropped, never clamped.
  3. Duplicate question ids collapse to the last occurrence in input order.

Corrupt or partial data degrades gracefully: bad entries are dropped and
logged, nothing is raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from foefinder.schemas.questionnaire import Answer, AnswerSet, AnswerSubmission, Question

logger = structlog.get_logger("foefinder.validation")

SCALE_MIN: int = 1
SCALE_MAX: int = 7

# Keys the persistence layer has used for the question reference.
_QUESTION_ID_KEYS: tuple[str, ...] = ("question_id", "questionId")


def validate_answers(
    raw: Iterable[Any] | None,
    catalog: Sequence[Question],
    user_id: str | None = None,
) -> AnswerSet:
    """Return a validated :class:`AnswerSet` built from ``raw``.

    Parameters
    ----------
    raw:
        Iterable of ``{"question_id" | "questionId": int, "value": int}``
        mappings or :class:`Answer` instances.  ``None`` is treated as empty.
    catalog:
        The question catalog answers are checked against.
    user_id:
        Optional owner of the answers, carried through to the result.
    """
    known_ids = {q.id for q in catalog}
    latest: dict[int, int] = {}
    dropped = 0

    for entry in raw or ():
        question_id, value = _unpack(entry)
        question_id = _as_int(question_id)
        value = _as_int(value)

        if question_id is None or question_id not in known_ids:
            dropped += 1
            continue
        if value is None or not SCALE_MIN <= value <= SCALE_MAX:
            dropped += 1
            continue

        if question_id in latest:
            # Last write wins; re-insert so ordering follows the last occurrence
            del latest[question_id]
            dropped += 1
        latest[question_id] = value

    if dropped:
        logger.debug(
            "validation.entries_dropped",
            user_id=user_id,
            dropped=dropped,
            kept=len(latest),
        )

    return AnswerSet(
        user_id=user_id,
        answers=tuple(Answer(question_id=q, value=v) for q, v in latest.items()),
    )


def validate_population(
    submissions: Iterable[AnswerSubmission],
    catalog: Sequence[Question],
) -> list[AnswerSet]:
    """Validate every user's raw answers in a population snapshot."""
    return [validate_answers(s.answers, catalog, user_id=s.user_id) for s in submissions]


def is_valid_value(value: Any) -> bool:
    """Return True if ``value`` is an integer on the 1-7 scale."""
    as_int = _as_int(value)
    return as_int is not None and SCALE_MIN <= as_int <= SCALE_MAX


# ── Internal helpers ────────────────────────────────────────────────────────

def _unpack(entry: Any) -> tuple[Any, Any]:
    if isinstance(entry, Answer):
        return entry.question_id, entry.value
    if isinstance(entry, Mapping):
        question_id = None
        for key in _QUESTION_ID_KEYS:
            if key in entry:
                question_id = entry[key]
                break
        return question_id, entry.get("value")
    return None, None


def _as_int(raw: Any) -> int | None:
    """Coerce ints and integral floats (``7.0``); reject everything else."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None
