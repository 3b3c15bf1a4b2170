"""The 30 Likert statements of the default questionnaire.

Every statement is answered on a 1-7 scale (1 = Strongly Disagree,
7 = Strongly Agree).  The catalog is immutable and loaded once per process.
"""

from __future__ import annotations

from foefinder.schemas.questionnaire import Question, QuestionCategory

_SOCIAL = QuestionCategory.SOCIAL
_LIFESTYLE = QuestionCategory.LIFESTYLE
_OPINIONS = QuestionCategory.OPINIONS

_STATEMENTS: list[tuple[str, QuestionCategory]] = [
    ('Typing "..." is more threatening than a period', _SOCIAL),
    ("I've screenshot texts to send to the group chat", _SOCIAL),
    ("Couples who share a social media account are hiding something", _OPINIONS),
    ("People who back into parking spots are trying too hard", _OPINIONS),
    ("I've rewatched the same show 5+ times instead of starting something new", _LIFESTYLE),
    ("Watching someone's story without following them is research, not stalking", _SOCIAL),
    ("I've rehearsed a conversation in the shower", _LIFESTYLE),
    ("Leaving someone on 'delivered' is a power move", _SOCIAL),
    ("I've judged someone's bookshelf", _OPINIONS),
    ("People who say 'let's hang soon!' never mean it", _SOCIAL),
    ("I've pretended my phone died to avoid a situation", _LIFESTYLE),
    ("Eating alone in public is underrated", _OPINIONS),
    ("I've bought something just because the packaging was cute", _LIFESTYLE),
    ("Main character syndrome is fine actually", _OPINIONS),
    ("Read receipts should be illegal", _SOCIAL),
    ("I think about texts I sent 3 years ago", _LIFESTYLE),
    ("I've deleted an app just to avoid someone", _SOCIAL),
    ("Watching TV on 1.5x speed is valid", _OPINIONS),
    ("I've said 'let's do this again' knowing I never would", _LIFESTYLE),
    ("Standing at concerts is overrated", _OPINIONS),
    ("Dating apps have actually improved dating", _OPINIONS),
    ("It's okay to end things over text", _SOCIAL),
    ("Going to bed before 11pm is peak adulthood", _LIFESTYLE),
    ("Voice notes over 30 seconds are inconsiderate", _SOCIAL),
    ("Brunch is just expensive breakfast with permission to drink", _OPINIONS),
    ("Therapy speak has ruined normal conversations", _SOCIAL),
    ("You should be embarrassed if you can't cook by 25", _OPINIONS),
    ("Remote work is making us worse at being people", _OPINIONS),
    ("Being single in your late 20s is underrated", _LIFESTYLE),
    ("LinkedIn is just Facebook for people in denial", _SOCIAL),
]

QUESTIONS: tuple[Question, ...] = tuple(
    Question(id=number, text=text, category=category, order=number)
    for number, (text, category) in enumerate(_STATEMENTS, start=1)
)


def get_question(question_id: int, catalog=QUESTIONS) -> Question | None:
    """Return the question with ``question_id``, or ``None`` if unknown."""
    for question in catalog:
        if question.id == question_id:
            return question
    return None
