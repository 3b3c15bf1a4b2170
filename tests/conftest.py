"""Shared pytest fixtures for Foe Finder tests."""
import pytest

from foefinder.catalog import QUESTIONS
from foefinder.schemas.questionnaire import Answer, AnswerSet, Question, QuestionCategory


def make_answer_set(pairs, user_id=None):
    """Build an AnswerSet from ``[(question_id, value), ...]``."""
    return AnswerSet(
        user_id=user_id,
        answers=tuple(Answer(question_id=q, value=v) for q, v in pairs),
    )


@pytest.fixture
def small_catalog():
    """Questions 1-5, the catalog used in the worked scenarios."""
    return [
        Question(id=i, text=f"Statement {i}", category=QuestionCategory.OPINIONS, order=i)
        for i in range(1, 6)
    ]


@pytest.fixture
def catalog():
    return QUESTIONS


@pytest.fixture
def scenario_a_answers():
    """Scenario A: [(1,7),(2,1),(3,4),(4,6),(5,2)]."""
    return make_answer_set([(1, 7), (2, 1), (3, 4), (4, 6), (5, 2)], user_id="user-a")


@pytest.fixture
def scenario_b_population():
    """Scenario B: four users answering question 1 with 2, 4, 4, 6."""
    return [
        make_answer_set([(1, 2)], user_id="u1"),
        make_answer_set([(1, 4)], user_id="u2"),
        make_answer_set([(1, 4)], user_id="u3"),
        make_answer_set([(1, 6)], user_id="u4"),
    ]


@pytest.fixture
def ten_user_population():
    """Ten users; question 1 is mostly 4s, question 2 is split 1 vs 7."""
    q1_values = [1, 4, 4, 4, 4, 4, 4, 4, 4, 7]
    q2_values = [1, 1, 1, 1, 1, 7, 7, 7, 7, 7]
    return [
        make_answer_set([(1, a), (2, b)], user_id=f"user-{i}")
        for i, (a, b) in enumerate(zip(q1_values, q2_values))
    ]
