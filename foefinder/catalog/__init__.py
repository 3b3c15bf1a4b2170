from foefinder.catalog.neighborhoods import NEIGHBORHOODS
from foefinder.catalog.questions import QUESTIONS, get_question

__all__ = ["NEIGHBORHOODS", "QUESTIONS", "get_question"]
