"""
Foe Finder — Main API Router

Aggregates all sub-routers under a single prefix so that ``foefinder.main``
can mount the entire API surface with one ``include_router`` call.
"""

from fastapi import APIRouter

from foefinder.api import questionnaire, results
from foefinder.api.admin import analytics

router = APIRouter()

router.include_router(questionnaire.router, prefix="/questionnaire", tags=["Questionnaire"])
router.include_router(results.router, prefix="/results", tags=["Results"])
router.include_router(analytics.router, prefix="/admin/analytics", tags=["Admin - Analytics"])
