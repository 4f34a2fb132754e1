"""Routers package."""

from peakplay.routers.students import router as students_router
from peakplay.routers.scores import router as scores_router
from peakplay.routers.skills import router as skills_router

__all__ = [
    "students_router",
    "scores_router",
    "skills_router",
]
