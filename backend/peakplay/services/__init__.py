"""Services package."""

from peakplay.services.scoring_service import compute_scores
from peakplay.services.progress_service import ProgressService, fill_and_trend
from peakplay.services.student_score_service import StudentScoreService

__all__ = [
    "compute_scores",
    "fill_and_trend",
    "ProgressService",
    "StudentScoreService",
]
