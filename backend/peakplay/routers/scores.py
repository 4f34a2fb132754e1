"""Scores API router - stateless PeakScore computation."""

from fastapi import APIRouter, HTTPException

from peakplay.config import get_settings
from peakplay.schemas import ScoreRequest, PeakScoreResult, NutritionTargets
from peakplay.services.scoring_service import compute_scores, calculate_nutrition_targets

router = APIRouter(prefix="/scores", tags=["scores"])


@router.post("/compute", response_model=PeakScoreResult)
def compute(request: ScoreRequest):
    """Compute a PeakScore from a posted snapshot, profile and goal."""
    settings = get_settings()
    return compute_scores(
        request.snapshot,
        request.profile,
        request.goal,
        tactical_score=settings.tactical_placeholder_score,
    )


@router.post("/nutrition-targets", response_model=NutritionTargets)
def nutrition_targets(request: ScoreRequest):
    """Personalized daily targets for the posted profile and goal."""
    targets = calculate_nutrition_targets(request.profile, request.goal)
    if targets is None:
        raise HTTPException(status_code=400, detail="Weight and height are required for personalized targets")
    return targets
