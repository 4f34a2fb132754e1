"""Skill history API router - progress data for charts."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from peakplay.config import get_settings
from peakplay.database import get_db
from peakplay.schemas import HistoryResponse, StudentBrief, ProgressResponse
from peakplay.services.progress_service import ProgressService
from peakplay.routers.students import get_student_or_404

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("/history", response_model=HistoryResponse)
def get_skill_history(
    student_id: int,
    days: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """Get stored history points for a student, oldest first."""
    student = get_student_or_404(student_id, db)
    days = days or get_settings().default_history_days
    
    try:
        history = ProgressService(db).get_history(student, days, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    response = HistoryResponse(history=history, student=StudentBrief.model_validate(student))
    if not history:
        response.message = "No historical data available for this athlete in the selected time period."
    return response


@router.get("/progress", response_model=ProgressResponse)
def get_progress(
    student_id: int,
    category: str = "physical",
    days: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """Gap-filled series with trend and summary for one category."""
    student = get_student_or_404(student_id, db)
    days = days or get_settings().default_history_days
    
    try:
        return ProgressService(db).get_progress(student, category, days, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
