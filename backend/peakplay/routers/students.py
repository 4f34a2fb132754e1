"""Students API router - profiles, skill snapshots and PeakScore."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from peakplay.database import get_db
from peakplay.models import Student
from peakplay.schemas import (
    StudentCreate,
    StudentUpdate,
    StudentResponse,
    StudentWithSkills,
    SkillSnapshot,
    NutritionGoal,
    ActivityLevel,
    Sex,
    NutritionGoalProfile,
    PeakScoreResult,
    HistoryRecordRequest,
    TimeSeriesPoint,
)
from peakplay.services.student_score_service import StudentScoreService

router = APIRouter(prefix="/students", tags=["students"])


def get_student_or_404(student_id: int, db: Session) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.post("/", response_model=StudentResponse)
def create_student(
    student_data: StudentCreate,
    db: Session = Depends(get_db),
):
    """Create a new student."""
    student = Student(**student_data.model_dump(mode="json"))
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


@router.get("/{student_id}", response_model=StudentWithSkills)
def get_student(
    student_id: int,
    db: Session = Depends(get_db),
):
    """Get a student with their latest skill snapshot."""
    return get_student_or_404(student_id, db)


@router.patch("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: int,
    student_data: StudentUpdate,
    db: Session = Depends(get_db),
):
    """Update a student's profile."""
    student = get_student_or_404(student_id, db)
    
    for field, value in student_data.model_dump(mode="json", exclude_unset=True).items():
        if value is not None:
            setattr(student, field, value)
    
    db.commit()
    db.refresh(student)
    return student


@router.put("/{student_id}/skills", response_model=SkillSnapshot)
def put_skills(
    student_id: int,
    snapshot: SkillSnapshot,
    db: Session = Depends(get_db),
):
    """Replace the student's latest skill snapshot."""
    student = get_student_or_404(student_id, db)
    skills = StudentScoreService(db).upsert_skills(student, snapshot)
    return SkillSnapshot.model_validate(skills)


@router.get("/{student_id}/peak-score", response_model=PeakScoreResult)
def get_peak_score(
    student_id: int,
    goal: Optional[NutritionGoal] = None,
    activity_level: Optional[ActivityLevel] = None,
    sex: Optional[Sex] = None,
    db: Session = Depends(get_db),
):
    """Compute the student's PeakScore from their latest skills."""
    student = get_student_or_404(student_id, db)
    service = StudentScoreService(db)
    
    goal_profile = None
    if goal or activity_level or sex:
        defaults = service.default_goal(student)
        goal_profile = NutritionGoalProfile(
            goal=goal or defaults.goal,
            activity_level=activity_level or defaults.activity_level,
            sex=sex or defaults.sex,
        )
    
    result = service.score_student(student, goal_profile)
    if result is None:
        raise HTTPException(status_code=404, detail="No skills recorded for this student")
    return result


@router.post("/{student_id}/history", response_model=TimeSeriesPoint)
def record_history(
    student_id: int,
    request: HistoryRecordRequest,
    db: Session = Depends(get_db),
):
    """Store the student's current scores as a history point."""
    student = get_student_or_404(student_id, db)
    
    entry = StudentScoreService(db).record_history(
        student,
        on_date=request.entry_date,
        goal=request.goal,
        is_match_day=request.is_match_day,
        match_id=request.match_id,
        coach_feedback=request.coach_feedback,
        notes=request.notes,
    )
    if entry is None:
        raise HTTPException(status_code=404, detail="No skills recorded for this student")
    return entry
