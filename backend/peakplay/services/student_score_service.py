"""Student scoring service - bridges stored students to the PeakScore engine."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from peakplay.config import get_settings
from peakplay.models import Student, Skills, SkillHistory
from peakplay.schemas import (
    SkillSnapshot,
    StudentProfile,
    NutritionGoalProfile,
    PeakScoreResult,
)
from peakplay.services.scoring_service import compute_scores

logger = logging.getLogger(__name__)


class StudentScoreService:
    """Service for scoring students and recording their daily history."""

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    def get_student(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def build_snapshot(self, student: Student) -> Optional[SkillSnapshot]:
        """Parse the stored skills row, or None if nothing was ever recorded."""
        if student.skills is None:
            return None
        return SkillSnapshot.model_validate(student.skills)

    def build_profile(self, student: Student) -> StudentProfile:
        return StudentProfile(
            age=student.age,
            weight=student.weight,
            height=student.height,
            sex=(student.sex or "").strip().lower() or None,
        )

    def default_goal(self, student: Student) -> NutritionGoalProfile:
        """Goal profile from settings, with the student's sex."""
        return NutritionGoalProfile(
            goal=self.settings.default_nutrition_goal,
            activity_level=self.settings.default_activity_level,
            sex=(student.sex or "").strip().lower() or "male",
        )

    def upsert_skills(self, student: Student, snapshot: SkillSnapshot) -> Skills:
        """Replace the student's latest snapshot with the given values."""
        skills = student.skills
        if skills is None:
            skills = Skills(student_id=student.id)
            self.db.add(skills)

        for field, value in snapshot.model_dump().items():
            setattr(skills, field, value)

        self.db.commit()
        self.db.refresh(skills)
        self.db.refresh(student)
        return skills

    def score_student(
        self,
        student: Student,
        goal: Optional[NutritionGoalProfile] = None,
    ) -> Optional[PeakScoreResult]:
        """
        Compute the PeakScore for a stored student.

        Returns None when the student has no skills recorded yet.
        """
        snapshot = self.build_snapshot(student)
        if snapshot is None:
            return None

        return compute_scores(
            snapshot,
            self.build_profile(student),
            goal or self.default_goal(student),
            tactical_score=self.settings.tactical_placeholder_score,
        )

    def record_history(
        self,
        student: Student,
        on_date: Optional[date] = None,
        goal: Optional[NutritionGoalProfile] = None,
        is_match_day: bool = False,
        match_id: Optional[str] = None,
        coach_feedback: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[SkillHistory]:
        """
        Store today's (or `on_date`'s) category scores, replacing any row for that day.

        Wellness is the mean of the positive physical, nutrition and mental
        scores. Returns None when the student has no skills recorded yet.
        """
        result = self.score_student(student, goal)
        if result is None:
            return None

        on_date = on_date or date.today()

        components = [result.physical.value, result.nutrition.value, result.mental.value]
        positive = [v for v in components if v > 0]
        wellness = round(sum(positive) / len(positive), 1) if positive else 0

        scores = {
            "physical_score": result.physical.value,
            "nutrition_score": result.nutrition.value,
            "mental_score": result.mental.value,
            "wellness_score": wellness,
            "technique_score": result.technical.value,
            "tactical_score": result.tactical.value,
        }

        entry = (
            self.db.query(SkillHistory)
            .filter(SkillHistory.student_id == student.id, SkillHistory.date == on_date)
            .first()
        )
        if entry is None:
            entry = SkillHistory(student_id=student.id, date=on_date)
            self.db.add(entry)

        for field, value in scores.items():
            setattr(entry, field, value)
        entry.is_match_day = is_match_day
        entry.match_id = match_id
        entry.coach_feedback = coach_feedback
        entry.notes = notes

        self.db.commit()
        self.db.refresh(entry)

        logger.info(
            "Recorded history for student %s on %s (PeakScore %d)",
            student.id, on_date, result.aggregate,
        )
        return entry
