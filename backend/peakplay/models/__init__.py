"""Database models package."""

from peakplay.models.student import Student
from peakplay.models.skills import Skills
from peakplay.models.skill_history import SkillHistory

__all__ = [
    "Student",
    "Skills",
    "SkillHistory",
]
