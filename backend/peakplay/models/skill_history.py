"""Per-day category scores for progress charts."""

from sqlalchemy import Column, Integer, Float, Date, Boolean, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from peakplay.database import Base


class SkillHistory(Base):
    """One row per student per day. Null scores mean nothing was measured."""
    
    __tablename__ = "skill_history"
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_skill_history_student_date"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    
    # Category scores (0-100)
    physical_score = Column(Float, nullable=True)
    nutrition_score = Column(Float, nullable=True)
    mental_score = Column(Float, nullable=True)
    wellness_score = Column(Float, nullable=True)
    technique_score = Column(Float, nullable=True)
    tactical_score = Column(Float, nullable=True)
    
    # Match context
    is_match_day = Column(Boolean, default=False)
    match_id = Column(String(50), nullable=True)
    
    # Notes
    coach_feedback = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    
    # Relationships
    student = relationship("Student", back_populates="history")
    
    def __repr__(self):
        return f"<SkillHistory {self.date} - student={self.student_id}>"
