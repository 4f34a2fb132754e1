"""Latest skill snapshot for a student."""

from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from peakplay.database import Base


class Skills(Base):
    """Most recent measurement set. Null columns have not been measured yet."""
    
    __tablename__ = "skills"
    
    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), unique=True, nullable=False, index=True)
    
    # Strength
    pushup_score = Column(Float, nullable=True)  # reps
    pullup_score = Column(Float, nullable=True)  # reps
    vertical_jump = Column(Float, nullable=True)  # cm
    grip_strength = Column(Float, nullable=True)  # kg
    
    # Speed & agility (seconds, lower is better)
    sprint_50m = Column(Float, nullable=True)
    shuttle_run = Column(Float, nullable=True)
    sprint_time = Column(Float, nullable=True)
    
    # Endurance
    run_5k_time = Column(Float, nullable=True)  # minutes
    yoyo_test = Column(Float, nullable=True)  # level
    
    # Wellness (0-10)
    mood_score = Column(Float, nullable=True)
    sleep_score = Column(Float, nullable=True)
    
    # Nutrition
    total_calories = Column(Float, nullable=True)  # kcal
    protein = Column(Float, nullable=True)  # g
    carbohydrates = Column(Float, nullable=True)  # g
    fats = Column(Float, nullable=True)  # g
    water_intake = Column(Float, nullable=True)  # liters
    
    # Batting (0-10)
    batting_grip = Column(Float, nullable=True)
    batting_stance = Column(Float, nullable=True)
    batting_balance = Column(Float, nullable=True)
    cocking_of_wrist = Column(Float, nullable=True)
    back_lift = Column(Float, nullable=True)
    top_hand_dominance = Column(Float, nullable=True)
    high_elbow = Column(Float, nullable=True)
    running_between_wickets = Column(Float, nullable=True)
    calling = Column(Float, nullable=True)
    
    # Bowling (0-10)
    bowling_grip = Column(Float, nullable=True)
    run_up = Column(Float, nullable=True)
    back_foot_landing = Column(Float, nullable=True)
    front_foot_landing = Column(Float, nullable=True)
    hip_drive = Column(Float, nullable=True)
    back_foot_drag = Column(Float, nullable=True)
    non_bowling_arm = Column(Float, nullable=True)
    release = Column(Float, nullable=True)
    follow_through = Column(Float, nullable=True)
    
    # Fielding (0-10)
    positioning_of_ball = Column(Float, nullable=True)
    pick_up = Column(Float, nullable=True)
    aim = Column(Float, nullable=True)
    throw = Column(Float, nullable=True)
    soft_hands = Column(Float, nullable=True)
    receiving = Column(Float, nullable=True)
    high_catch = Column(Float, nullable=True)
    flat_catch = Column(Float, nullable=True)
    
    # Timestamps
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    student = relationship("Student", back_populates="skills")
    
    def __repr__(self):
        return f"<Skills student={self.student_id}>"
