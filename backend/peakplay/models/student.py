"""Student model holding the biometrics used for personalized targets."""

from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import relationship, validates
from datetime import datetime

from peakplay.database import Base


class Student(Base):
    """Athlete enrolled with a coach."""
    
    __tablename__ = "students"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    username = Column(String(100), unique=True, index=True, nullable=True)
    sport = Column(String(50), default="CRICKET")
    role = Column(String(50), nullable=True)  # BATSMAN, BOWLER, ALL_ROUNDER, KEEPER
    academy = Column(String(255), nullable=True)
    
    # Biometrics
    age = Column(Integer, nullable=True)  # years
    weight = Column(Float, nullable=True)  # kg
    height = Column(Float, nullable=True)  # cm
    sex = Column(String(10), nullable=False, default="male")  # male, female
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    skills = relationship("Skills", back_populates="student", uselist=False, cascade="all, delete-orphan")
    history = relationship("SkillHistory", back_populates="student", cascade="all, delete-orphan")
    
    @validates("sex")
    def normalize_sex(self, key, value):
        return (value or "male").strip().lower()

    def __repr__(self):
        return f"<Student {self.name} ({self.sport})>"
