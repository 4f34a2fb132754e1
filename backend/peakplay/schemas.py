"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime, date
from enum import Enum


# ============== Profile Enums ==============

class NutritionGoal(str, Enum):
    BULKING = "bulking"
    MAINTAINING = "maintaining"
    CUTTING = "cutting"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"
    VERY_INTENSE = "very_intense"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


# ============== Scoring Input Schemas ==============

class SkillSnapshot(BaseModel):
    """One point-in-time measurement set. None means not measured yet."""

    # Strength
    pushup_score: Optional[float] = Field(None, ge=0)  # reps
    pullup_score: Optional[float] = Field(None, ge=0)  # reps
    vertical_jump: Optional[float] = Field(None, ge=0)  # cm
    grip_strength: Optional[float] = Field(None, ge=0)  # kg

    # Speed & agility (seconds, must be positive)
    sprint_50m: Optional[float] = Field(None, gt=0)
    shuttle_run: Optional[float] = Field(None, gt=0)
    sprint_time: Optional[float] = Field(None, gt=0)

    # Endurance
    run_5k_time: Optional[float] = Field(None, gt=0)  # minutes
    yoyo_test: Optional[float] = Field(None, ge=0)  # level

    # Wellness self-report
    mood_score: Optional[float] = Field(None, ge=0, le=10)
    sleep_score: Optional[float] = Field(None, ge=0, le=10)

    # Nutrition intake
    total_calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbohydrates: Optional[float] = Field(None, ge=0)
    fats: Optional[float] = Field(None, ge=0)
    water_intake: Optional[float] = Field(None, ge=0)  # liters

    # Batting (0-10)
    batting_grip: Optional[float] = None
    batting_stance: Optional[float] = None
    batting_balance: Optional[float] = None
    cocking_of_wrist: Optional[float] = None
    back_lift: Optional[float] = None
    top_hand_dominance: Optional[float] = None
    high_elbow: Optional[float] = None
    running_between_wickets: Optional[float] = None
    calling: Optional[float] = None

    # Bowling (0-10)
    bowling_grip: Optional[float] = None
    run_up: Optional[float] = None
    back_foot_landing: Optional[float] = None
    front_foot_landing: Optional[float] = None
    hip_drive: Optional[float] = None
    back_foot_drag: Optional[float] = None
    non_bowling_arm: Optional[float] = None
    release: Optional[float] = None
    follow_through: Optional[float] = None

    # Fielding (0-10)
    positioning_of_ball: Optional[float] = None
    pick_up: Optional[float] = None
    aim: Optional[float] = None
    throw: Optional[float] = None
    soft_hands: Optional[float] = None
    receiving: Optional[float] = None
    high_catch: Optional[float] = None
    flat_catch: Optional[float] = None

    class Config:
        from_attributes = True
        frozen = True


class StudentProfile(BaseModel):
    """Biometrics used to personalize benchmarks and nutrition targets."""
    age: Optional[int] = Field(None, ge=0, le=120)
    weight: Optional[float] = Field(None, gt=0)  # kg
    height: Optional[float] = Field(None, gt=0)  # cm
    sex: Optional[Sex] = None

    class Config:
        from_attributes = True
        frozen = True


class NutritionGoalProfile(BaseModel):
    goal: NutritionGoal = NutritionGoal.MAINTAINING
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    sex: Sex = Sex.MALE

    class Config:
        frozen = True


class ScoreRequest(BaseModel):
    """Ad-hoc scoring request carrying everything the engine needs."""
    snapshot: SkillSnapshot = SkillSnapshot()
    profile: Optional[StudentProfile] = None
    goal: Optional[NutritionGoalProfile] = None


# ============== Scoring Output Schemas ==============

class ScoreComponent(BaseModel):
    """A named slice of a sub-score."""
    name: str
    raw_score: float  # 0-10
    earned: float
    max_points: float

    class Config:
        frozen = True


class SubScore(BaseModel):
    category: str
    value: int  # 0-100
    breakdown: List[ScoreComponent] = []

    class Config:
        frozen = True


class NutritionTargets(BaseModel):
    """Personalized daily intake targets."""
    bmr: float
    tdee: float
    calories: float
    protein: float  # g
    carbs: float  # g
    fats: float  # g
    water: float  # liters

    class Config:
        frozen = True


class RadarPoint(BaseModel):
    category: str
    score: int
    full_mark: int = 100

    class Config:
        frozen = True


class PeakScoreResult(BaseModel):
    """All five sub-scores plus the 0-500 aggregate."""
    physical: SubScore
    mental: SubScore
    nutrition: SubScore
    technical: SubScore
    tactical: SubScore
    aggregate: int
    radar: List[RadarPoint]
    nutrition_targets: Optional[NutritionTargets] = None

    class Config:
        frozen = True


# ============== Progress Schemas ==============

class TimeSeriesPoint(BaseModel):
    """One day of category scores. None means nothing was measured."""
    date: date
    physical_score: Optional[float] = None
    nutrition_score: Optional[float] = None
    mental_score: Optional[float] = None
    wellness_score: Optional[float] = None
    technique_score: Optional[float] = None
    tactical_score: Optional[float] = None
    is_match_day: bool = False
    match_id: Optional[str] = None
    coach_feedback: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class TrendSummary(BaseModel):
    category: str
    current: Optional[float] = None
    previous: Optional[float] = None
    trend: float = 0
    trend_percentage: float = 0


class FilledSeries(BaseModel):
    """Gap-filled series with the trend of one category."""
    series: List[TimeSeriesPoint]
    current: Optional[float] = None
    trend: float = 0
    trend_percentage: float = 0


class SeriesSummary(BaseModel):
    category: str
    average: float
    max_score: float
    min_score: float
    data_points: int
    status: str


class ProgressResponse(FilledSeries):
    student_id: int
    category: str
    start_date: date
    end_date: date
    summary: SeriesSummary


# ============== Student Schemas ==============

class StudentBase(BaseModel):
    name: str
    username: Optional[str] = None
    sport: str = "CRICKET"
    role: Optional[str] = None
    academy: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    sex: Sex = Sex.MALE


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None
    sport: Optional[str] = None
    role: Optional[str] = None
    academy: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    sex: Optional[Sex] = None


class StudentResponse(StudentBase):
    id: int
    sex: Optional[Sex] = None
    created_at: datetime

    @field_validator("sex", mode="before")
    @classmethod
    def normalize_sex(cls, value):
        if isinstance(value, str):
            return value.strip().lower() or None
        return value

    class Config:
        from_attributes = True


class StudentWithSkills(StudentResponse):
    skills: Optional[SkillSnapshot] = None

    class Config:
        from_attributes = True


class StudentBrief(BaseModel):
    id: int
    name: str
    sport: Optional[str] = None

    class Config:
        from_attributes = True


# ============== History Schemas ==============

class HistoryResponse(BaseModel):
    history: List[TimeSeriesPoint]
    student: StudentBrief
    message: Optional[str] = None


class HistoryRecordRequest(BaseModel):
    """Snapshot the student's current scores into their history."""
    entry_date: Optional[date] = None
    goal: Optional[NutritionGoalProfile] = None
    is_match_day: bool = False
    match_id: Optional[str] = None
    coach_feedback: Optional[str] = None
    notes: Optional[str] = None
