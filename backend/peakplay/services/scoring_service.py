"""PeakScore engine - physical, mental, nutrition, technical and tactical scoring.

Every calculator is a pure function of its arguments. A field that is None
was not measured and is left out of both the earned and the maximum points
of its category, so partial data lowers granularity instead of the score.
"""

import logging
import math
from typing import List, Optional

from peakplay.schemas import (
    SkillSnapshot,
    StudentProfile,
    NutritionGoalProfile,
    NutritionTargets,
    ScoreComponent,
    SubScore,
    RadarPoint,
    PeakScoreResult,
    Sex,
)
from peakplay.services.benchmarks import (
    DEFAULT_AGE,
    age_bucketed,
    STRENGTH_METRICS,
    SPEED_METRICS,
    ENDURANCE_METRICS,
    PHYSICAL_POINTS,
    MENTAL_POINTS,
    ACTIVITY_MULTIPLIERS,
    GOAL_CALORIE_MULTIPLIERS,
    PROTEIN_PER_KG,
    CARBS_PER_KG,
    FAT_CALORIE_PERCENT,
    KCAL_PER_GRAM_FAT,
    WATER_LITERS_PER_KG,
    HIGH_ACTIVITY_EXTRA_WATER,
    HIGH_ACTIVITY_LEVELS,
    NUTRIENTS,
    TECHNICAL_GROUPS,
    TACTICAL_PLACEHOLDER_SCORE,
    EXCELLENT_THRESHOLD,
    GOOD_THRESHOLD,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float = 0.0, high: float = 10.0) -> float:
    return max(low, min(high, value))


def _component(name: str, scores: List[float], points: float) -> Optional[ScoreComponent]:
    """Average 0-10 scores and rescale them to the component's points."""
    if not scores:
        return None
    average = sum(scores) / len(scores)
    return ScoreComponent(
        name=name,
        raw_score=round(average, 2),
        earned=average / 10 * points,
        max_points=points,
    )


def _finalize(category: str, components: List[Optional[ScoreComponent]]) -> SubScore:
    """Turn earned/max points into a 0-100 sub-score."""
    present = [c for c in components if c is not None]
    earned = sum(c.earned for c in present)
    max_points = sum(c.max_points for c in present)

    value = round_half_up(earned / max_points * 100) if max_points > 0 else 0
    return SubScore(category=category, value=value, breakdown=present)


def _resolve_age(profile: Optional[StudentProfile]) -> int:
    if profile is not None and profile.age is not None:
        return profile.age
    return DEFAULT_AGE


def _resolve_benchmark(benchmark, age: int) -> float:
    if isinstance(benchmark, tuple):
        return age_bucketed(age, *benchmark)
    return benchmark


def _higher_is_better(value: float, benchmark: float) -> float:
    return min(10.0, value / benchmark * 10)


def _lower_is_better(value: float, benchmark: float) -> float:
    return _clamp(benchmark / value * 10)


# ============== Physical ==============

def calculate_physical_score(
    snapshot: SkillSnapshot,
    profile: Optional[StudentProfile] = None,
) -> SubScore:
    """
    Score strength (40), speed & agility (30) and endurance (30).

    Each metric is normalized to 0-10 against an age-adjusted benchmark:
    - higher is better: min(10, value / benchmark * 10)
    - lower is better: clamp(benchmark / value * 10, 0, 10)
    A component only counts when at least one of its metrics is present.
    """
    age = _resolve_age(profile)

    strength = []
    for field, benchmark in STRENGTH_METRICS:
        value = getattr(snapshot, field)
        if value is not None:
            strength.append(_higher_is_better(value, _resolve_benchmark(benchmark, age)))

    speed = []
    for field, benchmark in SPEED_METRICS:
        value = getattr(snapshot, field)
        if value is not None:
            speed.append(_lower_is_better(value, _resolve_benchmark(benchmark, age)))

    endurance = []
    for field, benchmark, lower_is_better in ENDURANCE_METRICS:
        value = getattr(snapshot, field)
        if value is None:
            continue
        resolved = _resolve_benchmark(benchmark, age)
        if lower_is_better:
            endurance.append(_lower_is_better(value, resolved))
        else:
            endurance.append(_higher_is_better(value, resolved))

    return _finalize("physical", [
        _component("strength", strength, PHYSICAL_POINTS["strength"]),
        _component("speed", speed, PHYSICAL_POINTS["speed"]),
        _component("endurance", endurance, PHYSICAL_POINTS["endurance"]),
    ])


# ============== Mental ==============

def calculate_mental_score(
    snapshot: SkillSnapshot,
    wellness_entry: Optional[float] = None,
) -> SubScore:
    """
    Score mood and sleep self-reports (0-10), 40 points each.

    The daily wellness entry is accepted for call-site compatibility but does
    not feed the formula.
    """
    components = []
    for field, points in MENTAL_POINTS.items():
        value = getattr(snapshot, field)
        if value is None:
            continue
        components.append(ScoreComponent(
            name=field.replace("_score", ""),
            raw_score=value,
            earned=value / 10 * points,
            max_points=points,
        ))

    return _finalize("mental", components)


# ============== Nutrition ==============

def resolve_goal(
    profile: Optional[StudentProfile] = None,
    goal: Optional[NutritionGoalProfile] = None,
) -> NutritionGoalProfile:
    """Use the caller's goal, else the defaults with the student's sex."""
    if goal is not None:
        return goal
    if profile is not None and profile.sex is not None:
        return NutritionGoalProfile(sex=profile.sex)
    return NutritionGoalProfile()


def calculate_nutrition_targets(
    profile: Optional[StudentProfile],
    goal: Optional[NutritionGoalProfile] = None,
) -> Optional[NutritionTargets]:
    """
    Personalized daily targets, or None when weight or height is unknown.

    BMR uses Mifflin-St Jeor: 10*kg + 6.25*cm - 5*age (+5 male, -161 female).
    TDEE = BMR * activity multiplier; calories = TDEE * goal multiplier.
    """
    if profile is None or profile.weight is None or profile.height is None:
        return None

    goal = resolve_goal(profile, goal)
    weight = profile.weight
    age = _resolve_age(profile)

    sex_offset = 5 if goal.sex == Sex.MALE else -161
    bmr = 10 * weight + 6.25 * profile.height - 5 * age + sex_offset
    tdee = bmr * ACTIVITY_MULTIPLIERS[goal.activity_level.value]
    calories = tdee * GOAL_CALORIE_MULTIPLIERS[goal.goal.value]

    water = weight * WATER_LITERS_PER_KG
    if goal.activity_level.value in HIGH_ACTIVITY_LEVELS:
        water += HIGH_ACTIVITY_EXTRA_WATER

    return NutritionTargets(
        bmr=bmr,
        tdee=tdee,
        calories=calories,
        protein=weight * PROTEIN_PER_KG[goal.goal.value],
        carbs=weight * CARBS_PER_KG[goal.goal.value],
        fats=calories * FAT_CALORIE_PERCENT[goal.goal.value] / 100 / KCAL_PER_GRAM_FAT,
        water=water,
    )


def score_against_target(actual: float, target: float, tolerance: float) -> float:
    """10 at the target, falling linearly to 0 at `tolerance` relative deviation."""
    if target <= 0:
        return 0.0
    deviation = abs(actual - target) / target
    return _clamp(10 * (1 - deviation / tolerance))


def score_in_range(value: float, low: float, high: float) -> float:
    """Linear position of value inside [low, high], on a 0-10 scale."""
    return _clamp((value - low) / (high - low) * 10)


def calculate_nutrition_score(
    snapshot: SkillSnapshot,
    profile: Optional[StudentProfile] = None,
    goal: Optional[NutritionGoalProfile] = None,
) -> SubScore:
    """
    Score calories, protein, carbs (25 each), fats and water (12.5 each).

    With weight and height known, intake is compared to personalized targets;
    otherwise each nutrient is placed inside a generic absolute range.
    """
    targets = calculate_nutrition_targets(profile, goal)
    if targets is None:
        logger.debug("Nutrition scored against generic ranges (no weight/height)")
    else:
        logger.debug("Nutrition scored against personalized targets: %.0f kcal", targets.calories)

    components = []
    for field, target_key, points, tolerance, low, high in NUTRIENTS:
        value = getattr(snapshot, field)
        if value is None:
            continue

        if targets is not None:
            raw = score_against_target(value, getattr(targets, target_key), tolerance)
        else:
            raw = score_in_range(value, low, high)

        components.append(ScoreComponent(
            name=target_key,
            raw_score=round(raw, 2),
            earned=raw / 10 * points,
            max_points=points,
        ))

    return _finalize("nutrition", components)


# ============== Technical ==============

def calculate_technical_score(snapshot: SkillSnapshot) -> SubScore:
    """Average batting (35), bowling (35) and fielding (30) ratings."""
    components = []
    for group, skills, points in TECHNICAL_GROUPS:
        ratings = [
            _clamp(getattr(snapshot, skill))
            for skill in skills
            if getattr(snapshot, skill) is not None
        ]
        components.append(_component(group, ratings, points))

    return _finalize("technical", components)


# ============== Tactical ==============

def calculate_tactical_score(placeholder: int = TACTICAL_PLACEHOLDER_SCORE) -> SubScore:
    # TODO: replace with game-awareness ratings once coaches record them
    return SubScore(category="tactical", value=placeholder)


# ============== Aggregate ==============

def build_radar(sub_scores: List[SubScore]) -> List[RadarPoint]:
    """Project each sub-score onto a 0-100 radar axis."""
    return [RadarPoint(category=s.category, score=s.value) for s in sub_scores]


def compute_scores(
    snapshot: SkillSnapshot,
    profile: Optional[StudentProfile] = None,
    goal: Optional[NutritionGoalProfile] = None,
    tactical_score: int = TACTICAL_PLACEHOLDER_SCORE,
) -> PeakScoreResult:
    """
    Compute all sub-scores and the PeakScore aggregate (0-500).

    The aggregate is a plain sum: each category has an equal voice
    regardless of how much of it the student has logged.
    """
    physical = calculate_physical_score(snapshot, profile)
    mental = calculate_mental_score(snapshot)
    nutrition = calculate_nutrition_score(snapshot, profile, goal)
    technical = calculate_technical_score(snapshot)
    tactical = calculate_tactical_score(tactical_score)

    sub_scores = [physical, mental, nutrition, technical, tactical]

    return PeakScoreResult(
        physical=physical,
        mental=mental,
        nutrition=nutrition,
        technical=technical,
        tactical=tactical,
        aggregate=sum(s.value for s in sub_scores),
        radar=build_radar(sub_scores),
        nutrition_targets=calculate_nutrition_targets(profile, goal),
    )


def score_status(value: Optional[float]) -> str:
    """Band a 0-100 score for display."""
    if value is None:
        return "no-data"
    if value >= EXCELLENT_THRESHOLD:
        return "excellent"
    if value >= GOOD_THRESHOLD:
        return "good"
    return "needs-improvement"
