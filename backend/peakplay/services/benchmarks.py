"""Benchmark and target tables for the PeakScore engine.

Age buckets are (under 16, under 18, 18 and over). Benchmarks are the raw
value that earns a full 10/10 on that metric.
"""

DEFAULT_AGE = 18


def age_bucketed(age: int, under_16, under_18, adult):
    """Pick the benchmark for the student's age bucket."""
    if age < 16:
        return under_16
    if age < 18:
        return under_18
    return adult


# ============== Physical ==============

# (field, benchmark) - benchmark may be a (u16, u18, adult) tuple
STRENGTH_METRICS = [
    ("pushup_score", (60, 70, 80)),
    ("pullup_score", 20),
    ("vertical_jump", 90),
    ("grip_strength", (50, 60, 70)),
]

# Lower is better
SPEED_METRICS = [
    ("sprint_50m", 6.5),
    ("shuttle_run", 12),
    ("sprint_time", 10),
]

# (field, benchmark, lower_is_better)
ENDURANCE_METRICS = [
    ("run_5k_time", (18, 17, 16), True),
    ("yoyo_test", 25, False),
]

PHYSICAL_POINTS = {
    "strength": 40,
    "speed": 30,
    "endurance": 30,
}


# ============== Mental ==============

# Two components only: max accumulates to 80 when both are present
MENTAL_POINTS = {
    "mood_score": 40,
    "sleep_score": 40,
}


# ============== Nutrition ==============

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "intense": 1.725,
    "very_intense": 1.9,
}

GOAL_CALORIE_MULTIPLIERS = {
    "bulking": 1.15,
    "maintaining": 1.0,
    "cutting": 0.85,
}

PROTEIN_PER_KG = {
    "bulking": 2.0,
    "maintaining": 1.6,
    "cutting": 2.2,
}

CARBS_PER_KG = {
    "bulking": 5.0,
    "maintaining": 4.0,
    "cutting": 3.0,
}

FAT_CALORIE_PERCENT = {
    "bulking": 20,
    "maintaining": 25,
    "cutting": 20,
}

KCAL_PER_GRAM_FAT = 9

WATER_LITERS_PER_KG = 0.035
HIGH_ACTIVITY_EXTRA_WATER = 0.5
HIGH_ACTIVITY_LEVELS = ("intense", "very_intense")

# (intake field, target key, points, tolerance width, generic low, generic high)
NUTRIENTS = [
    ("total_calories", "calories", 25, 0.5, 1000, 4000),
    ("protein", "protein", 25, 0.4, 50, 150),
    ("carbohydrates", "carbs", 25, 0.5, 150, 400),
    ("fats", "fats", 12.5, 0.6, 50, 100),
    ("water_intake", "water", 12.5, 0.4, 1, 4),
]


# ============== Technical ==============

BATTING_SKILLS = [
    "batting_grip", "batting_stance", "batting_balance", "cocking_of_wrist", "back_lift",
    "top_hand_dominance", "high_elbow", "running_between_wickets", "calling",
]

BOWLING_SKILLS = [
    "bowling_grip", "run_up", "back_foot_landing", "front_foot_landing", "hip_drive",
    "back_foot_drag", "non_bowling_arm", "release", "follow_through",
]

FIELDING_SKILLS = [
    "positioning_of_ball", "pick_up", "aim", "throw", "soft_hands",
    "receiving", "high_catch", "flat_catch",
]

TECHNICAL_GROUPS = [
    ("batting", BATTING_SKILLS, 35),
    ("bowling", BOWLING_SKILLS, 35),
    ("fielding", FIELDING_SKILLS, 30),
]


# ============== Tactical ==============

# Not measured yet; every student gets the same value
TACTICAL_PLACEHOLDER_SCORE = 65


# ============== Status bands ==============

EXCELLENT_THRESHOLD = 75
GOOD_THRESHOLD = 50
