import pytest

from peakplay.schemas import (
    SkillSnapshot,
    StudentProfile,
    NutritionGoalProfile,
    NutritionGoal,
    ActivityLevel,
    Sex,
)
from peakplay.services.scoring_service import (
    calculate_nutrition_score,
    calculate_nutrition_targets,
    score_against_target,
    score_in_range,
    resolve_goal,
)


PROFILE = StudentProfile(age=17, weight=70, height=175, sex=Sex.MALE)


class TestTargets:
    def test_requires_weight_and_height(self):
        assert calculate_nutrition_targets(None) is None
        assert calculate_nutrition_targets(StudentProfile(weight=70)) is None
        assert calculate_nutrition_targets(StudentProfile(height=175)) is None

    def test_maintaining_moderate_male(self):
        targets = calculate_nutrition_targets(PROFILE, NutritionGoalProfile())

        # 10*70 + 6.25*175 - 5*17 + 5
        assert targets.bmr == pytest.approx(1713.75)
        assert targets.tdee == pytest.approx(1713.75 * 1.55)
        assert targets.calories == pytest.approx(1713.75 * 1.55)
        assert targets.protein == pytest.approx(112)
        assert targets.carbs == pytest.approx(280)
        assert targets.fats == pytest.approx(1713.75 * 1.55 * 0.25 / 9)
        assert targets.water == pytest.approx(2.45)

    def test_female_offset(self):
        goal = NutritionGoalProfile(sex=Sex.FEMALE)
        targets = calculate_nutrition_targets(PROFILE, goal)
        assert targets.bmr == pytest.approx(1713.75 - 166)

    def test_profile_sex_used_without_goal(self):
        profile = StudentProfile(age=17, weight=70, height=175, sex=Sex.FEMALE)
        assert calculate_nutrition_targets(profile).bmr == pytest.approx(1547.75)

    def test_goal_sex_wins_over_profile(self):
        profile = StudentProfile(age=17, weight=70, height=175, sex=Sex.FEMALE)
        targets = calculate_nutrition_targets(profile, NutritionGoalProfile(sex=Sex.MALE))
        assert targets.bmr == pytest.approx(1713.75)

    def test_missing_age_defaults_to_18(self):
        targets = calculate_nutrition_targets(StudentProfile(weight=70, height=175))
        assert targets.bmr == pytest.approx(10 * 70 + 6.25 * 175 - 5 * 18 + 5)

    def test_high_activity_adds_water(self):
        for level in (ActivityLevel.INTENSE, ActivityLevel.VERY_INTENSE):
            targets = calculate_nutrition_targets(PROFILE, NutritionGoalProfile(activity_level=level))
            assert targets.water == pytest.approx(2.95)

        light = calculate_nutrition_targets(PROFILE, NutritionGoalProfile(activity_level=ActivityLevel.LIGHT))
        assert light.water == pytest.approx(2.45)
        assert light.tdee == pytest.approx(1713.75 * 1.375)

    def test_goal_macros(self):
        bulking = calculate_nutrition_targets(PROFILE, NutritionGoalProfile(goal=NutritionGoal.BULKING))
        cutting = calculate_nutrition_targets(PROFILE, NutritionGoalProfile(goal=NutritionGoal.CUTTING))

        assert bulking.calories > cutting.calories
        assert bulking.calories == pytest.approx(bulking.tdee * 1.15)
        assert cutting.calories == pytest.approx(cutting.tdee * 0.85)
        assert bulking.protein == pytest.approx(140)
        assert cutting.protein == pytest.approx(154)
        assert bulking.carbs == pytest.approx(350)
        assert cutting.carbs == pytest.approx(210)
        assert cutting.fats == pytest.approx(cutting.calories * 0.20 / 9)


class TestNutrientScoring:
    def test_score_against_target(self):
        assert score_against_target(100, 100, 0.5) == 10
        assert score_against_target(75, 100, 0.5) == pytest.approx(5)
        assert score_against_target(125, 100, 0.5) == pytest.approx(5)
        assert score_against_target(200, 100, 0.5) == 0
        assert score_against_target(50, 0, 0.5) == 0

    def test_score_in_range(self):
        assert score_in_range(2500, 1000, 4000) == pytest.approx(5)
        assert score_in_range(500, 1000, 4000) == 0
        assert score_in_range(5000, 1000, 4000) == 10


class TestNutritionScore:
    def test_no_data_scores_zero(self):
        score = calculate_nutrition_score(SkillSnapshot(), PROFILE)
        assert score.value == 0
        assert score.breakdown == []

    def test_fallback_calories_only(self):
        score = calculate_nutrition_score(SkillSnapshot(total_calories=2500))

        assert score.value == 50
        assert score.breakdown[0].name == "calories"
        assert score.breakdown[0].raw_score == 5

    def test_fallback_counts_zero_scores(self):
        score = calculate_nutrition_score(SkillSnapshot(total_calories=500, water_intake=4))

        # calories 0/25, water 12.5/12.5
        assert score.value == 33

    def test_personalized_perfect_intake(self):
        targets = calculate_nutrition_targets(PROFILE)
        snapshot = SkillSnapshot(
            total_calories=targets.calories,
            protein=targets.protein,
            carbohydrates=targets.carbs,
            fats=targets.fats,
            water_intake=targets.water,
        )
        score = calculate_nutrition_score(snapshot, PROFILE)

        assert score.value == 100
        assert sum(c.max_points for c in score.breakdown) == 100

    def test_personalized_deviation(self):
        # protein target 112 g, 20% under with a 0.4 tolerance -> 5/10
        assert calculate_nutrition_score(SkillSnapshot(protein=89.6), PROFILE).value == 50
        assert calculate_nutrition_score(SkillSnapshot(protein=170), PROFILE).value == 0

    def test_personalization_switch(self):
        snapshot = SkillSnapshot(total_calories=2500)

        generic = calculate_nutrition_score(snapshot)
        personalized = calculate_nutrition_score(snapshot, PROFILE)
        missing_height = calculate_nutrition_score(snapshot, StudentProfile(age=17, weight=70))

        assert generic.value == 50
        assert personalized.value == 88
        assert missing_height.value == generic.value

    def test_goal_sensitivity(self):
        snapshot = SkillSnapshot(total_calories=3000)
        bulking = calculate_nutrition_score(snapshot, PROFILE, NutritionGoalProfile(goal=NutritionGoal.BULKING))
        cutting = calculate_nutrition_score(snapshot, PROFILE, NutritionGoalProfile(goal=NutritionGoal.CUTTING))

        assert bulking.value > cutting.value


def test_resolve_goal():
    assert resolve_goal() == NutritionGoalProfile()
    assert resolve_goal(StudentProfile(sex=Sex.FEMALE)).sex == Sex.FEMALE

    explicit = NutritionGoalProfile(goal=NutritionGoal.CUTTING)
    assert resolve_goal(StudentProfile(sex=Sex.FEMALE), explicit) is explicit
