import pytest
from pydantic import ValidationError

from peakplay.schemas import SkillSnapshot, StudentProfile
from peakplay.services.scoring_service import (
    calculate_physical_score,
    calculate_mental_score,
    calculate_technical_score,
    calculate_tactical_score,
    compute_scores,
    round_half_up,
    score_status,
)


AGE_17 = StudentProfile(age=17)


class TestPhysicalScore:
    def test_no_data_scores_zero(self):
        score = calculate_physical_score(SkillSnapshot())
        assert score.value == 0
        assert score.breakdown == []

    def test_single_component_rescales_to_full_range(self):
        # 80 push-ups against the under-18 benchmark of 70 caps at 10/10
        score = calculate_physical_score(SkillSnapshot(pushup_score=80), AGE_17)

        assert score.value == 100
        assert len(score.breakdown) == 1
        strength = score.breakdown[0]
        assert strength.name == "strength"
        assert strength.raw_score == 10
        assert strength.earned == pytest.approx(40)
        assert strength.max_points == 40

    def test_adding_metric_with_same_ratio_does_not_inflate(self):
        only_pushups = calculate_physical_score(SkillSnapshot(pushup_score=35), AGE_17)
        with_pullups = calculate_physical_score(SkillSnapshot(pushup_score=35, pullup_score=10), AGE_17)

        assert only_pushups.value == 50
        assert with_pullups.value == 50

    def test_lower_is_better_metrics(self):
        assert calculate_physical_score(SkillSnapshot(sprint_50m=6.5)).value == 100
        assert calculate_physical_score(SkillSnapshot(sprint_50m=13)).value == 50
        # Faster than benchmark is still capped at 10
        assert calculate_physical_score(SkillSnapshot(shuttle_run=6)).value == 100

    def test_components_weighted_by_points(self):
        snapshot = SkillSnapshot(pushup_score=70, sprint_50m=13)
        score = calculate_physical_score(snapshot, AGE_17)

        # strength 40/40, speed 15/30 -> 55/70
        assert score.value == 79
        assert [c.name for c in score.breakdown] == ["strength", "speed"]

    def test_age_buckets(self):
        snapshot = SkillSnapshot(pushup_score=60)
        assert calculate_physical_score(snapshot, StudentProfile(age=15)).value == 100
        assert calculate_physical_score(snapshot, StudentProfile(age=20)).value == 75

    def test_missing_age_uses_adult_benchmarks(self):
        assert calculate_physical_score(SkillSnapshot(pushup_score=60)).value == 75
        assert calculate_physical_score(SkillSnapshot(pushup_score=60), StudentProfile(weight=60)).value == 75

    def test_endurance_metrics(self):
        assert calculate_physical_score(SkillSnapshot(yoyo_test=25)).value == 100
        snapshot = SkillSnapshot(run_5k_time=32)
        assert calculate_physical_score(snapshot, StudentProfile(age=20)).value == 50

    def test_measured_zero_counts_against_the_student(self):
        # 0 pull-ups is a measurement: strength averages 10 and 0
        score = calculate_physical_score(SkillSnapshot(pushup_score=80, pullup_score=0))
        assert score.value == 50
        assert score.breakdown[0].raw_score == 5

    def test_zero_time_is_rejected(self):
        with pytest.raises(ValidationError):
            SkillSnapshot(sprint_50m=0)


class TestMentalScore:
    def test_no_data_scores_zero(self):
        score = calculate_mental_score(SkillSnapshot())
        assert score.value == 0
        assert score.breakdown == []

    def test_mood_and_sleep(self):
        score = calculate_mental_score(SkillSnapshot(mood_score=8, sleep_score=6))

        assert score.value == 70
        assert sum(c.max_points for c in score.breakdown) == 80
        assert [c.name for c in score.breakdown] == ["mood", "sleep"]

    def test_single_component(self):
        assert calculate_mental_score(SkillSnapshot(mood_score=5)).value == 50

    def test_wellness_entry_is_ignored(self):
        snapshot = SkillSnapshot(mood_score=8, sleep_score=6)
        assert calculate_mental_score(snapshot, wellness_entry=1).value == 70


class TestTechnicalScore:
    def test_no_data_scores_zero(self):
        assert calculate_technical_score(SkillSnapshot()).value == 0

    def test_group_average(self):
        batting = {
            "batting_grip": 8, "batting_stance": 8, "batting_balance": 8,
            "cocking_of_wrist": 8, "back_lift": 8, "top_hand_dominance": 8,
            "high_elbow": 8, "running_between_wickets": 8, "calling": 8,
        }
        assert calculate_technical_score(SkillSnapshot(**batting)).value == 80

    def test_ratings_are_clamped(self):
        snapshot = SkillSnapshot(batting_grip=8, aim=12)
        score = calculate_technical_score(snapshot)

        # batting 28/35, fielding 30/30 -> 58/65
        assert score.value == 89
        assert calculate_technical_score(SkillSnapshot(release=-3)).value == 0

    def test_only_present_skills_are_averaged(self):
        snapshot = SkillSnapshot(run_up=6, release=None, follow_through=None)
        assert calculate_technical_score(snapshot).value == 60


class TestComputeScores:
    def test_empty_snapshot(self):
        result = compute_scores(SkillSnapshot())

        assert result.physical.value == 0
        assert result.mental.value == 0
        assert result.nutrition.value == 0
        assert result.technical.value == 0
        assert result.tactical.value == 65
        assert result.aggregate == 65
        assert result.nutrition_targets is None

    @pytest.mark.parametrize("snapshot", [
        SkillSnapshot(pushup_score=1000, sprint_50m=0.1, yoyo_test=500),
        SkillSnapshot(sprint_50m=100, run_5k_time=300, mood_score=0, sleep_score=0),
        SkillSnapshot(total_calories=100000, protein=0, water_intake=50, mood_score=10, sleep_score=10),
        SkillSnapshot(batting_grip=100, bowling_grip=-100, aim=5),
    ])
    def test_bounds_and_aggregate(self, snapshot):
        profile = StudentProfile(age=16, weight=60, height=170)
        for p in (None, profile):
            result = compute_scores(snapshot, p)
            subs = [result.physical, result.mental, result.nutrition, result.technical, result.tactical]

            for sub in subs:
                assert 0 <= sub.value <= 100
            assert result.aggregate == sum(s.value for s in subs)
            assert 0 <= result.aggregate <= 500

    def test_radar_projection(self):
        result = compute_scores(SkillSnapshot(pushup_score=80, mood_score=5), AGE_17)

        assert [r.category for r in result.radar] == [
            "physical", "mental", "nutrition", "technical", "tactical",
        ]
        assert [r.score for r in result.radar] == [100, 50, 0, 0, 65]
        assert all(r.full_mark == 100 for r in result.radar)

    def test_custom_tactical_placeholder(self):
        result = compute_scores(SkillSnapshot(), tactical_score=40)
        assert result.tactical.value == 40
        assert result.aggregate == 40

    def test_result_is_immutable(self):
        result = compute_scores(SkillSnapshot())
        with pytest.raises(Exception):
            result.aggregate = 10


def test_tactical_placeholder():
    score = calculate_tactical_score()
    assert score.value == 65
    assert score.breakdown == []


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(88.23) == 88
    assert round_half_up(0) == 0


@pytest.mark.parametrize("value,status", [
    (None, "no-data"),
    (90, "excellent"),
    (75, "excellent"),
    (50, "good"),
    (49.9, "needs-improvement"),
    (0, "needs-improvement"),
])
def test_score_status(value, status):
    assert score_status(value) == status
