"""
Tests for compound-exercise classification and workout selection.

Covers:
  1. Compound keyword heuristic (case, substrings, accepted false positives)
  2. Workout tag matching for free text and tag sets
  3. Significance scoring
  4. Selection: ordering, stability on ties, size bounds
"""

import pytest

from services.recovery_week import (
    WorkoutRecord,
    is_compound_exercise,
    score_workout,
    select_recovery_workouts,
    workout_has_tag,
)
from fixtures.recovery_fixtures import make_workout


class TestCompoundClassifier:
    """Keyword heuristic for multi-joint movements."""

    @pytest.mark.parametrize("name", [
        "Back Squat",
        "Romanian Deadlift",
        "Incline Bench",
        "Overhead Press",
        "Barbell Row",
        "Pull-up",
        "Weighted Chin-up",
        "Walking Lunge",
        "Power Clean",
        "Hang Snatch",
    ])
    def test_vocabulary_matches(self, name):
        assert is_compound_exercise(name) is True

    def test_case_insensitive(self):
        assert is_compound_exercise("DEADLIFT") is True
        assert is_compound_exercise("front SQUAT") is True

    @pytest.mark.parametrize("name", ["Bicep Curl", "Plank", "Lateral Raise", "Burpees"])
    def test_accessories_do_not_match(self, name):
        assert is_compound_exercise(name) is False

    def test_substring_false_positive_accepted(self):
        """'pressing' contains 'press' - heuristic, not a registry."""
        assert is_compound_exercise("Leg Pressing Machine") is True

    def test_empty_name(self):
        assert is_compound_exercise("") is False


class TestWorkoutTags:
    """Tag matching for free-text and structured workout types."""

    def test_free_text_substring(self):
        workout = WorkoutRecord(type="strength_upper compound")
        assert workout_has_tag(workout, "strength")
        assert workout_has_tag(workout, "compound")
        assert not workout_has_tag(workout, "full_body")

    def test_tag_set_requires_exact_member(self):
        workout = WorkoutRecord(type=["strength_upper", "compound"])
        assert workout_has_tag(workout, "compound")
        assert not workout_has_tag(workout, "strength")

    def test_missing_type(self):
        assert not workout_has_tag(WorkoutRecord(type=""), "strength")
        assert not workout_has_tag(WorkoutRecord(type=None), "strength")


class TestWorkoutScoring:
    """Additive significance score."""

    def test_tag_points(self):
        assert score_workout(make_workout("strength")) == 10
        assert score_workout(make_workout("compound")) == 8
        assert score_workout(make_workout("full_body")) == 7
        assert score_workout(make_workout("cardio")) == 0

    def test_tags_stack(self):
        assert score_workout(make_workout("strength compound full_body")) == 25

    def test_compound_exercises_stack_without_cap(self):
        names = ["Squat", "Deadlift", "Bench Press", "Row", "Lunge", "Clean"]
        assert score_workout(make_workout("", names)) == 12

    def test_accessories_add_nothing(self):
        assert score_workout(make_workout("strength", ["Curl", "Plank"])) == 10

    def test_fixture_week_scores(self, previous_week):
        scores = {key: score_workout(w) for key, w in previous_week.items()}
        assert scores == {
            "monday": 14,
            "tuesday": 2,
            "wednesday": 16,
            "thursday": 9,
            "friday": 12,
            "saturday": 0,
        }


class TestSelection:
    """Top-N selection by score."""

    def test_descending_by_score(self, previous_week):
        selected = select_recovery_workouts(list(previous_week.items()), 4)
        assert [key for key, _ in selected] == ["wednesday", "monday", "friday", "thursday"]

    def test_ties_keep_original_order(self):
        first = make_workout("strength", name="first")
        second = make_workout("strength", name="second")
        third = make_workout("cardio", name="third")

        selected = select_recovery_workouts(
            [("a", third), ("b", first), ("c", second)], 3
        )
        assert [key for key, _ in selected] == ["b", "c", "a"]

        reversed_input = select_recovery_workouts(
            [("c", second), ("b", first), ("a", third)], 3
        )
        assert [key for key, _ in reversed_input] == ["c", "b", "a"]

    @pytest.mark.parametrize("target", [0, 1, 3, 6, 10])
    def test_never_more_than_min_of_target_and_input(self, previous_week, target):
        selected = select_recovery_workouts(list(previous_week.items()), target)
        assert len(selected) == min(target, len(previous_week))

    def test_short_week_returns_everything_ranked(self):
        light = make_workout("cardio")
        heavy = make_workout("strength")
        selected = select_recovery_workouts([("x", light), ("y", heavy)], 4)
        assert [key for key, _ in selected] == ["y", "x"]

    def test_empty_input(self):
        assert select_recovery_workouts([], 4) == []

    def test_returns_same_workout_objects(self, previous_week):
        selected = dict(select_recovery_workouts(list(previous_week.items()), 2))
        assert selected["wednesday"] is previous_week["wednesday"]

    def test_deterministic(self, previous_week):
        entries = list(previous_week.items())
        assert select_recovery_workouts(entries, 4) == select_recovery_workouts(entries, 4)
