"""
Pytest configuration and fixtures

Everything here is in-memory. The engine has no database or network,
so fixtures just build source weeks.
"""
import pytest
import sys
import os

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.recovery_week import RecoveryWeekConfig, UserContext, WorkoutRecord
from fixtures.recovery_fixtures import make_reps_exercise as reps
from fixtures.recovery_fixtures import make_timed_exercise as timed


@pytest.fixture
def previous_week():
    """
    Six-session week.

    Scores: wed 16, mon 14, fri 12, thu 9, tue 2, sat 0
    """
    return {
        "monday": WorkoutRecord(
            name="Lower + Push",
            type="strength",
            exercises=[
                reps("Back Squat", sets=5, reps=5, weight=100.0),
                reps("Bench Press", sets=4, reps=8, weight=72.5),
                reps("Bicep Curl", sets=3, reps=12, weight=12.0),
            ],
            notes="Add 2.5kg to squat if all reps clean",
        ),
        "tuesday": WorkoutRecord(
            name="Conditioning",
            type="cardio",
            exercises=[
                timed("Rowing Intervals", rounds=6),
                timed("Jump Rope", rounds=5),
            ],
        ),
        "wednesday": WorkoutRecord(
            name="Pull Day",
            type="strength",
            exercises=[
                reps("Deadlift", sets=5, reps=3, weight=140.0),
                reps("Overhead Press", sets=4, reps=6, weight=45.0),
                reps("Pull-up", sets=3, reps=8),
                timed("Plank", rounds=3, work_time=45, rest_time=15),
            ],
        ),
        "thursday": WorkoutRecord(
            name="Athletic Circuit",
            type="full_body",
            exercises=[
                reps("Kettlebell Swing", sets=4, reps=15, weight=24.0),
                reps("Walking Lunge", sets=3, reps=12, weight=16.0),
                timed("Burpees", rounds=4),
            ],
        ),
        "friday": WorkoutRecord(
            name="Volume Day",
            type="compound",
            exercises=[
                reps("Front Squat", sets=4, reps=6, weight=80.0),
                reps("Barbell Row", sets=4, reps=8, weight=60.0),
            ],
        ),
        "saturday": WorkoutRecord(
            name="Easy Aerobic",
            type="cardio",
            exercises=[
                timed("Easy Run", rounds=1, work_time=1800, rest_time=0),
                timed("Cycling", rounds=1, work_time=1200, rest_time=0),
            ],
        ),
    }


@pytest.fixture
def user_context():
    return UserContext(primary_goal="strength", training_days_per_week=6, session_duration=60)


@pytest.fixture
def recovery_config():
    """Explicit copy of the standard policy, independent of RECOVERY_* env."""
    return RecoveryWeekConfig(
        target_workouts=4,
        target_nutrition_days=4,
        pause_progression=True,
        simplify_workouts=True,
        maintain_weights=True,
        focus_message="This week is about getting back on track. Lower volume, same intensity. Just show up.",
    )
