"""
Constants for recovery week generation.

Policy tables are product decisions, not computed optima. Adding a new
workout count or goal means adding an explicit entry here.
"""

from enum import Enum
from typing import Dict, List, Tuple


class ExerciseType(str, Enum):
    """How an exercise is prescribed."""
    REPS = "reps"        # sets x reps @ weight
    TIMED = "timed"      # rounds of work/rest intervals


class WeekType(str, Enum):
    """External classification of a completed week."""
    EXCELLENT = "excellent"
    GOOD = "good"
    INCONSISTENT = "inconsistent"
    BAD = "bad"
    RECOVERY = "recovery"


class RecoveryMode(str, Enum):
    """Where a user sits in the recovery cycle."""
    NORMAL = "normal"
    RECOVERY = "recovery"
    EXTENDED_RECOVERY = "extended_recovery"


class PrimaryGoal(str, Enum):
    """Goals with dedicated recovery messaging."""
    STRENGTH = "strength"
    CARDIO = "cardio"
    WEIGHT_GAIN = "weight_gain"
    WEIGHT_LOSS = "weight_loss"


# Substring vocabulary for multi-joint movements
COMPOUND_KEYWORDS: Tuple[str, ...] = (
    "squat",
    "deadlift",
    "bench",
    "press",
    "row",
    "pull-up",
    "chin-up",
    "lunge",
    "clean",
    "snatch",
)

# Workout tag -> significance points
WORKOUT_TAG_SCORES: Tuple[Tuple[str, int], ...] = (
    ("strength", 10),
    ("compound", 8),
    ("full_body", 7),
)
COMPOUND_EXERCISE_SCORE = 2

# Volume reduction
VOLUME_REDUCTION_FACTOR = 0.7
MIN_REDUCED_SETS = 2
ACCESSORY_FALLBACK_COUNT = 3

RECOVERY_WORKOUT_NOTE = "Recovery week - reduced volume, same weights"

# Weekday spacing by number of recovery sessions
RECOVERY_DAY_SCHEDULES: Dict[int, List[str]] = {
    3: ["Monday", "Wednesday", "Saturday"],
    4: ["Monday", "Wednesday", "Friday", "Sunday"],
    5: ["Monday", "Tuesday", "Thursday", "Friday", "Sunday"],
}
DEFAULT_SCHEDULE_SIZE = 4
FALLBACK_DAY = "Monday"

RECOVERY_FOCUS_MESSAGES: Dict[PrimaryGoal, str] = {
    PrimaryGoal.STRENGTH: "Maintain strength with lower volume. Focus on perfect form and showing up.",
    PrimaryGoal.CARDIO: "Keep moving, but don't chase PR's. Rebuild your aerobic base.",
    PrimaryGoal.WEIGHT_GAIN: "Hit your protein and keep lifting. Gains happen when you're consistent.",
    PrimaryGoal.WEIGHT_LOSS: "One meal logged per day. Show up for your workouts. That's enough.",
}
DEFAULT_FOCUS_MESSAGE = "Focus on consistency. Volume is lower to help you rebuild momentum."

RECOVERY_NUTRITION_GUIDANCE = (
    "Log ONE meal per day minimum. We're not aiming for perfection - just staying "
    "connected to your nutrition. Pick your easiest meal (breakfast works great) "
    "and make it a habit."
)

# Momentum adjustments around recovery weeks
BAD_WEEK_MOMENTUM_CAP = 30
RECOVERY_MOMENTUM_BONUS = 10
MAX_MOMENTUM_SCORE = 100

# Recovery week scoring
RECOVERY_HIGH_CONFIDENCE_THRESHOLD = 75.0
RECOVERY_HIGH_CONFIDENCE = 0.9
RECOVERY_BASE_CONFIDENCE = 0.7
