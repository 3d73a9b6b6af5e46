"""
Recovery Week Data Model

Transient records built fresh per call. Nothing here is persisted or
shared between invocations; the calling layer owns every instance.

to_dict() methods emit the camelCase shape consumed by the
program-assembly and UI layers.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Union

from core.config import recovery_policy
from core.exceptions import InvalidRecoveryConfig, MalformedWorkoutInput

from .constants import ExerciseType, RecoveryMode, WeekType


# ---------------------------------------------------------------------------
# Source week records
# ---------------------------------------------------------------------------


@dataclass
class ExerciseRecord:
    """One movement as prescribed in a workout."""

    name: str
    type: ExerciseType = ExerciseType.REPS

    # Reps-based prescription
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[float] = None      # kg, never mutated during recovery

    # Timed prescription
    rounds: Optional[int] = None
    work_time: Optional[int] = None     # seconds
    rest_time: Optional[int] = None     # seconds

    @property
    def has_reps_shape(self) -> bool:
        return self.sets is not None or self.reps is not None

    @property
    def has_timed_shape(self) -> bool:
        return (
            self.rounds is not None
            or self.work_time is not None
            or self.rest_time is not None
        )

    def validate_shape(self) -> None:
        """Raise MalformedWorkoutInput if neither prescription shape is present."""
        if not (self.has_reps_shape or self.has_timed_shape):
            raise MalformedWorkoutInput(
                f"Exercise '{self.name}' has neither sets/reps nor "
                f"rounds/workTime/restTime",
                field="exercise_shape",
            )

    def with_volume(self, sets: Optional[int], rounds: Optional[int]) -> "ExerciseRecord":
        """Copy with new sets/rounds; every other field carried over untouched."""
        return replace(self, sets=sets, rounds=rounds)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
        }
        optional = (
            ("sets", self.sets),
            ("reps", self.reps),
            ("weight", self.weight),
            ("rounds", self.rounds),
            ("workTime", self.work_time),
            ("restTime", self.rest_time),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value
        return data


@dataclass
class WorkoutRecord:
    """
    A single training session from the source week.

    `type` is either free tag text ("strength compound") or a sequence of
    tags; see exercise_classifier.workout_has_tag for matching rules.
    `extra` carries any caller fields the engine does not interpret.
    """

    type: Union[str, Sequence[str]] = ""
    exercises: List[ExerciseRecord] = field(default_factory=list)
    notes: Optional[str] = None
    name: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.extra)
        if self.name is not None:
            data["name"] = self.name
        if self.type is None or isinstance(self.type, str):
            data["type"] = self.type
        else:
            data["type"] = list(self.type)
        data["exercises"] = [ex.to_dict() for ex in self.exercises]
        if self.notes is not None:
            data["notes"] = self.notes
        return data


@dataclass
class UserContext:
    """Profile slice supplied by the account layer."""
    primary_goal: str
    training_days_per_week: int = 6
    session_duration: int = 60          # minutes


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RecoveryWeekConfig:
    """Immutable policy snapshot for one recovery cycle."""

    target_workouts: int
    target_nutrition_days: int
    pause_progression: bool
    simplify_workouts: bool
    maintain_weights: bool
    focus_message: str

    def __post_init__(self):
        if self.target_workouts < 1:
            raise InvalidRecoveryConfig(
                f"target_workouts must be >= 1, got {self.target_workouts}"
            )
        if not 0 <= self.target_nutrition_days <= 7:
            raise InvalidRecoveryConfig(
                f"target_nutrition_days must be 0-7, got {self.target_nutrition_days}"
            )
        if not self.pause_progression:
            raise InvalidRecoveryConfig("pause_progression must be true for recovery weeks")


def default_recovery_config() -> RecoveryWeekConfig:
    """Build the standard recovery policy from RECOVERY_* settings."""
    return RecoveryWeekConfig(
        target_workouts=recovery_policy.target_workouts,
        target_nutrition_days=recovery_policy.target_nutrition_days,
        pause_progression=recovery_policy.pause_progression,
        simplify_workouts=recovery_policy.simplify_workouts,
        maintain_weights=recovery_policy.maintain_weights,
        focus_message=recovery_policy.focus_message,
    )


@dataclass(frozen=True)
class SimplifyOptions:
    """Switches for a single simplify_workout call."""
    remove_accessories: bool = True
    maintain_weights: bool = True
    reduce_sets: bool = True


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


@dataclass
class RecoveryWorkout:
    """A simplified workout placed on a weekday."""

    workout: WorkoutRecord
    day_of_week: str
    is_recovery_workout: bool = True

    @property
    def exercises(self) -> List[ExerciseRecord]:
        return self.workout.exercises

    def to_dict(self) -> Dict[str, Any]:
        data = self.workout.to_dict()
        data["dayOfWeek"] = self.day_of_week
        data["isRecoveryWorkout"] = self.is_recovery_workout
        return data


@dataclass
class RecoveryWeekResult:
    """Assembled recovery week, keyed workout_1..workout_N in selection order."""

    workouts: Dict[str, RecoveryWorkout]
    weekly_focus: str
    nutrition_guidance: str
    recovery_notes: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workouts": {key: w.to_dict() for key, w in self.workouts.items()},
            "weeklyFocus": self.weekly_focus,
            "nutritionGuidance": self.nutrition_guidance,
            "recoveryNotes": self.recovery_notes,
        }


@dataclass
class RecoverySuccessEvaluation:
    """End-of-week verdict for a recovery week."""

    successful: bool
    message: str
    next_step_recommendation: str
    workout_success: bool
    nutrition_success: bool
    next_mode: RecoveryMode

    def to_dict(self) -> Dict[str, Any]:
        return {
            "successful": self.successful,
            "message": self.message,
            "nextStepRecommendation": self.next_step_recommendation,
            "workoutSuccess": self.workout_success,
            "nutritionSuccess": self.nutrition_success,
            "nextMode": self.next_mode.value,
        }


@dataclass
class RecoveryWeekScore:
    """Scores for a completed recovery week against its adjusted targets."""

    workout_score: float
    nutrition_score: float
    overall_score: float
    confidence: float
    reasons: List[str]
    week_type: WeekType = WeekType.RECOVERY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekType": self.week_type.value,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "scores": {
                "workoutScore": self.workout_score,
                "nutritionScore": self.nutrition_score,
                "weightScore": None,
                "overallScore": self.overall_score,
            },
        }
