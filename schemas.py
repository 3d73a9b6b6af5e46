"""
Input boundary for the recovery week engine.

Validates raw caller dictionaries (camelCase wire shape from the program
generator and profile layer) and converts them into engine records.
Anything that cannot be classified fails here as MalformedWorkoutInput,
before it reaches the engine.
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Dict, List, Mapping, Optional, Union

from core.exceptions import MalformedWorkoutInput
from services.recovery_week.constants import ExerciseType
from services.recovery_week.models import ExerciseRecord, UserContext, WorkoutRecord


class ExerciseIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    type: ExerciseType = ExerciseType.REPS
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[float] = None  # kg
    rounds: Optional[int] = None
    work_time: Optional[int] = Field(default=None, alias="workTime")  # seconds
    rest_time: Optional[int] = Field(default=None, alias="restTime")  # seconds

    def to_record(self) -> ExerciseRecord:
        return ExerciseRecord(
            name=self.name,
            type=self.type,
            sets=self.sets,
            reps=self.reps,
            weight=self.weight,
            rounds=self.rounds,
            work_time=self.work_time,
            rest_time=self.rest_time,
        )


class WorkoutIn(BaseModel):
    """Unknown keys are kept and passed through to the recovery workout."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    type: Optional[Union[str, List[str]]] = None
    exercises: Optional[List[ExerciseIn]] = None
    notes: Optional[str] = None

    def to_record(self) -> WorkoutRecord:
        return WorkoutRecord(
            type=self.type if self.type is not None else "",
            exercises=[ex.to_record() for ex in (self.exercises or [])],
            notes=self.notes,
            name=self.name,
            extra=dict(self.model_extra or {}),
        )


class UserContextIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary_goal: str = Field(alias="primaryGoal")
    training_days_per_week: int = Field(default=6, alias="trainingDaysPerWeek", ge=1, le=7)
    session_duration: int = Field(default=60, alias="sessionDuration", ge=0)  # minutes

    def to_record(self) -> UserContext:
        return UserContext(
            primary_goal=self.primary_goal,
            training_days_per_week=self.training_days_per_week,
            session_duration=self.session_duration,
        )


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    location = ".".join(str(part) for part in err.get("loc", ()))
    return f"{location}: {err.get('msg')}" if location else str(err.get("msg"))


def parse_workout(key: str, raw: Mapping[str, Any]) -> WorkoutRecord:
    """
    Validate one raw workout.

    Raises:
        MalformedWorkoutInput: wrong types, missing exercise names, or an
            exercise with neither a reps nor a timed shape
    """
    try:
        workout = WorkoutIn.model_validate(raw)
    except ValidationError as e:
        raise MalformedWorkoutInput(
            f"Workout '{key}' is malformed ({_first_error(e)})", field="workout"
        ) from e

    record = workout.to_record()
    for index, exercise in enumerate(record.exercises):
        if not (exercise.has_reps_shape or exercise.has_timed_shape):
            raise MalformedWorkoutInput(
                f"Workout '{key}' exercise {index} ('{exercise.name}') has neither "
                f"sets/reps nor rounds/workTime/restTime",
                field="exercise_shape",
            )
    return record


def parse_previous_week(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, WorkoutRecord]:
    """Validate a whole source week, keeping key order."""
    return {key: parse_workout(key, value) for key, value in raw.items()}


def parse_user_context(raw: Mapping[str, Any]) -> UserContext:
    try:
        return UserContextIn.model_validate(raw).to_record()
    except ValidationError as e:
        raise MalformedWorkoutInput(
            f"User context is malformed ({_first_error(e)})", field="user_context"
        ) from e
