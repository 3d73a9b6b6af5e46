"""
Workout Simplifier

Rewrites one workout under recovery policy. Steps run in a fixed order:

1. Accessory removal - keep compound movements only; if nothing survives,
   keep the first three exercises of the original list.
2. Volume reduction - sets and rounds each become max(ceil(n * 0.7), 2).
   Fields the exercise does not have stay absent.
3. Load freeze - there is deliberately no weight step. maintain_weights is
   a declared switch only; progression is paused by omission.

The output note always replaces the source note so stale guidance from the
previous week never carries over.
"""

import logging
import math
from dataclasses import replace
from typing import List, Optional

from .constants import (
    ACCESSORY_FALLBACK_COUNT,
    MIN_REDUCED_SETS,
    RECOVERY_WORKOUT_NOTE,
    VOLUME_REDUCTION_FACTOR,
)
from .exercise_classifier import is_compound_exercise
from .models import ExerciseRecord, SimplifyOptions, WorkoutRecord

logger = logging.getLogger(__name__)


def reduce_volume(count: Optional[int]) -> Optional[int]:
    """70% of the original count, never below 2. Absent or zero stays as-is."""
    if not count:
        return count
    return max(math.ceil(count * VOLUME_REDUCTION_FACTOR), MIN_REDUCED_SETS)


def remove_accessories(exercises: List[ExerciseRecord]) -> List[ExerciseRecord]:
    compound = [ex for ex in exercises if is_compound_exercise(ex.name)]
    if not compound:
        return list(exercises[:ACCESSORY_FALLBACK_COUNT])
    return compound


def simplify_workout(
    workout: WorkoutRecord,
    options: Optional[SimplifyOptions] = None,
) -> WorkoutRecord:
    """
    Return a recovery version of `workout`. The input is not modified.

    Raises:
        MalformedWorkoutInput: an exercise has neither a reps nor a timed shape
    """
    options = options or SimplifyOptions()

    source = workout.exercises or []
    for ex in source:
        ex.validate_shape()

    # Copies, so the result never aliases the source week
    exercises = [replace(ex) for ex in source]

    if options.remove_accessories:
        exercises = remove_accessories(exercises)

    if options.reduce_sets:
        exercises = [
            ex.with_volume(sets=reduce_volume(ex.sets), rounds=reduce_volume(ex.rounds))
            for ex in exercises
        ]

    logger.debug(
        "Simplified workout %s: %d -> %d exercises",
        workout.name or workout.type, len(source), len(exercises),
    )

    return replace(
        workout,
        exercises=exercises,
        notes=RECOVERY_WORKOUT_NOTE,
        extra=dict(workout.extra),
    )
