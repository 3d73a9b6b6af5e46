"""
Workout Scorer & Selector

Ranks a week's workouts by training significance and keeps the top N.

Scoring (additive):
    "strength" tag     +10
    "compound" tag     +8
    "full_body" tag    +7
    each compound exercise  +2 (no cap)

Ties keep their input order (list.sort is stable).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .constants import COMPOUND_EXERCISE_SCORE, WORKOUT_TAG_SCORES
from .exercise_classifier import count_compound_exercises, workout_has_tag
from .models import WorkoutRecord

logger = logging.getLogger(__name__)


WorkoutEntry = Tuple[str, WorkoutRecord]


@dataclass
class ScoredWorkout:
    key: str
    workout: WorkoutRecord
    score: int


def score_workout(workout: WorkoutRecord) -> int:
    """Training-significance score for one workout."""
    score = 0
    for tag, points in WORKOUT_TAG_SCORES:
        if workout_has_tag(workout, tag):
            score += points
    score += count_compound_exercises(workout) * COMPOUND_EXERCISE_SCORE
    return score


def rank_workouts(workouts: Iterable[WorkoutEntry]) -> List[ScoredWorkout]:
    """All workouts, highest score first, ties in input order."""
    scored = [
        ScoredWorkout(key=key, workout=workout, score=score_workout(workout))
        for key, workout in workouts
    ]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def select_recovery_workouts(
    workouts: Iterable[WorkoutEntry],
    target_count: int,
) -> List[WorkoutEntry]:
    """
    Pick the most important workouts to keep for a recovery week.

    Args:
        workouts: (key, WorkoutRecord) pairs in source-week order
        target_count: How many to keep

    Returns:
        At most min(target_count, len(workouts)) pairs, ranked by score.
        A short week simply returns everything it has.
    """
    ranked = rank_workouts(workouts)
    selected = ranked[:max(target_count, 0)]

    logger.debug(
        "Selected %d of %d workouts: %s",
        len(selected), len(ranked),
        ", ".join(f"{s.key}={s.score}" for s in selected),
    )
    return [(s.key, s.workout) for s in selected]
