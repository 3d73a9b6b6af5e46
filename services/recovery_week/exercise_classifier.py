"""
Exercise & Workout Tag Classification

Keyword heuristics, not a registry lookup. False positives are accepted
("pressing" matches "press"). Kept behind these two functions so the
scorer can move to structured tags without changing.
"""

from typing import Iterable

from .constants import COMPOUND_KEYWORDS
from .models import WorkoutRecord


def is_compound_exercise(name: str, keywords: Iterable[str] = COMPOUND_KEYWORDS) -> bool:
    """Case-insensitive substring match against the compound vocabulary."""
    name_lower = (name or "").lower()
    return any(keyword in name_lower for keyword in keywords)


def workout_has_tag(workout: WorkoutRecord, tag: str) -> bool:
    """
    True if the workout carries `tag`.

    Free-text types use substring matching ("strength_upper" carries
    "strength"). Sequence types are treated as a closed tag set and need
    an exact member.
    """
    if not workout.type:
        return False
    # str -> substring, list/tuple/set -> membership
    return tag in workout.type


def count_compound_exercises(workout: WorkoutRecord) -> int:
    return sum(1 for ex in (workout.exercises or ()) if is_compound_exercise(ex.name))
