"""
Recovery Week Generator

Turns the previous week's program into a lighter recovery week after a
bad week.

Philosophy:
- Fewer sessions so success is easy to reach
- Progression paused, weights held where they were
- No new exercises, only a subset of last week's
- Rebuild momentum, not performance

Usage:
    result = generate_recovery_week_program(previous_week, user_context)
    payload = result.to_dict()
"""

import logging
from typing import Dict, Mapping, Optional

from .day_scheduler import get_recovery_day
from .messaging import generate_recovery_focus, generate_recovery_nutrition_guidance
from .models import (
    RecoveryWeekConfig,
    RecoveryWeekResult,
    RecoveryWorkout,
    SimplifyOptions,
    UserContext,
    WorkoutRecord,
    default_recovery_config,
)
from .workout_selector import select_recovery_workouts
from .workout_simplifier import simplify_workout

logger = logging.getLogger(__name__)


def generate_recovery_week_program(
    previous_week_workouts: Mapping[str, WorkoutRecord],
    user_context: UserContext,
    config: Optional[RecoveryWeekConfig] = None,
) -> RecoveryWeekResult:
    """
    Build a recovery week from last week's workouts.

    Args:
        previous_week_workouts: Source week keyed by day/session id. Only
            iteration order matters; the keys are dropped from the output.
        user_context: Goal and schedule for the athlete
        config: Recovery policy; defaults to default_recovery_config()

    Returns:
        RecoveryWeekResult with workouts keyed workout_1..workout_N.
        An empty source week yields an empty workouts map.
    """
    config = config or default_recovery_config()

    selected = select_recovery_workouts(
        list(previous_week_workouts.items()), config.target_workouts
    )

    options = SimplifyOptions(
        remove_accessories=config.simplify_workouts,
        maintain_weights=config.maintain_weights,
        reduce_sets=True,
    )

    # Spread over the count actually selected, not the configured target
    total = len(selected)
    workouts: Dict[str, RecoveryWorkout] = {}
    for index, (_, workout) in enumerate(selected):
        workouts[f"workout_{index + 1}"] = RecoveryWorkout(
            workout=simplify_workout(workout, options),
            day_of_week=get_recovery_day(index, total),
        )

    logger.info(
        "Generated recovery week: %d of %d workouts kept (goal=%s)",
        total, len(previous_week_workouts), user_context.primary_goal,
        extra={"extra_fields": {
            "workouts_kept": total,
            "workouts_available": len(previous_week_workouts),
            "primary_goal": user_context.primary_goal,
        }},
    )

    return RecoveryWeekResult(
        workouts=workouts,
        weekly_focus=generate_recovery_focus(user_context.primary_goal),
        nutrition_guidance=generate_recovery_nutrition_guidance(),
        recovery_notes=config.focus_message,
    )
