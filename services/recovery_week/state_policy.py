"""
Recovery State Policy

Decides when recovery mode starts, continues or ends.

    NORMAL --(previous week bad)--> RECOVERY
    RECOVERY --(bad again)--> EXTENDED_RECOVERY
    RECOVERY / EXTENDED_RECOVERY --(targets met)--> NORMAL

Recovery always follows evidence: a bad current week after a good one
does not trigger anything by itself. Only the completed previous week's
classification triggers the next week's recovery plan.
"""

import logging
from typing import Optional, Union

from core.exceptions import InvalidRecoveryInput

from .constants import (
    BAD_WEEK_MOMENTUM_CAP,
    MAX_MOMENTUM_SCORE,
    RECOVERY_BASE_CONFIDENCE,
    RECOVERY_HIGH_CONFIDENCE,
    RECOVERY_HIGH_CONFIDENCE_THRESHOLD,
    RECOVERY_MOMENTUM_BONUS,
    RecoveryMode,
    WeekType,
)
from .models import (
    RecoverySuccessEvaluation,
    RecoveryWeekConfig,
    RecoveryWeekScore,
    default_recovery_config,
)

logger = logging.getLogger(__name__)


WeekTypeLike = Union[WeekType, str]


def _week_type_value(week_type: Optional[WeekTypeLike]) -> Optional[str]:
    if week_type is None:
        return None
    if isinstance(week_type, WeekType):
        return week_type.value
    return str(week_type)


def _check_counts(**counts: int) -> None:
    for name, value in counts.items():
        if value < 0:
            raise InvalidRecoveryInput(f"{name} cannot be negative, got {value}")


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def should_generate_recovery_week(
    current_week_type: WeekTypeLike,
    previous_week_type: Optional[WeekTypeLike] = None,
) -> bool:
    """
    True if next week should be a recovery week.

    - previous week bad -> recovery
    - bad week while already in recovery -> extend recovery
    - anything else -> normal programming
    """
    current = _week_type_value(current_week_type)
    previous = _week_type_value(previous_week_type)

    if previous == WeekType.BAD.value:
        return True

    if current == WeekType.BAD.value and previous == WeekType.RECOVERY.value:
        return True

    return False


def next_recovery_mode(
    current_week_type: WeekTypeLike,
    previous_week_type: Optional[WeekTypeLike] = None,
    current_mode: RecoveryMode = RecoveryMode.NORMAL,
) -> RecoveryMode:
    """Mode for the coming week given the last two classifications."""
    if not should_generate_recovery_week(current_week_type, previous_week_type):
        mode = RecoveryMode.NORMAL
    elif (
        current_mode != RecoveryMode.NORMAL
        or _week_type_value(previous_week_type) == WeekType.RECOVERY.value
    ):
        mode = RecoveryMode.EXTENDED_RECOVERY
    else:
        mode = RecoveryMode.RECOVERY

    if mode != current_mode:
        logger.info(
            "Recovery mode transition: %s -> %s (current=%s, previous=%s)",
            current_mode.value, mode.value,
            _week_type_value(current_week_type), _week_type_value(previous_week_type),
            extra={"extra_fields": {
                "previous_mode": current_mode.value,
                "next_mode": mode.value,
            }},
        )
    return mode


# ---------------------------------------------------------------------------
# End-of-week evaluation
# ---------------------------------------------------------------------------


def evaluate_recovery_success(
    workouts_completed: int,
    nutrition_days_hit_target: int,
    config: Optional[RecoveryWeekConfig] = None,
) -> RecoverySuccessEvaluation:
    """
    Judge a finished recovery week against its targets.

    2x2 table on (workouts met, nutrition met). Only both met exits
    recovery; each partial miss gets its own focus note.
    """
    _check_counts(
        workouts_completed=workouts_completed,
        nutrition_days_hit_target=nutrition_days_hit_target,
    )
    config = config or default_recovery_config()

    workout_success = workouts_completed >= config.target_workouts
    nutrition_success = nutrition_days_hit_target >= config.target_nutrition_days
    successful = workout_success and nutrition_success

    if successful:
        message = (
            f"Great job! You completed {workouts_completed}/{config.target_workouts} "
            f"workouts and hit nutrition {nutrition_days_hit_target}/"
            f"{config.target_nutrition_days} days."
        )
        next_step = "You're ready to return to your normal program with progression."
    elif workout_success:
        message = "Good workout consistency, but nutrition needs attention."
        next_step = "Continue with recovery goals for one more week, focusing on nutrition."
    elif nutrition_success:
        message = "Nutrition is on track, but workouts need more consistency."
        next_step = "Continue with recovery goals for one more week, focusing on showing up."
    else:
        message = "This week was still challenging. That's okay."
        next_step = "Let's extend recovery another week. We'll get through this together."

    next_mode = RecoveryMode.NORMAL if successful else RecoveryMode.EXTENDED_RECOVERY

    logger.info(
        "Recovery evaluation: workouts %d/%d, nutrition %d/%d -> %s",
        workouts_completed, config.target_workouts,
        nutrition_days_hit_target, config.target_nutrition_days,
        next_mode.value,
        extra={"extra_fields": {
            "workouts_completed": workouts_completed,
            "target_workouts": config.target_workouts,
            "nutrition_days": nutrition_days_hit_target,
            "target_nutrition_days": config.target_nutrition_days,
            "next_mode": next_mode.value,
        }},
    )

    return RecoverySuccessEvaluation(
        successful=successful,
        message=message,
        next_step_recommendation=next_step,
        workout_success=workout_success,
        nutrition_success=nutrition_success,
        next_mode=next_mode,
    )


def score_recovery_week(
    workouts_completed: int,
    nutrition_days_hit_target: int,
    config: Optional[RecoveryWeekConfig] = None,
) -> RecoveryWeekScore:
    """
    Score a recovery week against its adjusted targets.

    Weight progress is not scored during recovery.
    """
    _check_counts(
        workouts_completed=workouts_completed,
        nutrition_days_hit_target=nutrition_days_hit_target,
    )
    config = config or default_recovery_config()
    workout_target = config.target_workouts
    nutrition_target = config.target_nutrition_days

    workout_score = min(workouts_completed / workout_target * 100, 100.0)
    if nutrition_target:
        nutrition_score = min(nutrition_days_hit_target / nutrition_target * 100, 100.0)
    else:
        nutrition_score = 100.0
    overall_score = (workout_score + nutrition_score) / 2

    reasons = ["Recovery week with adjusted goals"]
    if workouts_completed >= workout_target:
        reasons.append(
            f"Completed {workouts_completed} workouts (recovery target: {workout_target})"
        )
    else:
        reasons.append(f"Completed {workouts_completed}/{workout_target} recovery workouts")

    if nutrition_days_hit_target >= nutrition_target:
        reasons.append(
            f"Hit nutrition targets {nutrition_days_hit_target} days "
            f"(recovery target: {nutrition_target})"
        )

    if overall_score >= RECOVERY_HIGH_CONFIDENCE_THRESHOLD:
        confidence = RECOVERY_HIGH_CONFIDENCE
    else:
        confidence = RECOVERY_BASE_CONFIDENCE

    return RecoveryWeekScore(
        workout_score=workout_score,
        nutrition_score=nutrition_score,
        overall_score=overall_score,
        confidence=confidence,
        reasons=reasons,
    )


def adjust_momentum_score(
    momentum_score: int,
    current_week_type: WeekTypeLike,
    is_recovery_week: bool,
) -> int:
    """
    Momentum after weekly review.

    Bad weeks are capped at 30. A recovery week that was not bad earns a
    +10 bonus, capped at 100.
    """
    current = _week_type_value(current_week_type)
    if current == WeekType.BAD.value:
        return min(momentum_score, BAD_WEEK_MOMENTUM_CAP)
    if is_recovery_week:
        return min(momentum_score + RECOVERY_MOMENTUM_BONUS, MAX_MOMENTUM_SCORE)
    return momentum_score
