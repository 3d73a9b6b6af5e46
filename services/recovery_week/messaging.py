"""Goal-specific recovery messaging."""

from .constants import (
    DEFAULT_FOCUS_MESSAGE,
    RECOVERY_FOCUS_MESSAGES,
    RECOVERY_NUTRITION_GUIDANCE,
    PrimaryGoal,
)


def generate_recovery_focus(primary_goal: str) -> str:
    """Weekly focus text for a goal; unknown goals get the generic message."""
    try:
        goal = PrimaryGoal(primary_goal)
    except ValueError:
        return DEFAULT_FOCUS_MESSAGE
    return RECOVERY_FOCUS_MESSAGES.get(goal, DEFAULT_FOCUS_MESSAGE)


def generate_recovery_nutrition_guidance() -> str:
    return RECOVERY_NUTRITION_GUIDANCE
