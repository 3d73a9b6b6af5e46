"""
Recovery Day Scheduler

Maps a workout's position in the recovery week to a weekday. The table
covers 3, 4 and 5 sessions; any other count uses the 4-session pattern
and positions past the end land on Monday.
"""

from .constants import DEFAULT_SCHEDULE_SIZE, FALLBACK_DAY, RECOVERY_DAY_SCHEDULES


def get_recovery_day(index: int, total_workouts: int) -> str:
    """Weekday for the workout at 0-based `index` out of `total_workouts`."""
    schedule = RECOVERY_DAY_SCHEDULES.get(
        total_workouts, RECOVERY_DAY_SCHEDULES[DEFAULT_SCHEDULE_SIZE]
    )
    if 0 <= index < len(schedule):
        return schedule[index]
    return FALLBACK_DAY
