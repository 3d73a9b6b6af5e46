# Recovery Week Engine
#
# Rule-based transformation of a bad week's program into a lighter
# recovery week, plus the policy deciding when recovery starts and ends.
#
# Pipeline:
# - exercise_classifier: compound-movement heuristic
# - workout_selector: significance scoring, top-N selection
# - workout_simplifier: accessory removal, volume reduction, load freeze
# - day_scheduler: weekday spacing table
# - messaging: goal-specific focus and nutrition text
# - generator: orchestrates the above into a RecoveryWeekResult
# - state_policy: recovery triggers, success evaluation, momentum
#
# Pure functions over in-memory records. No I/O, no shared state.

from .constants import ExerciseType, PrimaryGoal, RecoveryMode, WeekType
from .models import (
    ExerciseRecord,
    WorkoutRecord,
    UserContext,
    RecoveryWeekConfig,
    SimplifyOptions,
    RecoveryWorkout,
    RecoveryWeekResult,
    RecoverySuccessEvaluation,
    RecoveryWeekScore,
    default_recovery_config,
)
from .exercise_classifier import is_compound_exercise, workout_has_tag
from .workout_selector import score_workout, select_recovery_workouts
from .workout_simplifier import simplify_workout
from .day_scheduler import get_recovery_day
from .messaging import generate_recovery_focus, generate_recovery_nutrition_guidance
from .generator import generate_recovery_week_program
from .state_policy import (
    should_generate_recovery_week,
    next_recovery_mode,
    evaluate_recovery_success,
    score_recovery_week,
    adjust_momentum_score,
)

__all__ = [
    # Main entry points
    'generate_recovery_week_program',
    'should_generate_recovery_week',
    'evaluate_recovery_success',
    'next_recovery_mode',
    'score_recovery_week',
    'adjust_momentum_score',

    # Pipeline components
    'is_compound_exercise',
    'workout_has_tag',
    'score_workout',
    'select_recovery_workouts',
    'simplify_workout',
    'get_recovery_day',
    'generate_recovery_focus',
    'generate_recovery_nutrition_guidance',

    # Records
    'ExerciseRecord',
    'WorkoutRecord',
    'UserContext',
    'RecoveryWeekConfig',
    'SimplifyOptions',
    'RecoveryWorkout',
    'RecoveryWeekResult',
    'RecoverySuccessEvaluation',
    'RecoveryWeekScore',
    'default_recovery_config',

    # Constants
    'ExerciseType',
    'PrimaryGoal',
    'RecoveryMode',
    'WeekType',
]
