"""
Custom exception classes.

The recovery engine is total wherever it can be. These cover the few
shapes a caller can get wrong before handing data to it.
"""
from typing import Optional


class RecoveryEngineError(Exception):
    """Base exception with consistent structure."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class MalformedWorkoutInput(RecoveryEngineError):
    """Workout or exercise record that cannot be classified."""

    def __init__(self, detail: str, field: Optional[str] = None):
        error_code = "MALFORMED_WORKOUT_INPUT"
        if field:
            error_code = f"{error_code}_{field.upper()}"
        super().__init__(detail=detail, error_code=error_code)
        self.field = field


class InvalidRecoveryConfig(RecoveryEngineError):
    """Recovery policy values outside their allowed range."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="INVALID_RECOVERY_CONFIG")


class InvalidRecoveryInput(RecoveryEngineError, ValueError):
    """Negative or otherwise impossible week counts."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="INVALID_RECOVERY_INPUT")
