"""
Centralized configuration management with validation.

Environment variables are loaded and validated here. The recovery engine
itself never reads settings; only the default-config factory does.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="text")  # json or text

    # Environment
    ENVIRONMENT: str = Field(default="development")


class RecoveryPolicySettings(BaseSettings):
    """
    Default recovery week policy.

    Adjustable via RECOVERY_* environment variables without code changes.
    Per-user tuning should pass an explicit RecoveryWeekConfig instead.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOVERY_",
        case_sensitive=False,
        extra="ignore"
    )

    # Down from a typical 6 sessions
    target_workouts: int = Field(default=4, ge=1)

    # One meal logged per day minimum
    target_nutrition_days: int = Field(default=4, ge=0, le=7)

    pause_progression: bool = True
    simplify_workouts: bool = True
    maintain_weights: bool = True

    focus_message: str = Field(
        default=(
            "This week is about getting back on track. "
            "Lower volume, same intensity. Just show up."
        )
    )


# Global settings instances
settings = Settings()
recovery_policy = RecoveryPolicySettings()
