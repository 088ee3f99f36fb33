"""
Centralized configuration management with validation.

All environment variables are loaded and validated here.
This ensures consistent configuration across the engine, the CLI and tests.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    # Pydantic v2 configuration
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
    DEBUG: bool = Field(default=False)

    # Reference catalogs
    # Directory holding exercises.yaml, rest_activities.yaml, supplements.yaml.
    # None means the catalogs bundled with services/workout_plan/data.
    PLAN_DATA_DIR: Optional[str] = Field(default=None)

    # Plan generation
    # Seed for the default random source. Unset means a fresh, unseeded RNG per plan.
    PLAN_RANDOM_SEED: Optional[int] = Field(default=None)
    DEFAULT_EXERCISES_PER_WORKOUT: int = Field(default=5, ge=1, le=20)


# Global settings instance
settings = Settings()
