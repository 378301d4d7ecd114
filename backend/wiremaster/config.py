"""
Wire Master - Backend Configuration

Application settings via environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Application settings."""

    # App
    APP_NAME: str = "Wire Master"
    DEBUG: bool = False
    API_PREFIX: str = "/api/v1"
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8081"

    # Rate Limiting
    RATE_LIMIT_LEVELS: int = 120

    # Generator
    GENERATOR_MAX_ATTEMPTS: int = 10
    GENERATOR_FLIP_CHANCE: float = 0.25
    GENERATOR_VERIFY_SOLVABLE: bool = False
    GENERATOR_MAX_GRID_SIZE: int = 16
    SOLVER_MAX_STEPS: int = 200_000

    # Level cache
    LEVEL_CACHE_SIZE: int = 256
    PREGENERATE_AHEAD: int = 2
    MAX_LEVEL: int = 300

    @field_validator("GENERATOR_MAX_ATTEMPTS", "SOLVER_MAX_STEPS", "MAX_LEVEL")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"must be >= 1, got: {value}")
        return value

    @field_validator("GENERATOR_MAX_GRID_SIZE")
    @classmethod
    def validate_max_grid_size(cls, value: int) -> int:
        # level progression goes up to 9x9
        if value < 9:
            raise ValueError(f"GENERATOR_MAX_GRID_SIZE must be >= 9, got: {value}")
        return value

    @field_validator("GENERATOR_FLIP_CHANCE")
    @classmethod
    def validate_flip_chance(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"GENERATOR_FLIP_CHANCE must be within [0, 1], got: {value}")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return level

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """Split CORS_ORIGINS into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get settings (cached)."""
    return Settings()


settings = get_settings()
