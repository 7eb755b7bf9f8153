"""
Application settings, read from FINCAST_* environment variables or a .env file.

The calculation core takes no configuration; these values only provide the
defaults the HTTP layer passes down.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FINCAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:5173"],
        description="Frontend origins allowed to call /api/*",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=True, description="Render logs as JSON lines")

    milestone_max_years: int = Field(default=50, ge=1, le=100)
    growth_series_years: int = Field(default=30, ge=0, le=100)
    projection_horizons: List[int] = Field(default=[10, 20, 30])

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("projection_horizons")
    @classmethod
    def validate_horizons(cls, v: List[int]) -> List[int]:
        if any(h < 0 for h in v):
            raise ValueError("projection horizons must be non-negative")
        return sorted(set(v))


@lru_cache
def get_settings() -> Settings:
    return Settings()
