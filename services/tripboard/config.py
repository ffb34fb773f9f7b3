"""
Application configuration via pydantic-settings.
All config read from environment variables with sensible defaults for local dev.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "tripboard"
    app_version: str = "0.1.0"
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # Time budget
    # Hours of scheduled activity a single travel day can hold before it
    # reads as overbooked.
    daily_time_budget_hours: float = Field(default=10.0, gt=0.0)

    # Seed data (JSON). When unset, the bundled sample trip is used.
    seed_path: Optional[Path] = None

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
