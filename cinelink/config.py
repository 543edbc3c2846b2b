"""Configuration management for CineLink."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine_core.result import EmptyTitlePolicy


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CINELINK_",
    )

    # Game rules
    win_threshold: int = Field(default=1, ge=1, description="Qualifying movies needed to win")
    turn_time_limit: float = Field(default=30.0, gt=0, description="Seconds per turn")
    empty_title_policy: EmptyTitlePolicy = Field(
        default=EmptyTitlePolicy.FORFEIT,
        description="forfeit: blank title loses; signal: caller may re-prompt",
    )
    random_seed: Optional[int] = Field(default=None)

    # Data
    data_dir: Path = Field(default=Path("data"))
    movies_csv: Optional[Path] = Field(default=None)
    credits_csv: Optional[Path] = Field(default=None)

    log_level: str = Field(default="INFO")

    @property
    def movies_path(self) -> Path:
        return self.movies_csv or self.data_dir / "tmdb_5000_movies.csv"

    @property
    def credits_path(self) -> Path:
        return self.credits_csv or self.data_dir / "tmdb_5000_credits.csv"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
