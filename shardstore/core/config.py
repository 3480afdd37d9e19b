"""Application configuration via Pydantic Settings."""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_SHARD_SIZE = 500 * 1024 * 1024  # 500 MiB


class Settings(BaseSettings):
    """Storage settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SHARDSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    storage_path: Path | None = None
    max_shard_size: int = Field(default=MAX_SHARD_SIZE, gt=0)
    strict_hashes: bool = True

    # Stats
    stats_concurrency: int = Field(default=64, ge=1)

    # Logging
    log_level: Literal["debug", "info", "warn", "error"] = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case and the ``warning`` spelling."""
        if isinstance(v, str):
            v = v.lower()
            if v == "warning":
                return "warn"
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
