"""
Runtime settings for neo-batch.

Values are read from ``NEO_BATCH_*`` environment variables or a local
``.env`` file.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BatchDefaults


class BatchSettings(BaseSettings):
    """Scheduler defaults."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_BATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_max_concurrency: int = Field(
        default=BatchDefaults.MAX_CONCURRENCY,
        ge=1,
        description="Wave size used when a caller does not pass max_concurrency",
    )


@lru_cache()
def get_settings() -> BatchSettings:
    """Get cached settings instance."""
    return BatchSettings()
