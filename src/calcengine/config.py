from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Load from env (CALCENGINE_*) and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="CALCENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Zero tolerance used by BasicCalculator.divide
    epsilon: float = Field(default=1e-9, gt=0)

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Read settings once per process; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
