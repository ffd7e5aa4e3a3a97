"""Library configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``CRITERION_*`` environment variables.

    The engine itself reads none of these; they feed logging and the
    defaults of the testing and devtools helpers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRITERION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Runtime environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # Trace collector
    trace_max_traces: int = 1000
    trace_auto_log: bool = False

    # Fuzzing
    fuzz_iterations: int = 100

    # Directory of YAML profiles loaded at host startup
    profiles_dir: Path | None = None

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
