"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - user_min_age (env USER_MIN_AGE, the `user.min.age` property) has no default:
      a missing or non-integer value fails at startup
    - get_settings() is cached (lru_cache), single immutable instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # Age policy
    user_min_age: int = Field(ge=0)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
