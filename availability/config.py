"""Environment-based configuration using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    """Application configuration loaded from ``AVAILABILITY_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="AVAILABILITY_")

    clock_mode: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Normalize the level name and reject names logging does not know.

        Args:
            value: Level name as configured.

        Returns:
            Upper-cased level name.
        """
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}"
            )
        return level
