"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = "INFO"
    rule_table_path: str | None = None
    data_freshness_days: int = 30
    high_claim_warning_threshold: float = 100_000_000

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment (debug -> DEBUG)."""
        return v.strip().upper()


settings = Settings()
