"""Application settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseModel):
    """Retry behavior for outbound HTTP calls."""

    attempts: int = Field(default=3, ge=1, le=10)
    min_seconds: float = Field(default=0.5, ge=0.1, le=10.0)
    max_seconds: float = Field(default=4.0, ge=0.1, le=20.0)


class TierThresholds(BaseModel):
    """Minimum totals for each recommendation tier."""

    strong_buy: float = Field(default=80, ge=0, le=100)
    buy: float = Field(default=60, ge=0, le=100)
    hold: float = Field(default=40, ge=0, le=100)

    @model_validator(mode="after")
    def _check_descending(self) -> TierThresholds:
        if not self.strong_buy > self.buy > self.hold:
            raise ValueError("tier thresholds must satisfy strong_buy > buy > hold")
        return self


class Settings(BaseSettings):
    """Runtime application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    request_timeout_seconds: float = Field(default=12.0, ge=1, le=120)
    retry: RetryConfig = RetryConfig()
    tier_thresholds: TierThresholds = TierThresholds()

    fmp_api_key: str = Field(default="", alias="FMP_API_KEY")
    fmp_base_url: str = "https://financialmodelingprep.com/api"
    peer_limit: int = Field(default=10, ge=1, le=50)


def get_settings() -> Settings:
    """Return application settings."""

    return Settings()
