"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agroadvisor.models.soil import get_parameter
from agroadvisor.services.policies import ScoringPolicy


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Recommendation policy ───────────────────────────────────────────────
    viability_threshold: int = Field(default=50, ge=0, le=100)
    weight_soil_fit: float = 40.0
    weight_season_fit: float = 30.0
    weight_market_fit: float = 30.0
    secondary_season_fraction: float = Field(default=0.5, ge=0.0, le=1.0)

    # ── Soil health ─────────────────────────────────────────────────────────
    soil_weight_overrides: dict[str, float] = Field(default_factory=dict)

    # ── HTTP ────────────────────────────────────────────────────────────────
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json

    @field_validator("soil_weight_overrides")
    @classmethod
    def _validate_soil_weights(cls, value: dict[str, float]) -> dict[str, float]:
        """Reject unknown parameters and non-positive weights at startup, keyed by canonical name."""
        weights: dict[str, float] = {}
        for raw_name, weight in value.items():
            param = get_parameter(raw_name)
            if param is None:
                raise ValueError(f"unknown soil parameter {raw_name!r}")
            if weight <= 0:
                raise ValueError(f"weight for {param.label} must be positive")
            weights[param.name] = weight
        return weights

    def scoring_policy(self) -> ScoringPolicy:
        return ScoringPolicy(
            soil_fit=self.weight_soil_fit,
            season_fit=self.weight_season_fit,
            market_fit=self.weight_market_fit,
            secondary_season_fraction=self.secondary_season_fraction,
        )


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
