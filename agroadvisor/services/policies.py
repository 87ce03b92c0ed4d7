"""Weighting policy for the multi-criteria suitability scorer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_VIABILITY_THRESHOLD = 50

# Fraction of a criterion's weight awarded per ordinal step of shortfall.
DEFAULT_DEGRADATION = (1.0, 0.5, 0.0)


class ScoringPolicy(BaseModel):
	model_config = ConfigDict(frozen=True)

	soil_fit: float = Field(default=40.0, ge=0.0)
	season_fit: float = Field(default=30.0, ge=0.0)
	market_fit: float = Field(default=30.0, ge=0.0)
	secondary_season_fraction: float = Field(default=0.5, ge=0.0, le=1.0)
	degradation: tuple[float, ...] = DEFAULT_DEGRADATION

	@model_validator(mode="after")
	def _validate_weights(self) -> "ScoringPolicy":
		total = self.soil_fit + self.season_fit + self.market_fit
		if abs(total - 100.0) > 1e-9:
			raise ValueError(f"criterion weights must sum to 100, got {total:g}")
		if not self.degradation or any(not 0.0 <= step <= 1.0 for step in self.degradation):
			raise ValueError("degradation fractions must lie in [0, 1]")
		return self

	def fraction_for_steps(self, steps: int) -> float:
		if steps < 0:
			steps = 0
		if steps >= len(self.degradation):
			return 0.0
		return self.degradation[steps]
