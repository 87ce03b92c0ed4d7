"""Pydantic schemas for scenario-based yield prediction."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agroadvisor.models.enums import SoilTypeEnum


class YieldPredictionRequest(BaseModel):
	crop_type: str = Field(min_length=1, max_length=100)
	soil_type: SoilTypeEnum
	area: float = Field(gt=0, allow_inf_nan=False, description="Field area in acres")
	prior_yield: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class ScenarioProjection(BaseModel):
	model_config = ConfigDict(frozen=True)

	scenario: str
	rainfall: str
	fertilizer: str
	yield_per_acre: float
	total_production: float
	confidence: int
	expected_revenue: float


class YieldPredictionResponse(BaseModel):
	crop: str
	soil_type: SoilTypeEnum
	area: float
	scenarios: list[ScenarioProjection] = Field(default_factory=list)
	recommendations: list[str] = Field(default_factory=list)
