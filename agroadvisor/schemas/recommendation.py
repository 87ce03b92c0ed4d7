"""Pydantic schemas for farm profiles, financial projections and crop recommendations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agroadvisor.models.enums import (
	BudgetBandEnum,
	MarketDemandEnum,
	RiskLevel,
	SeasonEnum,
	SoilHealthEnum,
	SoilTypeEnum,
)


class FarmProfile(BaseModel):
	model_config = ConfigDict(frozen=True)

	soil_health: SoilHealthEnum
	season: SeasonEnum
	budget: BudgetBandEnum
	market_demand: MarketDemandEnum
	area: float = Field(gt=0, allow_inf_nan=False, description="Field area in acres")
	soil_type: SoilTypeEnum
	prior_yield: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class FinancialProjection(BaseModel):
	model_config = ConfigDict(frozen=True)

	crop: str
	investment: float
	revenue: float
	profit: float
	profit_margin: int
	margin_substituted: bool = False
	demand_multiplier: float = 1.0
	within_budget: bool = True
	currency: str = "INR"


class Recommendation(BaseModel):
	model_config = ConfigDict(frozen=True)

	crop: str
	suitability: int = Field(ge=0, le=100)
	risk_level: RiskLevel
	investment: float
	revenue: float
	profit: float
	profit_margin: int
	margin_substituted: bool = False
	within_budget: bool = True
	growing_period: str
	market_price: float
	reasons: tuple[str, ...] = ()
	tips: tuple[str, ...] = ()


class RecommendationListResponse(BaseModel):
	items: list[Recommendation] = Field(default_factory=list)
