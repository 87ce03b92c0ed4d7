"""Pydantic schemas for read-only reference data listings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agroadvisor.models.enums import (
	Favorability,
	GrowthStageEnum,
	MarketDemandEnum,
	RiskLevel,
	SeasonEnum,
	SoilHealthEnum,
	SoilTypeEnum,
)


class CropReferenceRead(BaseModel):
	name: str
	seasons: list[SeasonEnum]
	secondary_seasons: list[SeasonEnum] = Field(default_factory=list)
	min_soil_health: SoilHealthEnum
	preferred_soils: list[SoilTypeEnum]
	min_market_demand: MarketDemandEnum
	investment_per_acre: float
	revenue_per_acre: float
	growing_period: str
	risk_level: RiskLevel
	market_price: float
	baseline_yield: float
	treatment_stages: list[GrowthStageEnum] = Field(default_factory=list)


class SoilParameterRead(BaseModel):
	name: str
	label: str
	unit: str
	ideal_min: float
	ideal_max: float
	favorability: Favorability
	weight: float
	required: bool


class CropReferenceList(BaseModel):
	items: list[CropReferenceRead]


class SoilParameterList(BaseModel):
	items: list[SoilParameterRead]
