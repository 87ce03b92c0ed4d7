"""CropCandidate reference table — per-crop baselines independent of any farm.

Economics are per acre in INR; ``market_price`` is INR per quintal and
``baseline_yield`` is tons per acre.  Season fit is declared in two tiers:

    seasons            -> full seasonal-fit weight
    secondary_seasons  -> partial weight (policy ``secondary_season_fraction``)
"""

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


class CropCandidate(BaseModel):
	"""Agronomic and economic baseline for one crop."""

	model_config = ConfigDict(frozen=True)

	name: str = Field(min_length=1, max_length=100)
	seasons: frozenset[SeasonEnum]
	secondary_seasons: frozenset[SeasonEnum] = frozenset()
	min_soil_health: SoilHealthEnum = SoilHealthEnum.fair
	preferred_soils: frozenset[SoilTypeEnum] = frozenset(SoilTypeEnum)
	min_market_demand: MarketDemandEnum = MarketDemandEnum.medium
	investment_per_acre: float = Field(ge=0)
	revenue_per_acre: float
	growing_period_days: tuple[int, int]
	risk_level: RiskLevel = RiskLevel.medium
	market_price: float = Field(ge=0)
	baseline_yield: float = Field(ge=0)
	tips: tuple[str, ...] = ()

	@property
	def growing_period(self) -> str:
		low, high = self.growing_period_days
		return f"{low}-{high} days"


# Upper bound of each budget band, INR per acre; ``None`` is unbounded.
BUDGET_BAND_LIMITS: dict[BudgetBandEnum, tuple[float, float | None]] = {
	BudgetBandEnum.low: (0.0, 50_000.0),
	BudgetBandEnum.medium: (50_000.0, 100_000.0),
	BudgetBandEnum.high: (100_000.0, None),
}

# Price multiplier applied to baseline revenue.
DEMAND_PRICE_MULTIPLIER: dict[MarketDemandEnum, float] = {
	MarketDemandEnum.low: 0.9,
	MarketDemandEnum.medium: 1.0,
	MarketDemandEnum.high: 1.1,
}

_S = SoilTypeEnum

CROPS: tuple[CropCandidate, ...] = (
	CropCandidate(
		name="Wheat",
		seasons=frozenset({SeasonEnum.rabi}),
		secondary_seasons=frozenset({SeasonEnum.zaid}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.loamy, _S.clay, _S.silty}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=45_000,
		revenue_per_acre=85_000,
		growing_period_days=(120, 150),
		risk_level=RiskLevel.low,
		market_price=2_500,
		baseline_yield=4.2,
		tips=(
			"Use certified seeds for better yield",
			"Apply fertilizer in 3 split doses",
			"Monitor for rust diseases during flowering",
		),
	),
	CropCandidate(
		name="Mustard",
		seasons=frozenset({SeasonEnum.rabi}),
		min_soil_health=SoilHealthEnum.fair,
		preferred_soils=frozenset({_S.loamy, _S.sandy}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=25_000,
		revenue_per_acre=55_000,
		growing_period_days=(90, 120),
		risk_level=RiskLevel.medium,
		market_price=4_500,
		baseline_yield=0.6,
		tips=(
			"Ensure proper drainage in fields",
			"Use aphid-resistant varieties",
			"Harvest at right maturity for oil content",
		),
	),
	CropCandidate(
		name="Barley",
		seasons=frozenset({SeasonEnum.rabi}),
		secondary_seasons=frozenset({SeasonEnum.zaid}),
		min_soil_health=SoilHealthEnum.fair,
		preferred_soils=frozenset({_S.loamy, _S.sandy, _S.chalky}),
		min_market_demand=MarketDemandEnum.low,
		investment_per_acre=35_000,
		revenue_per_acre=65_000,
		growing_period_days=(100, 120),
		risk_level=RiskLevel.low,
		market_price=2_200,
		baseline_yield=1.4,
		tips=(
			"Plant early for better grain quality",
			"Avoid waterlogging during grain filling",
			"Consider malting barley for premium prices",
		),
	),
	CropCandidate(
		name="Rice",
		seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.clay, _S.silty, _S.loamy}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=55_000,
		revenue_per_acre=95_000,
		growing_period_days=(110, 150),
		risk_level=RiskLevel.medium,
		market_price=2_200,
		baseline_yield=2.4,
		tips=(
			"Maintain 5 cm standing water during tillering",
			"Transplant 21-25 day old seedlings",
			"Watch for stem borer after panicle initiation",
		),
	),
	CropCandidate(
		name="Maize",
		seasons=frozenset({SeasonEnum.kharif}),
		secondary_seasons=frozenset({SeasonEnum.rabi, SeasonEnum.zaid}),
		min_soil_health=SoilHealthEnum.fair,
		preferred_soils=frozenset({_S.loamy, _S.silty, _S.sandy}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=40_000,
		revenue_per_acre=75_000,
		growing_period_days=(90, 110),
		risk_level=RiskLevel.low,
		market_price=2_000,
		baseline_yield=2.8,
		tips=(
			"Sow on ridges to avoid waterlogging",
			"Top-dress nitrogen at knee-high stage",
			"Scout for fall armyworm in the whorl",
		),
	),
	CropCandidate(
		name="Cotton",
		seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.clay, _S.loamy}),
		min_market_demand=MarketDemandEnum.high,
		investment_per_acre=60_000,
		revenue_per_acre=110_000,
		growing_period_days=(150, 180),
		risk_level=RiskLevel.high,
		market_price=6_600,
		baseline_yield=0.9,
		tips=(
			"Use Bt hybrids suited to your region",
			"Install pheromone traps for pink bollworm",
			"Avoid irrigation stress at boll formation",
		),
	),
	CropCandidate(
		name="Sugarcane",
		seasons=frozenset({SeasonEnum.zaid}),
		secondary_seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.loamy, _S.clay}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=90_000,
		revenue_per_acre=180_000,
		growing_period_days=(300, 365),
		risk_level=RiskLevel.medium,
		market_price=340,
		baseline_yield=32.0,
		tips=(
			"Use three-bud setts treated with fungicide",
			"Earth up at 90 and 120 days",
			"Trash mulching conserves soil moisture",
		),
	),
	CropCandidate(
		name="Potato",
		seasons=frozenset({SeasonEnum.rabi}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.loamy, _S.sandy, _S.silty}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=80_000,
		revenue_per_acre=140_000,
		growing_period_days=(90, 120),
		risk_level=RiskLevel.medium,
		market_price=1_200,
		baseline_yield=10.0,
		tips=(
			"Use disease-free seed tubers",
			"Spray against late blight in foggy weather",
			"Stop irrigation 10 days before harvest",
		),
	),
	CropCandidate(
		name="Tomato",
		seasons=frozenset({SeasonEnum.rabi, SeasonEnum.zaid}),
		secondary_seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.good,
		preferred_soils=frozenset({_S.loamy, _S.sandy}),
		min_market_demand=MarketDemandEnum.high,
		investment_per_acre=75_000,
		revenue_per_acre=150_000,
		growing_period_days=(90, 120),
		risk_level=RiskLevel.high,
		market_price=1_500,
		baseline_yield=12.0,
		tips=(
			"Stake plants to keep fruit off the soil",
			"Use drip irrigation with mulch",
			"Stagger planting to spread price risk",
		),
	),
	CropCandidate(
		name="Onion",
		seasons=frozenset({SeasonEnum.rabi}),
		secondary_seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.fair,
		preferred_soils=frozenset({_S.loamy, _S.silty}),
		min_market_demand=MarketDemandEnum.high,
		investment_per_acre=65_000,
		revenue_per_acre=120_000,
		growing_period_days=(120, 150),
		risk_level=RiskLevel.high,
		market_price=1_800,
		baseline_yield=8.0,
		tips=(
			"Cure bulbs in shade before storage",
			"Avoid nitrogen after bulb initiation",
			"Store in ventilated structures to cut losses",
		),
	),
	CropCandidate(
		name="Soybean",
		seasons=frozenset({SeasonEnum.kharif}),
		min_soil_health=SoilHealthEnum.fair,
		preferred_soils=frozenset({_S.loamy, _S.clay}),
		min_market_demand=MarketDemandEnum.medium,
		investment_per_acre=30_000,
		revenue_per_acre=60_000,
		growing_period_days=(90, 110),
		risk_level=RiskLevel.medium,
		market_price=4_600,
		baseline_yield=1.0,
		tips=(
			"Treat seed with Rhizobium culture",
			"Ensure field drainage during heavy rain",
			"Harvest when 95% of pods turn brown",
		),
	),
)

CROPS_BY_NAME: dict[str, CropCandidate] = {crop.name.lower(): crop for crop in CROPS}


def get_crop(name: str) -> CropCandidate | None:
	return CROPS_BY_NAME.get(name.strip().lower())
