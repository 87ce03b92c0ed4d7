"""Yield scenario reference table — fixed weather/fertilizer assumptions.

Each scenario scales a crop's baseline yield by ``yield_factor``; confidence
is a property of the scenario, not of the crop.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agroadvisor.models.enums import SoilTypeEnum


class YieldScenario(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	rainfall: str
	fertilizer: str
	yield_factor: float = Field(ge=0)
	confidence: int = Field(ge=0, le=100)


YIELD_SCENARIOS: tuple[YieldScenario, ...] = (
	YieldScenario(
		name="Optimal Conditions",
		rainfall="High (800-1000mm)",
		fertilizer="Recommended amount",
		yield_factor=1.0,
		confidence=92,
	),
	YieldScenario(
		name="Average Conditions",
		rainfall="Normal (600-800mm)",
		fertilizer="80% of recommended",
		yield_factor=0.9,
		confidence=88,
	),
	YieldScenario(
		name="Drought Scenario",
		rainfall="Low (400-600mm)",
		fertilizer="Recommended amount",
		yield_factor=0.69,
		confidence=85,
	),
	YieldScenario(
		name="Excess Rain",
		rainfall="Very High (>1000mm)",
		fertilizer="Reduced amount",
		yield_factor=0.76,
		confidence=82,
	),
)

# Applied only when the soil is not among the crop's preferred soils.
SOIL_YIELD_FACTORS: dict[SoilTypeEnum, float] = {
	SoilTypeEnum.loamy: 1.0,
	SoilTypeEnum.silty: 0.97,
	SoilTypeEnum.clay: 0.93,
	SoilTypeEnum.peaty: 0.88,
	SoilTypeEnum.sandy: 0.85,
	SoilTypeEnum.chalky: 0.82,
}

PRIOR_YIELD_WEIGHT = 0.3

YIELD_ADVICE: tuple[str, ...] = (
	"Consider using high-yield variety seeds for better results",
	"Apply fertilizer in 3 split doses for optimal nutrient uptake",
	"Monitor soil moisture levels regularly during critical growth stages",
	"Use drip irrigation to optimize water usage",
)
