"""Scenario yield projector — fixed scenario table applied to per-crop baselines."""

from __future__ import annotations

from collections.abc import Mapping

from agroadvisor.models.crops import CROPS_BY_NAME, CropCandidate
from agroadvisor.models.enums import SoilTypeEnum
from agroadvisor.models.scenarios import PRIOR_YIELD_WEIGHT, SOIL_YIELD_FACTORS, YIELD_SCENARIOS
from agroadvisor.schemas.yield_forecast import ScenarioProjection
from agroadvisor.services.errors import UnsupportedCropOrStage
from agroadvisor.services.validation import coerce_enum, require_non_negative, require_positive

QUINTALS_PER_TON = 10


def base_yield(crop: CropCandidate, soil_type: SoilTypeEnum, prior_yield: float | None = None) -> float:
	"""Tons/acre before scenario adjustment."""
	base = crop.baseline_yield
	if prior_yield is not None:
		base = (1 - PRIOR_YIELD_WEIGHT) * base + PRIOR_YIELD_WEIGHT * prior_yield
	if soil_type not in crop.preferred_soils:
		base *= SOIL_YIELD_FACTORS[soil_type]
	return base


def predict_yield(
	crop_type: str,
	soil_type: SoilTypeEnum | str,
	area: float,
	prior_yield: float | None = None,
	crops: Mapping[str, CropCandidate] = CROPS_BY_NAME,
) -> tuple[ScenarioProjection, ...]:
	acres = require_positive(area, "area")
	prior = require_non_negative(prior_yield, "prior_yield") if prior_yield is not None else None
	soil = coerce_enum(SoilTypeEnum, soil_type, "soil_type")
	crop = crops.get(str(crop_type).strip().lower())
	if crop is None:
		raise UnsupportedCropOrStage(f"no yield baseline for crop {crop_type!r}", field="crop_type")

	base = base_yield(crop, soil, prior)
	projections = []
	for scenario in YIELD_SCENARIOS:
		per_acre = base * scenario.yield_factor
		total = per_acre * acres
		projections.append(
			ScenarioProjection(
				scenario=scenario.name,
				rainfall=scenario.rainfall,
				fertilizer=scenario.fertilizer,
				yield_per_acre=round(per_acre, 2),
				total_production=round(total, 1),
				confidence=scenario.confidence,
				expected_revenue=round(total * QUINTALS_PER_TON * crop.market_price, 2),
			)
		)
	return tuple(projections)
