"""Read-only reference data routes (crop baselines, soil parameters)."""

from __future__ import annotations

from fastapi import APIRouter

from agroadvisor.models.crops import CROPS
from agroadvisor.models.enums import GROWTH_STAGE_ORDER, SeasonEnum, SoilTypeEnum
from agroadvisor.models.soil import SOIL_PARAMETERS
from agroadvisor.models.treatment import TREATMENT_PROFILES_BY_CROP
from agroadvisor.schemas.reference import (
	CropReferenceList,
	CropReferenceRead,
	SoilParameterList,
	SoilParameterRead,
)

router = APIRouter(prefix="/reference", tags=["reference"])

_SEASON_ORDER = list(SeasonEnum)
_SOIL_ORDER = list(SoilTypeEnum)


@router.get("/crops", response_model=CropReferenceList)
async def list_crops() -> CropReferenceList:
	items = []
	for crop in CROPS:
		profile = TREATMENT_PROFILES_BY_CROP.get(crop.name.lower())
		stages = [spec.stage for spec in profile.stages] if profile is not None else []
		items.append(
			CropReferenceRead(
				name=crop.name,
				seasons=sorted(crop.seasons, key=_SEASON_ORDER.index),
				secondary_seasons=sorted(crop.secondary_seasons, key=_SEASON_ORDER.index),
				min_soil_health=crop.min_soil_health,
				preferred_soils=sorted(crop.preferred_soils, key=_SOIL_ORDER.index),
				min_market_demand=crop.min_market_demand,
				investment_per_acre=crop.investment_per_acre,
				revenue_per_acre=crop.revenue_per_acre,
				growing_period=crop.growing_period,
				risk_level=crop.risk_level,
				market_price=crop.market_price,
				baseline_yield=crop.baseline_yield,
				treatment_stages=sorted(stages, key=GROWTH_STAGE_ORDER.index),
			)
		)
	return CropReferenceList(items=items)


@router.get("/soil-parameters", response_model=SoilParameterList)
async def list_soil_parameters() -> SoilParameterList:
	return SoilParameterList(
		items=[
			SoilParameterRead(
				name=param.name,
				label=param.label,
				unit=param.unit,
				ideal_min=param.ideal.min,
				ideal_max=param.ideal.max,
				favorability=param.favorability,
				weight=param.weight,
				required=param.required,
			)
			for param in SOIL_PARAMETERS
		]
	)
