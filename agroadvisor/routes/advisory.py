"""Advisory routes — recommendations, yield scenarios, treatment plans, soil assessment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from agroadvisor.config import Settings, get_settings
from agroadvisor.models.scenarios import YIELD_ADVICE
from agroadvisor.schemas.recommendation import FarmProfile, RecommendationListResponse
from agroadvisor.schemas.soil import SoilHealthReport, SoilSample
from agroadvisor.schemas.treatment import TreatmentPlan, TreatmentRequest
from agroadvisor.schemas.yield_forecast import YieldPredictionRequest, YieldPredictionResponse
from agroadvisor.services.advisory_service import AdvisoryService
from agroadvisor.services.errors import AdvisoryError

router = APIRouter(tags=["advisory"])


def _map_error(exc: Exception) -> HTTPException:
	detail: object = exc.to_dict() if isinstance(exc, AdvisoryError) else str(exc)
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="advisory failure")


@router.post("/recommendations", response_model=RecommendationListResponse)
async def get_recommendations(
	payload: FarmProfile,
	settings: Settings = Depends(get_settings),
) -> RecommendationListResponse:
	service = AdvisoryService(settings)
	try:
		items = service.get_recommendations(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return RecommendationListResponse(items=list(items))


@router.post("/yield/predict", response_model=YieldPredictionResponse)
async def predict_yield(
	payload: YieldPredictionRequest,
	settings: Settings = Depends(get_settings),
) -> YieldPredictionResponse:
	service = AdvisoryService(settings)
	try:
		scenarios = service.predict_yield(
			payload.crop_type,
			payload.soil_type,
			payload.area,
			payload.prior_yield,
		)
	except Exception as exc:
		raise _map_error(exc) from exc
	return YieldPredictionResponse(
		crop=payload.crop_type,
		soil_type=payload.soil_type,
		area=payload.area,
		scenarios=list(scenarios),
		recommendations=list(YIELD_ADVICE),
	)


@router.post("/treatment/optimize", response_model=TreatmentPlan)
async def optimize_treatment(
	payload: TreatmentRequest,
	settings: Settings = Depends(get_settings),
) -> TreatmentPlan:
	service = AdvisoryService(settings)
	try:
		return service.optimize_treatment(
			payload.crop_type,
			payload.field_size,
			payload.soil_type,
			payload.growth_stage,
		)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/soil/assess", response_model=SoilHealthReport)
async def assess_soil(
	payload: SoilSample,
	settings: Settings = Depends(get_settings),
) -> SoilHealthReport:
	service = AdvisoryService(settings)
	try:
		return service.assess_soil(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
