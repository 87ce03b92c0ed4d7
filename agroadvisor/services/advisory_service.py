"""Advisory facade — the four request/response operations, with policy from settings."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import structlog

from agroadvisor.config import Settings, get_settings
from agroadvisor.models.crops import CROPS
from agroadvisor.models.enums import GrowthStageEnum, SoilTypeEnum
from agroadvisor.schemas.recommendation import FarmProfile, Recommendation
from agroadvisor.schemas.soil import SoilHealthReport, SoilSample
from agroadvisor.schemas.treatment import TreatmentPlan
from agroadvisor.schemas.yield_forecast import ScenarioProjection
from agroadvisor.services import ranking, soil_health, treatment, yield_forecast
from agroadvisor.services.errors import AdvisoryError
from agroadvisor.services.validation import coerce_model

T = TypeVar("T")

_logger = structlog.get_logger("agroadvisor.engine")


def _engine_timing(op: str, start: float, ok: bool, error: str | None = None) -> None:
	duration_ms = round((time.perf_counter() - start) * 1000.0, 2)
	if ok:
		_logger.info("advisory_call", operation=op, duration_ms=duration_ms, ok=True)
	else:
		_logger.warning("advisory_call_failed", operation=op, duration_ms=duration_ms, ok=False, error=error)


class AdvisoryService:
	def __init__(self, settings: Settings | None = None):
		self.settings = settings or get_settings()
		self.policy = self.settings.scoring_policy()

	def _run(self, op: str, fn: Callable[[], T]) -> T:
		start = time.perf_counter()
		try:
			result = fn()
		except AdvisoryError as exc:
			_engine_timing(op, start, False, exc.kind)
			raise
		_engine_timing(op, start, True)
		return result

	def get_recommendations(self, profile: FarmProfile | Mapping[str, Any]) -> tuple[Recommendation, ...]:
		def compute() -> tuple[Recommendation, ...]:
			farm = coerce_model(FarmProfile, profile)
			return ranking.rank(
				farm,
				CROPS,
				policy=self.policy,
				threshold=self.settings.viability_threshold,
			)

		return self._run("get_recommendations", compute)

	def predict_yield(
		self,
		crop_type: str,
		soil_type: SoilTypeEnum | str,
		area: float,
		prior_yield: float | None = None,
	) -> tuple[ScenarioProjection, ...]:
		return self._run(
			"predict_yield",
			lambda: yield_forecast.predict_yield(crop_type, soil_type, area, prior_yield),
		)

	def optimize_treatment(
		self,
		crop_type: str,
		field_size: float,
		soil_type: SoilTypeEnum | str,
		growth_stage: GrowthStageEnum | str,
	) -> TreatmentPlan:
		return self._run(
			"optimize_treatment",
			lambda: treatment.plan(crop_type, field_size, soil_type, growth_stage),
		)

	def assess_soil(self, sample: SoilSample | Mapping[str, Any]) -> SoilHealthReport:
		def compute() -> SoilHealthReport:
			soil_sample = coerce_model(SoilSample, sample)
			return soil_health.assess(
				soil_sample,
				weights=self.settings.soil_weight_overrides,
				threshold=self.settings.viability_threshold,
				policy=self.policy,
			)

		return self._run("assess_soil", compute)
