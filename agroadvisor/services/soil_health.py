"""Soil health aggregator — classify every measured parameter and roll them up.

The compatible-crop list is produced by the ranking aggregator, fed with a
farm profile synthesized from the report itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from agroadvisor.models.crops import CROPS, CropCandidate
from agroadvisor.models.enums import (
	BudgetBandEnum,
	MarketDemandEnum,
	Priority,
	SeasonEnum,
	Severity,
	SoilHealthEnum,
	StatusBand,
)
from agroadvisor.models.soil import SOIL_PARAMETERS, SoilParameter, get_parameter
from agroadvisor.schemas.recommendation import FarmProfile, Recommendation
from agroadvisor.schemas.soil import (
	ClassificationResult,
	Deficiency,
	SoilAction,
	SoilHealthReport,
	SoilSample,
)
from agroadvisor.services.classifier import classify
from agroadvisor.services.errors import ValidationError
from agroadvisor.services.policies import DEFAULT_VIABILITY_THRESHOLD, ScoringPolicy
from agroadvisor.services.ranking import rank, sort_key

GOODNESS: dict[StatusBand, int] = {
	StatusBand.good: 100,
	StatusBand.high: 80,
	StatusBand.medium: 60,
	StatusBand.low: 30,
	StatusBand.needs_attention: 30,
}

DEFICIENT_BANDS = frozenset({StatusBand.low, StatusBand.medium, StatusBand.needs_attention})

_PRIORITY_FOR_SEVERITY = {
	Severity.high: Priority.high,
	Severity.medium: Priority.medium,
	Severity.low: Priority.low,
}
_PRIORITY_RANK = {Priority.high: 0, Priority.medium: 1, Priority.low: 2}


def severity_for(result: ClassificationResult, param: SoilParameter) -> Severity:
	scaled = result.deviation * param.severity_scale
	if scaled <= 0.2:
		return Severity.low
	if scaled <= 0.5:
		return Severity.medium
	return Severity.high


def soil_health_category(overall_score: int) -> SoilHealthEnum:
	if overall_score >= 85:
		return SoilHealthEnum.excellent
	if overall_score >= 70:
		return SoilHealthEnum.good
	if overall_score >= 50:
		return SoilHealthEnum.fair
	return SoilHealthEnum.poor


def _measured_parameters(sample: SoilSample) -> dict[str, tuple[SoilParameter, float | None]]:
	measured: dict[str, tuple[SoilParameter, float | None]] = {}
	for raw_name, value in sample.values.items():
		param = get_parameter(raw_name)
		if param is None:
			raise ValidationError(f"unknown soil parameter {raw_name!r}", field=f"values.{raw_name}")
		if param.name in measured:
			raise ValidationError(f"{param.label} supplied more than once", field=f"values.{raw_name}")
		measured[param.name] = (param, value)

	for param in SOIL_PARAMETERS:
		if param.required and param.name not in measured:
			raise ValidationError(f"{param.label} is required", field=f"values.{param.name}")
	return measured


def _weights(overrides: Mapping[str, float] | None) -> dict[str, float]:
	weights = {param.name: param.weight for param in SOIL_PARAMETERS}
	for raw_name, weight in (overrides or {}).items():
		param = get_parameter(raw_name)
		if param is None:
			raise ValidationError(f"unknown soil parameter {raw_name!r}", field="weights")
		if weight <= 0:
			raise ValidationError(f"weight for {param.label} must be positive", field="weights")
		weights[param.name] = float(weight)
	return weights


def suitable_crops(
	overall_score: int,
	sample: SoilSample,
	candidates: Iterable[CropCandidate] = CROPS,
	policy: ScoringPolicy | None = None,
	threshold: int = DEFAULT_VIABILITY_THRESHOLD,
) -> tuple[str, ...]:
	candidates = tuple(candidates)
	seasons = [sample.season] if sample.season is not None else list(SeasonEnum)
	best: dict[str, Recommendation] = {}
	for season in seasons:
		profile = FarmProfile(
			soil_health=soil_health_category(overall_score),
			season=season,
			budget=BudgetBandEnum.medium,
			market_demand=MarketDemandEnum.medium,
			area=1.0,
			soil_type=sample.soil_type,
		)
		for rec in rank(profile, candidates, policy=policy, threshold=threshold):
			current = best.get(rec.crop)
			if current is None or sort_key(rec) < sort_key(current):
				best[rec.crop] = rec
	return tuple(rec.crop for rec in sorted(best.values(), key=sort_key))


def assess(
	sample: SoilSample,
	weights: Mapping[str, float] | None = None,
	threshold: int = DEFAULT_VIABILITY_THRESHOLD,
	policy: ScoringPolicy | None = None,
	candidates: Iterable[CropCandidate] = CROPS,
) -> SoilHealthReport:
	measured = _measured_parameters(sample)
	param_weights = _weights(weights)

	analysis: list[ClassificationResult] = []
	for param in SOIL_PARAMETERS:
		if param.name in measured:
			_, value = measured[param.name]
			analysis.append(classify(param.name, value))

	total_weight = sum(param_weights[result.parameter] for result in analysis)
	weighted = sum(param_weights[result.parameter] * GOODNESS[result.status] for result in analysis)
	overall = round(weighted / total_weight)

	deficiencies: list[Deficiency] = []
	actions: list[SoilAction] = []
	warnings: list[str] = []
	for result in analysis:
		param, _ = measured[result.parameter]
		if result.status in DEFICIENT_BANDS:
			severity = severity_for(result, param)
			deficiencies.append(
				Deficiency(
					parameter=param.name,
					nutrient=param.label,
					status=result.status,
					severity=severity,
					impact=param.impact,
				)
			)
			remediation = param.remediation_for(result.value, result.ideal_range)
			if remediation is not None:
				actions.append(
					SoilAction(
						parameter=param.name,
						category=remediation.category,
						priority=_PRIORITY_FOR_SEVERITY[severity],
						action=remediation.action,
						timing=remediation.timing,
						expected_improvement=remediation.expected_improvement,
					)
				)
		elif result.status == StatusBand.high and param.surplus_warning:
			warnings.append(param.surplus_warning)

	actions.sort(key=lambda action: (_PRIORITY_RANK[action.priority], -param_weights[action.parameter], action.parameter))

	return SoilHealthReport(
		overall_score=overall,
		soil_type=sample.soil_type,
		analysis=tuple(analysis),
		deficiencies=tuple(deficiencies),
		recommendations=tuple(actions),
		warnings=tuple(warnings),
		suitable_crops=suitable_crops(overall, sample, candidates, policy, threshold),
	)
