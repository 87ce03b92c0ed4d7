"""Treatment planner — dosed, time-phased fertilizer and irrigation plan for one field."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Mapping

from agroadvisor.models.crops import CROPS_BY_NAME, CropCandidate
from agroadvisor.models.enums import GrowthStageEnum, Priority, SoilTypeEnum
from agroadvisor.models.treatment import (
	ACRE_M2,
	IRRIGATION_METHODS,
	IRRIGATION_SOIL_FACTORS,
	IRRIGATION_WATER_SAVINGS,
	NUTRIENT_SOIL_FACTORS,
	SUPPORTED_SOILS,
	TREATMENT_PROFILES_BY_CROP,
	DoseSpec,
	StageSpec,
	TreatmentProfile,
)
from agroadvisor.schemas.treatment import (
	DoseApplication,
	FertilizerDose,
	IrrigationEvent,
	TreatmentPlan,
	WeekPlan,
)
from agroadvisor.services.errors import UnsupportedCropOrStage
from agroadvisor.services.validation import coerce_enum, require_positive
from agroadvisor.services.yield_forecast import QUINTALS_PER_TON


def _resolve_profile(crop_type: str, profiles: Mapping[str, TreatmentProfile]) -> TreatmentProfile:
	profile = profiles.get(str(crop_type).strip().lower())
	if profile is None:
		raise UnsupportedCropOrStage(f"no treatment reference for crop {crop_type!r}", field="crop_type")
	return profile


def _timing_text(applications: list[DoseApplication], per_acre: float) -> str:
	if len(applications) == 1:
		app = applications[0]
		suffix = " (catch-up)" if app.catch_up else ""
		return f"Full dose of {per_acre:g} kg/acre at {app.stage_label}{suffix}"
	parts = []
	for app in applications:
		suffix = " (catch-up)" if app.catch_up else ""
		parts.append(f"{round(per_acre * app.fraction, 1):g} kg/acre at {app.stage_label}{suffix}")
	return "Split application: " + ", ".join(parts)


def _plan_dose(
	dose: DoseSpec,
	profile: TreatmentProfile,
	current: StageSpec,
	elapsed: set[GrowthStageEnum],
	soil_type: SoilTypeEnum,
	field_size: float,
) -> FertilizerDose:
	factor = NUTRIENT_SOIL_FACTORS[soil_type].get(dose.nutrient, 1.0)
	per_acre = round(dose.per_acre_kg * factor, 1)
	total = round(per_acre * field_size, 2)

	# elapsed splits collapse onto the current stage; quantity is never dropped
	merged: dict[GrowthStageEnum, list[float | bool]] = {}
	for split in dose.splits:
		target = current.stage if split.stage in elapsed else split.stage
		entry = merged.setdefault(target, [0.0, False])
		entry[0] += split.fraction
		entry[1] = entry[1] or split.stage in elapsed

	# TreatmentProfile guarantees every split stage is declared
	specs = {spec.stage: spec for spec in profile.stages}
	order = {spec.stage: index for index, spec in enumerate(profile.stages)}
	applications: list[DoseApplication] = []
	for stage in sorted(merged, key=order.__getitem__):
		fraction, catch_up = merged[stage]
		spec = specs[stage]
		applications.append(
			DoseApplication(
				stage=stage,
				stage_label=spec.label,
				week=spec.start_week,
				fraction=round(fraction, 4),
				quantity_kg=round(total * fraction, 2),
				catch_up=bool(catch_up),
				critical=spec.critical,
			)
		)

	return FertilizerDose(
		nutrient=dose.nutrient,
		product=dose.product,
		per_acre_kg=per_acre,
		total_kg=total,
		timing=_timing_text(applications, per_acre),
		cost=round(total * dose.cost_per_kg, 2),
		benefit=dose.benefit,
		applications=tuple(applications),
	)


def _plan_irrigation(spec: StageSpec, soil_type: SoilTypeEnum, field_size: float) -> IrrigationEvent:
	interval_factor, amount_factor = IRRIGATION_SOIL_FACTORS[soil_type]
	low = max(1, round(spec.interval_days[0] * interval_factor))
	high = max(low, round(spec.interval_days[1] * interval_factor))
	amount = round(spec.amount_mm * amount_factor, 1)
	frequency = f"Every {low} days" if low == high else f"Every {low}-{high} days"
	return IrrigationEvent(
		stage=spec.stage,
		stage_label=spec.label,
		start_week=spec.start_week,
		frequency=frequency,
		interval_days=(low, high),
		amount_mm=amount,
		volume_liters=round(amount * field_size * ACRE_M2, 1),
		duration_days=spec.duration_days,
		applications=math.ceil(spec.duration_days / ((low + high) / 2)),
		critical=spec.critical,
	)


def _weekly_schedule(fertilizer: list[FertilizerDose], irrigation: list[IrrigationEvent]) -> tuple[WeekPlan, ...]:
	tasks: dict[int, list[str]] = defaultdict(list)
	critical_weeks: set[int] = set()
	fertilizer_weeks: set[int] = set()

	for dose in fertilizer:
		for app in dose.applications:
			label = f"Apply {dose.product} ({dose.nutrient}): {app.quantity_kg:g} kg"
			if app.catch_up:
				label += " (catch-up)"
			tasks[app.week].append(label)
			fertilizer_weeks.add(app.week)
			if app.critical:
				critical_weeks.add(app.week)

	for event in irrigation:
		label = f"Irrigation for {event.stage_label}: {event.frequency.lower()}, {event.amount_mm:g} mm"
		if event.critical:
			label = "Critical " + label[0].lower() + label[1:]
			critical_weeks.add(event.start_week)
		tasks[event.start_week].append(label)

	schedule = []
	for week in sorted(tasks):
		if week in critical_weeks:
			priority = Priority.high
		elif week in fertilizer_weeks:
			priority = Priority.medium
		else:
			priority = Priority.low
		schedule.append(WeekPlan(week=week, tasks=tuple(tasks[week]), priority=priority))
	return tuple(schedule)


def _range_text(low: int, high: int) -> str:
	return f"{low}%" if low == high else f"{low}-{high}%"


def _payback_period(
	profile: TreatmentProfile,
	field_size: float,
	cost: float,
	crops: Mapping[str, CropCandidate],
) -> str | None:
	"""Seasons of extra harvest (at the mid-point yield response) needed to recover the fertilizer cost."""
	crop = crops.get(profile.crop.lower())
	if crop is None:
		return None
	response = sum(profile.yield_response_pct) / 2 / 100
	extra_revenue = crop.baseline_yield * field_size * QUINTALS_PER_TON * crop.market_price * response
	if extra_revenue <= 0:
		return None
	seasons = max(1, math.ceil(cost / extra_revenue))
	return "1 season" if seasons == 1 else f"{seasons} seasons"


def plan(
	crop_type: str,
	field_size: float,
	soil_type: SoilTypeEnum | str,
	growth_stage: GrowthStageEnum | str,
	profiles: Mapping[str, TreatmentProfile] = TREATMENT_PROFILES_BY_CROP,
	crops: Mapping[str, CropCandidate] = CROPS_BY_NAME,
) -> TreatmentPlan:
	size = require_positive(field_size, "field_size")
	soil = coerce_enum(SoilTypeEnum, soil_type, "soil_type")
	stage = coerce_enum(GrowthStageEnum, growth_stage, "growth_stage")

	profile = _resolve_profile(crop_type, profiles)
	if soil not in SUPPORTED_SOILS:
		raise UnsupportedCropOrStage(f"no treatment reference for {soil.value} soil", field="soil_type")
	current = profile.stage_spec(stage)
	if current is None:
		raise UnsupportedCropOrStage(
			f"no treatment reference for {profile.crop} at {stage.value} stage",
			field="growth_stage",
		)

	stage_index = profile.stages.index(current)
	elapsed = {spec.stage for spec in profile.stages[:stage_index]}
	remaining = profile.stages[stage_index:]

	fertilizer = [_plan_dose(dose, profile, current, elapsed, soil, size) for dose in profile.doses]
	irrigation = [_plan_irrigation(spec, soil, size) for spec in remaining]
	total_cost = round(sum(dose.cost for dose in fertilizer), 2)

	return TreatmentPlan(
		crop=profile.crop,
		field_size=size,
		soil_type=soil,
		growth_stage=stage,
		fertilizer=tuple(fertilizer),
		irrigation=tuple(irrigation),
		schedule=_weekly_schedule(fertilizer, irrigation),
		total_fertilizer_cost=total_cost,
		total_water_mm=round(sum(event.amount_mm * event.applications for event in irrigation), 1),
		total_water_liters=round(sum(event.volume_liters * event.applications for event in irrigation), 1),
		irrigation_method=IRRIGATION_METHODS[soil],
		expected_yield_increase=_range_text(*profile.yield_response_pct),
		payback_period=_payback_period(profile, size, total_cost, crops),
		water_savings=_range_text(*IRRIGATION_WATER_SAVINGS[soil]),
	)
