"""Pydantic schemas for fertilizer / irrigation treatment plans."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agroadvisor.models.enums import GrowthStageEnum, Priority, SoilTypeEnum


class TreatmentRequest(BaseModel):
	crop_type: str = Field(min_length=1, max_length=100)
	field_size: float = Field(gt=0, allow_inf_nan=False, description="Field size in acres")
	soil_type: SoilTypeEnum
	growth_stage: GrowthStageEnum


class DoseApplication(BaseModel):
	model_config = ConfigDict(frozen=True)

	stage: GrowthStageEnum
	stage_label: str
	week: int
	fraction: float
	quantity_kg: float
	catch_up: bool = False
	critical: bool = False


class FertilizerDose(BaseModel):
	model_config = ConfigDict(frozen=True)

	nutrient: str
	product: str
	per_acre_kg: float
	total_kg: float
	timing: str
	cost: float
	benefit: str
	applications: tuple[DoseApplication, ...] = ()


class IrrigationEvent(BaseModel):
	model_config = ConfigDict(frozen=True)

	stage: GrowthStageEnum
	stage_label: str
	start_week: int
	frequency: str
	interval_days: tuple[int, int]
	amount_mm: float
	volume_liters: float
	duration_days: int
	applications: int
	critical: bool


class WeekPlan(BaseModel):
	model_config = ConfigDict(frozen=True)

	week: int
	tasks: tuple[str, ...]
	priority: Priority


class TreatmentPlan(BaseModel):
	model_config = ConfigDict(frozen=True)

	crop: str
	field_size: float
	soil_type: SoilTypeEnum
	growth_stage: GrowthStageEnum
	fertilizer: tuple[FertilizerDose, ...] = ()
	irrigation: tuple[IrrigationEvent, ...] = ()
	schedule: tuple[WeekPlan, ...] = ()
	total_fertilizer_cost: float = 0.0
	total_water_mm: float = 0.0
	total_water_liters: float = 0.0
	irrigation_method: str = ""
	expected_yield_increase: str = ""
	payback_period: str | None = None
	water_savings: str = ""
