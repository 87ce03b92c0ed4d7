"""Pydantic schemas for soil samples, classifications and soil health reports."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agroadvisor.models.enums import Priority, SeasonEnum, Severity, SoilTypeEnum, StatusBand
from agroadvisor.models.soil import IdealRange


class SoilSample(BaseModel):
	values: dict[str, float | None] = Field(min_length=1)
	soil_type: SoilTypeEnum = SoilTypeEnum.loamy
	season: SeasonEnum | None = None


class ClassificationResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	parameter: str
	label: str
	value: float
	unit: str
	status: StatusBand
	ideal_range: IdealRange
	recommendation: str
	deviation: float = Field(ge=0.0)


class Deficiency(BaseModel):
	model_config = ConfigDict(frozen=True)

	parameter: str
	nutrient: str
	status: StatusBand
	severity: Severity
	impact: str


class SoilAction(BaseModel):
	model_config = ConfigDict(frozen=True)

	parameter: str
	category: str
	priority: Priority
	action: str
	timing: str
	expected_improvement: str


class SoilHealthReport(BaseModel):
	model_config = ConfigDict(frozen=True)

	overall_score: int = Field(ge=0, le=100)
	soil_type: SoilTypeEnum
	analysis: tuple[ClassificationResult, ...] = ()
	deficiencies: tuple[Deficiency, ...] = ()
	recommendations: tuple[SoilAction, ...] = ()
	warnings: tuple[str, ...] = ()
	suitable_crops: tuple[str, ...] = ()
