from __future__ import annotations

import pytest

from agroadvisor.models.enums import Priority, Severity, SoilHealthEnum, StatusBand
from agroadvisor.models.soil import SOIL_PARAMETERS_BY_NAME
from agroadvisor.schemas.soil import SoilSample
from agroadvisor.services import soil_health
from agroadvisor.services.errors import InvalidMeasurement, ValidationError


def _sample(values: dict[str, float | None], **extra: object) -> SoilSample:
	return SoilSample(values=values, **extra)


def test_healthy_soil_scores_full_marks(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample(healthy_values))
	assert report.overall_score == 100
	assert report.deficiencies == ()
	assert report.recommendations == ()
	assert report.warnings == ()
	assert [result.parameter for result in report.analysis] == ["ph", "nitrogen", "phosphorus", "potassium"]


def test_deficiencies_and_actions_are_reported() -> None:
	report = soil_health.assess(
		_sample({"potassium": 300, "nitrogen": 30, "phosphorus": 30, "ph": 5.5}),
	)
	# (30*2 + 30*2 + 100*2 + 80*2) / 8
	assert report.overall_score == 60
	assert [d.parameter for d in report.deficiencies] == ["ph", "nitrogen"]
	assert report.deficiencies[0].status == StatusBand.needs_attention
	assert report.deficiencies[0].severity == Severity.medium
	assert report.deficiencies[1].status == StatusBand.low
	assert report.deficiencies[1].severity == Severity.medium
	# equal priority and weight fall back to parameter name
	assert [a.parameter for a in report.recommendations] == ["nitrogen", "ph"]
	assert report.warnings == ("Avoid over-application of potassium fertilizers",)


def test_most_severe_action_comes_first() -> None:
	report = soil_health.assess(
		_sample({"ph": 5.5, "nitrogen": 30, "phosphorus": 30, "potassium": 300, "salinity": 4.0}),
	)
	assert report.overall_score == 57
	first = report.recommendations[0]
	assert first.parameter == "salinity"
	assert first.priority == Priority.high
	assert first.category == "Salinity"


def test_waterlogged_soil_gets_drainage_action(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample({**healthy_values, "moisture": 45}))
	moisture = next(result for result in report.analysis if result.parameter == "moisture")
	assert moisture.status == StatusBand.needs_attention
	assert moisture.recommendation == "Improve drainage to avoid waterlogging"
	action = next(a for a in report.recommendations if a.parameter == "moisture")
	assert action.category == "Drainage"
	assert "drains" in action.action
	assert "irrigation" not in action.action.lower()


def test_dry_soil_gets_irrigation_action(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample({**healthy_values, "moisture": 10}))
	action = next(a for a in report.recommendations if a.parameter == "moisture")
	assert action.category == "Irrigation"


@pytest.mark.parametrize(("ph", "keyword"), [(5.0, "lime"), (8.2, "sulfur")])
def test_ph_action_follows_direction(healthy_values: dict[str, float], ph: float, keyword: str) -> None:
	report = soil_health.assess(_sample({**healthy_values, "ph": ph}))
	action = next(a for a in report.recommendations if a.parameter == "ph")
	assert keyword in action.action


def test_remediation_required_for_deficient_side() -> None:
	moisture = SOIL_PARAMETERS_BY_NAME["moisture"]
	with pytest.raises(ValueError):
		moisture.model_validate({**moisture.model_dump(), "above_remediation": None})


def test_medium_band_counts_as_deficiency(healthy_values: dict[str, float]) -> None:
	values = {**healthy_values, "phosphorus": 24.0}
	report = soil_health.assess(_sample(values))
	phosphorus = next(d for d in report.deficiencies if d.parameter == "phosphorus")
	assert phosphorus.status == StatusBand.medium
	assert phosphorus.severity == Severity.low


def test_weight_overrides_shift_overall_score(healthy_values: dict[str, float]) -> None:
	values = {**healthy_values, "ph": 5.0}
	report = soil_health.assess(_sample(values), weights={"ph": 6})
	# (30*6 + 100*6) / 12
	assert report.overall_score == 65


def test_invalid_weight_overrides() -> None:
	sample = _sample({"ph": 6.5, "nitrogen": 50, "phosphorus": 30, "potassium": 200})
	with pytest.raises(ValidationError):
		soil_health.assess(sample, weights={"zinc": 1.0})
	with pytest.raises(ValidationError):
		soil_health.assess(sample, weights={"ph": 0})


def test_missing_required_parameter() -> None:
	with pytest.raises(ValidationError) as exc_info:
		soil_health.assess(_sample({"ph": 6.5, "nitrogen": 50, "phosphorus": 30}))
	assert exc_info.value.field == "values.potassium"


def test_unknown_parameter(healthy_values: dict[str, float]) -> None:
	with pytest.raises(ValidationError) as exc_info:
		soil_health.assess(_sample({**healthy_values, "zinc": 1.2}))
	assert exc_info.value.field == "values.zinc"


def test_duplicate_parameter_via_alias(healthy_values: dict[str, float]) -> None:
	with pytest.raises(ValidationError):
		soil_health.assess(_sample({**healthy_values, "salinity": 1.0, "EC": 1.0}))


def test_missing_measurement_value(healthy_values: dict[str, float]) -> None:
	with pytest.raises(InvalidMeasurement) as exc_info:
		soil_health.assess(_sample({**healthy_values, "moisture": None}))
	assert exc_info.value.field == "moisture"


def test_suitable_crops_search_every_season(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample(healthy_values))
	assert report.suitable_crops[0] == "Mustard"
	assert len(report.suitable_crops) == 11
	assert len(set(report.suitable_crops)) == 11


def test_suitable_crops_for_given_season(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample(healthy_values, season="kharif"))
	assert report.suitable_crops[:3] == ("Soybean", "Maize", "Rice")


def test_viability_threshold_limits_suitable_crops(healthy_values: dict[str, float]) -> None:
	report = soil_health.assess(_sample(healthy_values, season="kharif"), threshold=100)
	assert report.suitable_crops == ("Soybean", "Maize", "Rice")


@pytest.mark.parametrize(
	("score", "category"),
	[
		(100, SoilHealthEnum.excellent),
		(85, SoilHealthEnum.excellent),
		(70, SoilHealthEnum.good),
		(50, SoilHealthEnum.fair),
		(49, SoilHealthEnum.poor),
	],
)
def test_soil_health_category(score: int, category: SoilHealthEnum) -> None:
	assert soil_health.soil_health_category(score) == category
