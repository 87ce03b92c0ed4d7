from __future__ import annotations

import pytest

from agroadvisor.services import yield_forecast
from agroadvisor.services.errors import UnsupportedCropOrStage, ValidationError


def test_wheat_scenarios_on_loamy_soil() -> None:
	projections = yield_forecast.predict_yield("Wheat", "loamy", 25)

	assert [p.scenario for p in projections] == [
		"Optimal Conditions",
		"Average Conditions",
		"Drought Scenario",
		"Excess Rain",
	]
	assert [p.confidence for p in projections] == [92, 88, 85, 82]

	optimal = projections[0]
	assert optimal.yield_per_acre == 4.2
	assert optimal.total_production == 105.0
	assert optimal.expected_revenue == pytest.approx(2_625_000)
	assert projections[1].yield_per_acre == 3.78
	assert projections[3].yield_per_acre == 3.19


def test_optimal_scenario_yields_the_most() -> None:
	projections = yield_forecast.predict_yield("Rice", "clay", 3)
	assert max(projections, key=lambda p: p.total_production).scenario == "Optimal Conditions"


def test_non_preferred_soil_lowers_baseline() -> None:
	optimal = yield_forecast.predict_yield("Wheat", "sandy", 1)[0]
	assert optimal.yield_per_acre == pytest.approx(3.57)


def test_prior_yield_is_blended_in() -> None:
	optimal = yield_forecast.predict_yield("wheat", "loamy", 1, prior_yield=5.0)[0]
	assert optimal.yield_per_acre == pytest.approx(4.44)


def test_unknown_crop() -> None:
	with pytest.raises(UnsupportedCropOrStage) as exc_info:
		yield_forecast.predict_yield("Banana", "loamy", 1)
	assert exc_info.value.field == "crop_type"


@pytest.mark.parametrize(
	("kwargs", "field"),
	[
		({"area": 0}, "area"),
		({"area": -2}, "area"),
		({"prior_yield": -1.0}, "prior_yield"),
		({"soil_type": "marsh"}, "soil_type"),
	],
)
def test_invalid_inputs(kwargs: dict[str, object], field: str) -> None:
	args = {"crop_type": "Wheat", "soil_type": "loamy", "area": 1.0, **kwargs}
	with pytest.raises(ValidationError) as exc_info:
		yield_forecast.predict_yield(**args)  # type: ignore[arg-type]
	assert exc_info.value.field == field
