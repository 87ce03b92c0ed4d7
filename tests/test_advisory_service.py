from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError
from structlog.testing import capture_logs

from agroadvisor.config import Settings
from agroadvisor.services.advisory_service import AdvisoryService
from agroadvisor.services.errors import UnsupportedCropOrStage, ValidationError


def _profile(**overrides: object) -> dict[str, object]:
	return {
		"soil_health": "good",
		"season": "rabi",
		"budget": "medium",
		"market_demand": "medium",
		"area": 1.0,
		"soil_type": "loamy",
		**overrides,
	}


def test_recommendations_from_plain_mapping() -> None:
	items = AdvisoryService(Settings()).get_recommendations(_profile())
	assert items[0].crop == "Mustard"
	assert len(items) == 11


def test_threshold_comes_from_settings() -> None:
	items = AdvisoryService(Settings(viability_threshold=90)).get_recommendations(_profile())
	assert [rec.crop for rec in items] == ["Mustard", "Wheat", "Barley", "Potato"]


def test_weights_come_from_settings() -> None:
	settings = Settings(weight_soil_fit=20, weight_season_fit=60, weight_market_fit=20)
	items = AdvisoryService(settings).get_recommendations(_profile(season="kharif"))
	assert {rec.crop for rec in items if rec.suitability == 100} == {"Rice", "Maize", "Soybean"}


def test_bad_policy_weights_fail_fast() -> None:
	with pytest.raises(PydanticValidationError):
		AdvisoryService(Settings(weight_soil_fit=50, weight_season_fit=50, weight_market_fit=50))


def test_invalid_profile_names_field() -> None:
	with pytest.raises(ValidationError) as exc_info:
		AdvisoryService(Settings()).get_recommendations(_profile(soil_health="superb"))
	assert exc_info.value.field == "soil_health"


def test_non_positive_area_is_rejected() -> None:
	with pytest.raises(ValidationError) as exc_info:
		AdvisoryService(Settings()).get_recommendations(_profile(area=0))
	assert exc_info.value.field == "area"


def test_soil_weight_overrides_come_from_settings() -> None:
	service = AdvisoryService(Settings(soil_weight_overrides={"ph": 6}))
	report = service.assess_soil(
		{"values": {"ph": 5.0, "nitrogen": 50, "phosphorus": 30, "potassium": 200}},
	)
	assert report.overall_score == 65


@pytest.mark.parametrize("overrides", [{"zinc": 1.0}, {"ph": 0}, {"moisture": -2.0}])
def test_bad_soil_weight_overrides_fail_at_startup(overrides: dict[str, float]) -> None:
	with pytest.raises(PydanticValidationError):
		Settings(soil_weight_overrides=overrides)


def test_soil_weight_overrides_use_canonical_names() -> None:
	settings = Settings(soil_weight_overrides={"EC": 2.5, "Organic-Matter": 1.5})
	assert settings.soil_weight_overrides == {"salinity": 2.5, "organic_matter": 1.5}


def test_successful_call_is_logged() -> None:
	with capture_logs() as logs:
		AdvisoryService(Settings()).predict_yield("Wheat", "loamy", 1)
	event = logs[-1]
	assert event["event"] == "advisory_call"
	assert event["operation"] == "predict_yield"
	assert event["ok"] is True


def test_failed_call_is_logged_and_reraised() -> None:
	with capture_logs() as logs:
		with pytest.raises(UnsupportedCropOrStage):
			AdvisoryService(Settings()).optimize_treatment("Banana", 1, "loamy", "seedling")
	event = logs[-1]
	assert event["event"] == "advisory_call_failed"
	assert event["error"] == "unsupported_crop_or_stage"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setenv("VIABILITY_THRESHOLD", "80")
	monkeypatch.setenv("SOIL_WEIGHT_OVERRIDES", '{"ph": 3}')
	settings = Settings()
	assert settings.viability_threshold == 80
	assert settings.soil_weight_overrides == {"ph": 3.0}
