from __future__ import annotations

import pytest

from agroadvisor.models.crops import get_crop
from agroadvisor.models.enums import SeasonEnum, SoilHealthEnum, SoilTypeEnum
from agroadvisor.schemas.recommendation import FarmProfile
from agroadvisor.services import suitability
from agroadvisor.services.policies import ScoringPolicy


def test_full_match_scores_100(rabi_profile: FarmProfile) -> None:
	score, reasons = suitability.score(rabi_profile, get_crop("Wheat"))
	assert score == 100
	assert reasons == (
		"Excellent match for your good soil health and loamy soil",
		"Well-suited for Rabi (Winter) season planting",
		"Medium market demand supports stable prices",
	)


def test_secondary_season_earns_partial_weight(rabi_profile: FarmProfile) -> None:
	profile = rabi_profile.model_copy(update={"season": SeasonEnum.zaid})
	score, reasons = suitability.score(profile, get_crop("Wheat"))
	assert score == 85
	# largest contribution first
	assert reasons[1] == "Medium market demand supports stable prices"
	assert reasons[2] == "Can be grown in Zaid (Spring) season with adjusted sowing dates"


def test_zero_contributions_produce_no_reason(rabi_profile: FarmProfile) -> None:
	profile = rabi_profile.model_copy(update={"season": SeasonEnum.kharif})
	score, reasons = suitability.score(profile, get_crop("Wheat"))
	assert score == 70
	assert len(reasons) == 2
	assert not any(reason.startswith("Not a") for reason in reasons)


def test_soil_shortfall_degrades_per_step(rabi_profile: FarmProfile) -> None:
	wheat = get_crop("Wheat")
	fair = rabi_profile.model_copy(update={"soil_health": SoilHealthEnum.fair})
	poor = rabi_profile.model_copy(update={"soil_health": SoilHealthEnum.poor})
	assert suitability.score(fair, wheat)[0] == 80
	assert suitability.score(poor, wheat)[0] == 60


def test_non_preferred_soil_counts_as_a_step(rabi_profile: FarmProfile) -> None:
	profile = rabi_profile.model_copy(update={"soil_type": SoilTypeEnum.sandy})
	fits = suitability.evaluate(profile, get_crop("Wheat"))
	assert fits[0].criterion == "soil_fit"
	assert fits[0].fraction == 0.5
	assert fits[0].partial


def test_worst_case_stays_in_bounds() -> None:
	profile = FarmProfile(
		soil_health="poor",
		season="kharif",
		budget="low",
		market_demand="low",
		area=1.0,
		soil_type="sandy",
	)
	score, reasons = suitability.score(profile, get_crop("Wheat"))
	assert score == 15
	assert reasons == ("Market demand is adequate but prices may fluctuate",)


def test_custom_policy_changes_weights(rabi_profile: FarmProfile) -> None:
	policy = ScoringPolicy(soil_fit=50, season_fit=25, market_fit=25)
	profile = rabi_profile.model_copy(update={"season": SeasonEnum.kharif})
	assert suitability.score(profile, get_crop("Wheat"), policy)[0] == 75


def test_policy_weights_must_sum_to_100() -> None:
	with pytest.raises(ValueError):
		ScoringPolicy(soil_fit=50, season_fit=50, market_fit=50)


def test_policy_fraction_beyond_curve_is_zero() -> None:
	policy = ScoringPolicy()
	assert policy.fraction_for_steps(0) == 1.0
	assert policy.fraction_for_steps(1) == 0.5
	assert policy.fraction_for_steps(7) == 0.0


def test_scoring_is_deterministic(rabi_profile: FarmProfile) -> None:
	crop = get_crop("Tomato")
	assert suitability.score(rabi_profile, crop) == suitability.score(rabi_profile, crop)
