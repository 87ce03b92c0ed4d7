from __future__ import annotations

from agroadvisor.models.crops import CROPS, CropCandidate, get_crop
from agroadvisor.models.enums import BudgetBandEnum, SoilHealthEnum
from agroadvisor.schemas.recommendation import FarmProfile
from agroadvisor.services import ranking


def _twin(name: str) -> CropCandidate:
	return CropCandidate(
		name=name,
		seasons=frozenset({"rabi"}),
		investment_per_acre=20_000,
		revenue_per_acre=40_000,
		growing_period_days=(90, 100),
		market_price=1_000,
		baseline_yield=1.0,
	)


def test_rank_orders_by_score_then_margin_then_name(rabi_profile: FarmProfile) -> None:
	ranked = ranking.rank(rabi_profile, CROPS)
	assert [rec.crop for rec in ranked] == [
		"Mustard",
		"Wheat",
		"Barley",
		"Potato",
		"Tomato",
		"Maize",
		"Onion",
		"Soybean",
		"Sugarcane",
		"Rice",
		"Cotton",
	]
	scores = [rec.suitability for rec in ranked]
	assert scores == sorted(scores, reverse=True)


def test_rank_applies_viability_threshold(rabi_profile: FarmProfile) -> None:
	ranked = ranking.rank(rabi_profile, CROPS, threshold=90)
	assert [rec.crop for rec in ranked] == ["Mustard", "Wheat", "Barley", "Potato"]
	assert all(rec.suitability >= 90 for rec in ranked)


def test_threshold_is_inclusive(rabi_profile: FarmProfile) -> None:
	ranked = ranking.rank(rabi_profile, CROPS, threshold=55)
	assert ranked[-1].crop == "Cotton"
	assert ranked[-1].suitability == 55


def test_full_ties_break_on_crop_name(rabi_profile: FarmProfile) -> None:
	ranked = ranking.rank(rabi_profile, [_twin("Beta"), _twin("Alpha")])
	assert [rec.crop for rec in ranked] == ["Alpha", "Beta"]


def test_no_candidates_gives_empty_result(rabi_profile: FarmProfile) -> None:
	assert ranking.rank(rabi_profile, []) == ()


def test_nothing_viable_gives_empty_result(rabi_profile: FarmProfile) -> None:
	assert ranking.rank(rabi_profile, CROPS, threshold=101) == ()


def test_recommendation_carries_projection_and_reference(rabi_profile: FarmProfile) -> None:
	rec = ranking.build_recommendation(rabi_profile, get_crop("Wheat"))
	assert rec.suitability == 100
	assert rec.profit == 40_000
	assert rec.profit_margin == 47
	assert rec.growing_period == "120-150 days"
	assert rec.market_price == 2_500
	assert rec.risk_level == "Low"
	assert rec.tips[0] == "Use certified seeds for better yield"


def test_over_budget_crop_gets_budget_tip(rabi_profile: FarmProfile) -> None:
	profile = rabi_profile.model_copy(update={"budget": BudgetBandEnum.low})
	rec = ranking.build_recommendation(profile, get_crop("Potato"))
	assert rec.within_budget is False
	assert any("above your ₹50,000/acre budget" in tip for tip in rec.tips)


def test_partial_soil_fit_gets_soil_tip(rabi_profile: FarmProfile) -> None:
	profile = rabi_profile.model_copy(update={"soil_health": SoilHealthEnum.fair})
	rec = ranking.build_recommendation(profile, get_crop("Wheat"))
	assert rec.tips[-1] == "Improve soil health with organic amendments before sowing"


def test_rank_is_idempotent(rabi_profile: FarmProfile) -> None:
	assert ranking.rank(rabi_profile, CROPS) == ranking.rank(rabi_profile, CROPS)
