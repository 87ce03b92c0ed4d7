"""Ranking aggregator — score, project, filter and order crop candidates."""

from __future__ import annotations

from collections.abc import Iterable

from agroadvisor.models.crops import BUDGET_BAND_LIMITS, CropCandidate
from agroadvisor.schemas.recommendation import FarmProfile, Recommendation
from agroadvisor.services import financials, suitability
from agroadvisor.services.policies import DEFAULT_VIABILITY_THRESHOLD, ScoringPolicy


def _tips(profile: FarmProfile, candidate: CropCandidate, fits: list[suitability.CriterionFit], in_budget: bool) -> tuple[str, ...]:
	tips = list(candidate.tips)
	if not in_budget:
		_, upper = BUDGET_BAND_LIMITS[profile.budget]
		tips.append(
			f"Costs ₹{candidate.investment_per_acre:,.0f}/acre, above your ₹{upper:,.0f}/acre budget; "
			"consider phased planting or a crop loan"
		)
	if any(fit.criterion == "soil_fit" and fit.partial for fit in fits):
		tips.append("Improve soil health with organic amendments before sowing")
	return tuple(tips)


def build_recommendation(
	profile: FarmProfile,
	candidate: CropCandidate,
	policy: ScoringPolicy | None = None,
) -> Recommendation:
	fits = suitability.evaluate(profile, candidate, policy)
	projection = financials.project(profile, candidate)
	return Recommendation(
		crop=candidate.name,
		suitability=suitability.total_score(fits),
		risk_level=candidate.risk_level,
		investment=projection.investment,
		revenue=projection.revenue,
		profit=projection.profit,
		profit_margin=projection.profit_margin,
		margin_substituted=projection.margin_substituted,
		within_budget=projection.within_budget,
		growing_period=candidate.growing_period,
		market_price=candidate.market_price,
		reasons=suitability.reasons_for(fits),
		tips=_tips(profile, candidate, fits, projection.within_budget),
	)


def sort_key(rec: Recommendation) -> tuple[int, int, str]:
	return (-rec.suitability, -rec.profit_margin, rec.crop)


def rank(
	profile: FarmProfile,
	candidates: Iterable[CropCandidate],
	policy: ScoringPolicy | None = None,
	threshold: int = DEFAULT_VIABILITY_THRESHOLD,
) -> tuple[Recommendation, ...]:
	viable = [
		rec
		for rec in (build_recommendation(profile, candidate, policy) for candidate in candidates)
		if rec.suitability >= threshold
	]
	viable.sort(key=sort_key)
	return tuple(viable)
