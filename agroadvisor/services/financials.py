"""Financial projector — investment, revenue, profit and margin for one crop on one farm."""

from __future__ import annotations

from agroadvisor.models.crops import BUDGET_BAND_LIMITS, DEMAND_PRICE_MULTIPLIER, CropCandidate
from agroadvisor.models.enums import BudgetBandEnum
from agroadvisor.schemas.recommendation import FarmProfile, FinancialProjection


def profit_margin(profit: float, revenue: float) -> tuple[int, bool]:
	"""Whole-percent margin; non-positive revenue yields ``(0, True)``."""
	if revenue <= 0:
		return 0, True
	return round(profit / revenue * 100), False


def within_budget(investment_per_acre: float, budget: BudgetBandEnum) -> bool:
	_, upper = BUDGET_BAND_LIMITS[budget]
	return upper is None or investment_per_acre <= upper


def project(profile: FarmProfile, candidate: CropCandidate) -> FinancialProjection:
	multiplier = DEMAND_PRICE_MULTIPLIER[profile.market_demand]
	investment = round(candidate.investment_per_acre * profile.area, 2)
	revenue = round(candidate.revenue_per_acre * profile.area * multiplier, 2)
	profit = round(revenue - investment, 2)
	margin, substituted = profit_margin(profit, revenue)

	return FinancialProjection(
		crop=candidate.name,
		investment=investment,
		revenue=revenue,
		profit=profit,
		profit_margin=margin,
		margin_substituted=substituted,
		demand_multiplier=multiplier,
		within_budget=within_budget(candidate.investment_per_acre, profile.budget),
	)
