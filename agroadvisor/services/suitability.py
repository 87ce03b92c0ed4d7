"""Suitability scorer — weighted multi-criteria match of a crop against a farm profile."""

from __future__ import annotations

from dataclasses import dataclass

from agroadvisor.models.crops import CropCandidate
from agroadvisor.models.enums import MARKET_DEMAND_ORDER, SOIL_HEALTH_ORDER, SeasonEnum
from agroadvisor.schemas.recommendation import FarmProfile
from agroadvisor.services.policies import ScoringPolicy

SEASON_LABELS: dict[SeasonEnum, str] = {
	SeasonEnum.kharif: "Kharif (Summer)",
	SeasonEnum.rabi: "Rabi (Winter)",
	SeasonEnum.zaid: "Zaid (Spring)",
}

_DEFAULT_POLICY = ScoringPolicy()


@dataclass(frozen=True)
class CriterionFit:
	criterion: str
	weight: float
	fraction: float
	reason: str

	@property
	def contribution(self) -> float:
		return self.weight * self.fraction

	@property
	def partial(self) -> bool:
		return 0.0 < self.fraction < 1.0


def _soil_fit(profile: FarmProfile, candidate: CropCandidate, policy: ScoringPolicy) -> CriterionFit:
	steps = max(0, SOIL_HEALTH_ORDER.index(candidate.min_soil_health) - SOIL_HEALTH_ORDER.index(profile.soil_health))
	if profile.soil_type not in candidate.preferred_soils:
		steps += 1
	fraction = policy.fraction_for_steps(steps)
	if fraction >= 1.0:
		reason = f"Excellent match for your {profile.soil_health.value} soil health and {profile.soil_type.value} soil"
	else:
		reason = f"Tolerates {profile.soil_health.value} soil health on {profile.soil_type.value} soil with amendments"
	return CriterionFit("soil_fit", policy.soil_fit, fraction, reason)


def _season_fit(profile: FarmProfile, candidate: CropCandidate, policy: ScoringPolicy) -> CriterionFit:
	label = SEASON_LABELS[profile.season]
	if profile.season in candidate.seasons:
		return CriterionFit("season_fit", policy.season_fit, 1.0, f"Well-suited for {label} season planting")
	if profile.season in candidate.secondary_seasons:
		return CriterionFit(
			"season_fit",
			policy.season_fit,
			policy.secondary_season_fraction,
			f"Can be grown in {label} season with adjusted sowing dates",
		)
	return CriterionFit("season_fit", policy.season_fit, 0.0, f"Not a {label} season crop")


def _market_fit(profile: FarmProfile, candidate: CropCandidate, policy: ScoringPolicy) -> CriterionFit:
	steps = max(0, MARKET_DEMAND_ORDER.index(candidate.min_market_demand) - MARKET_DEMAND_ORDER.index(profile.market_demand))
	fraction = policy.fraction_for_steps(steps)
	if fraction >= 1.0:
		reason = f"{profile.market_demand.value.capitalize()} market demand supports stable prices"
	else:
		reason = "Market demand is adequate but prices may fluctuate"
	return CriterionFit("market_fit", policy.market_fit, fraction, reason)


def evaluate(profile: FarmProfile, candidate: CropCandidate, policy: ScoringPolicy | None = None) -> list[CriterionFit]:
	"""Per-criterion fits in declaration order (soil, season, market)."""
	policy = policy or _DEFAULT_POLICY
	return [
		_soil_fit(profile, candidate, policy),
		_season_fit(profile, candidate, policy),
		_market_fit(profile, candidate, policy),
	]


def total_score(fits: list[CriterionFit]) -> int:
	return max(0, min(100, round(sum(fit.contribution for fit in fits))))


def reasons_for(fits: list[CriterionFit]) -> tuple[str, ...]:
	contributing = [fit for fit in fits if fit.contribution > 0]
	# sorted() is stable, so equal contributions keep declaration order
	contributing = sorted(contributing, key=lambda fit: -fit.contribution)
	return tuple(fit.reason for fit in contributing)


def score(
	profile: FarmProfile,
	candidate: CropCandidate,
	policy: ScoringPolicy | None = None,
) -> tuple[int, tuple[str, ...]]:
	fits = evaluate(profile, candidate, policy)
	return total_score(fits), reasons_for(fits)
