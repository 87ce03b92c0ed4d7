"""Closed vocabularies shared by the reference tables, schemas and engine.

Ordinal inputs (soil health, budget, market demand) keep their members in
ascending order so ``ORDER.index(member)`` gives the rank used for step
distances by the suitability scorer.
"""

from enum import StrEnum

# ── Farm profile enums ──────────────────────────────────────────────────────


class SoilHealthEnum(StrEnum):
    """Farmer-reported soil health category (ordinal)."""

    poor = "poor"
    fair = "fair"
    good = "good"
    excellent = "excellent"


class SeasonEnum(StrEnum):
    """Indian cropping seasons."""

    kharif = "kharif"
    rabi = "rabi"
    zaid = "zaid"


class BudgetBandEnum(StrEnum):
    """Per-acre investment budget band (ordinal)."""

    low = "low"
    medium = "medium"
    high = "high"


class MarketDemandEnum(StrEnum):
    """Expected market demand for produce (ordinal)."""

    low = "low"
    medium = "medium"
    high = "high"


class SoilTypeEnum(StrEnum):
    """Soil texture class."""

    loamy = "loamy"
    clay = "clay"
    sandy = "sandy"
    silty = "silty"
    peaty = "peaty"
    chalky = "chalky"


class GrowthStageEnum(StrEnum):
    """Crop growth stage, in crop-cycle order."""

    seedling = "seedling"
    vegetative = "vegetative"
    flowering = "flowering"
    fruit_development = "fruit_development"
    maturity = "maturity"


SOIL_HEALTH_ORDER = tuple(SoilHealthEnum)
BUDGET_ORDER = tuple(BudgetBandEnum)
MARKET_DEMAND_ORDER = tuple(MarketDemandEnum)
GROWTH_STAGE_ORDER = tuple(GrowthStageEnum)


# ── Result enums ────────────────────────────────────────────────────────────


class StatusBand(StrEnum):
    """Qualitative status of a measurement against its ideal range."""

    low = "Low"
    medium = "Medium"
    good = "Good"
    high = "High"
    needs_attention = "NeedsAttention"


class Favorability(StrEnum):
    """How a parameter's value relates to agronomic benefit."""

    symmetric = "symmetric"
    higher_is_better = "higher_is_better"
    lower_is_better = "lower_is_better"


class RiskLevel(StrEnum):
    low = "Low"
    medium = "Medium"
    high = "High"


class Priority(StrEnum):
    high = "High"
    medium = "Medium"
    low = "Low"


class Severity(StrEnum):
    low = "Low"
    medium = "Medium"
    high = "High"
