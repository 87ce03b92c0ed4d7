"""Reference data registry — static tables the engine reads, never writes.

Application code can do::

    from agroadvisor.models import CROPS, SOIL_PARAMETERS, TREATMENT_PROFILES, ...
"""

# ── Crop reference ──────────────────────────────────────────────────────────
from agroadvisor.models.crops import (
    BUDGET_BAND_LIMITS,
    CROPS,
    CROPS_BY_NAME,
    DEMAND_PRICE_MULTIPLIER,
    CropCandidate,
    get_crop,
)

# ── Enums ───────────────────────────────────────────────────────────────────
from agroadvisor.models.enums import (
    BudgetBandEnum,
    Favorability,
    GrowthStageEnum,
    MarketDemandEnum,
    Priority,
    RiskLevel,
    SeasonEnum,
    Severity,
    SoilHealthEnum,
    SoilTypeEnum,
    StatusBand,
)

# ── Yield scenarios ─────────────────────────────────────────────────────────
from agroadvisor.models.scenarios import SOIL_YIELD_FACTORS, YIELD_SCENARIOS, YieldScenario

# ── Soil parameters ─────────────────────────────────────────────────────────
from agroadvisor.models.soil import (
    SOIL_PARAMETERS,
    IdealRange,
    Remediation,
    SoilParameter,
    get_parameter,
)

# ── Treatment profiles ──────────────────────────────────────────────────────
from agroadvisor.models.treatment import (
    TREATMENT_PROFILES,
    DoseSpec,
    DoseSplit,
    StageSpec,
    TreatmentProfile,
)

__all__ = [
    "BUDGET_BAND_LIMITS",
    "BudgetBandEnum",
    # Crop reference
    "CROPS",
    "CROPS_BY_NAME",
    "CropCandidate",
    "DEMAND_PRICE_MULTIPLIER",
    "DoseSpec",
    "DoseSplit",
    # Enums
    "Favorability",
    "GrowthStageEnum",
    "IdealRange",
    "MarketDemandEnum",
    "Priority",
    "Remediation",
    "RiskLevel",
    # Soil parameters
    "SOIL_PARAMETERS",
    # Yield scenarios
    "SOIL_YIELD_FACTORS",
    "SeasonEnum",
    "Severity",
    "SoilHealthEnum",
    "SoilParameter",
    "SoilTypeEnum",
    "StageSpec",
    "StatusBand",
    # Treatment profiles
    "TREATMENT_PROFILES",
    "TreatmentProfile",
    "YIELD_SCENARIOS",
    "YieldScenario",
    "get_crop",
    "get_parameter",
]
