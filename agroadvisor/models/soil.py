"""Soil parameter reference table — ideal ranges, favorability and remediation.

Ranges follow common Indian soil-testing guidance (kg/ha for available
N/P/K, % for organic matter and moisture, °C for soil temperature and dS/m
for salinity as electrical conductivity).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agroadvisor.models.enums import Favorability, StatusBand


class IdealRange(BaseModel):
	model_config = ConfigDict(frozen=True)

	min: float
	max: float

	@model_validator(mode="after")
	def _validate_bounds(self) -> "IdealRange":
		if self.min > self.max:
			raise ValueError("ideal range min must not exceed max")
		return self

	def __str__(self) -> str:
		return f"{self.min:g}-{self.max:g}"


class Remediation(BaseModel):
	model_config = ConfigDict(frozen=True)

	category: str
	action: str
	timing: str
	expected_improvement: str


class SoilParameter(BaseModel):
	"""Reference entry for one measurable soil parameter."""

	model_config = ConfigDict(frozen=True)

	name: str
	label: str
	unit: str
	ideal: IdealRange
	favorability: Favorability
	below_band: StatusBand = StatusBand.low
	above_band: StatusBand = StatusBand.high
	# Shortfall below ``ideal.min``, as a fraction of it, still reported as Medium.
	marginal_tolerance: float = Field(default=0.0, ge=0.0)
	below_hint: str
	within_hint: str
	above_hint: str
	marginal_hint: str | None = None
	weight: float = Field(default=1.0, gt=0)
	severity_scale: float = Field(default=1.0, gt=0)
	impact: str
	below_remediation: Remediation | None = None
	above_remediation: Remediation | None = None
	surplus_warning: str | None = None
	required: bool = False

	@model_validator(mode="after")
	def _validate_remediation(self) -> "SoilParameter":
		# every side that can be flagged as deficient needs its own corrective action
		if self.favorability != Favorability.lower_is_better and self.below_remediation is None:
			raise ValueError(f"{self.name}: below_remediation is required")
		if self.favorability != Favorability.higher_is_better and self.above_remediation is None:
			raise ValueError(f"{self.name}: above_remediation is required")
		return self

	def remediation_for(self, value: float, ideal: IdealRange | None = None) -> Remediation | None:
		"""Corrective action for the side of the ideal range that ``value`` falls on."""
		ideal = ideal or self.ideal
		if value > ideal.max:
			return self.above_remediation
		if value < ideal.min:
			return self.below_remediation
		return None


SOIL_PARAMETERS: tuple[SoilParameter, ...] = (
	SoilParameter(
		name="ph",
		label="pH",
		unit="pH",
		ideal=IdealRange(min=6.0, max=7.0),
		favorability=Favorability.symmetric,
		below_band=StatusBand.needs_attention,
		above_band=StatusBand.needs_attention,
		below_hint="Apply lime to increase pH",
		within_hint="Optimal pH level",
		above_hint="Add organic matter or elemental sulfur to lower pH",
		weight=2.0,
		# pH is logarithmic: a 10% miss is already agronomically significant.
		severity_scale=4.0,
		impact="Locks up nutrients and limits uptake by roots",
		below_remediation=Remediation(
			category="pH Correction",
			action="Apply agricultural lime at 1-2 tons/acre to raise pH",
			timing="2-3 weeks before sowing",
			expected_improvement="Better availability of applied nutrients",
		),
		above_remediation=Remediation(
			category="pH Correction",
			action="Apply elemental sulfur or gypsum and incorporate organic matter to lower pH",
			timing="2-3 weeks before sowing",
			expected_improvement="Better availability of applied nutrients",
		),
		required=True,
	),
	SoilParameter(
		name="nitrogen",
		label="Nitrogen",
		unit="kg/ha",
		ideal=IdealRange(min=40, max=60),
		favorability=Favorability.higher_is_better,
		marginal_tolerance=0.1,
		below_hint="Apply nitrogen fertilizer",
		within_hint="Maintain current levels",
		above_hint="Nitrogen is ample; skip basal nitrogen this season",
		marginal_hint="Add nitrogen-rich fertilizer",
		weight=2.0,
		impact="Stunted growth and yellowing of older leaves",
		below_remediation=Remediation(
			category="Fertilizer",
			action="Apply urea at 45 kg/acre in two splits",
			timing="At sowing and at first top-dressing",
			expected_improvement="10-15% yield increase",
		),
		surplus_warning="Avoid excess nitrogen to prevent lodging",
		required=True,
	),
	SoilParameter(
		name="phosphorus",
		label="Phosphorus",
		unit="kg/ha",
		ideal=IdealRange(min=25, max=40),
		favorability=Favorability.higher_is_better,
		marginal_tolerance=0.1,
		below_hint="Apply phosphorus fertilizer",
		within_hint="Good phosphorus levels",
		above_hint="Phosphorus is ample; reduce DAP this season",
		marginal_hint="Top up with a phosphorus fertilizer",
		weight=2.0,
		impact="May affect root development and flowering",
		below_remediation=Remediation(
			category="Fertilizer",
			action="Apply DAP (Di-ammonium Phosphate) at 50 kg/acre",
			timing="Before sowing",
			expected_improvement="15-20% yield increase",
		),
		surplus_warning="Avoid over-application of phosphate fertilizers",
		required=True,
	),
	SoilParameter(
		name="potassium",
		label="Potassium",
		unit="kg/ha",
		ideal=IdealRange(min=120, max=280),
		favorability=Favorability.higher_is_better,
		marginal_tolerance=0.1,
		below_hint="Apply potassium fertilizer",
		within_hint="Good potassium levels",
		above_hint="High potassium levels; no potash needed",
		marginal_hint="Top up with muriate of potash",
		weight=2.0,
		impact="Weak stems and lower disease resistance",
		below_remediation=Remediation(
			category="Fertilizer",
			action="Apply MOP (Muriate of Potash) at 30 kg/acre",
			timing="At sowing as basal dose",
			expected_improvement="Improved grain quality and stress tolerance",
		),
		surplus_warning="Avoid over-application of potassium fertilizers",
		required=True,
	),
	SoilParameter(
		name="organic_matter",
		label="Organic Matter",
		unit="%",
		ideal=IdealRange(min=2.5, max=4.0),
		favorability=Favorability.higher_is_better,
		below_hint="Add compost or farmyard manure",
		within_hint="Maintain with compost",
		above_hint="Rich in organic matter",
		impact="Poor soil structure and water retention",
		below_remediation=Remediation(
			category="Organic Matter",
			action="Add 2-3 tons of well-decomposed farmyard manure per acre",
			timing="During land preparation",
			expected_improvement="Improved soil structure and water retention",
		),
	),
	SoilParameter(
		name="moisture",
		label="Moisture",
		unit="%",
		ideal=IdealRange(min=20, max=30),
		favorability=Favorability.symmetric,
		below_band=StatusBand.low,
		above_band=StatusBand.needs_attention,
		below_hint="Irrigate to bring moisture into range",
		within_hint="Good moisture level",
		above_hint="Improve drainage to avoid waterlogging",
		impact="Moisture stress during establishment",
		below_remediation=Remediation(
			category="Irrigation",
			action="Schedule light irrigation and mulch to retain moisture",
			timing="Before sowing and during dry spells",
			expected_improvement="Uniform germination and establishment",
		),
		above_remediation=Remediation(
			category="Drainage",
			action="Open field drains and let the topsoil dry before the next watering",
			timing="Immediately",
			expected_improvement="Restored root aeration and lower disease risk",
		),
	),
	SoilParameter(
		name="temperature",
		label="Soil Temperature",
		unit="°C",
		ideal=IdealRange(min=18, max=30),
		favorability=Favorability.symmetric,
		below_band=StatusBand.low,
		above_band=StatusBand.needs_attention,
		below_hint="Delay sowing or use mulch to warm the soil",
		within_hint="Soil temperature suits germination",
		above_hint="Mulch and irrigate in the evening to cool the soil",
		weight=0.5,
		impact="Slow germination and root activity",
		below_remediation=Remediation(
			category="Soil Temperature",
			action="Use dark organic mulch and delay sowing until the soil warms",
			timing="Immediately after sowing",
			expected_improvement="Faster, more even emergence",
		),
		above_remediation=Remediation(
			category="Soil Temperature",
			action="Apply straw mulch and irrigate in the evening to cool the soil",
			timing="During hot spells",
			expected_improvement="Less heat stress on roots and seedlings",
		),
	),
	SoilParameter(
		name="salinity",
		label="Salinity (EC)",
		unit="dS/m",
		ideal=IdealRange(min=0.0, max=2.0),
		favorability=Favorability.lower_is_better,
		below_hint="Salinity is within safe limits",
		within_hint="Salinity is within safe limits",
		above_hint="Leach salts with good-quality water and apply gypsum",
		impact="Osmotic stress and leaf burn",
		above_remediation=Remediation(
			category="Salinity",
			action="Apply gypsum at 1 ton/acre and leach with good-quality irrigation water",
			timing="Before the next crop",
			expected_improvement="Restored germination and root growth",
		),
	),
)

SOIL_PARAMETERS_BY_NAME: dict[str, SoilParameter] = {param.name: param for param in SOIL_PARAMETERS}

_ALIASES = {
	"p_h": "ph",
	"organicmatter": "organic_matter",
	"organic matter": "organic_matter",
	"ec": "salinity",
}


def normalize_parameter_name(name: str) -> str:
	token = name.strip().lower().replace("-", "_")
	return _ALIASES.get(token, token)


def get_parameter(name: str) -> SoilParameter | None:
	return SOIL_PARAMETERS_BY_NAME.get(normalize_parameter_name(name))
