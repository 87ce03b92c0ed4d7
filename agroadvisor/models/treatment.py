"""Treatment reference table — per-crop growth stages, irrigation needs and NPK doses.

Stage ``start_week`` is counted from sowing (week 1).  Dose quantities are
kg of product per acre; each dose declares how it is split across stages:

    DoseSpec(nutrient="Nitrogen", product="Urea", per_acre_kg=120,
             splits=((seedling, 1/3), (vegetative, 1/3), (flowering, 1/3)))
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agroadvisor.models.enums import GrowthStageEnum, SoilTypeEnum

ACRE_M2 = 4046.86

_G = GrowthStageEnum


class StageSpec(BaseModel):
	model_config = ConfigDict(frozen=True)

	stage: GrowthStageEnum
	label: str
	start_week: int = Field(ge=1)
	duration_days: int = Field(gt=0)
	interval_days: tuple[int, int]
	amount_mm: float = Field(gt=0)
	critical: bool = False


class DoseSplit(BaseModel):
	model_config = ConfigDict(frozen=True)

	stage: GrowthStageEnum
	fraction: float = Field(gt=0, le=1)


class DoseSpec(BaseModel):
	model_config = ConfigDict(frozen=True)

	nutrient: str
	product: str
	per_acre_kg: float = Field(gt=0)
	cost_per_kg: float = Field(ge=0)
	splits: tuple[DoseSplit, ...]
	benefit: str

	@model_validator(mode="after")
	def _validate_splits(self) -> "DoseSpec":
		total = sum(split.fraction for split in self.splits)
		if abs(total - 1.0) > 1e-6:
			raise ValueError(f"{self.product} split fractions must sum to 1, got {total:g}")
		return self


class TreatmentProfile(BaseModel):
	model_config = ConfigDict(frozen=True)

	crop: str
	stages: tuple[StageSpec, ...]
	doses: tuple[DoseSpec, ...]
	# Expected yield gain (%) when the full plan is followed.
	yield_response_pct: tuple[int, int] = (15, 20)

	@model_validator(mode="after")
	def _validate_stages(self) -> "TreatmentProfile":
		declared = [spec.stage for spec in self.stages]
		if not declared:
			raise ValueError(f"{self.crop} profile declares no growth stages")
		if len(set(declared)) != len(declared):
			raise ValueError(f"{self.crop} profile declares a growth stage more than once")
		for dose in self.doses:
			for split in dose.splits:
				if split.stage not in declared:
					raise ValueError(f"{self.crop} {dose.product} split targets undeclared stage {split.stage.value}")
		low, high = self.yield_response_pct
		if not 0 <= low <= high:
			raise ValueError(f"{self.crop} yield response must be an ascending non-negative range")
		return self

	def stage_spec(self, stage: GrowthStageEnum) -> StageSpec | None:
		for spec in self.stages:
			if spec.stage == stage:
				return spec
		return None


SUPPORTED_SOILS = frozenset({SoilTypeEnum.loamy, SoilTypeEnum.clay, SoilTypeEnum.sandy, SoilTypeEnum.silty})

# Multipliers on per-acre nutrient doses: sandy soils leach N and K, clay fixes P.
NUTRIENT_SOIL_FACTORS: dict[SoilTypeEnum, dict[str, float]] = {
	SoilTypeEnum.loamy: {},
	SoilTypeEnum.silty: {},
	SoilTypeEnum.sandy: {"Nitrogen": 1.15, "Potassium": 1.1},
	SoilTypeEnum.clay: {"Phosphorus": 1.1},
}

# (interval factor, amount factor) per soil type.
IRRIGATION_SOIL_FACTORS: dict[SoilTypeEnum, tuple[float, float]] = {
	SoilTypeEnum.loamy: (1.0, 1.0),
	SoilTypeEnum.silty: (1.0, 1.0),
	SoilTypeEnum.sandy: (0.7, 0.8),
	SoilTypeEnum.clay: (1.25, 1.1),
}

IRRIGATION_METHODS: dict[SoilTypeEnum, str] = {
	SoilTypeEnum.loamy: "Drip or sprinkler irrigation recommended",
	SoilTypeEnum.silty: "Sprinkler irrigation recommended",
	SoilTypeEnum.sandy: "Drip irrigation recommended",
	SoilTypeEnum.clay: "Furrow irrigation with field drainage recommended",
}

# Water saved against flood irrigation by the recommended method (%).
IRRIGATION_WATER_SAVINGS: dict[SoilTypeEnum, tuple[int, int]] = {
	SoilTypeEnum.loamy: (20, 25),
	SoilTypeEnum.silty: (15, 20),
	SoilTypeEnum.sandy: (25, 30),
	SoilTypeEnum.clay: (10, 15),
}


def _stages(*rows: tuple) -> tuple[StageSpec, ...]:
	return tuple(
		StageSpec(
			stage=stage,
			label=label,
			start_week=start_week,
			duration_days=duration_days,
			interval_days=interval_days,
			amount_mm=amount_mm,
			critical=critical,
		)
		for stage, label, start_week, duration_days, interval_days, amount_mm, critical in rows
	)


def _splits(*pairs: tuple[GrowthStageEnum, float]) -> tuple[DoseSplit, ...]:
	return tuple(DoseSplit(stage=stage, fraction=fraction) for stage, fraction in pairs)


def _npk(
	n_kg: float,
	p_kg: float,
	k_kg: float,
	n_splits: tuple[DoseSplit, ...],
	k_splits: tuple[DoseSplit, ...],
) -> tuple[DoseSpec, ...]:
	return (
		DoseSpec(
			nutrient="Nitrogen",
			product="Urea",
			per_acre_kg=n_kg,
			cost_per_kg=30.0,
			splits=n_splits,
			benefit="Promotes leaf growth and protein synthesis",
		),
		DoseSpec(
			nutrient="Phosphorus",
			product="DAP",
			per_acre_kg=p_kg,
			cost_per_kg=40.0,
			splits=_splits((_G.seedling, 1.0)),
			benefit="Enhances root development and early establishment",
		),
		DoseSpec(
			nutrient="Potassium",
			product="MOP",
			per_acre_kg=k_kg,
			cost_per_kg=40.0,
			splits=k_splits,
			benefit="Improves disease resistance and grain quality",
		),
	)


_THIRDS = _splits((_G.seedling, 1 / 3), (_G.vegetative, 1 / 3), (_G.flowering, 1 / 3))
_SOWING_AND_FLOWERING = _splits((_G.seedling, 0.5), (_G.flowering, 0.5))

TREATMENT_PROFILES: tuple[TreatmentProfile, ...] = (
	TreatmentProfile(
		crop="Wheat",
		stages=_stages(
			(_G.seedling, "Sowing to Germination", 1, 15, (2, 3), 25, True),
			(_G.vegetative, "Vegetative Growth", 3, 45, (7, 10), 40, False),
			(_G.flowering, "Flowering", 10, 20, (5, 7), 50, True),
			(_G.fruit_development, "Grain Filling", 13, 25, (7, 10), 45, True),
			(_G.maturity, "Maturity", 17, 15, (12, 15), 20, False),
		),
		doses=_npk(120, 60, 40, _THIRDS, _SOWING_AND_FLOWERING),
	),
	TreatmentProfile(
		crop="Rice",
		stages=_stages(
			(_G.seedling, "Nursery and Transplanting", 1, 21, (1, 2), 50, True),
			(_G.vegetative, "Tillering", 4, 35, (3, 5), 50, False),
			(_G.flowering, "Panicle Initiation and Flowering", 9, 25, (2, 3), 60, True),
			(_G.fruit_development, "Grain Filling", 13, 25, (3, 5), 50, True),
			(_G.maturity, "Maturity", 17, 15, (7, 10), 25, False),
		),
		doses=_npk(
			100,
			50,
			40,
			_splits((_G.seedling, 0.5), (_G.vegetative, 0.25), (_G.flowering, 0.25)),
			_SOWING_AND_FLOWERING,
		),
		yield_response_pct=(12, 18),
	),
	TreatmentProfile(
		crop="Maize",
		stages=_stages(
			(_G.seedling, "Emergence", 1, 15, (4, 6), 30, True),
			(_G.vegetative, "Knee-high Growth", 3, 35, (7, 10), 40, False),
			(_G.flowering, "Tasseling and Silking", 8, 20, (5, 7), 50, True),
			(_G.fruit_development, "Grain Filling", 11, 30, (7, 10), 45, True),
			(_G.maturity, "Maturity", 15, 15, (12, 15), 20, False),
		),
		doses=_npk(110, 50, 35, _THIRDS, _splits((_G.seedling, 1.0))),
	),
	TreatmentProfile(
		crop="Cotton",
		stages=_stages(
			(_G.seedling, "Emergence", 1, 20, (6, 8), 30, False),
			(_G.vegetative, "Square Formation", 4, 40, (10, 14), 40, False),
			(_G.flowering, "Flowering", 10, 35, (7, 10), 50, True),
			(_G.fruit_development, "Boll Development", 15, 45, (8, 12), 50, True),
			(_G.maturity, "Boll Opening", 22, 30, (15, 20), 20, False),
		),
		doses=_npk(
			100,
			40,
			40,
			_splits((_G.seedling, 0.25), (_G.vegetative, 0.5), (_G.flowering, 0.25)),
			_SOWING_AND_FLOWERING,
		),
		yield_response_pct=(10, 15),
	),
	TreatmentProfile(
		crop="Sugarcane",
		stages=_stages(
			(_G.seedling, "Germination", 1, 35, (7, 10), 40, True),
			(_G.vegetative, "Tillering", 6, 85, (8, 12), 60, True),
			(_G.flowering, "Grand Growth", 18, 120, (7, 10), 75, True),
			(_G.fruit_development, "Ripening", 35, 60, (15, 20), 40, False),
			(_G.maturity, "Harvest Preparation", 44, 30, (20, 25), 20, False),
		),
		doses=_npk(
			150,
			80,
			60,
			_splits((_G.seedling, 0.25), (_G.vegetative, 0.5), (_G.flowering, 0.25)),
			_splits((_G.seedling, 0.5), (_G.vegetative, 0.5)),
		),
		yield_response_pct=(12, 18),
	),
	TreatmentProfile(
		crop="Potato",
		stages=_stages(
			(_G.seedling, "Sprouting", 1, 20, (7, 10), 30, True),
			(_G.vegetative, "Haulm Growth", 4, 25, (7, 10), 40, False),
			(_G.flowering, "Tuber Initiation", 7, 20, (5, 7), 45, True),
			(_G.fruit_development, "Tuber Bulking", 10, 30, (5, 7), 50, True),
			(_G.maturity, "Haulm Killing", 14, 14, (10, 14), 15, False),
		),
		doses=_npk(
			100,
			60,
			80,
			_splits((_G.seedling, 0.5), (_G.vegetative, 0.5)),
			_splits((_G.seedling, 0.5), (_G.vegetative, 0.5)),
		),
		yield_response_pct=(18, 25),
	),
	TreatmentProfile(
		crop="Tomato",
		stages=_stages(
			(_G.seedling, "Transplant Establishment", 1, 15, (2, 3), 25, True),
			(_G.vegetative, "Vegetative Growth", 3, 30, (5, 7), 35, False),
			(_G.flowering, "Flowering", 7, 20, (3, 5), 40, True),
			(_G.fruit_development, "Fruit Set and Development", 10, 40, (3, 5), 45, True),
			(_G.maturity, "Harvest", 16, 30, (5, 7), 30, False),
		),
		doses=_npk(
			80,
			50,
			60,
			_splits(
				(_G.seedling, 0.25),
				(_G.vegetative, 0.25),
				(_G.flowering, 0.25),
				(_G.fruit_development, 0.25),
			),
			_splits((_G.seedling, 0.5), (_G.fruit_development, 0.5)),
		),
		yield_response_pct=(20, 25),
	),
)

TREATMENT_PROFILES_BY_CROP: dict[str, TreatmentProfile] = {
	profile.crop.lower(): profile for profile in TREATMENT_PROFILES
}
