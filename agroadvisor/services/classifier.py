"""Threshold classifier — measured value vs. ideal range → status band + hint."""

from __future__ import annotations

import math
from numbers import Real

from pydantic import ValidationError as PydanticValidationError

from agroadvisor.models.enums import Favorability, StatusBand
from agroadvisor.models.soil import IdealRange, SoilParameter, get_parameter
from agroadvisor.schemas.soil import ClassificationResult
from agroadvisor.services.errors import InvalidMeasurement, ValidationError, from_pydantic


def _relative_gap(value: float, boundary: float, ideal: IdealRange) -> float:
	base = abs(boundary) or (ideal.max - ideal.min) or 1.0
	return abs(value - boundary) / base


def _coerce_range(ideal_range: IdealRange | tuple[float, float] | None, param: SoilParameter) -> IdealRange:
	if ideal_range is None:
		return param.ideal
	if isinstance(ideal_range, IdealRange):
		return ideal_range
	try:
		low, high = ideal_range
		return IdealRange(min=low, max=high)
	except PydanticValidationError as exc:
		raise ValidationError(from_pydantic(exc).message, field="ideal_range") from exc
	except (TypeError, ValueError) as exc:
		raise ValidationError("ideal range must be a (min, max) pair", field="ideal_range") from exc


def _coerce_value(value: object, param: SoilParameter) -> float:
	if value is None:
		raise InvalidMeasurement(f"{param.label} measurement is missing", field=param.name)
	if isinstance(value, bool) or not isinstance(value, Real):
		raise InvalidMeasurement(f"{param.label} measurement must be numeric", field=param.name)
	number = float(value)
	if not math.isfinite(number):
		raise InvalidMeasurement(f"{param.label} measurement must be finite", field=param.name)
	return number


def classify(
	parameter_name: str,
	value: float | None,
	ideal_range: IdealRange | tuple[float, float] | None = None,
) -> ClassificationResult:
	param = get_parameter(parameter_name)
	if param is None:
		raise ValidationError(f"unknown soil parameter {parameter_name!r}", field="parameter")

	measured = _coerce_value(value, param)
	ideal = _coerce_range(ideal_range, param)

	deviation = 0.0
	if ideal.min <= measured <= ideal.max:
		band, hint = StatusBand.good, param.within_hint
	elif measured < ideal.min:
		deviation = _relative_gap(measured, ideal.min, ideal)
		if param.favorability == Favorability.lower_is_better:
			band, hint, deviation = StatusBand.good, param.within_hint, 0.0
		elif param.favorability == Favorability.higher_is_better:
			if param.marginal_tolerance and deviation <= param.marginal_tolerance:
				band, hint = StatusBand.medium, param.marginal_hint or param.below_hint
			else:
				band, hint = StatusBand.low, param.below_hint
		else:
			band, hint = param.below_band, param.below_hint
	else:
		deviation = _relative_gap(measured, ideal.max, ideal)
		if param.favorability == Favorability.higher_is_better:
			band, hint = StatusBand.high, param.above_hint
		elif param.favorability == Favorability.lower_is_better:
			band, hint = StatusBand.needs_attention, param.above_hint
		else:
			band, hint = param.above_band, param.above_hint

	return ClassificationResult(
		parameter=param.name,
		label=param.label,
		value=measured,
		unit=param.unit,
		status=band,
		ideal_range=ideal,
		recommendation=hint,
		deviation=round(deviation, 4),
	)
