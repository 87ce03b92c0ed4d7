"""Input guards shared by engine entrypoints — fail before any computation starts."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from numbers import Real
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agroadvisor.services.errors import ValidationError, from_pydantic

E = TypeVar("E", bound=StrEnum)
M = TypeVar("M", bound=BaseModel)


def coerce_enum(enum_cls: type[E], value: Any, field: str) -> E:
	if isinstance(value, enum_cls):
		return value
	if isinstance(value, str):
		token = value.strip().lower().replace(" ", "_")
		try:
			return enum_cls(token)
		except ValueError:
			pass
	allowed = ", ".join(member.value for member in enum_cls)
	raise ValidationError(f"{field} must be one of: {allowed}", field=field)


def require_positive(value: Any, field: str) -> float:
	if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(float(value)):
		raise ValidationError(f"{field} must be a finite number", field=field)
	if value <= 0:
		raise ValidationError(f"{field} must be greater than zero", field=field)
	return float(value)


def require_non_negative(value: Any, field: str) -> float:
	if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(float(value)):
		raise ValidationError(f"{field} must be a finite number", field=field)
	if value < 0:
		raise ValidationError(f"{field} must not be negative", field=field)
	return float(value)


def coerce_model(model_cls: type[M], payload: M | Mapping[str, Any]) -> M:
	"""Accept an already-built model or validate a plain mapping into one."""
	if isinstance(payload, model_cls):
		return payload
	if not isinstance(payload, Mapping):
		raise ValidationError(f"expected {model_cls.__name__} or a mapping", field=None)
	try:
		return model_cls.model_validate(dict(payload))
	except PydanticValidationError as exc:
		raise from_pydantic(exc) from exc
