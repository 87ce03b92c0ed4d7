"""Structured failures raised by the advisory engine."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class AdvisoryError(Exception):
	"""Base failure: carries a machine-readable ``kind`` and the offending ``field``."""

	kind = "advisory_error"

	def __init__(self, message: str, field: str | None = None):
		super().__init__(message)
		self.message = message
		self.field = field

	def to_dict(self) -> dict[str, Any]:
		return {"kind": self.kind, "field": self.field, "message": self.message}


class ValidationError(AdvisoryError, ValueError):
	"""Missing or out-of-domain input, raised before any computation."""

	kind = "validation_error"


class InvalidMeasurement(AdvisoryError, ValueError):
	"""A soil measurement that is missing or not a finite number."""

	kind = "invalid_measurement"


class UnsupportedCropOrStage(AdvisoryError, LookupError):
	"""No reference data for the requested crop / growth stage / soil type."""

	kind = "unsupported_crop_or_stage"


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
	"""Collapse a pydantic error into a ``ValidationError`` naming the first bad field."""
	errors = exc.errors()
	if not errors:
		return ValidationError(str(exc))
	first = errors[0]
	field = ".".join(str(part) for part in first.get("loc", ())) or None
	return ValidationError(str(first.get("msg", "invalid input")), field=field)
