"""Structured logging for the advisory API — request IDs, timing and service tags."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from agroadvisor import __version__
from agroadvisor.config import LogFormat, get_settings

REQUEST_ID_HEADER = "x-request-id"
RESPONSE_TIME_HEADER = "x-response-time-ms"

# Polled by load balancers; logged at debug so they do not drown advisory traffic.
_QUIET_PATHS = frozenset({"/health"})

_configured = False


def _add_service(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
	event_dict.setdefault("service", "agroadvisor")
	event_dict.setdefault("version", __version__)
	return event_dict


def configure_structured_logging() -> None:
	"""Configure stdlib + structlog once per process."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

	processors: list[Any] = [
		structlog.contextvars.merge_contextvars,
		structlog.processors.add_log_level,
		structlog.processors.TimeStamper(fmt="iso", utc=True),
		_add_service,
		structlog.processors.format_exc_info,
	]

	if settings.log_format == LogFormat.json:
		processors.append(structlog.processors.JSONRenderer())
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		processors.append(structlog.dev.ConsoleRenderer())
		logging.basicConfig(level=log_level)

	structlog.configure(
		processors=processors,
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind a request ID for every advisory call and report how long it took."""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
		request.state.request_id = request_id

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)

		logger = structlog.get_logger("agroadvisor.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception:
			logger.exception(
				"http_request_failed",
				method=request.method,
				duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
			)
			raise

		duration_ms = round((time.perf_counter() - start) * 1000.0, 2)
		response.headers[REQUEST_ID_HEADER] = request_id
		response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"

		log = logger.debug if request.url.path in _QUIET_PATHS else logger.info
		log(
			"http_request",
			method=request.method,
			status_code=response.status_code,
			duration_ms=duration_ms,
		)
		return response
