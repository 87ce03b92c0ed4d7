"""FastAPI application entrypoint — lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agroadvisor import __version__
from agroadvisor.config import get_settings
from agroadvisor.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from agroadvisor.models.crops import CROPS
from agroadvisor.models.soil import SOIL_PARAMETERS
from agroadvisor.routes import advisory, reference

logger = structlog.get_logger("agroadvisor")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Validate the scoring policy from settings (fails fast on bad weights)

    The engine keeps no connections or caches, so shutdown only logs.
    """
    configure_structured_logging()
    settings = get_settings()
    settings.scoring_policy()
    logger.info(
        "AgroAdvisor starting",
        log_level=settings.log_level,
        viability_threshold=settings.viability_threshold,
        crops=len(CROPS),
        soil_parameters=len(SOIL_PARAMETERS),
    )

    yield

    logger.info("AgroAdvisor shutting down")


app = FastAPI(
    title="AgroAdvisor API",
    description=(
        "Agronomic advisory engine — ranked crop recommendations, scenario "
        "yield projections, fertilizer/irrigation treatment plans and soil "
        "health assessment from structured farm, soil and market inputs."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "agroadvisor",
        "version": __version__,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(advisory.router, prefix="/api/v1")
app.include_router(reference.router, prefix="/api/v1")
