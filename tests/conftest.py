"""Shared pytest fixtures — async test client and reusable farm/soil inputs."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from agroadvisor.main import app
from agroadvisor.models.enums import (
	BudgetBandEnum,
	MarketDemandEnum,
	SeasonEnum,
	SoilHealthEnum,
	SoilTypeEnum,
)
from agroadvisor.schemas.recommendation import FarmProfile


@pytest.fixture
def rabi_profile() -> FarmProfile:
	"""Good loamy soil in rabi with medium budget and demand, one acre."""
	return FarmProfile(
		soil_health=SoilHealthEnum.good,
		season=SeasonEnum.rabi,
		budget=BudgetBandEnum.medium,
		market_demand=MarketDemandEnum.medium,
		area=1.0,
		soil_type=SoilTypeEnum.loamy,
	)


@pytest.fixture
def healthy_values() -> dict[str, float]:
	return {"ph": 6.5, "nitrogen": 50.0, "phosphorus": 30.0, "potassium": 200.0}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled."""
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
