from __future__ import annotations

import pytest
from httpx import AsyncClient

from agroadvisor import __version__


@pytest.mark.asyncio
async def test_health_ok(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "agroadvisor", "version": __version__}


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: AsyncClient) -> None:
    request_id = "advisory-request-id"
    response = await client.get("/health", headers={"x-request-id": request_id})
    assert response.status_code == 200
    assert response.headers.get("x-request-id") == request_id


@pytest.mark.asyncio
async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/health")
    generated = response.headers.get("x-request-id")
    assert generated is not None
    assert len(generated) >= 8


@pytest.mark.asyncio
async def test_response_time_header(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/yield/predict",
        json={"crop_type": "Maize", "soil_type": "silty", "area": 2},
    )
    assert response.status_code == 200
    assert float(response.headers["x-response-time-ms"]) >= 0.0
