import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_endpoint(ac: AsyncClient):
    response = await ac.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_health_ignores_query_params(ac: AsyncClient):
    response = await ac.get("/health", params={"resource": "nope", "verbose": "1"})
    assert response.status_code == 200
    assert response.text == "OK"
