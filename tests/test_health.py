"""
Health endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_endpoint(test_client: AsyncClient):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/v1/health")
    
    assert response.status_code == 200
    data = response.json()
    
    assert data["status"] == "ok"
    assert data["checks"] == {"database": "ok"}
    assert data["uptime"].startswith("PT")
    assert "version" in data
