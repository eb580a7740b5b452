"""Tests for GET /scheduler/policies."""

import pytest

from api.dependencies import get_settings
from config.settings import Settings


@pytest.mark.asyncio
async def test_lists_every_policy(client):
    response = await client.get("/scheduler/policies")
    assert response.status_code == 200
    assert response.json()["policies"] == ["round_robin", "spn", "srt", "hrrn"]


@pytest.mark.asyncio
async def test_reports_configured_defaults(app, client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        DEFAULT_SCHEDULING_POLICY="hrrn", ROUND_ROBIN_TIME_QUANTUM=4,
    )

    data = (await client.get("/scheduler/policies")).json()
    assert data["default_policy"] == "hrrn"
    assert data["default_time_quantum"] == 4
