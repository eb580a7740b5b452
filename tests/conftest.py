"""
Shared test fixtures.

The simulator has no infrastructure to fake — the only fixtures are:
- the FastAPI app, built fresh per test so dependency_overrides never leak
- an HTTP client that talks to it in-process via httpx's ASGITransport
- small process tables used by several test modules

No server, no network — runs in milliseconds.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from models.process import Process


@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def client(app):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def textbook_workload():
    """
    The classic five-process example (A..E) used in OS textbooks.

    Arrivals 0, 2, 4, 6, 8 — service 3, 6, 4, 5, 2.
    """
    return [
        Process(start_time=0, total_time_needed=3, name="A"),
        Process(start_time=2, total_time_needed=6, name="B"),
        Process(start_time=4, total_time_needed=4, name="C"),
        Process(start_time=6, total_time_needed=5, name="D"),
        Process(start_time=8, total_time_needed=2, name="E"),
    ]
