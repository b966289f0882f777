"""API test fixtures — FastAPI test client over the real app.

Invariants:
    - Every test starts from the seed state (Whiskers, Buddy)
    - Requests go through the full ASGI stack: middleware, handlers, routes

Design Decisions:
    - httpx AsyncClient + ASGITransport: no network, no server process
    - Store reset through app.state, the same object routes are injected with
"""

import pytest
from httpx import ASGITransport, AsyncClient

from animals_api.main import app


@pytest.fixture(autouse=True)
def reset_store():
    app.state.animal_store.reset_to_seed()
    yield app.state.animal_store


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
