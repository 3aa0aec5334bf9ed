"""Service test fixtures — FastAPI test client over the ASGI app.

Invariants:
    - Requests go through the real app (routers, error handlers, CORS)
    - Lifespan is not run; logging stays at pytest's defaults

Design Decisions:
    - httpx AsyncClient + ASGITransport: no server process, no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from taskview.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
