"""API test fixtures — FastAPI app driven in-process through httpx.

Invariants:
    - No socket is opened; requests go straight to the ASGI app
    - Lifespan is not run, so tests never reconfigure root logging
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hello_api.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def valid_user():
    return {"name": "Alice", "email": "alice@example.com"}
