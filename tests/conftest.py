"""
Shared test fixtures.

The app is driven in-process through ``httpx.ASGITransport``, so tests
need no running server.  The rate limiter storage and the rapid-request
monitor are in-memory and cleared around every test.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.middleware import limiter, request_monitor


@pytest.fixture(autouse=True)
def reset_request_state():
    limiter.reset()
    request_monitor.reset()
    yield
    limiter.reset()
    request_monitor.reset()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from src.api.app import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
