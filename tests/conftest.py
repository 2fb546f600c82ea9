import asyncio

import pytest
from fastapi.testclient import TestClient

from chesstime.main import app
from chesstime.routes.fetch import get_chesscom_client
from tests.http_fakes import FakeChessCom


@pytest.fixture
def fake_api() -> FakeChessCom:
    return FakeChessCom()


@pytest.fixture
def run_with_client(fake_api):
    """Run `fn(client)` against the fake API and return its result."""

    def _run(fn, **settings):
        async def _go():
            async with fake_api.client(**settings) as client:
                return await fn(client)

        return asyncio.run(_go())

    return _run


@pytest.fixture
def api_client(fake_api):
    async def _client():
        async with fake_api.client() as client:
            yield client

    app.dependency_overrides[get_chesscom_client] = _client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
