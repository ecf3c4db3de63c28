"""API fixtures: the real app over httpx with the test database.

``get_db_session`` is overridden to yield sessions from the per-test
in-memory database; the notifier is swapped for the recording double.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blindgate.core.container import get_db_session, identity_handlers
from blindgate.main import app


@pytest_asyncio.fixture
async def client(database, email_service, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    monkeypatch.setattr(identity_handlers, "get_email_service", lambda: email_service)

    async def override_db_session():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
