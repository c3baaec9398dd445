from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.server.services.email import EmailService


@pytest.fixture
def email_service() -> MagicMock:
    """E-mail service double recording welcome e-mails instead of sending them."""
    service = MagicMock(spec=EmailService)
    service.enabled = True
    service.send_welcome_email = AsyncMock(return_value=True)
    return service


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, email_service: MagicMock) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden session and e-mail dependencies."""
    from postboard.core.database import get_session
    from postboard.server.main import app
    from postboard.server.services.deps import get_email_service

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_email_service] = lambda: email_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user(client: AsyncClient) -> dict:
    """A registered user, as returned by the API."""
    response = await client.post("/api/v1/users", json={"email": "Ada@Example.com", "name": "Ada Lovelace"})
    assert response.status_code == 201
    return response.json()["data"]
