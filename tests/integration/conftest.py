"""API test fixtures.

The app is driven through httpx's ASGI transport, which does not run the
lifespan, so each test injects a ready AppState backed by memory.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from biztax.api.app import create_app
from biztax.config import Settings
from biztax.services.app_state import AppState
from biztax.services.document_vault import DocumentVault, sample_documents
from biztax.services.profile_repository import InMemoryProfileRepository

from tests.conftest import make_advisor, make_profile

ANSWER = "Small companies pay 0% CIT but must still file returns."

TEST_SETTINGS = Settings(
    database_url="sqlite+aiosqlite:///:memory:",
    host="127.0.0.1",
    port=8000,
    debug=False,
    log_level="WARNING",
    ai_api_key=None,
    ai_base_url="http://ai.test/v1/",
    ai_model="test-model",
    seed_sample_documents=False,
)


@pytest_asyncio.fixture
async def state() -> AppState:
    """State for a small business that has completed onboarding."""
    return AppState(
        repository=InMemoryProfileRepository(make_profile("5000000")),
        advisor=make_advisor(content=ANSWER),
        profile=make_profile("5000000"),
        documents=DocumentVault(sample_documents()),
    )


@pytest_asyncio.fixture
async def fresh_state() -> AppState:
    """State before onboarding."""
    return AppState(repository=InMemoryProfileRepository(), advisor=make_advisor(content=ANSWER))


async def _client_for(state: AppState) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(settings=TEST_SETTINGS, state=state)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(state: AppState) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(state):
        yield ac


@pytest_asyncio.fixture
async def fresh_client(fresh_state: AppState) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(fresh_state):
        yield ac
