"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path
from typing import AsyncGenerator

import httpx
import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def repository():
    """Empty in-memory bank account repository."""
    from infrastructure.database.in_memory_adapter import InMemoryBankAccountRepository
    return InMemoryBankAccountRepository()


@pytest.fixture
async def api_client(repository) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the FastAPI app with the in-memory repository.

    Yields:
        httpx.AsyncClient: Client over ASGI transport (no network)
    """
    from main import app
    from api.v1.dependencies import get_repository

    async def override_repository():
        return repository

    app.dependency_overrides[get_repository] = override_repository
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
