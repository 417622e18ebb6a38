"""
pytest configuration and fixtures for the users backend test suite
The app runs in-process over httpx's ASGI transport with in-memory storage.
"""

import os

# Storage must be chosen before the settings module is imported
os.environ["STORAGE_BACKEND"] = "memory"
os.environ.pop("DATABASE_URL", None)

import pytest
import pytest_asyncio
import httpx
from unittest.mock import AsyncMock, MagicMock

from users_backend.app import create_app
from users_backend.models.user import User
from users_backend.repositories import InMemoryUserRepository, UserRepository
from users_backend.services.users_service import UsersService, get_users_service


@pytest.fixture
def test_user() -> User:
    return User(id=1, name="John Doe", address="123 Main Street")


@pytest.fixture
def make_pool():
    """Factory for a mocked asyncpg pool whose acquire() context yields the given connection"""
    def _make_pool(conn):
        pool = MagicMock()
        pool.acquire.return_value.__aenter__.return_value = conn
        return pool
    return _make_pool


@pytest.fixture
def mock_repository():
    """Repository stand-in for isolated service tests"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_users_service():
    """Service stand-in for isolated route tests"""
    return AsyncMock(spec=UsersService)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(user_repository):
    """Full application wired to a fresh in-memory repository"""
    application = create_app()
    users_service = UsersService(user_repository)
    application.dependency_overrides[get_users_service] = lambda: users_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def mocked_app(mock_users_service):
    """Application whose routes talk to a mocked service"""
    application = create_app()
    application.dependency_overrides[get_users_service] = lambda: mock_users_service
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def mocked_client(mocked_app):
    # Let unhandled errors come back as 500 responses instead of being re-raised
    transport = httpx.ASGITransport(app=mocked_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
