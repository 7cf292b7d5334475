"""Shared test fixtures and hypothesis strategies for the users API test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config.settings import UsersSettings
from src.main import create_app
from src.routers.users import UsersController
from src.services.users_service import InMemoryUsersService


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> UsersSettings:
    """Test settings with safe defaults."""
    return UsersSettings(log_level="DEBUG")


# ---------------------------------------------------------------------------
# Service fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def users_service() -> InMemoryUsersService:
    return InMemoryUsersService()


@pytest.fixture
def mock_service() -> AsyncMock:
    """Service double whose five coroutines are AsyncMocks."""
    service = AsyncMock()
    service.find_all.return_value = []
    service.find_one.return_value = None
    service.update.return_value = None
    service.remove.return_value = None
    return service


@pytest.fixture
def controller(mock_service: AsyncMock) -> UsersController:
    return UsersController(mock_service)


# ---------------------------------------------------------------------------
# App fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_app(settings: UsersSettings, mock_service: AsyncMock) -> FastAPI:
    return create_app(settings=settings, users_service=mock_service)


@pytest.fixture
def mock_client(mock_app: FastAPI) -> TestClient:
    return TestClient(mock_app, raise_server_exceptions=False)


@pytest.fixture
def client(settings: UsersSettings, users_service: InMemoryUsersService) -> TestClient:
    """Client against an app backed by a fresh in-memory service."""
    return TestClient(
        create_app(settings=settings, users_service=users_service),
        raise_server_exceptions=False,
    )

