"""Root conftest: shared test configuration and fixtures.

Invariants:
    - USER_MIN_AGE is set before any user_registry import reads settings
    - Every route test gets a fresh repository and a service pinned to 2024-06-01
    - get_user_service dependency overridden, cleared after each test

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler's 500 response is asserted
      instead of the exception Starlette re-raises after sending it
"""

import os

os.environ.setdefault("USER_MIN_AGE", "18")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from user_registry.api.dependencies import get_user_repository, get_user_service
from user_registry.core.user import User
from user_registry.infrastructure.user_repository import InMemoryUserRepository
from user_registry.main import app
from user_registry.services.user_mapper import UserMapper
from user_registry.services.user_service import UserService

TODAY = date(2024, 6, 1)
MIN_AGE = 18


def _build_user(**overrides) -> User:
    """Build a valid adult User; keyword overrides replace single fields."""
    fields = {
        "id": None,
        "email": "a@x",
        "first_name": "A",
        "last_name": "B",
        "birth_date": date(2000, 1, 1),
        "address": None,
        "phone_number": None,
    }
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def make_user():
    return _build_user


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def service(repository):
    return UserService(
        repository=repository,
        mapper=UserMapper(),
        user_min_age=MIN_AGE,
        clock=lambda: TODAY,
    )


@pytest.fixture
async def client(service, repository):
    """FastAPI test client with the user service overridden."""
    app.dependency_overrides[get_user_service] = lambda: service
    app.dependency_overrides[get_user_repository] = lambda: repository

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
