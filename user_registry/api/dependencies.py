"""API Dependencies: process-wide repository and the UserService provider.

Invariants:
    - _repository is the single source of user records for the process lifetime
    - get_user_service() reads user_min_age once; the service is cached after that
    - Tests swap the service via app.dependency_overrides[get_user_service]
"""

from functools import lru_cache

from user_registry.config import get_settings
from user_registry.infrastructure.user_repository import InMemoryUserRepository
from user_registry.services.user_mapper import UserMapper
from user_registry.services.user_service import UserService

_repository = InMemoryUserRepository()


def get_user_repository() -> InMemoryUserRepository:
    return _repository


@lru_cache
def get_user_service() -> UserService:
    return UserService(
        repository=_repository,
        mapper=UserMapper(),
        user_min_age=get_settings().user_min_age,
    )
