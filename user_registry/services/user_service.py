"""User Service: domain policy for creating, updating, deleting and querying users.

Invariants:
    - Raises InvalidArgumentError (or a subclass) at the first failing check, no recovery
    - create_user: id must be absent; completed-years age >= user_min_age on clock()
    - update_user: no age policy, field-present merge through the repository
    - get_users_by_birth_date_range: from_date < to_date strictly, endpoints excluded

Design Decisions:
    - Clock injected as a callable so the age policy is testable at fixed dates
"""

import logging
from datetime import date
from typing import Callable

from user_registry.core.errors import (
    EmailNotFoundError,
    InvalidArgumentError,
    InvalidDateRangeError,
    UnderageUserError,
    UserNotFoundError,
)
from user_registry.core.repository_protocols import UserRepository
from user_registry.core.user import User, completed_years_age, filter_by_birth_date
from user_registry.schemas.user import UserDto, UserPatchDto
from user_registry.services.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user operations between the API layer and the repository."""

    def __init__(
        self,
        repository: UserRepository,
        mapper: UserMapper,
        user_min_age: int,
        clock: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self._mapper = mapper
        self._user_min_age = user_min_age
        self._clock = clock

    @property
    def user_min_age(self) -> int:
        return self._user_min_age

    def get_all_users(self) -> list[User]:
        return self._repository.find_all()

    def create_user(self, dto: UserDto) -> User:
        """Validate the age policy and store a new user.

        The id is assigned by the repository; a client-supplied id is rejected.
        """
        if dto.id is not None:
            raise InvalidArgumentError("ID must be null on create")
        user = self._mapper.to_entity(dto)

        age = completed_years_age(user.birth_date, self._clock())
        if age < self._user_min_age:
            logger.warning(
                f"Rejected underage user (age {age})",
                extra={"email": user.email, "error_code": "USER_UNDERAGE"},
            )
            raise UnderageUserError(self._user_min_age)

        saved = self._repository.save(user)
        logger.info(
            "User created", extra={"user_id": saved.id, "email": saved.email},
        )
        return saved

    def update_user(self, user_id: int, dto: UserPatchDto | None) -> User:
        """Merge the non-null fields of dto into the stored user."""
        if dto is None:
            raise InvalidArgumentError("UserDto must not be null")
        if not self._repository.exists_by_id(user_id):
            raise UserNotFoundError(user_id)

        patch = self._mapper.to_patch(dto)
        updated = self._repository.update(user_id, patch)
        logger.info("User updated", extra={"user_id": user_id})
        return updated

    def delete_user(self, email: str) -> None:
        if not self._repository.delete_by_email(email):
            raise EmailNotFoundError(email)
        logger.info("User deleted", extra={"email": email})

    def get_users_by_birth_date_range(
        self, from_date: date, to_date: date,
    ) -> list[User]:
        if from_date >= to_date:
            raise InvalidDateRangeError()
        return filter_by_birth_date(
            self._repository.find_all(), from_date, to_date,
        )
