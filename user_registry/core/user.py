"""User Entity: the in-memory user record and the pure rules applied to it.

Invariants:
    - User is mutable: the repository merges patches into the stored instance
    - UserPatch fields are all optional; None means "not provided"
    - completed_years_age is negative for birth dates after the reference date
    - Birth-date range filtering excludes both endpoints and keeps input order
"""

from dataclasses import dataclass, fields
from datetime import date
from typing import Iterable


@dataclass
class User:
    """User entity."""

    id: int | None
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class UserPatch:
    """Partial update payload, applied with field-present merge."""

    id: int | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None


# id is identity, never merged
MERGEABLE_FIELDS = tuple(f.name for f in fields(UserPatch) if f.name != "id")


def apply_patch(user: User, patch: UserPatch) -> User:
    """Overwrite each field of user for which patch carries a non-None value."""
    for name in MERGEABLE_FIELDS:
        value = getattr(patch, name)
        if value is not None:
            setattr(user, name, value)
    return user


def completed_years_age(birth_date: date, today: date) -> int:
    """Number of full years elapsed between birth_date and today."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def filter_by_birth_date(
    users: Iterable[User], from_date: date, to_date: date,
) -> list[User]:
    """Users with from_date < birth_date < to_date, in input order."""
    return [u for u in users if from_date < u.birth_date < to_date]
