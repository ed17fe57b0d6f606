"""User Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - JSON keys are camelCase (firstName, birthDate, ...); snake_case accepted on input
    - UserDto: email/firstName/lastName non-blank, email well-formed, birthDate required,
      id positive when present
    - UserPatchDto: same rules, applied only to fields that are present and non-null
    - Validation messages are stable text surfaced verbatim in 400 responses

Design Decisions:
    - Required fields default to None with validate_default=True so that "missing"
      and "blank" produce the same message
    - Email grammar is a local@domain regex; a dot in the domain is not required
"""

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*$",
)

_REQUIRED_MESSAGES = {
    "email": "Email is required",
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "birth_date": "Birth date is required",
}


def _check_email_format(v: str) -> str:
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v


def _check_positive_id(v: int | None) -> int | None:
    if v is not None and v <= 0:
        raise ValueError("ID must be a positive number")
    return v


class _UserSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class UserDto(_UserSchema):
    """Full user representation: create payload and every response body."""
    id: int | None = None
    email: str | None = Field(None, validate_default=True)
    first_name: str | None = Field(None, validate_default=True)
    last_name: str | None = Field(None, validate_default=True)
    birth_date: date | None = Field(None, validate_default=True)
    address: str | None = None
    phone_number: str | None = None

    @field_validator("id")
    @classmethod
    def id_positive(cls, v: int | None) -> int | None:
        return _check_positive_id(v)

    @field_validator("email", "first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str | None, info) -> str | None:
        if v is None or not v.strip():
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        return _check_email_format(v)

    @field_validator("birth_date")
    @classmethod
    def birth_date_present(cls, v: date | None) -> date:
        if v is None:
            raise ValueError(_REQUIRED_MESSAGES["birth_date"])
        return v


class UserPatchDto(_UserSchema):
    """Update payload for PUT and PATCH. Absent or null fields are left unchanged."""
    id: int | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None

    @field_validator("id")
    @classmethod
    def id_positive(cls, v: int | None) -> int | None:
        return _check_positive_id(v)

    @field_validator("email", "first_name", "last_name")
    @classmethod
    def not_blank_when_present(cls, v: str | None, info) -> str | None:
        if v is not None and not v.strip():
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str | None) -> str | None:
        return v if v is None else _check_email_format(v)
