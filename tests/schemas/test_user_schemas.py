"""User schema validation: camelCase wire shape and field-level constraints.

Invariants:
    - UserDto requires email, firstName, lastName, birthDate; blank counts as missing
    - Email grammar accepts a dotless domain (a@x) and rejects strings without '@'
    - id must be positive when present
    - UserPatchDto accepts any subset of fields but rejects blank names and bad emails
"""

from datetime import date

import pytest
from pydantic import ValidationError

from user_registry.schemas.user import UserDto, UserPatchDto

VALID = {
    "email": "a@x",
    "firstName": "A",
    "lastName": "B",
    "birthDate": "2000-01-01",
}


def _messages(exc_info) -> list[str]:
    return [str(e["ctx"]["error"]) for e in exc_info.value.errors() if "ctx" in e]


# --- UserDto ------------------------------------------------------------------

def test_user_dto_parses_camel_case_keys():
    dto = UserDto.model_validate({**VALID, "phoneNumber": "123"})
    assert dto.first_name == "A"
    assert dto.birth_date == date(2000, 1, 1)
    assert dto.phone_number == "123"
    assert dto.id is None
    assert dto.address is None


def test_user_dto_accepts_snake_case_names():
    dto = UserDto(
        email="a@x", first_name="A", last_name="B", birth_date=date(2000, 1, 1),
    )
    assert dto.last_name == "B"


def test_user_dto_dumps_camel_case_keys():
    dto = UserDto.model_validate(VALID)
    dumped = dto.model_dump(by_alias=True, mode="json")
    assert dumped == {
        "id": None,
        "email": "a@x",
        "firstName": "A",
        "lastName": "B",
        "birthDate": "2000-01-01",
        "address": None,
        "phoneNumber": None,
    }


@pytest.mark.parametrize("field, message", [
    ("email", "Email is required"),
    ("firstName", "First name is required"),
    ("lastName", "Last name is required"),
    ("birthDate", "Birth date is required"),
])
def test_user_dto_missing_required_field(field, message):
    payload = {k: v for k, v in VALID.items() if k != field}
    with pytest.raises(ValidationError) as exc_info:
        UserDto.model_validate(payload)
    assert _messages(exc_info) == [message]


@pytest.mark.parametrize("field, message", [
    ("email", "Email is required"),
    ("firstName", "First name is required"),
    ("lastName", "Last name is required"),
])
def test_user_dto_blank_string_counts_as_missing(field, message):
    with pytest.raises(ValidationError) as exc_info:
        UserDto.model_validate({**VALID, field: "   "})
    assert _messages(exc_info) == [message]


@pytest.mark.parametrize("email", ["a@x", "john.doe@example.com", "x+tag@sub.domain.org"])
def test_user_dto_accepts_valid_emails(email):
    assert UserDto.model_validate({**VALID, "email": email}).email == email


@pytest.mark.parametrize("email", ["plainaddress", "a@", "@x", "a b@x", "a@x..y"])
def test_user_dto_rejects_invalid_emails(email):
    with pytest.raises(ValidationError) as exc_info:
        UserDto.model_validate({**VALID, "email": email})
    assert _messages(exc_info) == ["Invalid email format"]


@pytest.mark.parametrize("bad_id", [0, -1])
def test_user_dto_rejects_non_positive_id(bad_id):
    with pytest.raises(ValidationError) as exc_info:
        UserDto.model_validate({**VALID, "id": bad_id})
    assert _messages(exc_info) == ["ID must be a positive number"]


def test_user_dto_rejects_malformed_birth_date():
    with pytest.raises(ValidationError):
        UserDto.model_validate({**VALID, "birthDate": "01/01/2000"})


# --- UserPatchDto -------------------------------------------------------------

def test_patch_dto_accepts_single_field():
    dto = UserPatchDto.model_validate({"firstName": "Alice"})
    assert dto.first_name == "Alice"
    assert dto.email is None
    assert dto.birth_date is None


def test_patch_dto_accepts_empty_body():
    assert UserPatchDto.model_validate({}) == UserPatchDto()


def test_patch_dto_rejects_blank_name():
    with pytest.raises(ValidationError) as exc_info:
        UserPatchDto.model_validate({"lastName": ""})
    assert _messages(exc_info) == ["Last name is required"]


def test_patch_dto_rejects_bad_email():
    with pytest.raises(ValidationError) as exc_info:
        UserPatchDto.model_validate({"email": "nope"})
    assert _messages(exc_info) == ["Invalid email format"]


def test_patch_dto_rejects_non_positive_id():
    with pytest.raises(ValidationError):
        UserPatchDto.model_validate({"id": 0})
