"""User Mapper: field-wise conversion between wire schemas and domain entities.

Invariants:
    - Pure, stateless, total: every field copied, nothing transformed or validated
    - to_dto(to_entity(d)) == d for any UserDto d
"""

from user_registry.core.user import User, UserPatch
from user_registry.schemas.user import UserDto, UserPatchDto


class UserMapper:
    """Converts between UserDto/UserPatchDto and User/UserPatch."""

    def to_entity(self, dto: UserDto) -> User:
        return User(
            id=dto.id,
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            birth_date=dto.birth_date,
            address=dto.address,
            phone_number=dto.phone_number,
        )

    def to_patch(self, dto: UserPatchDto) -> UserPatch:
        return UserPatch(
            id=dto.id,
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            birth_date=dto.birth_date,
            address=dto.address,
            phone_number=dto.phone_number,
        )

    def to_dto(self, user: User) -> UserDto:
        # model_construct: stored users were validated on the way in
        return UserDto.model_construct(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            birth_date=user.birth_date,
            address=user.address,
            phone_number=user.phone_number,
        )
