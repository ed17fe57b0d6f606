"""Users: list, create, update, delete and birth-date range query.

Invariants:
    - All endpoints under /api/v1/users; collection path works with or without trailing slash
    - PUT and PATCH are equivalent: both perform field-present merge
    - Responses are encoded from the stored entity through UserMapper.to_dto
    - Routes contain no business logic; failures are mapped by api/error_handlers
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from user_registry.api.dependencies import get_user_service
from user_registry.schemas.user import UserDto, UserPatchDto
from user_registry.services.user_mapper import UserMapper
from user_registry.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])

_mapper = UserMapper()


@router.get("", response_model=list[UserDto])
@router.get("/", response_model=list[UserDto], include_in_schema=False)
async def get_all_users(service: UserService = Depends(get_user_service)):
    """List every stored user in insertion order."""
    return [_mapper.to_dto(u) for u in service.get_all_users()]


@router.post(
    "", response_model=UserDto, status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=UserDto, status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(
    body: UserDto, service: UserService = Depends(get_user_service),
):
    """Create a user, subject to the minimum-age policy."""
    created = service.create_user(body)
    if created is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return _mapper.to_dto(created)


@router.get("/birthDate", response_model=list[UserDto])
async def get_users_by_birth_date_range(
    from_date: date = Query(alias="fromDate"),
    to_date: date = Query(alias="toDate"),
    service: UserService = Depends(get_user_service),
):
    """Users born strictly between fromDate and toDate."""
    users = service.get_users_by_birth_date_range(from_date, to_date)
    return [_mapper.to_dto(u) for u in users]


@router.put("/{user_id}", response_model=UserDto)
async def update_user(
    user_id: int, body: UserPatchDto,
    service: UserService = Depends(get_user_service),
):
    """Merge the non-null fields of the body into the stored user."""
    return _mapper.to_dto(service.update_user(user_id, body))


@router.patch("/{user_id}", response_model=UserDto)
async def patch_user(
    user_id: int, body: UserPatchDto,
    service: UserService = Depends(get_user_service),
):
    """Partial update; same merge semantics as PUT."""
    return _mapper.to_dto(service.update_user(user_id, body))


@router.delete("/{email}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    email: str, service: UserService = Depends(get_user_service),
):
    """Delete every user with exactly this email."""
    service.delete_user(email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
