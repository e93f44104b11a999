from typing import List

import attrs
from fastapi import APIRouter, Depends, Response, status

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.command.create_user_use_case import CreateUserUseCase
from movie_booking.service.user.app.command.delete_user_use_case import DeleteUserUseCase
from movie_booking.service.user.app.command.update_user_use_case import UpdateUserUseCase
from movie_booking.service.user.app.query.get_user_use_case import GetUserUseCase
from movie_booking.service.user.driving_adapter.http_controller.schema.user_schema import (
    UserRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=UserResponse)
@Logger.io
async def create_user(
    request: UserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> UserResponse:
    user = await use_case.create(
        name=request.name,
        email=str(request.email),
        phone=request.phone,
        user_type=request.user_type,
        cinema_id=request.cinema_id,
    )
    return UserResponse.model_validate(attrs.asdict(user))


@router.get('', response_model=List[UserResponse])
@Logger.io
async def list_users(
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> List[UserResponse]:
    users = await use_case.list_all()
    return [UserResponse.model_validate(attrs.asdict(user)) for user in users]


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
async def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> UserResponse:
    user = await use_case.get_by_id(user_id=user_id)
    return UserResponse.model_validate(attrs.asdict(user))


@router.put('/{user_id}', response_model=UserResponse)
@Logger.io
async def update_user(
    user_id: str,
    request: UserRequest,
    use_case: UpdateUserUseCase = Depends(UpdateUserUseCase.depends),
) -> UserResponse:
    user = await use_case.update(
        user_id=user_id,
        name=request.name,
        email=str(request.email),
        phone=request.phone,
        user_type=request.user_type,
        cinema_id=request.cinema_id,
    )
    return UserResponse.model_validate(attrs.asdict(user))


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(DeleteUserUseCase.depends),
) -> Response:
    await use_case.delete(user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
