# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest
from ...application.dto.user_dto import UserResponse, UserUpdateRequest
from ...application.dto.error_dto import ErrorResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from ...domain.models.user import User
from ...di.container import get_container
from ..dependencies import get_current_user


router = APIRouter(
    tags=["users"],
    dependencies=[Depends(get_current_user)],
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List all users"""
    return await get_container().get(ListUsersUseCase).execute()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserRegistrationRequest,
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """
    Create a user on behalf of the caller
    
    Same validation as registration; 409 when username or email is taken.
    """
    create_use_case = get_container().get(CreateUserUseCase)
    return await create_use_case.execute(request, created_by=current_user.username)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information
    
    Re-reads the user so profile edits made during this token's lifetime show up.
    """
    return await get_container().get(GetUserUseCase).execute_by_username(current_user.username)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int) -> UserResponse:
    return await get_container().get(GetUserUseCase).execute(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, request: UserUpdateRequest) -> UserResponse:
    """Partially update a user; omitted fields are left unchanged"""
    return await get_container().get(UpdateUserUseCase).execute(user_id, request)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int) -> Response:
    await get_container().get(DeleteUserUseCase).execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
