# Local application imports
from ....domain.exceptions import NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID or by username"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: int) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        return UserResponse.from_user(user)
    
    async def execute_by_username(self, username: str) -> UserResponse:
        """
        Get a user by username (used for the caller's own profile)
        
        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise NotFoundError(f"User not found with username: {username}")
        return UserResponse.from_user(user)
