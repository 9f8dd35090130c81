# Standard library imports
import logging

# Local application imports
from ..auth.register_user import RegisterUserUseCase
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user from the user management API.
    
    Same rules as self-registration: uniqueness checks, plaintext password
    hashed before persistence, account enabled.
    """
    
    def __init__(self, register_user_use_case: RegisterUserUseCase) -> None:
        self.register_user_use_case = register_user_use_case
    
    async def execute(self, request: UserRegistrationRequest, created_by: str) -> UserResponse:
        user = await self.register_user_use_case.execute(request)
        logger.info(f"User '{user.username}' created by '{created_by}'")
        return user
