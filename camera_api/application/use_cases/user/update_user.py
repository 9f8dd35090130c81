# Standard library imports
import logging

# Local application imports
from ....core.security import PasswordHasher
from ....domain.exceptions import BadRequestError, ConflictError, NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ..auth.register_user import EMAIL_EXISTS, USERNAME_EXISTS
from ...dto.user_dto import UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user profile"""
    
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
    
    async def execute(self, user_id: int, request: UserUpdateRequest) -> UserResponse:
        """
        Apply the non-null fields of ``request`` to the user
        
        Raises:
            NotFoundError: If no user has this ID
            ConflictError: If the new username or email belongs to another user
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        
        if request.username is not None and request.username != user.username:
            other = await self.user_repository.find_by_username(request.username)
            if other is not None and other.id != user.id:
                raise ConflictError(USERNAME_EXISTS, "Duplicate username")
            user.username = request.username
        
        if request.email is not None and request.email != user.email:
            other = await self.user_repository.find_by_email(request.email)
            if other is not None and other.id != user.id:
                raise ConflictError(EMAIL_EXISTS, "Duplicate email")
            user.email = request.email
        
        if request.name is not None:
            user.name = request.name
        if request.photo is not None:
            user.photo = request.photo
        if request.password is not None:
            user.hashed_password = self.password_hasher.hash(request.password)
        
        if not user.username.strip():
            raise BadRequestError("Username is required", "Invalid username")
        
        updated = await self.user_repository.save(user)
        logger.info(f"Updated user {updated.id}")
        return UserResponse.from_user(updated)
