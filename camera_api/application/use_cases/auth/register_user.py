# Standard library imports
import logging

# Local application imports
from ....core.security import PasswordHasher
from ....domain.exceptions import BadRequestError, ConflictError
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

USERNAME_EXISTS = "Username already exists"
EMAIL_EXISTS = "Email already exists"


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details and plaintext password
            
        Returns:
            UserResponse with created user information
            
        Raises:
            BadRequestError: If the username is blank
            ConflictError: If the username (checked first) or the email is taken.
                The store's unique constraints settle races between the checks
                and the insert.
        """
        if not request.username.strip():
            raise BadRequestError("Username is required", "Invalid username")
        
        if await self.user_repository.find_by_username(request.username) is not None:
            logger.info(f"Registration rejected, username '{request.username}' exists")
            raise ConflictError(USERNAME_EXISTS, "Duplicate username")
        
        if await self.user_repository.find_by_email(request.email) is not None:
            logger.info(f"Registration rejected, email for '{request.username}' exists")
            raise ConflictError(EMAIL_EXISTS, "Duplicate email")
        
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=request.email,
            hashed_password=self.password_hasher.hash(request.password),
            name=request.name,
            photo=request.photo,
            disabled=False,
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user '{saved_user.username}' with id {saved_user.id}")
        
        return UserResponse.from_user(saved_user)
