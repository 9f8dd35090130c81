# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.security import PasswordHasher
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@bandanize.com"


class SeedAdminUserUseCase:
    """Creates the initial admin account when the user table is empty"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        admin_password: str,
        admin_name: Optional[str] = None,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.admin_password = admin_password
        self.admin_name = admin_name
    
    async def execute(self) -> Optional[User]:
        """
        Seed the admin user
        
        Returns:
            The created admin, or None if users already existed
        """
        if await self.user_repository.count() > 0:
            return None
        
        admin = await self.user_repository.save(
            User(
                id=None,
                username=ADMIN_USERNAME,
                email=ADMIN_EMAIL,
                hashed_password=self.password_hasher.hash(self.admin_password),
                name=self.admin_name,
                disabled=False,
            )
        )
        logger.info(f"Initial user created: {admin.username}")
        return admin
