"""Username/password verification shared by login and any future credential flows."""
import logging
from typing import Optional

from ...core.security import PasswordHasher
from ...domain.exceptions import InvalidCredentialsError
from ...domain.models.principal import EndUserPrincipal
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """
    Turns a (username, password) pair into an end-user principal.
    
    Unknown user, disabled user and wrong password all raise the same
    InvalidCredentialsError. An unknown user still pays for one bcrypt
    check so the branches take comparable time.
    """
    
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
    
    async def verify(self, username: Optional[str], password: Optional[str]) -> EndUserPrincipal:
        if not username or password is None:
            self.password_hasher.verify(password or "", self.password_hasher.dummy_hash)
            raise InvalidCredentialsError()
        
        user = await self.user_repository.find_by_username(username)
        if user is None:
            self.password_hasher.verify(password, self.password_hasher.dummy_hash)
            raise InvalidCredentialsError()
        
        password_ok = self.password_hasher.verify(password, user.hashed_password)
        if user.disabled or not password_ok:
            raise InvalidCredentialsError()
        
        return EndUserPrincipal(user=user)
