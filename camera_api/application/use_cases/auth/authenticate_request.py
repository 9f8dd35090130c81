"""
Principal attribution for incoming requests.

Decides, from the request path and the raw ``Authorization`` header, who is
calling. It never rejects a request: every failure yields ``None`` and the
route dependencies decide whether an anonymous caller may proceed.
"""
# Standard library imports
import hmac
import logging
from typing import Optional

# Local application imports
from ....core.security import TokenService
from ....domain.models.principal import (
    EndUserPrincipal,
    InternalServicePrincipal,
    Principal,
)
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AuthenticateRequestUseCase:
    """Resolves the principal for one request (internal token or end-user JWT)"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        token_service: TokenService,
        internal_api_token: str = "",
        internal_path_prefix: str = "/api/cameras",
    ) -> None:
        self.user_repository = user_repository
        self.token_service = token_service
        self.internal_api_token = internal_api_token
        self.internal_path_prefix = internal_path_prefix
    
    def _is_internal_call(self, path: str, authorization: Optional[str]) -> bool:
        if not self.internal_api_token or authorization is None:
            return False
        if not path.startswith(self.internal_path_prefix):
            return False
        expected = f"{BEARER_PREFIX}{self.internal_api_token}".encode("utf-8")
        return hmac.compare_digest(authorization.encode("utf-8"), expected)
    
    async def execute(self, path: str, authorization: Optional[str]) -> Optional[Principal]:
        """
        Attribute a principal to a request
        
        Args:
            path: Request URL path
            authorization: Raw Authorization header value, if any
            
        Returns:
            InternalServicePrincipal, EndUserPrincipal, or None when the
            caller is anonymous or presented unusable credentials
        """
        if self._is_internal_call(path, authorization):
            return InternalServicePrincipal()
        
        if authorization is None or not authorization.startswith(BEARER_PREFIX):
            return None
        
        token = authorization[len(BEARER_PREFIX):]
        username = self.token_service.extract_subject(token)
        if username is None:
            return None
        
        user = await self.user_repository.find_by_username(username)
        if user is None or user.disabled:
            return None
        
        if not self.token_service.validate(token, user.username):
            logger.debug(f"Rejected bearer token for '{username}' on {path}")
            return None
        
        return EndUserPrincipal(user=user)
