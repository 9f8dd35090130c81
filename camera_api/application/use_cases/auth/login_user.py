# Standard library imports
import logging

# Local application imports
from ....core.security import TokenService
from ....domain.exceptions import InvalidCredentialsError
from ...services.credential_verifier import CredentialVerifier
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, credential_verifier: CredentialVerifier, token_service: TokenService) -> None:
        self.credential_verifier = credential_verifier
        self.token_service = token_service
    
    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with username and password
            
        Returns:
            TokenResponse with a bearer token for the user
            
        Raises:
            InvalidCredentialsError: If the credentials do not match an enabled user
        """
        try:
            principal = await self.credential_verifier.verify(request.username, request.password)
        except InvalidCredentialsError:
            logger.info(f"Failed login attempt for username '{request.username}'")
            raise
        
        token = self.token_service.generate(principal.user.username)
        logger.info(f"User '{principal.user.username}' logged in")
        return TokenResponse(token=token)
