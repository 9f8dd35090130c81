# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..domain.exceptions import UnauthorizedError
from ..domain.models.principal import EndUserPrincipal, Principal
from ..domain.models.user import User


# Documents the bearer scheme in OpenAPI; the auth gate does the actual work
security_scheme = HTTPBearer(auto_error=False)


async def get_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Principal:
    """
    FastAPI dependency requiring any authenticated principal
    
    Returns:
        The principal attributed by the auth gate (end user or internal service)
        
    Raises:
        UnauthorizedError: If the request carries no usable credentials
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise UnauthorizedError()
    return principal


async def get_current_user(principal: Principal = Depends(get_principal)) -> User:
    """
    FastAPI dependency requiring an authenticated end user
    
    Returns:
        The user behind the bearer token
        
    Raises:
        UnauthorizedError: If the caller is anonymous or the internal service
    """
    if not isinstance(principal, EndUserPrincipal):
        raise UnauthorizedError()
    return principal.user
