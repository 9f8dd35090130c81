"""
Request middleware that attributes a principal to every request.

The principal (or None) is stored on ``request.state.principal`` and read by
the route dependencies in ``dependencies.py``; this middleware never rejects a
request on its own.
"""
# Standard library imports
import logging

# External package imports
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

# Local application imports
from ..application.use_cases.auth.authenticate_request import AuthenticateRequestUseCase
from ..domain.exceptions import StorageError
from ..di.container import get_container

logger = logging.getLogger(__name__)


class AuthGateMiddleware(BaseHTTPMiddleware):
    """Resolves ``request.state.principal`` before any route handler runs"""
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        authenticate_request = get_container().get(AuthenticateRequestUseCase)
        try:
            request.state.principal = await authenticate_request.execute(
                request.url.path,
                request.headers.get("Authorization"),
            )
        except StorageError as exception:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Internal storage error", "error": exception.error},
            )
        return await call_next(request)
