# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import (
    BadRequestError,
    ConflictError,
    DomainError,
    DownstreamError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[DomainError], int] = {
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    DownstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exception: DomainError) -> int:
    for error_type in type(exception).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exception: DomainError) -> JSONResponse:
    """Map a domain error to its status code and the {message, error} envelope"""
    status_code = status_for(exception)
    message = exception.message
    if isinstance(exception, StorageError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exception.message}")
        message = "Internal storage error"
    
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "error": exception.error},
        headers=headers,
    )


async def validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Request body/parameter validation failures use the same envelope with 400"""
    details = []
    for error in exception.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "; ".join(details) or "Invalid request", "error": "Bad request"},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(DomainError, domain_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
