# External package imports
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import ConflictError, InvalidCredentialsError
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    responses={409: {"description": "Username or email already exists"}},
)
async def register_user(request: UserRegistrationRequest) -> PlainTextResponse:
    """
    Register a new user
    
    Args:
        request: User registration request (plaintext password)
        
    Returns:
        201 "User registered successfully", or 409 naming the conflicting field
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        await register_use_case.execute(request)
    except ConflictError as exception:
        return PlainTextResponse(exception.message, status_code=status.HTTP_409_CONFLICT)
    return PlainTextResponse("User registered successfully", status_code=status.HTTP_201_CREATED)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid credentials"}},
)
async def login_user(request: UserLoginRequest):
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        TokenResponse with the bearer token, or 401 "Invalid credentials"
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    try:
        return await login_use_case.execute(request)
    except InvalidCredentialsError:
        return PlainTextResponse("Invalid credentials", status_code=status.HTTP_401_UNAUTHORIZED)
