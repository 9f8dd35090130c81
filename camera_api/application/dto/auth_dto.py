from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.
    
    ``password`` is always plaintext; the legacy ``hashedPassword`` key is
    accepted as an alias for older clients and hashed the same way.
    """
    username: str = Field(min_length=1, max_length=100, pattern=r"\S")
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(
        min_length=1,
        max_length=256,
        validation_alias=AliasChoices("password", "hashedPassword"),
    )
    name: Optional[str] = Field(default=None, max_length=200)
    photo: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request; missing fields fail as invalid credentials"""
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
