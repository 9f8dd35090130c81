from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password hash, no disabled flag)"""
    id: int
    username: str
    email: str
    name: Optional[str] = None
    photo: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or 0,
            username=user.username,
            email=user.email,
            name=user.name,
            photo=user.photo,
        )


class UserUpdateRequest(BaseModel):
    """DTO for a partial profile update; omitted fields are left unchanged"""
    username: Optional[str] = Field(default=None, min_length=1, max_length=100, pattern=r"\S")
    email: Optional[str] = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    name: Optional[str] = Field(default=None, max_length=200)
    photo: Optional[str] = None
    password: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=256,
        validation_alias=AliasChoices("password", "hashedPassword"),
    )
