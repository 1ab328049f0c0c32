"""Authentication schemas."""

from pydantic import EmailStr, Field, field_validator

from app.schemas.base import BaseSchema
from app.schemas.user import UserRead


class LoginRequest(BaseSchema):
    """Request schema for email/password login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class AuthResponse(BaseSchema):
    """Response schema for successful registration or login."""

    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token expiry in seconds")
    user: UserRead
