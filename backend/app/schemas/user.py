"""User schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.schemas.base import BaseSchema, not_null

RoleType = Literal["student", "admin"]

# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


def check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


class ProfileFields(BaseSchema):
    phone_number: str | None = Field(None, max_length=50)
    bio: str | None = None
    profile_image_url: str | None = Field(None, max_length=2048)
    profile_file_url: str | None = Field(None, max_length=2048)
    institution: str | None = Field(None, max_length=255)
    department: str | None = Field(None, max_length=255)


class UserCreate(ProfileFields):
    """Registration payload."""

    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=255)
    role: RoleType | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class UserRead(ProfileFields):
    """Public view of a user. Never includes the password hash."""

    id: UUID
    email: str
    name: str
    role: RoleType
    is_active: bool
    created_at: datetime
    updated_at: datetime


class UserUpdate(ProfileFields):
    """Schema for updating user profile. Email, role and password are not editable here."""

    name: str | None = Field(None, min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class PasswordChange(BaseSchema):
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)

    @field_validator("new_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)
