"""
Credential store: registration, login and profile management.

Passwords are bcrypt-hashed before they reach the database and are never
returned. Accounts are deactivated, never deleted.
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User, UserRole
from app.errors import DuplicateEmail, FieldValidationError, InvalidCredentials, InvalidOldPassword, NotFound
from app.repositories.base import parse_id, validate_fields
from app.schemas.user import PasswordChange, UserCreate, UserUpdate
from app.services.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(
        self,
        db: AsyncSession,
        *,
        bcrypt_rounds: int = 12,
        allow_admin_registration: bool = True,
    ) -> None:
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.allow_admin_registration = allow_admin_registration

    async def register(self, fields: Mapping[str, Any] | BaseModel) -> User:
        """Create a student (or admin, if allowed) account. Raises DuplicateEmail."""
        data: UserCreate = validate_fields(UserCreate, fields)
        role = data.role or UserRole.STUDENT.value
        if role == UserRole.ADMIN.value and not self.allow_admin_registration:
            raise FieldValidationError.single("role", "Cannot self-register as admin")

        if await self.find_by_email(data.email) is not None:
            raise DuplicateEmail()

        profile = data.model_dump(exclude={"email", "password", "name", "role"})
        profile["profile_file_url"] = profile.get("profile_file_url") or ""
        user = User(
            email=data.email,
            password_hash=hash_password(data.password, rounds=self.bcrypt_rounds),
            name=data.name,
            role=role,
            **profile,
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration for the same email
            await self.db.rollback()
            raise DuplicateEmail() from exc

        logger.info("Registered user %s role=%s", user.id, user.role)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """
        Return the user for valid credentials.

        Unknown email, deactivated account and wrong password all raise the
        same InvalidCredentials so callers cannot tell them apart.
        """
        user = await self.find_by_email(email)
        if user is None or not user.is_active or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentials()
        return user

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()

    async def get(self, user_id: str | UUID) -> User:
        user = await self.db.get(User, parse_id(user_id, "user"), populate_existing=True)
        if user is None:
            raise NotFound("User not found")
        return user

    async def update_profile(self, user_id: str | UUID, fields: Mapping[str, Any] | BaseModel) -> User:
        """Partial update of profile fields only."""
        resolved_id = parse_id(user_id, "user")
        data = validate_fields(UserUpdate, fields)
        user = await self.get(resolved_id)

        values = data.model_dump(exclude_unset=True)
        if "profile_file_url" in values and values["profile_file_url"] is None:
            values["profile_file_url"] = ""
        if values:
            for key, value in values.items():
                setattr(user, key, value)
            await self.db.commit()
            logger.info("Updated profile of user %s fields=%s", resolved_id, sorted(values))
        return user

    async def change_password(
        self,
        user_id: str | UUID,
        old_password: str,
        new_password: str,
    ) -> None:
        """Replace the password after checking the old one. Raises InvalidOldPassword."""
        resolved_id = parse_id(user_id, "user")
        validate_fields(PasswordChange, {"old_password": old_password, "new_password": new_password})
        user = await self.get(resolved_id)
        if not verify_password(old_password, user.password_hash):
            raise InvalidOldPassword()

        user.password_hash = hash_password(new_password, rounds=self.bcrypt_rounds)
        await self.db.commit()
        logger.info("Password changed for user %s", resolved_id)

    async def deactivate(self, user_id: str | UUID) -> User:
        """Soft-delete: the account stays but can no longer log in."""
        user = await self.get(user_id)
        user.is_active = False
        await self.db.commit()
        logger.info("Deactivated user %s", user.id)
        return user
