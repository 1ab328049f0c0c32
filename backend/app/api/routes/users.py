"""
User profile routes.

Reads are public. Updates, password changes and deactivation require a valid
token but do not check that the caller is the target user (see
app.services.policy).
"""

from fastapi import APIRouter, Depends

from app.api.deps import Credentials, require
from app.schemas.base import MessageResponse
from app.schemas.user import PasswordChange, UserRead, UserUpdate
from app.services.policy import Operation

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require("users", Operation.READ))],
)
async def get_user(user_id: str, store: Credentials) -> UserRead:
    """Get a user's public profile."""
    return UserRead.model_validate(await store.get(user_id))


@router.put(
    "/{user_id}",
    response_model=UserRead,
    dependencies=[Depends(require("users", Operation.UPDATE))],
)
async def update_user(user_id: str, data: UserUpdate, store: Credentials) -> UserRead:
    """Update profile fields. Email, role and password cannot be changed here."""
    return UserRead.model_validate(await store.update_profile(user_id, data))


@router.put(
    "/{user_id}/password",
    response_model=MessageResponse,
    dependencies=[Depends(require("users", Operation.CHANGE_PASSWORD))],
)
async def change_password(user_id: str, data: PasswordChange, store: Credentials) -> MessageResponse:
    await store.change_password(user_id, data.old_password, data.new_password)
    return MessageResponse(message="Password changed successfully")


@router.post(
    "/{user_id}/deactivate",
    response_model=UserRead,
    dependencies=[Depends(require("users", Operation.DEACTIVATE))],
)
async def deactivate_user(user_id: str, store: Credentials) -> UserRead:
    """Deactivate an account. The user can no longer log in."""
    return UserRead.model_validate(await store.deactivate(user_id))
