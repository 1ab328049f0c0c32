"""
Authentication Routes

Endpoints:
- POST /api/auth/register - Create an account and return a session JWT
- POST /api/auth/login - Exchange email/password for a session JWT
- GET /api/auth/me - Get the profile behind the current token

Auth Flow:
1. Client registers or logs in with email + password
2. Backend verifies the bcrypt hash and issues a JWT carrying userId, email, role
3. Client sends 'Authorization: Bearer <token>' on later requests

Login failures return the same 401 whether the email is unknown, the account
is deactivated or the password is wrong.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import Credentials, Tokens, require
from app.schemas.auth import AuthResponse, LoginRequest
from app.schemas.user import UserCreate, UserRead
from app.services.policy import Operation
from app.services.tokens import TokenPayload

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require("auth", Operation.REGISTER))],
)
async def register(
    data: UserCreate,
    store: Credentials,
    tokens: Tokens,
) -> AuthResponse:
    """Register a new user. Role defaults to student."""
    user = await store.register(data)
    return AuthResponse(
        message="User registered successfully",
        token=tokens.issue(user),
        expires_in=tokens.expires_in,
        user=UserRead.model_validate(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    dependencies=[Depends(require("auth", Operation.LOGIN))],
)
async def login(
    data: LoginRequest,
    store: Credentials,
    tokens: Tokens,
) -> AuthResponse:
    """Log in with email and password."""
    user = await store.authenticate(data.email, data.password)
    return AuthResponse(
        message="Login successful",
        token=tokens.issue(user),
        expires_in=tokens.expires_in,
        user=UserRead.model_validate(user),
    )


@router.get("/me", response_model=UserRead)
async def get_me(
    principal: Annotated[TokenPayload, Depends(require("auth", Operation.READ))],
    store: Credentials,
) -> UserRead:
    """
    Get the current authenticated user's profile.

    Unlike the other endpoints this one reads the user row, so it reflects
    changes made since the token was issued.
    """
    user = await store.get(principal.user_id)
    return UserRead.model_validate(user)
