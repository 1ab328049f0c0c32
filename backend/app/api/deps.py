"""
FastAPI Dependencies for Authentication and Authorization.

Key patterns:
1. get_db: per-request AsyncSession from the Database handle on app.state
2. require(resource, operation): runs the access policy before the handler,
   so a rejected request never reaches the database
3. No global "current user" state - the verified token payload is passed explicitly

Security model:
- JWT sent in the Authorization header: 'Bearer <token>'
- Claims are trusted as of issuance; the user row is not re-read per request
- On public operations a bad token is ignored and the caller is anonymous
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.db.session import Database
from app.errors import InvalidToken
from app.repositories.users import CredentialStore
from app.services.policy import Operation, Requirement, authorize, requirement_for
from app.services.tokens import TokenPayload, TokenService


# =============================================================================
# APPLICATION STATE
# =============================================================================


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


AppSettings = Annotated[Settings, Depends(get_settings_from_app)]
Tokens = Annotated[TokenService, Depends(get_token_service)]
DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_credential_store(db: DbSession, settings: AppSettings) -> CredentialStore:
    return CredentialStore(
        db,
        bcrypt_rounds=settings.bcrypt_rounds,
        allow_admin_registration=settings.allow_admin_registration,
    )


Credentials = Annotated[CredentialStore, Depends(get_credential_store)]


# =============================================================================
# AUTHENTICATION
# =============================================================================


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from 'Bearer <token>', or None if the header is absent or malformed."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def require(resource: str, operation: Operation) -> Callable[..., Awaitable[TokenPayload | None]]:
    """
    Build a dependency enforcing the access policy for one route.

        @router.post("", dependencies=[Depends(require("notes", Operation.CREATE))])

    or, to get the caller:

        principal: Annotated[TokenPayload | None, Depends(require("users", Operation.READ))]

    Raises Unauthenticated (401) or Forbidden (403).
    """

    async def dependency(
        tokens: Tokens,
        authorization: Annotated[str | None, Header()] = None,
    ) -> TokenPayload | None:
        principal = None
        token = extract_bearer_token(authorization)
        if token is not None:
            try:
                principal = tokens.verify(token)
            except InvalidToken:
                if requirement_for(resource, operation) is not Requirement.PUBLIC:
                    raise
        return authorize(principal, resource, operation)

    return dependency
