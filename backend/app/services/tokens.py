"""
JWT issuing and verification.

Token payload contains:
- sub / userId: user id as string
- email, role: identity claims copied from the user at login
- iat, exp: issue and expiry timestamps

Security notes:
- Verification never touches the database, so role/email may be stale until
  the user logs in again.
- Tokens are stateless; revocation would require a blocklist (not implemented).
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from app.db.models import User
from app.errors import InvalidToken


class TokenPayload(BaseModel):
    """Verified identity claims."""

    user_id: UUID
    email: str
    role: str
    exp: datetime


class TokenService:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24 * 7) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self.expire_minutes * 60

    def issue(self, user: User, expires_minutes: int | None = None) -> str:
        now = datetime.now(timezone.utc)
        minutes = self.expire_minutes if expires_minutes is None else expires_minutes
        payload = {
            "sub": str(user.id),
            "userId": str(user.id),
            "email": user.email,
            "role": user.role,
            "iat": now,
            "exp": now + timedelta(minutes=minutes),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """Check signature and expiry. Raises InvalidToken on any failure."""
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return TokenPayload(
                user_id=claims["userId"],
                email=claims["email"],
                role=claims["role"],
                exp=claims["exp"],
            )
        except (JWTError, KeyError, ValidationError) as exc:
            raise InvalidToken() from exc
