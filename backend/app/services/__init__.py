"""Domain services: tokens, password hashing, access policy and the subject catalog."""

from app.services.policy import Operation, Requirement, authorize
from app.services.tokens import TokenPayload, TokenService

__all__ = ["Operation", "Requirement", "TokenPayload", "TokenService", "authorize"]
