"""API routes package."""

from app.api.routes import (
    assignments,
    auth,
    blogs,
    notes,
    old_questions,
    subjects,
    users,
)

__all__ = [
    "assignments",
    "auth",
    "blogs",
    "notes",
    "old_questions",
    "subjects",
    "users",
]
