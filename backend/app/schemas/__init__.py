"""Pydantic schemas for API request/response validation."""

from app.schemas.base import DeleteResponse, MessageResponse, Page
from app.schemas.user import PasswordChange, UserCreate, UserRead, UserUpdate
from app.schemas.auth import AuthResponse, LoginRequest
from app.schemas.notes import NoteCreate, NoteListQuery, NoteRead, NoteUpdate
from app.schemas.assignments import (
    AssignmentCreate,
    AssignmentListQuery,
    AssignmentRead,
    AssignmentUpdate,
)
from app.schemas.old_questions import (
    OldQuestionCreate,
    OldQuestionListQuery,
    OldQuestionRead,
    OldQuestionUpdate,
)
from app.schemas.blogs import BlogCreate, BlogListQuery, BlogRead, BlogSection, BlogUpdate
from app.schemas.subjects import SemesterSubjects

__all__ = [
    # Envelopes
    "DeleteResponse",
    "MessageResponse",
    "Page",
    # User
    "PasswordChange",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    # Auth
    "AuthResponse",
    "LoginRequest",
    # Notes
    "NoteCreate",
    "NoteListQuery",
    "NoteRead",
    "NoteUpdate",
    # Assignments
    "AssignmentCreate",
    "AssignmentListQuery",
    "AssignmentRead",
    "AssignmentUpdate",
    # Old questions
    "OldQuestionCreate",
    "OldQuestionListQuery",
    "OldQuestionRead",
    "OldQuestionUpdate",
    # Blogs
    "BlogCreate",
    "BlogListQuery",
    "BlogRead",
    "BlogSection",
    "BlogUpdate",
    # Subjects
    "SemesterSubjects",
]
