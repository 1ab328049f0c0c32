"""
SQLAlchemy 2.0 Models for StudyShare.

Uses modern declarative syntax with Mapped[] type annotations.
Column types are kept portable (Uuid, JSON, DateTime) so the same models run
on PostgreSQL in production and SQLite in tests.
"""

from datetime import datetime, timezone
from enum import Enum as PyEnum
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================


class UserRole(str, PyEnum):
    """Role carried in the token; gates mutation rights."""

    STUDENT = "student"
    ADMIN = "admin"


class Difficulty(str, PyEnum):
    """Difficulty level of an assignment or old question."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# =============================================================================
# MIXINS
# =============================================================================


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class PublicationMixin:
    """File reference, SEO metadata and publication flag shared by all resources."""

    file_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    seo_keywords: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    seo_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)


class ClassificationMixin:
    """Academic classification used by the list filters."""

    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    semester: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    faculty: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


# =============================================================================
# MODELS
# =============================================================================


class User(TimestampMixin, Base):
    """
    Platform account.

    Email is stored lowercased so the unique index gives case-insensitive
    uniqueness on every backend. Users are never deleted, only deactivated.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.STUDENT.value)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    profile_image_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    profile_file_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    institution: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Note(ClassificationMixin, PublicationMixin, TimestampMixin, Base):
    """Lecture notes with an attached file."""

    __tablename__ = "notes"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    author_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    author: Mapped["User"] = relationship("User")


class Assignment(ClassificationMixin, PublicationMixin, TimestampMixin, Base):
    """Published assignment with a due date."""

    __tablename__ = "assignments"
    __table_args__ = (Index("idx_assignments_due_date", "due_date"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    author_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_marks: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    difficulty: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    author: Mapped["User"] = relationship("User")


class OldQuestion(ClassificationMixin, PublicationMixin, TimestampMixin, Base):
    """Past exam question with its answer. Subject is mandatory here."""

    __tablename__ = "old_questions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    author_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    difficulty: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    author: Mapped["User"] = relationship("User")


class Blog(PublicationMixin, TimestampMixin, Base):
    """
    Blog post made of ordered sections.

    Each section is {"text": ..., "image_url": ...} with both keys optional,
    stored as a JSON array.
    """

    __tablename__ = "blogs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    author_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    sections: Mapped[list[dict]] = mapped_column(JSON, nullable=False, default=list)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    read_time_minutes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    author: Mapped["User"] = relationship("User")
