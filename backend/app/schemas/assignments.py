"""Assignment schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import IDMixin, TimestampMixin, not_null
from app.schemas.common import (
    MAX_INT,
    AuthorRead,
    ClassificationFields,
    ClassifiedListQuery,
    DifficultyType,
    PublicationFields,
)


class AssignmentBase(ClassificationFields, PublicationFields):
    """Base assignment schema."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    instructions: str | None = None
    due_date: datetime
    total_marks: int | None = Field(None, ge=0, le=MAX_INT)
    difficulty: DifficultyType | None = None


class AssignmentCreate(AssignmentBase):
    """Schema for creating an assignment. Required: title, description, fileUrl, dueDate."""


class AssignmentRead(AssignmentBase, IDMixin, TimestampMixin):
    """Schema for reading assignment data."""

    author: AuthorRead


class AssignmentUpdate(ClassificationFields):
    """Schema for updating an assignment. All fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    instructions: str | None = None
    due_date: datetime | None = None
    total_marks: int | None = Field(None, ge=0, le=MAX_INT)
    difficulty: DifficultyType | None = None
    file_url: str | None = Field(None, min_length=1, max_length=2048)
    image_url: str | None = Field(None, max_length=2048)
    seo_keywords: list[str] | None = None
    seo_description: str | None = None
    is_published: bool | None = None

    @field_validator("title", "description", "due_date", "file_url", "seo_keywords", "is_published")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class AssignmentListQuery(ClassifiedListQuery):
    """Filters for GET /api/assignments."""

    difficulty: DifficultyType | None = None
