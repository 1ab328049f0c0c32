"""Old exam question schemas."""

from pydantic import Field, field_validator

from app.schemas.base import IDMixin, TimestampMixin, not_null
from app.schemas.common import (
    AuthorRead,
    ClassificationFields,
    ClassifiedListQuery,
    DifficultyType,
    PublicationFields,
)


class OldQuestionBase(ClassificationFields, PublicationFields):
    """Base old question schema. Unlike the other types, subject is required."""

    title: str = Field(..., min_length=1, max_length=255)
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1, max_length=255)
    difficulty: DifficultyType | None = None


class OldQuestionCreate(OldQuestionBase):
    """Schema for creating an old question. Required: title, question, answer, subject, fileUrl."""


class OldQuestionRead(OldQuestionBase, IDMixin, TimestampMixin):
    """Schema for reading old question data."""

    author: AuthorRead


class OldQuestionUpdate(ClassificationFields):
    """Schema for updating an old question. All fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    question: str | None = Field(None, min_length=1)
    answer: str | None = Field(None, min_length=1)
    subject: str | None = Field(None, min_length=1, max_length=255)
    difficulty: DifficultyType | None = None
    file_url: str | None = Field(None, min_length=1, max_length=2048)
    image_url: str | None = Field(None, max_length=2048)
    seo_keywords: list[str] | None = None
    seo_description: str | None = None
    is_published: bool | None = None

    @field_validator("title", "question", "answer", "subject", "file_url", "seo_keywords", "is_published")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class OldQuestionListQuery(ClassifiedListQuery):
    """Filters for GET /api/old-questions."""

    difficulty: DifficultyType | None = None
