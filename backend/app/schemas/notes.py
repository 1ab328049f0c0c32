"""Note schemas."""

from pydantic import Field, field_validator

from app.schemas.base import IDMixin, TimestampMixin, not_null
from app.schemas.common import AuthorRead, ClassificationFields, ClassifiedListQuery, PublicationFields


class NoteBase(ClassificationFields, PublicationFields):
    """Base note schema."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    description: str | None = None


class NoteCreate(NoteBase):
    """Schema for creating a note. Required: title, content, fileUrl."""


class NoteRead(NoteBase, IDMixin, TimestampMixin):
    """Schema for reading note data."""

    author: AuthorRead
    views: int = 0
    likes: int = 0


class NoteUpdate(ClassificationFields):
    """Schema for updating a note. All fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    description: str | None = None
    file_url: str | None = Field(None, min_length=1, max_length=2048)
    image_url: str | None = Field(None, max_length=2048)
    seo_keywords: list[str] | None = None
    seo_description: str | None = None
    is_published: bool | None = None

    @field_validator("title", "content", "file_url", "seo_keywords", "is_published")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class NoteListQuery(ClassifiedListQuery):
    """Filters for GET /api/notes."""
