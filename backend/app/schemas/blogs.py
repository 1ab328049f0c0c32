"""Blog schemas."""

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, IDMixin, TimestampMixin, not_null
from app.schemas.common import MAX_INT, AuthorRead, ListQuery, PublicationFields


class BlogSection(BaseSchema):
    """One block of a blog post. Both parts are optional."""

    text: str | None = None
    image_url: str | None = Field(None, max_length=2048)


class BlogBase(PublicationFields):
    """Base blog schema."""

    title: str = Field(..., min_length=1, max_length=255)
    sections: list[BlogSection]
    excerpt: str | None = None
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    is_featured: bool = False
    read_time_minutes: int | None = Field(None, ge=0, le=MAX_INT)


class BlogCreate(BlogBase):
    """Schema for creating a blog. Required: title, sections, fileUrl."""


class BlogRead(BlogBase, IDMixin, TimestampMixin):
    """Schema for reading blog data."""

    author: AuthorRead
    views: int = 0
    likes: int = 0


class BlogUpdate(BaseSchema):
    """Schema for updating a blog. All fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    sections: list[BlogSection] | None = None
    excerpt: str | None = None
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    is_featured: bool | None = None
    read_time_minutes: int | None = Field(None, ge=0, le=MAX_INT)
    file_url: str | None = Field(None, min_length=1, max_length=2048)
    image_url: str | None = Field(None, max_length=2048)
    seo_keywords: list[str] | None = None
    seo_description: str | None = None
    is_published: bool | None = None

    @field_validator("title", "sections", "is_featured", "file_url", "seo_keywords", "is_published")
    @classmethod
    def reject_null(cls, value):
        return not_null(value)


class BlogListQuery(ListQuery):
    """Filters for GET /api/blogs."""

    category: str | None = None
    is_published: bool | None = None
    is_featured: bool | None = None
