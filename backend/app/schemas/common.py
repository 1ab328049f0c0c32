"""Fields and query parameters shared by the four resource types."""

from typing import Literal
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from app.schemas.base import BaseSchema

DifficultyType = Literal["easy", "medium", "hard"]
SortOrder = Literal["asc", "desc"]

# Upper bound of a PostgreSQL INTEGER column
MAX_INT = 2**31 - 1


class AuthorRead(BaseSchema):
    """Read-only author join embedded in every resource. Never includes the password hash."""

    id: UUID
    name: str
    email: str


class ClassificationFields(BaseSchema):
    subject: str | None = Field(None, max_length=255)
    semester: str | None = Field(None, max_length=100)
    faculty: str | None = Field(None, max_length=255)
    year: int | None = Field(None, ge=1900, le=2100)


class PublicationFields(BaseSchema):
    file_url: str = Field(..., min_length=1, max_length=2048)
    image_url: str | None = Field(None, max_length=2048)
    seo_keywords: list[str] = Field(default_factory=list)
    seo_description: str | None = None
    is_published: bool = True


class ListQuery(BaseSchema):
    """Query parameters common to every list endpoint.

    page/limit default to 1/10; the route dependency substitutes the
    configured defaults and bounds before validation.
    """

    model_config = ConfigDict(extra="ignore")

    search: str | None = Field(None, max_length=200)
    sort_by: str | None = None
    order: SortOrder = "desc"
    page: int = Field(1, ge=1, le=MAX_INT)
    limit: int = Field(10, ge=1)

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order(cls, value):
        return value.lower() if isinstance(value, str) else value


class ClassifiedListQuery(ListQuery):
    subject: str | None = None
    semester: str | None = None
    faculty: str | None = None
    year: int | None = Field(None, ge=1900, le=2100)
    is_published: bool | None = None
