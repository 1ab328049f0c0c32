"""Base schema configuration."""

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are snake_case in Python and camelCase on the wire
    (file_url <-> fileUrl). Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        str_strip_whitespace=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for created_at/updated_at timestamps."""

    created_at: datetime
    updated_at: datetime


class IDMixin(BaseModel):
    """Mixin for UUID primary key."""

    id: UUID


def not_null(value: Any) -> Any:
    """Field validator body for update schemas: a required column may be omitted but not nulled."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class MessageResponse(BaseSchema):
    message: str


class DeleteResponse(BaseSchema):
    message: str
    id: UUID


ItemT = TypeVar("ItemT")


class Page(BaseSchema, Generic[ItemT]):
    """One window of a list result."""

    items: list[ItemT]
    count: int = Field(..., description="Number of items in this page")
    total: int = Field(..., description="Number of items matching the filters")
    page: int
    limit: int
    total_pages: int
