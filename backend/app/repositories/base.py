"""
Generic CRUD repository for the content resources.

Notes, assignments, old questions and blogs differ only in field shape, so a
single ResourceRepository is parameterized by a ResourceSchema describing:

- the ORM model and its create/update/read/list Pydantic schemas
- which columns are exact-match filters and which are searched by `search`
- which sort keys are allowed

Every read embeds the author (id, name, email) via selectinload.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import User
from app.errors import FieldValidationError, InvalidId, NotFound, field_errors
from app.repositories.query import (
    PageResult,
    PageWindow,
    filter_conditions,
    search_condition,
    sort_clauses,
)
from app.schemas.common import ListQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSchema:
    """Field schema of one resource type."""

    name: str  # policy key, e.g. "old_questions"
    path: str  # URL segment, e.g. "old-questions"
    label: str  # human label used in messages, e.g. "Old question"
    model: type
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    read_schema: type[BaseModel]
    query_schema: type[ListQuery]
    filter_fields: tuple[str, ...]
    search_fields: tuple[str, ...]
    sort_fields: Mapping[str, str]


def parse_id(value: str | UUID, label: str = "resource") -> UUID:
    """Parse a path identifier. Raises InvalidId before any lookup happens."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidId(f"Invalid {label} ID") from exc


def validate_fields(schema: type[BaseModel], fields: Mapping[str, Any] | BaseModel) -> BaseModel:
    """Validate raw fields, collecting every violation instead of stopping at the first."""
    if isinstance(fields, schema):
        return fields
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(fields)
    except ValidationError as exc:
        raise FieldValidationError(field_errors(exc.errors())) from exc


class ResourceRepository:
    """list/get/create/update/delete over one resource type."""

    def __init__(self, db: AsyncSession, resource: ResourceSchema) -> None:
        self.db = db
        self.resource = resource
        self.model = resource.model

    async def list(self, query: ListQuery) -> PageResult:
        filters = {name: getattr(query, name, None) for name in self.resource.filter_fields}
        conditions = filter_conditions(self.model, filters)
        search = search_condition(self.model, self.resource.search_fields, query.search)
        if search is not None:
            conditions.append(search)

        # Validate the sort key before touching the database
        order_by = sort_clauses(self.model, self.resource.sort_fields, query.sort_by, query.order)
        window = PageWindow(page=query.page, limit=query.limit)

        total = await self.db.scalar(
            select(func.count()).select_from(self.model).where(*conditions)
        )
        result = await self.db.execute(
            select(self.model)
            .options(selectinload(self.model.author))
            .where(*conditions)
            .order_by(*order_by)
            .offset(window.skip)
            .limit(window.limit)
        )
        return PageResult(items=list(result.scalars()), total=total or 0, window=window)

    async def get(self, item_id: str | UUID) -> Any:
        """Fetch one item with its author. Raises InvalidId or NotFound."""
        return await self._get_or_404(parse_id(item_id, self.resource.label.lower()))

    async def create(self, fields: Mapping[str, Any] | BaseModel, author_id: UUID) -> Any:
        """
        Validate and persist a new item owned by author_id.

        isPublished defaults to true. The author must exist at creation time.
        """
        data = validate_fields(self.resource.create_schema, fields)

        author = await self.db.get(User, author_id)
        if author is None:
            raise FieldValidationError.single("author", "Author does not exist")

        item = self.model(author_id=author.id, **data.model_dump())
        self.db.add(item)
        await self.db.commit()
        logger.info("Created %s %s by %s", self.resource.name, item.id, author.id)
        return await self._get_or_404(item.id)

    async def update(self, item_id: str | UUID, fields: Mapping[str, Any] | BaseModel) -> Any:
        """Partial update: only fields present in the payload are written."""
        resolved_id = parse_id(item_id, self.resource.label.lower())
        data = validate_fields(self.resource.update_schema, fields)
        values = data.model_dump(exclude_unset=True)

        item = await self._get_or_404(resolved_id)
        if values:
            for key, value in values.items():
                setattr(item, key, value)
            await self.db.commit()
            logger.info("Updated %s %s fields=%s", self.resource.name, resolved_id, sorted(values))
        return await self._get_or_404(resolved_id)

    async def delete(self, item_id: str | UUID) -> UUID:
        """Permanently delete an item and return its id."""
        resolved_id = parse_id(item_id, self.resource.label.lower())
        item = await self._get_or_404(resolved_id)
        await self.db.delete(item)
        await self.db.commit()
        logger.info("Deleted %s %s", self.resource.name, resolved_id)
        return resolved_id

    async def _get_or_404(self, item_id: UUID) -> Any:
        result = await self.db.execute(
            select(self.model)
            .options(selectinload(self.model.author))
            .where(self.model.id == item_id)
            .execution_options(populate_existing=True)
        )
        item = result.scalar_one_or_none()
        if item is None:
            raise NotFound(f"{self.resource.label} not found")
        return item
