"""
List query contract shared by every resource type.

- filters: exact-match AND over the type's filter columns present in the request
- search: case-insensitive substring, OR-ed across the type's text columns
- sort: whitelisted key + direction, with id as a tie-breaker so page windows
  never overlap or skip rows
- window: 1-indexed page, skip = (page - 1) * limit,
  total_pages = ceil(total / limit)
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError
from sqlalchemy import ColumnElement, asc, desc, or_

from app.errors import FieldValidationError, field_errors
from app.schemas.common import ListQuery

DEFAULT_SORT_KEY = "createdAt"


@dataclass(frozen=True)
class PageWindow:
    page: int = 1
    limit: int = 10

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


@dataclass
class PageResult:
    """Items of one page plus the counts needed to render pagination."""

    items: list[Any]
    total: int
    window: PageWindow = field(default_factory=PageWindow)

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.window.limit)


def parse_list_query(
    raw: Mapping[str, Any],
    query_schema: type[ListQuery],
    *,
    default_limit: int = 10,
    max_limit: int = 100,
) -> ListQuery:
    """Validate raw query-string values into query_schema, reporting every bad parameter."""
    params = dict(raw)
    params.setdefault("limit", default_limit)
    try:
        query = query_schema.model_validate(params)
    except ValidationError as exc:
        raise FieldValidationError(field_errors(exc.errors())) from exc

    if query.limit > max_limit:
        raise FieldValidationError.single("limit", f"limit must be at most {max_limit}")
    return query


def filter_conditions(model: type, filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """Exact-match conditions for every filter that has a value."""
    return [getattr(model, name) == value for name, value in filters.items() if value is not None]


def search_condition(model: type, fields: Sequence[str], term: str | None) -> ColumnElement[bool] | None:
    if term is None or not term.strip():
        return None
    term = term.strip()
    return or_(*(getattr(model, name).icontains(term, autoescape=True) for name in fields))


def sort_clauses(
    model: type,
    sort_fields: Mapping[str, str],
    sort_by: str | None,
    order: str = "desc",
) -> list[ColumnElement[Any]]:
    """
    ORDER BY clauses for a whitelisted sort key.

    sort_fields maps the wire name (e.g. "createdAt") to the model attribute.
    Unknown keys are rejected instead of being passed through to the database.
    """
    key = sort_by or DEFAULT_SORT_KEY
    if key not in sort_fields:
        allowed = ", ".join(sorted(sort_fields))
        raise FieldValidationError.single("sortBy", f"Unsupported sort key '{key}'. Allowed: {allowed}")

    direction = asc if order == "asc" else desc
    return [direction(getattr(model, sort_fields[key])), direction(model.id)]
