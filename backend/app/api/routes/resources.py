"""
CRUD router factory for the content resources.

Each resource type gets the same five endpoints:

- GET    /api/{path}        public, filtered + paginated list
- GET    /api/{path}/{id}   public
- POST   /api/{path}        admin
- PUT    /api/{path}/{id}   admin, partial update
- DELETE /api/{path}/{id}   admin

Ids are taken as plain strings so a malformed id is reported as 400 by the
repository instead of FastAPI's 422.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from app.api.deps import AppSettings, DbSession, require
from app.repositories.base import ResourceRepository, ResourceSchema
from app.repositories.query import parse_list_query
from app.schemas.base import DeleteResponse, Page
from app.services.policy import Operation
from app.services.tokens import TokenPayload


def build_resource_router(resource: ResourceSchema) -> APIRouter:
    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path])

    ReadSchema = resource.read_schema
    CreateSchema = resource.create_schema
    UpdateSchema = resource.update_schema

    @router.get("", response_model=Page[ReadSchema])
    async def list_items(
        request: Request,
        _: Annotated[TokenPayload | None, Depends(require(resource.name, Operation.LIST))],
        db: DbSession,
        settings: AppSettings,
    ):
        """
        List items, newest first by default.

        Query params: search, sortBy, order (asc|desc), page, limit, plus the
        exact-match filters of this resource type.
        """
        query = parse_list_query(
            request.query_params,
            resource.query_schema,
            default_limit=settings.default_page_size,
            max_limit=settings.max_page_size,
        )
        result = await ResourceRepository(db, resource).list(query)
        items = [ReadSchema.model_validate(item) for item in result.items]
        return Page[ReadSchema](
            items=items,
            count=len(items),
            total=result.total,
            page=result.window.page,
            limit=result.window.limit,
            total_pages=result.total_pages,
        )

    @router.get("/{item_id}", response_model=ReadSchema)
    async def get_item(
        item_id: str,
        _: Annotated[TokenPayload | None, Depends(require(resource.name, Operation.READ))],
        db: DbSession,
    ):
        """Get one item with its author."""
        item = await ResourceRepository(db, resource).get(item_id)
        return ReadSchema.model_validate(item)

    @router.post("", response_model=ReadSchema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        data: CreateSchema,
        principal: Annotated[TokenPayload, Depends(require(resource.name, Operation.CREATE))],
        db: DbSession,
    ):
        """Create an item authored by the caller."""
        item = await ResourceRepository(db, resource).create(data, author_id=principal.user_id)
        return ReadSchema.model_validate(item)

    @router.put("/{item_id}", response_model=ReadSchema)
    async def update_item(
        item_id: str,
        data: UpdateSchema,
        _: Annotated[TokenPayload, Depends(require(resource.name, Operation.UPDATE))],
        db: DbSession,
    ):
        """Update only the fields present in the body."""
        item = await ResourceRepository(db, resource).update(item_id, data)
        return ReadSchema.model_validate(item)

    @router.delete("/{item_id}", response_model=DeleteResponse)
    async def delete_item(
        item_id: str,
        _: Annotated[TokenPayload, Depends(require(resource.name, Operation.DELETE))],
        db: DbSession,
    ):
        """Permanently delete an item."""
        deleted_id = await ResourceRepository(db, resource).delete(item_id)
        return DeleteResponse(message=f"{resource.label} deleted successfully", id=deleted_id)

    return router
