"""Notes CRUD routes."""

from app.api.routes.resources import build_resource_router
from app.repositories.resources import NOTES

router = build_resource_router(NOTES)
