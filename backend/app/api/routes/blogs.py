"""Blog routes. Blogs additionally filter on category and isFeatured."""

from app.api.routes.resources import build_resource_router
from app.repositories.resources import BLOGS

router = build_resource_router(BLOGS)
