"""Old exam question routes (/api/old-questions)."""

from app.api.routes.resources import build_resource_router
from app.repositories.resources import OLD_QUESTIONS

router = build_resource_router(OLD_QUESTIONS)
