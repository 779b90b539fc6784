"""API route modules."""

from edufin.api.routes.drafts import router as drafts_router
from edufin.api.routes.health import router as health_router

__all__ = [
    "health_router",
    "drafts_router",
]
