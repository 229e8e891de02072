"""HTTP controllers (routers)."""

from apps.identity.presentation.http.controllers.health import router as health_router
from apps.identity.presentation.http.controllers.users import router as users_router

__all__ = ["users_router", "health_router"]
