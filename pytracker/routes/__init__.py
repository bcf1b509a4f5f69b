"""API route modules for FastAPI endpoints."""

from pytracker.routes.auth import router as auth_router
from pytracker.routes.projects import router as projects_router
from pytracker.routes.tickets import router as tickets_router
from pytracker.routes.users import router as users_router

__all__ = ["auth_router", "projects_router", "tickets_router", "users_router"]
